from __future__ import annotations

from typing import Iterable, List

from .models import AlignmentOp, OpKind
from .tokenization import is_punctuation


def render_fragment(op: AlignmentOp) -> str:
    """Render one op as plain text or ``[-deleted-]`` / ``{+inserted+}`` markup."""
    if op.kind is OpKind.EQUAL:
        return op.source_token or ""
    if op.kind is OpKind.DELETE:
        return f"[-{op.source_token}-]"
    if op.kind is OpKind.INSERT:
        return f"{{+{op.target_token}+}}"
    return f"[-{op.source_token}-]{{+{op.target_token}+}}"


def render_diff(ops: Iterable[AlignmentOp]) -> str:
    """
    Build the compact annotated diff for an edit script.

    Fragments are space separated unless the first fragment is punctuation,
    in which case the whole diff is joined without separators.
    """
    parts: List[str] = [render_fragment(op) for op in ops]
    if not parts:
        return ""
    separator = "" if is_punctuation(parts[0]) else " "
    return separator.join(parts)
