from __future__ import annotations

from typing import Sequence

from .models import ContextWindow

DEFAULT_WINDOW_SIZE = 3
MAX_CONTEXT_CHARS = 120


def make_context_window(
    tokens: Sequence[str],
    index: int,
    window_size: int = DEFAULT_WINDOW_SIZE,
    max_chars: int = MAX_CONTEXT_CHARS,
) -> ContextWindow:
    """Join up to ``window_size`` tokens on either side of ``index``."""
    window_size = max(0, window_size)
    start = max(0, index - window_size)
    end = min(len(tokens), index + window_size + 1)
    before = " ".join(tokens[start:index])
    after = " ".join(tokens[index + 1 : end])
    return ContextWindow(before=before[:max_chars], after=after[:max_chars])
