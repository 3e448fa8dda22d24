from __future__ import annotations

import re
import unicodedata
from typing import List

from .textutils import coerce_text

# Unicode letters, marks and numbers form word runs; any other non-whitespace
# character, the underscore included, is a token on its own.
WORD_CATEGORIES = frozenset("LMN")

# A byte-order mark counts as whitespace wherever it appears.
BOM = "\ufeff"

PUNCTUATION_RE = re.compile(r"^[.,;:!?()\"“”'¿¡\[\]{}]+$")


def _is_space(char: str) -> bool:
    return char.isspace() or char == BOM


def _is_word_char(char: str) -> bool:
    return unicodedata.category(char)[0] in WORD_CATEGORIES


def tokenize(text: str | None) -> List[str]:
    """Split text into word and punctuation tokens, discarding whitespace."""
    source = coerce_text(text).strip().strip(BOM).strip()
    if not source:
        return []

    tokens: List[str] = []
    run: List[str] = []
    for char in source:
        if _is_word_char(char):
            run.append(char)
            continue
        if run:
            tokens.append("".join(run))
            run = []
        if not _is_space(char):
            tokens.append(char)
    if run:
        tokens.append("".join(run))
    return tokens


def is_punctuation(token: str | None) -> bool:
    """Return True when every character of the token is in the punctuation class."""
    if not token:
        return False
    return PUNCTUATION_RE.match(token) is not None
