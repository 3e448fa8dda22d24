from __future__ import annotations

import re
import unicodedata

COMBINING_MARKS_RE = re.compile("[\u0300-\u036f]")


def coerce_text(value: object) -> str:
    """Treat None as empty text and stringify anything else that is not a str."""
    if value is None:
        return ""
    if not isinstance(value, str):
        value = str(value)
    return value


def fold_case(value: object) -> str:
    """Lowercase text for comparisons; the caller keeps the original casing."""
    return coerce_text(value).lower()


def strip_accents(value: object) -> str:
    """Decompose to NFD and drop the combining diacritical marks block."""
    decomposed = unicodedata.normalize("NFD", coerce_text(value))
    return COMBINING_MARKS_RE.sub("", decomposed)
