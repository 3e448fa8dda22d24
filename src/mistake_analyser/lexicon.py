"""
Closed Spanish word classes and suffix shapes used by the mistake classifier.

All tables are immutable and built once at import time.
"""

from __future__ import annotations

from typing import FrozenSet, Tuple

ARTICLES: FrozenSet[str] = frozenset(
    {"el", "la", "los", "las", "un", "una", "unos", "unas", "lo", "al", "del"}
)

PREPOSITIONS: FrozenSet[str] = frozenset(
    {
        "a",
        "ante",
        "bajo",
        "con",
        "contra",
        "de",
        "desde",
        "durante",
        "en",
        "entre",
        "hacia",
        "hasta",
        "para",
        "por",
        "segun",
        "sin",
        "sobre",
        "tras",
    }
)

PRONOUNS: FrozenSet[str] = frozenset(
    {
        # clitics
        "me", "te", "se", "nos", "os", "lo", "la", "los", "las", "le", "les",
        # possessives
        "mi", "tu", "su", "mis", "tus", "sus",
        # demonstratives
        "este", "esta", "estos", "estas", "eso", "esa", "esos", "esas",
        # personal
        "ello", "ella", "ellos", "ellas", "yo", "usted", "nosotros", "vosotros", "ustedes",
    }
)

VERB_ENDINGS: Tuple[str, ...] = (
    "ar",
    "er",
    "ir",
    "ado",
    "ido",
    "ando",
    "iendo",
    "é",
    "í",
    "ó",
    "aba",
    "ía",
    "aré",
    "eré",
    "iré",
)

# (wrong suffix, correct suffix) shapes hinting at a gender or number mismatch.
AGREEMENT_SUFFIX_SWAPS: Tuple[Tuple[str, str], ...] = (
    ("o", "a"),
    ("a", "o"),
    ("os", "as"),
    ("as", "os"),
    ("o", "os"),
    ("a", "as"),
)
