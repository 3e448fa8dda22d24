from __future__ import annotations

from typing import Callable, Tuple

from .distance import levenshtein
from .lexicon import AGREEMENT_SUFFIX_SWAPS, ARTICLES, PREPOSITIONS, PRONOUNS, VERB_ENDINGS
from .models import Classification, MistakeType, Severity
from .textutils import fold_case, strip_accents

Predicate = Callable[[str, str], bool]

SPELLING_MAX_DISTANCE = 2
SPELLING_MIN_LENGTH = 3


def _missing(wrong: str, correct: str) -> bool:
    return not wrong and bool(correct)


def _extra(wrong: str, correct: str) -> bool:
    return bool(wrong) and not correct


def _accent_only(wrong: str, correct: str) -> bool:
    return strip_accents(wrong) == strip_accents(correct) and wrong != correct


def _both_in(words: frozenset[str]) -> Predicate:
    def predicate(wrong: str, correct: str) -> bool:
        return wrong in words and correct in words

    return predicate


def _near_spelling(wrong: str, correct: str) -> bool:
    if len(wrong) < SPELLING_MIN_LENGTH or len(correct) < SPELLING_MIN_LENGTH:
        return False
    distance = levenshtein(strip_accents(wrong), strip_accents(correct))
    return distance <= SPELLING_MAX_DISTANCE


def _looks_like_verb(token: str) -> bool:
    return token.endswith(VERB_ENDINGS)


def _both_verbs(wrong: str, correct: str) -> bool:
    return _looks_like_verb(wrong) and _looks_like_verb(correct)


def _agreement_swap(wrong: str, correct: str) -> bool:
    return any(
        wrong.endswith(wrong_suffix) and correct.endswith(correct_suffix)
        for wrong_suffix, correct_suffix in AGREEMENT_SUFFIX_SWAPS
    )


# Evaluated top to bottom; the first matching predicate decides.
RULES: Tuple[Tuple[Predicate, Classification], ...] = (
    (_missing, Classification(MistakeType.MISSING_WORD, Severity.MEDIUM)),
    (_extra, Classification(MistakeType.EXTRA_WORD, Severity.MEDIUM)),
    (_accent_only, Classification(MistakeType.ACCENT, Severity.LOW)),
    (_both_in(ARTICLES), Classification(MistakeType.ARTICLE, Severity.MEDIUM)),
    (_both_in(PREPOSITIONS), Classification(MistakeType.PREPOSITION, Severity.MEDIUM)),
    (_both_in(PRONOUNS), Classification(MistakeType.PRONOUN, Severity.MEDIUM)),
    (_near_spelling, Classification(MistakeType.SPELLING, Severity.LOW)),
    (_both_verbs, Classification(MistakeType.VERB_FORM_POSSIBLE, Severity.HIGH)),
    (_agreement_swap, Classification(MistakeType.AGREEMENT_POSSIBLE, Severity.HIGH)),
)

FALLBACK = Classification(MistakeType.SPELLING, Severity.MEDIUM)


def classify_change(wrong: str | None, correct: str | None) -> Classification:
    """Map a (wrong, correct) token pair onto a mistake type and severity."""
    folded_wrong = fold_case(wrong)
    folded_correct = fold_case(correct)
    for predicate, outcome in RULES:
        if predicate(folded_wrong, folded_correct):
            return outcome
    return FALLBACK
