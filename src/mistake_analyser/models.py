from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class OpKind(str, Enum):
    """Kinds of steps in a token edit script."""

    EQUAL = "equal"
    INSERT = "insert"
    DELETE = "delete"
    REPLACE = "replace"


class MistakeType(str, Enum):
    """Categories a changed token pair can be classified into."""

    MISSING_WORD = "missing_word"
    EXTRA_WORD = "extra_word"
    ACCENT = "accent"
    ARTICLE = "article"
    PREPOSITION = "preposition"
    PRONOUN = "pronoun"
    SPELLING = "spelling"
    VERB_FORM_POSSIBLE = "verb_form_possible"
    AGREEMENT_POSSIBLE = "agreement_possible"


class Severity(str, Enum):
    """Coarse impact tier attached to each mistake type."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True, slots=True)
class AlignmentOp:
    """
    One step of the edit script turning the attempt tokens into the correct ones.

    ``source_token`` is None only for inserts and ``target_token`` is None only
    for deletes. For an insert ``source_index`` is the attempt position the
    token is inserted before, so it may equal ``len(source)``; deletes behave
    the same way on the target side.
    """

    kind: OpKind
    source_token: str | None
    target_token: str | None
    source_index: int
    target_index: int


@dataclass(frozen=True, slots=True)
class Classification:
    """Mistake category and severity for a single changed token pair."""

    type: MistakeType
    severity: Severity


@dataclass(slots=True)
class ContextWindow:
    before: str
    after: str


@dataclass(slots=True)
class MistakeMeta:
    """Raw alignment metadata kept alongside a mistake."""

    op: OpKind
    ai: int
    bi: int

    def to_dict(self) -> dict[str, Any]:
        return {"op": self.op.value, "ai": self.ai, "bi": self.bi}


@dataclass(slots=True)
class ClassifiedMistake:
    """A single classified difference between attempt and correct text."""

    mistake_id: str
    day_id: str
    page_id: str
    created_at: int
    type: MistakeType
    wrong: str
    correct: str
    context_before: str
    context_after: str
    severity: Severity
    meta: MistakeMeta
    raw_diff: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the record using the field names storage and UI consumers expect."""
        return {
            "mistakeId": self.mistake_id,
            "dayId": self.day_id,
            "pageId": self.page_id,
            "createdAt": self.created_at,
            "type": self.type.value,
            "wrong": self.wrong or "",
            "correct": self.correct or "",
            "contextBefore": self.context_before,
            "contextAfter": self.context_after,
            "severity": self.severity.value,
            "meta": self.meta.to_dict(),
            "rawDiff": self.raw_diff,
        }


@dataclass(slots=True)
class AnalysisSummary:
    """Aggregate counts for one analysis run."""

    analysed_at: int
    attempt_tokens: int
    correct_tokens: int
    total_mistakes: int
    by_type: Dict[str, int] = field(default_factory=dict)
    raw_diff: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "analysedAt": self.analysed_at,
            "attemptTokens": self.attempt_tokens,
            "correctTokens": self.correct_tokens,
            "totalMistakes": self.total_mistakes,
            "byType": dict(self.by_type),
            "rawDiff": self.raw_diff,
        }


@dataclass(slots=True)
class AnalysisResult:
    mistakes: List[ClassifiedMistake]
    summary: AnalysisSummary

    def to_dict(self) -> dict[str, Any]:
        return {
            "mistakes": [mistake.to_dict() for mistake in self.mistakes],
            "summary": self.summary.to_dict(),
        }
