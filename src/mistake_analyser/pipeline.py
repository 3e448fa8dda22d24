from __future__ import annotations

import logging
import time
import uuid
from typing import Callable, Dict, Iterable, List, Sequence

from .alignment import align_tokens
from .classification import classify_change
from .config import AnalyserConfig
from .models import (
    AlignmentOp,
    AnalysisResult,
    AnalysisSummary,
    ClassifiedMistake,
    MistakeMeta,
    OpKind,
)
from .rendering import render_diff
from .tokenization import is_punctuation, tokenize
from .windowing import make_context_window

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]
Clock = Callable[[], int]


def new_mistake_id() -> str:
    return str(uuid.uuid4())


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def analyse(
    day_id: str,
    page_id: str,
    attempt_text: str | None,
    correct_text: str | None,
    *,
    id_factory: IdFactory = new_mistake_id,
    clock: Clock = now_ms,
    config: AnalyserConfig | None = None,
) -> AnalysisResult:
    """Align an attempt with its correction and classify every difference."""
    cfg = config or AnalyserConfig()
    attempt_tokens = tokenize(attempt_text)
    correct_tokens = tokenize(correct_text)
    ops = align_tokens(attempt_tokens, correct_tokens)

    mistakes: List[ClassifiedMistake] = []
    for op in ops:
        if op.kind is OpKind.EQUAL:
            continue
        if cfg.skip_punctuation_replacements and _is_punctuation_replacement(op):
            logger.debug(
                "Skipping punctuation change %r -> %r at %d/%d",
                op.source_token,
                op.target_token,
                op.source_index,
                op.target_index,
            )
            continue
        mistakes.append(
            _build_mistake(
                op, day_id, page_id, attempt_tokens, correct_tokens, cfg, id_factory, clock
            )
        )

    raw_diff = render_diff(ops)
    summary = AnalysisSummary(
        analysed_at=clock(),
        attempt_tokens=len(attempt_tokens),
        correct_tokens=len(correct_tokens),
        total_mistakes=len(mistakes),
        by_type=summarize_mistakes(mistakes),
        raw_diff=raw_diff,
    )
    for mistake in mistakes:
        mistake.raw_diff = raw_diff

    logger.debug(
        "Analysed day=%s page=%s: %d attempt tokens, %d correct tokens, %d ops, %d mistakes",
        day_id,
        page_id,
        len(attempt_tokens),
        len(correct_tokens),
        len(ops),
        len(mistakes),
    )
    return AnalysisResult(mistakes=mistakes, summary=summary)


def summarize_mistakes(mistakes: Iterable[ClassifiedMistake]) -> Dict[str, int]:
    """Count mistakes per type, keyed in order of first appearance."""
    counts: Dict[str, int] = {}
    for mistake in mistakes:
        key = mistake.type.value
        counts[key] = counts.get(key, 0) + 1
    return counts


def diff_texts(attempt_text: str | None, correct_text: str | None) -> str:
    """Return only the rendered token diff between two texts."""
    return render_diff(align_tokens(tokenize(attempt_text), tokenize(correct_text)))


def _is_punctuation_replacement(op: AlignmentOp) -> bool:
    return (
        op.kind is OpKind.REPLACE
        and is_punctuation(op.source_token)
        and is_punctuation(op.target_token)
    )


def _clamp_index(index: int, tokens: Sequence[str]) -> int:
    return min(max(index, 0), max(len(tokens) - 1, 0))


def _build_mistake(
    op: AlignmentOp,
    day_id: str,
    page_id: str,
    attempt_tokens: Sequence[str],
    correct_tokens: Sequence[str],
    config: AnalyserConfig,
    id_factory: IdFactory,
    clock: Clock,
) -> ClassifiedMistake:
    wrong = "" if op.kind is OpKind.INSERT else (op.source_token or "")
    correct = "" if op.kind is OpKind.DELETE else (op.target_token or "")
    classification = classify_change(wrong, correct)

    attempt_ctx = make_context_window(
        attempt_tokens,
        _clamp_index(op.source_index, attempt_tokens),
        config.context_window_size,
        config.max_context_chars,
    )
    correct_ctx = make_context_window(
        correct_tokens,
        _clamp_index(op.target_index, correct_tokens),
        config.context_window_size,
        config.max_context_chars,
    )
    limit = config.max_context_chars

    return ClassifiedMistake(
        mistake_id=id_factory(),
        day_id=day_id,
        page_id=page_id,
        created_at=clock(),
        type=classification.type,
        wrong=wrong,
        correct=correct,
        context_before=(attempt_ctx.before or correct_ctx.before)[:limit],
        context_after=(attempt_ctx.after or correct_ctx.after)[:limit],
        severity=classification.severity,
        meta=MistakeMeta(op=op.kind, ai=op.source_index, bi=op.target_index),
    )
