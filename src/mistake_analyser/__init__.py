"""
mistake_analyser package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .alignment import align_tokens
from .classification import classify_change
from .config import AnalyserConfig, config_from_dict, config_from_yaml, load_config
from .distance import levenshtein
from .models import (
    AlignmentOp,
    AnalysisResult,
    AnalysisSummary,
    Classification,
    ClassifiedMistake,
    MistakeType,
    OpKind,
    Severity,
)
from .pipeline import analyse, diff_texts
from .rendering import render_diff
from .tokenization import tokenize
from .windowing import make_context_window

__all__ = [
    "AnalyserConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "AlignmentOp",
    "AnalysisResult",
    "AnalysisSummary",
    "Classification",
    "ClassifiedMistake",
    "MistakeType",
    "OpKind",
    "Severity",
    "align_tokens",
    "analyse",
    "classify_change",
    "diff_texts",
    "levenshtein",
    "make_context_window",
    "render_diff",
    "tokenize",
]

__version__ = "0.1.0"
