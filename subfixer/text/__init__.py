"""Subtitle text classification and rewrite components.

This package provides the line-shape classifier, the fixed fix rules, and the
rewrite engine that chains them.
"""

from .classify import LineKind, classify_line, split_lines
from .rewriter import FixReport, SubtitleFixer, fix
from .rules import (
    LocalizeDialogueDigits,
    NormalizePersianLetters,
    NormalizeQuestionMark,
    RemoveItalics,
    RemoveRightToLeftEmbedding,
    localize_digits,
)

__all__ = [
    "FixReport",
    "LineKind",
    "LocalizeDialogueDigits",
    "NormalizePersianLetters",
    "NormalizeQuestionMark",
    "RemoveItalics",
    "RemoveRightToLeftEmbedding",
    "SubtitleFixer",
    "classify_line",
    "fix",
    "localize_digits",
    "split_lines",
]
