"""Subtitle rewrite engine.

Responsibilities:
- Apply the fixed fix-rule sequence to a whole subtitle document.
- Report line and digit counts for CLI summaries.

Key types:
- `SubtitleFixer`: ordered rule runner with `fix` and `fix_with_report`.
- `FixReport`: fixed text plus diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass

from .rules import (
    FixRule,
    LocalizeDialogueDigits,
    NormalizePersianLetters,
    NormalizeQuestionMark,
    RemoveItalics,
    RemoveRightToLeftEmbedding,
)


@dataclass(frozen=True, slots=True)
class FixReport:
    """Structured output of one subtitle fix.

    Attributes:
        fixed_text: Corrected document text.
        line_count: Number of lines in the corrected document.
        dialogue_line_count: Number of lines classified as dialogue.
        localized_digit_count: Number of ASCII digits converted on dialogue lines.
    """

    fixed_text: str
    line_count: int
    dialogue_line_count: int
    localized_digit_count: int


class SubtitleFixer:
    """Apply the fixed Persian subtitle fix pipeline."""

    def __init__(self) -> None:
        """Build the rule sequence; document-wide rules run before line handling."""

        self.document_rules: tuple[FixRule, ...] = (
            RemoveItalics(),
            NormalizePersianLetters(),
            NormalizeQuestionMark(),
            RemoveRightToLeftEmbedding(),
        )
        self.digit_rule = LocalizeDialogueDigits()

    def fix_with_report(self, text: str) -> FixReport:
        """Apply all rules in order and return fixed text with diagnostics."""

        current = text
        for rule in self.document_rules:
            current = rule.apply(current)
        fixed_text, dialogue_lines, localized_digits = self.digit_rule.localize_with_counts(
            current
        )
        return FixReport(
            fixed_text=fixed_text,
            line_count=fixed_text.count("\n") + 1,
            dialogue_line_count=dialogue_lines,
            localized_digit_count=localized_digits,
        )

    def fix(self, text: str) -> str:
        """Return the corrected document for `text`."""

        return self.fix_with_report(text).fixed_text


def fix(text: str) -> str:
    """Fix one subtitle document with a fresh `SubtitleFixer`."""

    return SubtitleFixer().fix(text)
