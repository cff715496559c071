"""Fixed subtitle fix rules.

Responsibilities:
- Provide the document-wide character rules applied before line handling.
- Provide the line-aware digit localization rule for dialogue lines.
"""

from __future__ import annotations

from typing import Protocol

from .classify import LineKind, classify_line, split_lines


ITALIC_TAGS = ("<i>", "</i>")
RIGHT_TO_LEFT_EMBEDDING = "\u202b"
PERSIAN_QUESTION_MARK = "؟"

_PERSIAN_LETTERS = str.maketrans(
    {
        "ي": "ی",  # ARABIC LETTER YEH -> ARABIC LETTER FARSI YEH
        "ك": "ک",  # ARABIC LETTER KAF -> ARABIC LETTER KEHEH
    }
)
_PERSIAN_DIGITS = str.maketrans("0123456789", "۰۱۲۳۴۵۶۷۸۹")


class FixRule(Protocol):
    """Protocol for subtitle fix rules."""

    def apply(self, text: str) -> str:
        """Apply a single fix transformation."""


class RemoveItalics:
    """Remove `<i>` and `</i>` tags as plain substrings."""

    def apply(self, text: str) -> str:
        """Apply italic tag removal."""

        for tag in ITALIC_TAGS:
            text = text.replace(tag, "")
        return text


class NormalizePersianLetters:
    """Replace Arabic yeh and kaf with their Persian forms."""

    def apply(self, text: str) -> str:
        """Apply letter normalization."""

        return text.translate(_PERSIAN_LETTERS)


class NormalizeQuestionMark:
    """Convert ASCII question marks to the Persian question mark."""

    def apply(self, text: str) -> str:
        """Apply question mark conversion."""

        return text.replace("?", PERSIAN_QUESTION_MARK)


class RemoveRightToLeftEmbedding:
    """Delete U+202B RIGHT-TO-LEFT EMBEDDING characters."""

    def apply(self, text: str) -> str:
        """Apply directionality control removal."""

        return text.replace(RIGHT_TO_LEFT_EMBEDDING, "")


def localize_digits(line: str) -> str:
    """Return `line` with every ASCII digit replaced by its Persian digit."""

    return line.translate(_PERSIAN_DIGITS)


class LocalizeDialogueDigits:
    """Localize digits on dialogue lines and pass other line shapes through."""

    def apply(self, text: str) -> str:
        """Rewrite dialogue lines."""

        return self.localize_with_counts(text)[0]

    def localize_with_counts(self, text: str) -> tuple[str, int, int]:
        """Rewrite dialogue lines and count what changed.

        Returns:
            Fixed text, number of dialogue lines, and number of localized digits.
        """

        fixed_lines: list[str] = []
        dialogue_lines = 0
        localized_digits = 0
        for line in split_lines(text):
            if classify_line(line) is not LineKind.DIALOGUE:
                fixed_lines.append(line)
                continue
            dialogue_lines += 1
            localized_digits += sum(1 for character in line if "0" <= character <= "9")
            fixed_lines.append(localize_digits(line))

        return "\n".join(fixed_lines), dialogue_lines, localized_digits
