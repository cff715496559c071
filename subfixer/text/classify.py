"""SRT line-shape classification.

Responsibilities:
- Split a subtitle document into ordered lines.
- Classify each line as timestamp, blank, sequence number, or dialogue.

Key public functions:
- `classify_line`: ordered line-shape classification.
- `split_lines`: newline-based split used by the line-aware fix stage.
"""

from __future__ import annotations

from enum import Enum
import re


_TIMESTAMP_RE = re.compile(
    r"[0-9]{2}:[0-9]{2}:[0-9]{2},[0-9]{3} --> [0-9]{2}:[0-9]{2}:[0-9]{2},[0-9]{3}"
)
_SEQUENCE_NUMBER_RE = re.compile(r"[0-9]+")


class LineKind(Enum):
    """Shape of one subtitle line."""

    TIMESTAMP = "timestamp"
    BLANK = "blank"
    SEQUENCE_NUMBER = "sequence_number"
    DIALOGUE = "dialogue"


def classify_line(line: str) -> LineKind:
    """Classify one line, checking timestamp, blank, then sequence number.

    Anything that matches none of those shapes is dialogue.
    """

    if _TIMESTAMP_RE.fullmatch(line):
        return LineKind.TIMESTAMP
    if not line.strip():
        return LineKind.BLANK
    if _SEQUENCE_NUMBER_RE.fullmatch(line):
        return LineKind.SEQUENCE_NUMBER
    return LineKind.DIALOGUE


def split_lines(text: str) -> list[str]:
    """Split text on `\\n`, dropping one trailing `\\r` per line.

    A newline at the very end of the text yields a final empty line, so joining
    the result with `\\n` restores the trailing newline.
    """

    return [
        line[:-1] if line.endswith("\r") else line
        for line in text.split("\n")
    ]
