"""Subtitle file storage.

Responsibilities:
- Read source subtitle text with a configured encoding.
- Derive and write the fixed sibling subtitle file as UTF-8.
"""

from __future__ import annotations

from pathlib import Path


DEFAULT_ENCODING = "utf-8"
OUTPUT_ENCODING = "utf-8"
DEFAULT_OUTPUT_SUFFIX = ".fixed.srt"


class SubtitleStore:
    """Filesystem-backed subtitle reader and writer."""

    def __init__(
        self,
        encoding: str = DEFAULT_ENCODING,
        output_suffix: str = DEFAULT_OUTPUT_SUFFIX,
    ) -> None:
        """Initialize the store with source encoding and output suffix."""

        self.encoding = encoding
        self.output_suffix = output_suffix

    def read_subtitle(self, path: Path) -> str:
        """Load subtitle text from `path`.

        Newlines are read untranslated so CRLF handling stays in the fixer.
        """

        with path.open("r", encoding=self.encoding, newline="") as handle:
            return handle.read()

    def fixed_output_path(self, path: Path, output_dir: Path | None = None) -> Path:
        """Return the output path for the fixed version of `path`.

        `movie.srt` becomes `movie.fixed.srt`; only the last suffix is replaced.
        """

        target = path.with_suffix(self.output_suffix)
        if output_dir is None:
            return target
        return output_dir / target.name

    def write_subtitle(self, path: Path, content: str) -> Path:
        """Save subtitle text as UTF-8 and return the final path.

        Persian digits have no legacy code page form, so output is always UTF-8.
        """

        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding=OUTPUT_ENCODING, newline="") as handle:
            handle.write(content)
        return path
