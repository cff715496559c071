"""Top-level package for subfixer.

This package normalizes SRT subtitles for Persian: italic tags, Arabic letter
variants, question marks, RTL embedding marks, and dialogue digits. The main
entry points are `fix` and `SubtitleFixer`.
"""

from .text.rewriter import FixReport, SubtitleFixer, fix

__all__ = ["FixReport", "SubtitleFixer", "fix", "__version__"]

__version__ = "0.1.0"
