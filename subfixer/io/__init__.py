"""Input/output components for subfixer.

This package contains the filesystem store used to read source subtitles and
write their fixed siblings.
"""

from .storage import SubtitleStore

__all__ = ["SubtitleStore"]
