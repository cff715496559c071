"""File-level fix pipeline.

Responsibilities:
- Run the `read`, `fix`, and `write` stages for one subtitle file.
- Emit stage start/complete/failure telemetry and progress callbacks.
- Map I/O failures to stage-scoped `FixStageError` diagnostics.

Key types:
- `SubtitleFixPipeline`: stage runner.
- `FixResult`: paths and report of one completed run.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from .config import SubfixerConfig
from .errors import FixStageError
from .io.storage import SubtitleStore
from .telemetry.logger import RunLogger
from .text.rewriter import FixReport, SubtitleFixer

_StageResult = TypeVar("_StageResult")

StageProgressCallback = Callable[[str, int, int], None]


@dataclass(frozen=True, slots=True)
class FixResult:
    """Outcome of one fix run.

    Attributes:
        source_path: Subtitle file that was read.
        output_path: Fixed subtitle file that was written.
        report: Rewrite diagnostics for the document.
    """

    source_path: Path
    output_path: Path
    report: FixReport


class SubtitleFixPipeline:
    """Read a subtitle file, fix it, and write the fixed sibling."""

    _PHASE_SEQUENCE = ("read", "fix", "write")

    def __init__(
        self,
        run_logger: RunLogger | None = None,
        stage_progress_callback: StageProgressCallback | None = None,
    ) -> None:
        """Initialize optional telemetry hooks."""

        self._run_logger = run_logger
        self._stage_progress_callback = stage_progress_callback

    def run(self, config: SubfixerConfig) -> FixResult:
        """Execute all stages for `config.input_path`."""

        try:
            config.validate()
        except ValueError as exc:
            raise FixStageError(
                stage="config",
                detail=str(exc),
                hint="Fix config values and rerun.",
            ) from exc

        store = SubtitleStore(encoding=config.encoding, output_suffix=config.output_suffix)
        source_path = config.input_path
        output_path = store.fixed_output_path(source_path, config.output_dir)
        if output_path.resolve() == source_path.resolve():
            raise FixStageError(
                stage="config",
                detail=f"Output path `{output_path}` would overwrite the source subtitle.",
                hint="Use a different `--out` directory or `output_suffix`.",
            )

        text = self._run_stage("read", lambda: self._read(store, source_path))
        report = self._run_stage("fix", lambda: SubtitleFixer().fix_with_report(text))
        self._run_stage("write", lambda: self._write(store, output_path, report.fixed_text))

        return FixResult(source_path=source_path, output_path=output_path, report=report)

    def _read(self, store: SubtitleStore, path: Path) -> str:
        """Read source text and map failures to `read` stage errors."""

        try:
            return store.read_subtitle(path)
        except FileNotFoundError as exc:
            raise FixStageError(
                stage="read",
                detail=f"Subtitle file not found: `{path}`.",
                hint="Provide an existing `.srt` file path.",
            ) from exc
        except UnicodeDecodeError as exc:
            raise FixStageError(
                stage="read",
                detail=f"Subtitle file `{path}` is not valid `{store.encoding}` text.",
                hint="Pass the file's encoding via `--encoding`, e.g. `cp1256`.",
            ) from exc
        except OSError as exc:
            raise FixStageError(
                stage="read",
                detail=f"Failed to read subtitle file `{path}`: {exc}",
                hint="Verify file permissions and that the path is a regular file.",
            ) from exc

    def _write(self, store: SubtitleStore, path: Path, content: str) -> Path:
        """Write fixed text and map failures to `write` stage errors."""

        try:
            return store.write_subtitle(path, content)
        except OSError as exc:
            raise FixStageError(
                stage="write",
                detail=f"Failed to write fixed subtitle `{path}`: {exc}",
                hint="Verify the output directory is writable.",
            ) from exc

    def _stage_position(self, stage_name: str) -> tuple[int, int]:
        """Return 1-based stage index and total stage count."""

        return self._PHASE_SEQUENCE.index(stage_name) + 1, len(self._PHASE_SEQUENCE)

    def _on_stage_start(self, stage_name: str) -> None:
        """Emit start events to stage progress callback and structured logger."""

        if self._stage_progress_callback is not None:
            index, total = self._stage_position(stage_name)
            self._stage_progress_callback(stage_name, index, total)
        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage_name)

    def _on_stage_complete(self, stage_name: str) -> None:
        """Emit stage-complete event to the structured logger."""

        if self._run_logger is not None:
            self._run_logger.log_stage_complete(stage_name)

    def _on_stage_failure(self, stage_name: str, exc: Exception) -> None:
        """Emit stage-failure event with sanitized exception metadata."""

        if self._run_logger is not None:
            self._run_logger.log_stage_failure(stage_name, type(exc).__name__)

    def _run_stage(
        self,
        stage_name: str,
        action: Callable[[], _StageResult],
    ) -> _StageResult:
        """Run one named stage and emit start/complete/failure telemetry events."""

        self._on_stage_start(stage_name)
        try:
            result = action()
        except Exception as exc:
            self._on_stage_failure(stage_name, exc)
            raise
        self._on_stage_complete(stage_name)
        return result
