"""Command-line interface for subfixer.

Responsibilities:
- Expose the `fix` command for one subtitle file.
- Convert CLI arguments and optional YAML defaults into `SubfixerConfig`.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_fix_summary, exit_with_command_error
from .config import ConfigLoader, SubfixerConfig
from .errors import FixStageError
from .io.storage import DEFAULT_ENCODING
from .parsing import normalize_optional_string
from .pipeline import SubtitleFixPipeline
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="subfixer",
    no_args_is_help=True,
    help="Normalize Persian SRT subtitles.",
)


@app.callback()
def _root() -> None:
    """Normalize Persian SRT subtitles."""


class FixProgressIndicator:
    """Render deterministic per-stage progress lines for a command."""

    _SPINNER_FRAMES = "|/-\\"

    def __init__(self, command_name: str) -> None:
        """Initialize progress indicator metadata for a command invocation."""

        self._command_name = command_name

    def on_stage_start(self, stage_name: str, stage_index: int, stage_total: int) -> None:
        """Print one progress line for a stage start transition."""

        spinner = self._SPINNER_FRAMES[(stage_index - 1) % len(self._SPINNER_FRAMES)]
        typer.echo(
            f"[progress] command={self._command_name} "
            f"{spinner} {stage_index}/{stage_total} stage={stage_name}"
        )


def _load_yaml_config(config_path: Path | None) -> SubfixerConfig | None:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return None

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise FixStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise FixStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except OSError as exc:
        raise FixStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify file permissions.",
        ) from exc


def _resolve_command_config(
    config_file: Path | None,
    subtitle_file: Path | None,
    out: Path | None,
    encoding: str | None,
) -> SubfixerConfig:
    """Resolve effective command config from YAML defaults and explicit CLI overrides."""

    loaded_config = _load_yaml_config(config_file)
    encoding = normalize_optional_string(encoding)

    if loaded_config is None:
        if subtitle_file is None:
            raise FixStageError(
                stage="config",
                detail="Subtitle file path is required when `--config` is not provided.",
                hint="Pass `<subtitle.srt>` or use `--config <path.yaml>` with `input_path`.",
            )
        return SubfixerConfig(
            input_path=subtitle_file,
            output_dir=out,
            encoding=encoding if encoding is not None else DEFAULT_ENCODING,
        )

    return SubfixerConfig(
        input_path=subtitle_file if subtitle_file is not None else loaded_config.input_path,
        output_dir=out if out is not None else loaded_config.output_dir,
        encoding=encoding if encoding is not None else loaded_config.encoding,
        output_suffix=loaded_config.output_suffix,
    )


@app.command("fix")
def fix_command(
    subtitle_file: Annotated[
        Path | None,
        typer.Argument(
            help="Path to the SRT file to fix. Required unless provided by `--config`.",
        ),
    ] = None,
    out: Annotated[
        Path | None,
        typer.Option(
            "--out",
            help="Directory for the fixed file (defaults to the source file's directory).",
        ),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Path to YAML config file with command defaults.",
        ),
    ] = None,
    encoding: Annotated[
        str | None,
        typer.Option("--encoding", help="Text encoding of the subtitle file (default utf-8)."),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", help="Suppress progress and phase log lines."),
    ] = False,
) -> None:
    """Fix one subtitle file and write `<name>.fixed.srt` next to it."""

    try:
        config = _resolve_command_config(
            config_file=config_file,
            subtitle_file=subtitle_file,
            out=out,
            encoding=encoding,
        )
        if quiet:
            pipeline = SubtitleFixPipeline()
        else:
            progress = FixProgressIndicator(command_name="fix")
            pipeline = SubtitleFixPipeline(
                run_logger=RunLogger(),
                stage_progress_callback=progress.on_stage_start,
            )
        result = pipeline.run(config)
    except Exception as exc:
        exit_with_command_error("fix", exc)

    echo_fix_summary(result)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
