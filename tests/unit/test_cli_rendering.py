"""Unit tests for CLI output and error rendering helpers."""

from __future__ import annotations

from pathlib import Path

import pytest
import typer

from subfixer.cli_rendering import echo_fix_summary, exit_with_command_error
from subfixer.errors import FixStageError
from subfixer.pipeline import FixResult
from subfixer.text.rewriter import FixReport


def test_exit_with_command_error_renders_stage_error_with_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print stage diagnostics and hint before exiting with code 1."""

    error = FixStageError(
        stage="read",
        detail="Subtitle file not found: `missing.srt`.",
        hint="Provide an existing `.srt` file path.",
    )

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("fix", error)

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "fix failed at stage `read`: Subtitle file not found: `missing.srt`." in captured.err
    assert "Hint: Provide an existing `.srt` file path." in captured.err


def test_exit_with_command_error_renders_non_stage_fallback(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print fallback exception text for non-stage failures."""

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("fix", RuntimeError("unexpected failure"))

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "fix failed: unexpected failure" in captured.err


def test_echo_fix_summary_prints_path_and_counters(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Summary should list the output path and report counters."""

    result = FixResult(
        source_path=Path("movie.srt"),
        output_path=Path("movie.fixed.srt"),
        report=FixReport(
            fixed_text="1",
            line_count=4,
            dialogue_line_count=1,
            localized_digit_count=2,
        ),
    )

    echo_fix_summary(result)

    output = capsys.readouterr().out.splitlines()
    assert output == [
        "Fixed subtitle: movie.fixed.srt",
        "Lines: 4",
        "Dialogue lines: 1",
        "Localized digits: 2",
    ]
