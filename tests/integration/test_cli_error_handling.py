"""CLI error-handling tests for concise stage diagnostics."""

from pathlib import Path

from pytest import MonkeyPatch
from typer.testing import CliRunner

from subfixer.cli import app
from subfixer.errors import FixStageError


def test_fix_command_reports_missing_subtitle_file(tmp_path: Path) -> None:
    """Fix command should report a `read` stage failure with exit code 1."""

    missing = tmp_path / "missing.srt"
    runner = CliRunner()

    result = runner.invoke(app, ["fix", str(missing)])

    assert result.exit_code == 1
    assert "fix failed at stage `read`" in result.output
    assert "Hint: Provide an existing `.srt` file path." in result.output
    assert "stage=read event=failure error_type=FixStageError" in result.output
    assert not (tmp_path / "missing.fixed.srt").exists()


def test_fix_command_requires_input_without_config() -> None:
    """Fix command should fail at `config` stage when no input is given."""

    runner = CliRunner()

    result = runner.invoke(app, ["fix"])

    assert result.exit_code == 1
    assert "fix failed at stage `config`" in result.output
    assert "Subtitle file path is required" in result.output


def test_fix_command_reports_missing_config_file() -> None:
    """Fix should fail with stage-aware diagnostics when `--config` path is missing."""

    runner = CliRunner()

    result = runner.invoke(app, ["fix", "--config", "missing-subfixer.yaml"])

    assert result.exit_code == 1
    assert "fix failed at stage `config`" in result.output
    assert "Config file not found: `missing-subfixer.yaml`." in result.output


def test_fix_command_reports_invalid_config_payload(tmp_path: Path) -> None:
    """Fix should fail fast when YAML config schema/values are invalid."""

    config_path = tmp_path / "invalid.yaml"
    config_path.write_text("output_dir: out\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["fix", "--config", str(config_path)])

    assert result.exit_code == 1
    assert "fix failed at stage `config`" in result.output
    assert "missing required key(s): input_path" in result.output


def test_fix_command_reports_undecodable_subtitle(tmp_path: Path) -> None:
    """Invalid UTF-8 input should fail at `read` stage with an encoding hint."""

    source = tmp_path / "movie.srt"
    source.write_bytes("كدوم".encode("cp1256"))
    runner = CliRunner()

    result = runner.invoke(app, ["fix", str(source), "--quiet"])

    assert result.exit_code == 1
    assert "fix failed at stage `read`" in result.output
    assert "--encoding" in result.output


def test_fix_command_reports_non_stage_error(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    """Unexpected exceptions should still be reported with exit code 1."""

    def _failing_run(*_: object, **__: object) -> None:
        """Raise a generic error to verify fallback CLI diagnostics."""

        raise RuntimeError("unexpected pipeline error")

    monkeypatch.setattr("subfixer.cli.SubtitleFixPipeline.run", _failing_run)
    runner = CliRunner()

    result = runner.invoke(app, ["fix", str(tmp_path / "movie.srt")])

    assert result.exit_code == 1
    assert "fix failed: unexpected pipeline error" in result.output


def test_fix_command_reports_stage_error_with_hint(
    monkeypatch: MonkeyPatch, tmp_path: Path
) -> None:
    """Stage errors raised by the pipeline should be rendered with their hint."""

    def _failing_run(*_: object, **__: object) -> None:
        """Raise a stage-specific error to simulate a write failure."""

        raise FixStageError(
            stage="write",
            detail="Failed to write fixed subtitle `out/movie.fixed.srt`: disk full",
            hint="Verify the output directory is writable.",
        )

    monkeypatch.setattr("subfixer.cli.SubtitleFixPipeline.run", _failing_run)
    runner = CliRunner()

    result = runner.invoke(app, ["fix", str(tmp_path / "movie.srt")])

    assert result.exit_code == 1
    assert "fix failed at stage `write`" in result.output
    assert "Hint: Verify the output directory is writable." in result.output
