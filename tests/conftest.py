"""Shared pytest fixtures for the full subfixer test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fixture_paths import (
    persian_sample_expected_path as resolve_persian_sample_expected_path,
    persian_sample_srt_path as resolve_persian_sample_srt_path,
)


@pytest.fixture
def persian_sample_srt_path() -> Path:
    """Provide the Persian sample SRT fixture path."""

    return resolve_persian_sample_srt_path()


@pytest.fixture
def persian_sample_expected_path() -> Path:
    """Provide the expected fixed output for the Persian sample SRT fixture."""

    return resolve_persian_sample_expected_path()
