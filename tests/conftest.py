"""
Shared test fixtures for the fp_exercises test suite.

structlog is reset after every test so a logger configured (and cached) by
one test never writes to another test's captured stream.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from fp_exercises.config import RunnerSettings


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


@pytest.fixture()
def settings(tmp_path: Path) -> RunnerSettings:
    """Runner settings building into a per-test directory."""
    return RunnerSettings(build_dir=tmp_path / "dist", timeout_seconds=30)
