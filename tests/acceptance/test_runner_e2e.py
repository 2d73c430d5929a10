"""
Acceptance tests: the real runner compiles exercises and runs them in a child interpreter.

Each scenario goes through main() exactly like the console script does and
checks the forwarded child output.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from fp_exercises.main import main


@pytest.fixture()
def build_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    target = tmp_path / "dist"
    monkeypatch.setenv("FP_EXERCISES_BUILD_DIR", str(target))
    return target


@pytest.fixture(autouse=True)
def _plain_logging():
    # keep the parent's structlog uncached; the child configures its own
    with patch("fp_exercises.main.configure_structlog"):
        yield


class TestRunnerEndToEnd:
    def test_either_exercise(self, capsys, build_dir: Path) -> None:
        """
        GIVEN the exo3-either exercise
        WHEN the runner is invoked with its hyphenated name
        THEN the pyc is built and the child's Result output is forwarded.
        """
        assert main(["exo3-either"]) == 0

        out = capsys.readouterr().out
        assert (build_dir / "exo3_either.pyc").is_file()
        assert "Success(5.0)" in out
        assert "Cannot divide by zero" in out

    def test_chain_exercise(self, capsys, build_dir: Path) -> None:
        assert main(["exo5_chain"]) == 0

        out = capsys.readouterr().out
        assert "Success(12)" in out
        assert "Number must be even" in out
        assert "User details for ID 10" in out

    def test_pipe_exercise(self, capsys, build_dir: Path) -> None:
        assert main(["exo2-pipe"]) == 0

        assert "[7, 9, 11, 13, 15]" in capsys.readouterr().out

    def test_index(self, capsys, build_dir: Path) -> None:
        assert main(["index"]) == 0

        assert "Present(15)" in capsys.readouterr().out

    def test_unknown_exercise_is_logged(self, capsys, build_dir: Path) -> None:
        assert main(["exo42"]) == 0

        out = capsys.readouterr().out
        assert "runner.failed" in out
        assert "Unknown exercise" in out
        assert not build_dir.exists()
