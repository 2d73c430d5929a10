"""
Application entry point: run one exercise by name.

    fp-exercises exo3-either
    python -m fp_exercises exo5_chain

Responsibilities:
  1. Parse the single exercise-name argument (usage + exit 1 when missing)
  2. Load and validate configuration from environment
  3. Configure structlog
  4. Run the exercise and forward its stdout/stderr, or log the failure
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

import structlog
from fpkit import Failure, Success

from fp_exercises.config import RunnerSettings
from fp_exercises.logging_setup import configure_structlog
from fp_exercises.runner import ExerciseOutput, ExerciseRunner

MISSING_EXERCISE_MESSAGE = "Please pass the name of an exercise as an argument."


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fp-exercises",
        description="Compile one exercise and run it, forwarding its output.",
    )
    parser.add_argument(
        "exercise",
        nargs="?",
        help="exercise name, e.g. exo3-either (hyphens and underscores are interchangeable)",
    )
    return parser


def _forward(output: ExerciseOutput) -> None:
    if output.stdout:
        sys.stdout.write(output.stdout)
    if output.stderr:
        sys.stderr.write(output.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the named exercise. Returns the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not (args.exercise or "").strip():
        parser.print_usage(sys.stderr)
        print(MISSING_EXERCISE_MESSAGE, file=sys.stderr)  # noqa: T201
        return 1

    try:
        settings = RunnerSettings()
    except Exception as e:
        print(f"FATAL: Configuration error: {e}", file=sys.stderr)  # noqa: T201
        return 1

    configure_structlog(settings.log_level)
    log = structlog.get_logger()

    match ExerciseRunner(settings).run(args.exercise):
        case Success(output):
            _forward(output)
        case Failure(error):
            log.error("runner.failed", exercise=args.exercise, error=error)
    return 0


if __name__ == "__main__":
    sys.exit(main())
