"""
Exercise 3: explicit failure with Result.

divide_imperative raises, so every caller has to remember a try/except.
divide returns Failure("Cannot divide by zero") as an ordinary value; the
next step in the pipe is skipped automatically and the failure reaches the
end of the pipeline unchanged.
"""

from __future__ import annotations

import structlog
from fpkit import Result, pipe
from fpkit.pointfree import map_

from fp_exercises.logging_setup import configure_structlog

log = structlog.get_logger()

DIVIDE_BY_ZERO = "Cannot divide by zero"


def divide_imperative(a: float, b: float) -> float:
    if b == 0:
        raise ZeroDivisionError(DIVIDE_BY_ZERO)
    return a / b


def divide(a: float, b: float) -> Result[float, str]:
    if b == 0:
        return Result.failure(DIVIDE_BY_ZERO)
    return Result.success(a / b)


def safe_divide(a: float, b: float) -> Result[float, str]:
    """Divide, then double the quotient when the division worked."""
    return pipe(divide(a, b), map_(lambda quotient: quotient * 2))


def divide_guarded(a: float, b: float) -> Result[float, str]:
    """Bring the raising version onto the failure track."""
    return Result.from_computation(lambda: divide_imperative(a, b))


def main() -> None:
    configure_structlog()

    try:
        log.info("either.imperative", result=divide_imperative(10, 2))
        divide_imperative(10, 0)
    except ZeroDivisionError as e:
        log.info("either.imperative_error", error=str(e))

    log.info("either.functional", result=divide(10, 2))
    log.info("either.functional", result=divide(10, 0))

    log.info("either.chained", result=safe_divide(10, 2))
    log.info("either.chained", result=safe_divide(10, 0))

    log.info("either.guarded", result=divide_guarded(10, 0))


if __name__ == "__main__":
    main()
