"""
Exercise 5: sequencing with chain.

chain runs the next step only when the previous one succeeded, and hands it
the unwrapped value. Validations line up one after the other without nested
ifs; dependent async calls line up the same way with Task.
"""

from __future__ import annotations

import structlog
from fpkit import Result, Task, pipe
from fpkit.pointfree import chain

from fp_exercises.logging_setup import configure_structlog

log = structlog.get_logger()


# ----- Result -----


def validate_positive(n: int) -> Result[int, str]:
    return Result.success(n) if n > 0 else Result.failure("Number must be positive")


def double_number(n: int) -> Result[int, str]:
    return Result.success(n * 2)


def double_if_positive(n: int) -> Result[int, str]:
    return pipe(n, validate_positive, chain(double_number))


def validate_even(n: int) -> Result[int, str]:
    return Result.success(n) if n % 2 == 0 else Result.failure("Number must be even")


def triple_if_positive_and_even(n: int) -> Result[int, str]:
    return pipe(
        n,
        validate_positive,
        chain(validate_even),
        chain(lambda number: Result.success(number * 3)),
    )


# ----- Task -----

fetch_user_id: Task[int] = Task.of(10)


def fetch_user_details(user_id: int) -> Task[str]:
    return Task.of(f"User details for ID {user_id}")


fetch_and_display_user_details: Task[str] = pipe(fetch_user_id, chain(fetch_user_details))


def main() -> None:
    configure_structlog()

    log.info("chain.double_if_positive", n=5, result=double_if_positive(5))
    log.info("chain.double_if_positive", n=-3, result=double_if_positive(-3))

    for n in (4, 3, -2):
        log.info("chain.triple_if_positive_and_even", n=n, result=triple_if_positive_and_even(n))

    log.info("chain.user_details", result=fetch_and_display_user_details.run())


if __name__ == "__main__":
    main()
