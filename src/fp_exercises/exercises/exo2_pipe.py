"""
Exercise 2: pipe.

Method chaining and nested calls read inside-out once there are more than
two steps. pipe takes the input first and the steps in the order they run.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog
from fpkit import array, pipe

from fp_exercises.logging_setup import configure_structlog

log = structlog.get_logger()

NUMBERS = (1, 2, 3, 4, 5)


def add_ten_keep_large_nested(numbers: Sequence[int]) -> list[int]:
    """Traditional: filter(map(...)), read from the inside out."""
    return list(filter(lambda n: n >= 15, map(lambda n: n + 10, numbers)))


def add_ten_keep_large(numbers: Sequence[int]) -> list[int]:
    return pipe(
        numbers,
        array.map_(lambda n: n + 10),
        array.filter_(lambda n: n >= 15),
    )


def double_add_five_below_twenty(numbers: Sequence[int]) -> list[int]:
    """Multiply by 2, add 5, keep what stays under 20."""
    return pipe(
        numbers,
        array.map_(lambda n: n * 2),
        array.map_(lambda n: n + 5),
        array.filter_(lambda n: n < 20),
    )


def main() -> None:
    configure_structlog()

    log.info("pipe.traditional", result=add_ten_keep_large_nested(NUMBERS))
    log.info("pipe.composed", result=add_ten_keep_large(NUMBERS))

    result_complex = double_add_five_below_twenty(NUMBERS)
    log.info(
        "pipe.complex",
        result=result_complex,
        succeeded=result_complex == [7, 9, 11, 13, 15],
    )


if __name__ == "__main__":
    main()
