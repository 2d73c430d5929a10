"""
Exercise 1: immutability.

The imperative version adds 10 to every element by writing into the list it
was given, so every other holder of that list sees the change. The functional
versions build a new list and leave the input exactly as it was.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog
from fpkit import array, pipe

from fp_exercises.logging_setup import configure_structlog

log = structlog.get_logger()


def add_ten_in_place(numbers: list[int]) -> None:
    """Imperative: overwrite each element. Mutates numbers."""
    for i in range(len(numbers)):
        numbers[i] = numbers[i] + 10


def add_ten(numbers: Sequence[int]) -> list[int]:
    """Functional: a new list, numbers untouched."""
    return [n + 10 for n in numbers]


def add_ten_piped(numbers: Sequence[int]) -> list[int]:
    return pipe(numbers, array.map_(lambda n: n + 10))


def main() -> None:
    configure_structlog()

    numbers = [1, 2, 3, 4, 5]
    add_ten_in_place(numbers)
    log.info("immutability.imperative", numbers=numbers)

    numbers_functional = [1, 2, 3, 4, 5]
    result_functional = add_ten(numbers_functional)
    log.info(
        "immutability.functional",
        original=numbers_functional,
        result=result_functional,
    )

    result_piped = add_ten_piped(numbers_functional)
    log.info("immutability.piped", original=numbers_functional, result=result_piped)


if __name__ == "__main__":
    main()
