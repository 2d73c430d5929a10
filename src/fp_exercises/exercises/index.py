"""Warm-up: pipe a plain value, then the same step over an Option."""

from __future__ import annotations

import structlog
from fpkit import Option, pipe
from fpkit.pointfree import map_

from fp_exercises.logging_setup import configure_structlog

log = structlog.get_logger()


def add_five(n: int) -> int:
    return n + 5


def add_five_to_optional(number: Option[int]) -> Option[int]:
    """Applies add_five only when a number is present."""
    return pipe(number, map_(add_five))


def main() -> None:
    configure_structlog()

    number1 = 10
    number2 = pipe(number1, add_five)
    log.info("index.plain", number1=number1, number2=number2)

    number1_option = Option.present(10)
    number2_option = add_five_to_optional(number1_option)
    log.info("index.option", number1=number1_option, number2=number2_option)
    log.info("index.absent", result=add_five_to_optional(Option.absent()))


if __name__ == "__main__":
    main()
