"""
Function composition: pipe, flow, identity.

    pipe(10, add_five, double)   # → double(add_five(10)) == 30
    add_then_double = flow(add_five, double)
    add_then_double(10)          # → 30

pipe is oblivious to wrapped values: threading a Result, Option or Task
through it works by passing adapters from fpkit.pointfree (map_, chain, ...).
"""

from __future__ import annotations

from functools import reduce
from typing import Any, Callable, TypeVar

T = TypeVar("T")

Unary = Callable[[Any], Any]


def identity(value: T) -> T:
    return value


def pipe(value: Any, *fns: Unary) -> Any:
    """
    Thread value through fns left to right.

    pipe(x, f, g, h) == h(g(f(x))); pipe(x) == x. Exceptions raised by a
    stage propagate unchanged.
    """
    return reduce(lambda acc, fn: fn(acc), fns, value)


def flow(*fns: Unary) -> Unary:
    """Compose fns left to right into one unary function, without applying it."""
    if not fns:
        raise ValueError("flow requires at least one function")
    return lambda value: pipe(value, *fns)
