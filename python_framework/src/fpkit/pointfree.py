"""
Point-free adapters: turn container methods into unary functions for pipe.

Works with any container exposing the method (Result, Option, Task):

    from fpkit import pipe
    from fpkit.pointfree import chain, map_

    pipe(
        n,
        validate_positive,
        chain(validate_even),
        map_(lambda x: x * 3),
    )
"""

from __future__ import annotations

from typing import Any, Callable


def map_(mapper: Callable[[Any], Any]) -> Callable[[Any], Any]:
    return lambda container: container.map(mapper)


def chain(mapper: Callable[[Any], Any]) -> Callable[[Any], Any]:
    return lambda container: container.chain(mapper)


def map_failure(mapper: Callable[[Any], Any]) -> Callable[[Any], Any]:
    return lambda result: result.map_failure(mapper)


def ensure(predicate: Callable[[Any], bool], error: Any) -> Callable[[Any], Any]:
    return lambda result: result.ensure(predicate, error)


def peek(action: Callable[[Any], Any]) -> Callable[[Any], Any]:
    return lambda container: container.peek(action)


def get_or_else(default: Any) -> Callable[[Any], Any]:
    return lambda container: container.get_or_else(default)
