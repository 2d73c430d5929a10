"""Immutable sequence helpers for pipe. Every call builds a new list; inputs are never touched."""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

T = TypeVar("T")
U = TypeVar("U")


def map_(mapper: Callable[[T], U]) -> Callable[[Iterable[T]], list[U]]:
    """pipe([1, 2, 3], map_(lambda n: n + 10))  # → [11, 12, 13]"""
    return lambda items: [mapper(item) for item in items]


def filter_(predicate: Callable[[T], bool]) -> Callable[[Iterable[T]], list[T]]:
    """pipe([11, 15, 20], filter_(lambda n: n >= 15))  # → [15, 20]"""
    return lambda items: [item for item in items if predicate(item)]
