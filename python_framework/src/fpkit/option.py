"""
Option: the optional-value type.

An Option[T] is either Present(value: T) or Absent(). It behaves like
Result without an error payload: Absent short-circuits .map()/.chain()
exactly as Failure does, but carries no reason, only the fact of absence.

    Option.present(10).map(lambda n: n + 5)   # → Present(15)
    Option.absent().map(lambda n: n + 5)      # → Absent()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from fpkit.result import Failure, Result, Success

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
R = TypeVar("R")


class Option(Generic[T]):
    """Optional value: Present(value) or Absent()."""

    def is_present(self) -> bool:
        return isinstance(self, Present)

    def is_absent(self) -> bool:
        return isinstance(self, Absent)

    def value(self) -> T:
        """Extract the present value. Raises ValueError on Absent."""
        match self:
            case Present(v):
                return v
        raise ValueError("Cannot get value from Absent")

    def fold(self, on_present: Callable[[T], R], on_absent: Callable[[], R]) -> R:
        """Apply one of two functions depending on presence."""
        match self:
            case Present(v):
                return on_present(v)
        return on_absent()

    def map(self, mapper: Callable[[T], U]) -> Option[U]:
        """Transform the present value. Absent short-circuits, mapper not called."""
        match self:
            case Present(v):
                return Present(mapper(v))
        return Absent()

    def chain(self, mapper: Callable[[T], Option[U]]) -> Option[U]:
        """Chain an Option-returning function. Absent short-circuits."""
        match self:
            case Present(v):
                return mapper(v)
        return Absent()

    flat_map = chain

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep the value only when the predicate holds."""
        return self.chain(lambda v: Present(v) if predicate(v) else Absent())

    def get_or_else(self, default: T) -> T:
        match self:
            case Present(v):
                return v
        return default

    def to_result(self, error: E) -> Result[T, E]:
        """Attach a reason to absence: Present(v) → Success(v), Absent() → Failure(error)."""
        match self:
            case Present(v):
                return Success(v)
        return Failure(error)

    @staticmethod
    def present(value: T) -> Option[T]:
        return Present(value)

    @staticmethod
    def absent() -> Option[Any]:
        return Absent()

    @staticmethod
    def from_nullable(value: Optional[T]) -> Option[T]:
        """None becomes Absent(); anything else becomes Present(value)."""
        if value is None:
            return Absent()
        return Present(value)

    def __bool__(self) -> bool:
        return self.is_present()


@dataclass(frozen=True, slots=True)
class Present(Option[T]):
    """A value is there."""

    _value: T

    def __init__(self, value: T) -> None:
        if value is None:
            raise TypeError("Present value must not be None, use Absent()")
        object.__setattr__(self, "_value", value)

    def __repr__(self) -> str:
        return f"Present({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Present):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Present, self._value))


@dataclass(frozen=True, slots=True)
class Absent(Option[Any]):
    """No value. All Absent() instances compare equal."""

    def __repr__(self) -> str:
        return "Absent()"
