"""
Result: a value that is either a Success or a Failure.

Functions that can go wrong return a Result rather than raising. Each
.map()/.chain() step only runs while the Result is a Success; the first
Failure rides through every later step untouched.

    validate ──Success──> double ──Success──> triple ──> Success(v)
        │                   │                   │
        └──Failure──────────┴───────────────────┴──────> Failure(e)

The error side is not constrained to a type. The exercises use plain
strings such as "Cannot divide by zero"; anything except None is allowed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, List, Optional, TypeVar

if TYPE_CHECKING:
    from fpkit.execution import ExecutionContext
    from fpkit.option import Option

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")
A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")


class Result(Generic[T, E]):
    """
    Either ``Success(value)`` or ``Failure(error)``.

        >>> Result.success(5).map(lambda x: x * 2)
        Success(10)
        >>> Result.failure("bad input").map(lambda x: x * 2)
        Failure('bad input')
    """

    def is_success(self) -> bool:
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def value(self) -> T:
        """Unwrap a Success. A Failure raises ValueError; use either() when unsure."""
        match self:
            case Success(v):
                return v
            case Failure(err):
                raise ValueError(f"Cannot get value from a Failure: {err!r}")
        raise TypeError("unreachable")  # pragma: no cover

    def error(self) -> E:
        """Unwrap a Failure. A Success raises ValueError."""
        match self:
            case Failure(err):
                return err
            case Success(v):
                raise ValueError(f"Cannot get error from a Success: {v!r}")
        raise TypeError("unreachable")  # pragma: no cover

    def either(
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[E], R],
    ) -> R:
        """
        Fold both tracks into one value.

            divide(10, 0).either(
                on_success=lambda q: f"quotient {q}",
                on_failure=lambda err: f"error: {err}",
            )
        """
        match self:
            case Success(v):
                return on_success(v)
            case Failure(err):
                return on_failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def map(self, mapper: Callable[[T], U]) -> Result[U, E]:
        """
        Apply ``mapper`` to a Success value; a Failure is returned as is and
        ``mapper`` is never called. A mapper returning None raises TypeError;
        use ``chain`` with ``Result.from_optional`` for values that may be None.
        """
        match self:
            case Success(v):
                return Success(mapper(v))
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def map_failure(self, mapper: Callable[[E], F]) -> Result[T, F]:
        match self:
            case Success(_):
                return self  # type: ignore[return-value]
            case Failure(err):
                return Failure(mapper(err))
        raise TypeError("unreachable")  # pragma: no cover

    def chain(self, mapper: Callable[[T], Result[U, Any]]) -> Result[U, Any]:
        """
        Feed a Success value into a function that itself returns a Result.

        Whatever ``mapper`` returns becomes the new Result, so every step may
        pick its own error value:

            Result.success(4).chain(validate_positive).chain(validate_even)
            Result.success(-1).chain(validate_positive)  # Failure('Number must be positive')
        """
        match self:
            case Success(v):
                return mapper(v)
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    flat_map = chain

    def ensure(self, predicate: Callable[[T], bool], error: E) -> Result[T, E]:
        """Turn a Success into ``Failure(error)`` unless ``predicate`` holds."""
        return self.chain(lambda v: Success(v) if predicate(v) else Failure(error))

    def peek(self, action: Callable[[T], Any]) -> Result[T, E]:
        """Run ``action`` on a Success value for its side effect only."""
        match self:
            case Success(v):
                action(v)
        return self

    def peek_failure(self, action: Callable[[E], Any]) -> Result[T, E]:
        match self:
            case Failure(err):
                action(err)
        return self

    def recover(self, recovery_fn: Callable[[E], T]) -> Result[T, E]:
        """Replace a Failure with ``Success(recovery_fn(error))``."""
        match self:
            case Failure(err):
                return Success(recovery_fn(err))
        return self

    def get_or_else(self, default: T) -> T:
        match self:
            case Success(v):
                return v
        return default

    def get_or_else_get(self, fallback: Callable[[E], T]) -> T:
        """Like get_or_else, with the default computed from the error."""
        return self.either(lambda v: v, fallback)

    def to_option(self) -> Option[T]:
        """Success(v) becomes Present(v); a Failure becomes Absent()."""
        from fpkit.option import Absent, Present

        match self:
            case Success(v):
                return Present(v)
        return Absent()

    def within(self, execution_context: ExecutionContext) -> Result[T, E]:
        """
        Hand this Result to an execution context:

            divide(10, 2).within(LoggingExecutionContext(operation="Divide"))
        """
        return execution_context.execute(lambda: self)

    @staticmethod
    def success(value: T) -> Result[T, Any]:
        return Success(value)

    @staticmethod
    def failure(error: E) -> Result[Any, E]:
        return Failure(error)

    @staticmethod
    def from_computation(
        computation: Callable[[], T],
        on_exception: Callable[[Exception], E] = str,  # type: ignore[assignment]
    ) -> Result[T, E]:
        """
        Call ``computation``; its return value becomes a Success and any
        exception it raises becomes ``Failure(on_exception(exc))``. Success
        cannot hold None, so a computation returning None also ends up as a
        Failure (``on_exception`` of the resulting TypeError).

            Result.from_computation(lambda: divide_imperative(10, 0))
            # Failure('Cannot divide by zero')
        """
        try:
            return Success(computation())
        except Exception as exc:
            return Failure(on_exception(exc))

    @staticmethod
    def from_optional(value: Optional[T], error: E) -> Result[T, E]:
        """``Failure(error)`` when ``value`` is None, else ``Success(value)``."""
        return Failure(error) if value is None else Success(value)

    @staticmethod
    def combine(
        ra: Result[A, E],
        rb: Result[B, E],
        combiner: Callable[[A, B], R],
    ) -> Result[R, E]:
        """
        Merge two Results with ``combiner``; the first Failure wins.

            Result.combine(divide(10, 2), divide(9, 3), lambda a, b: a + b)
        """
        return ra.chain(lambda a: rb.map(lambda b: combiner(a, b)))

    @staticmethod
    def all_of(results: List[Result[T, E]]) -> Result[List[T], E]:
        """Success with every value in order, or the first Failure met."""
        collected: list[T] = []
        for result in results:
            if isinstance(result, Failure):
                return Failure(result.error())
            collected.append(result.value())
        return Success(collected)

    def __bool__(self) -> bool:
        """A Success is truthy, a Failure falsy."""
        return self.is_success()


@dataclass(frozen=True, slots=True)
class Success(Result[T, E]):
    _value: T

    def __init__(self, value: T) -> None:
        if value is None:
            raise TypeError("Success value must not be None")
        object.__setattr__(self, "_value", value)

    def __repr__(self) -> str:
        return f"Success({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Success):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Success, self._value))


@dataclass(frozen=True, slots=True)
class Failure(Result[T, E]):
    _error: E

    def __init__(self, error: E) -> None:
        if error is None:
            raise TypeError("Failure error must not be None")
        object.__setattr__(self, "_error", error)

    def __repr__(self) -> str:
        return f"Failure({self._error!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Failure):
            return NotImplemented
        return self._error == other._error

    def __hash__(self) -> int:
        return hash((Failure, self._error))
