"""
Execution contexts: run a Result-producing computation under some policy.

A pipeline built from Result.map/chain stays free of side effects; the
context around it decides whether to log, time or trap exceptions.

    def triple_if_even(n: int) -> Result[int, str]:
        return validate_positive(n).chain(validate_even).map(triple)

    ctx = LoggingExecutionContext(operation="Triple")
    ctx.execute(lambda: triple_if_even(4))
    triple_if_even(4).within(ctx)
"""

from __future__ import annotations

import logging
import time
from functools import reduce
from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

from fpkit.result import Failure, Result

T = TypeVar("T")
logger = logging.getLogger("fpkit.execution")

Computation = Callable[[], Result[T, Any]]


def _describe_exception(exc: Exception) -> str:
    return f"Execution failed: {exc}"


@runtime_checkable
class ExecutionContext(Protocol):
    """Anything with an ``execute(computation)`` method returning a Result."""

    def execute(self, computation: Computation[T]) -> Result[T, Any]: ...


class NoOpExecutionContext:
    """Calls the computation and hands back its Result untouched."""

    def execute(self, computation: Computation[T]) -> Result[T, Any]:
        return computation()


class LoggingExecutionContext:
    """
    Logs the start, the outcome and the elapsed time of a computation.

    Delegates to ``inner`` (NoOp by default). An exception raised by the
    computation never escapes: it is logged at ERROR and returned as
    ``Failure(on_exception(exc))``.
    """

    def __init__(
        self,
        inner: ExecutionContext | None = None,
        operation: str = "unknown",
        log_level: int = logging.INFO,
        on_exception: Callable[[Exception], Any] = _describe_exception,
    ) -> None:
        self._inner = inner if inner is not None else NoOpExecutionContext()
        self._operation = operation
        self._log_level = log_level
        self._on_exception = on_exception

    def execute(self, computation: Computation[T]) -> Result[T, Any]:
        logger.log(self._log_level, "%s started", self._operation)
        started_at = time.monotonic()
        try:
            outcome = self._inner.execute(computation)
        except Exception as exc:
            logger.error(
                "%s raised after %.3fs: %s",
                self._operation,
                time.monotonic() - started_at,
                exc,
            )
            return Failure(self._on_exception(exc))

        logger.log(
            self._log_level,
            "%s finished with %s in %.3fs",
            self._operation,
            "SUCCESS" if outcome.is_success() else "FAILURE",
            time.monotonic() - started_at,
        )
        return outcome


class ComposableExecutionContext:
    """
    Nests several contexts; the first one given ends up outermost.

        ComposableExecutionContext(LoggingExecutionContext(operation="Run"), other)
    """

    def __init__(self, *contexts: ExecutionContext) -> None:
        if not contexts:
            raise ValueError("At least one execution context is required")
        self._contexts = tuple(contexts)

    def execute(self, computation: Computation[T]) -> Result[T, Any]:
        def wrap(inner: Computation[T], ctx: ExecutionContext) -> Computation[T]:
            return lambda: ctx.execute(inner)

        return reduce(wrap, reversed(self._contexts), computation)()
