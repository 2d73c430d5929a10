"""
fpkit: small value-oriented computation toolkit.

Explicit, composable values instead of exceptions and callbacks:

    from fpkit import Result, Task, Option, pipe
    from fpkit.pointfree import chain, map_

    def validate_positive(n: int) -> Result[int, str]:
        if n > 0:
            return Result.success(n)
        return Result.failure("Number must be positive")

    pipe(5, validate_positive, map_(lambda n: n * 2))   # → Success(10)

  - pipe / flow   left-to-right function composition
  - Result        Success(value) | Failure(error)
  - Option        Present(value) | Absent()
  - Task          lazy asynchronous computation (asyncio)
"""

from fpkit.function import flow, identity, pipe
from fpkit.result import Result, Success, Failure
from fpkit.option import Option, Present, Absent
from fpkit.task import Task
from fpkit.execution import (
    ExecutionContext,
    NoOpExecutionContext,
    LoggingExecutionContext,
    ComposableExecutionContext,
)
from fpkit.assertions import OptionAssertions, ResultAssertions

__all__ = [
    "pipe",
    "flow",
    "identity",
    "Result",
    "Success",
    "Failure",
    "Option",
    "Present",
    "Absent",
    "Task",
    "ExecutionContext",
    "NoOpExecutionContext",
    "LoggingExecutionContext",
    "ComposableExecutionContext",
    "OptionAssertions",
    "ResultAssertions",
]

__version__ = "1.0.0"
