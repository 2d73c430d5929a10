"""
Task: the deferred asynchronous computation type.

A Task[T] wraps a zero-argument callable (thunk) that returns an awaitable
of T. Building a Task, or composing one with .map()/.chain(), performs no
work; the asynchronous operation starts only when the composed Task is
invoked and its awaitable is awaited.

    fetch_user_id = Task.of(10)
    details = fetch_user_id.chain(
        lambda user_id: Task.of(f"User details for ID {user_id}")
    )
    await details()   # → "User details for ID 10"

Each invocation calls the thunk again, so invoking the same Task twice
starts two independent operations. Nothing is memoized and nothing can be
cancelled from here; a rejection (raised exception) propagates to whoever
awaits the outer Task.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Coroutine, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Task(Generic[T]):
    """Lazy asynchronous computation of a T."""

    __slots__ = ("_thunk",)

    def __init__(self, thunk: Callable[[], Awaitable[T]]) -> None:
        if not callable(thunk):
            raise TypeError("Task requires a zero-argument callable")
        self._thunk = thunk

    def __call__(self) -> Awaitable[T]:
        """Start the computation and return its awaitable."""
        return self._thunk()

    def map(self, mapper: Callable[[T], U]) -> Task[U]:
        """
        Transform the resolved value.

        The mapper runs right after this Task resolves, inside the new Task.
        """

        async def run() -> U:
            return mapper(await self())

        return Task(run)

    def chain(self, mapper: Callable[[T], Task[U]]) -> Task[U]:
        """
        Sequence a dependent Task.

        The next Task is built from the resolved value and only started after
        this one has resolved.
        """

        async def run() -> U:
            value = await self()
            return await mapper(value)()

        return Task(run)

    flat_map = chain

    def peek(self, action: Callable[[T], Any]) -> Task[T]:
        """Run a side effect on the resolved value, passing it through unchanged."""

        async def run() -> T:
            value = await self()
            action(value)
            return value

        return Task(run)

    def run(self) -> T:
        """
        Drive the Task to completion on a fresh event loop.

        Must not be called from inside a running loop; await the Task there.
        """
        return asyncio.run(_invoke(self))

    @staticmethod
    def of(value: T) -> Task[T]:
        """A Task that resolves immediately to value."""

        async def run() -> T:
            return value

        return Task(run)

    @staticmethod
    def delayed(value: T, seconds: float) -> Task[T]:
        """A Task that resolves to value after sleeping; the timer starts on invocation."""

        async def run() -> T:
            await asyncio.sleep(seconds)
            return value

        return Task(run)

    @staticmethod
    def from_coroutine_function(
        fn: Callable[..., Coroutine[Any, Any, T]], *args: Any, **kwargs: Any
    ) -> Task[T]:
        """Defer a coroutine function call; a fresh coroutine is created per invocation."""
        return Task(lambda: fn(*args, **kwargs))

    def __repr__(self) -> str:
        return f"Task({getattr(self._thunk, '__qualname__', self._thunk)!r})"


async def _invoke(task: Task[T]) -> T:
    return await task()
