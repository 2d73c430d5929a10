"""
Tests for the Task type.

Focus on the laziness contract: nothing runs until the composed Task is
invoked, every invocation starts a fresh operation, and chained stages run
strictly in order.
"""

from __future__ import annotations

import asyncio

import pytest

from fpkit import Task, pipe
from fpkit.pointfree import chain, map_


def _counting_task(counter: list[int], value: int = 1) -> Task[int]:
    async def run() -> int:
        counter.append(value)
        return value

    return Task(run)


class TestConstruction:
    def test_requires_callable(self):
        with pytest.raises(TypeError, match="callable"):
            Task(42)  # type: ignore[arg-type]

    def test_construction_has_no_side_effect(self):
        counter: list[int] = []
        task = _counting_task(counter)
        assert counter == []
        assert task.run() == 1
        assert counter == [1]

    def test_composition_has_no_side_effect(self):
        counter: list[int] = []
        composed = (
            _counting_task(counter)
            .map(lambda n: n + 1)
            .chain(lambda n: _counting_task(counter, n))
        )
        assert counter == []
        assert composed.run() == 2
        assert counter == [1, 2]

    def test_each_invocation_starts_a_fresh_operation(self):
        counter: list[int] = []
        task = _counting_task(counter)
        task.run()
        task.run()
        assert counter == [1, 1]

    @pytest.mark.asyncio
    async def test_delayed_timer_starts_only_on_invocation(self):
        loop = asyncio.get_running_loop()
        task = Task.delayed("done", 0.05)
        await asyncio.sleep(0.1)
        start = loop.time()
        assert await task() == "done"
        assert loop.time() - start >= 0.04


class TestMap:
    @pytest.mark.asyncio
    async def test_map_transforms_resolved_value(self):
        task = Task.of("Data fetched").map(lambda s: f"{s} and processed")
        assert await task() == "Data fetched and processed"

    @pytest.mark.asyncio
    async def test_map_in_pipe(self):
        task = pipe(Task.of(3), map_(lambda n: n * 2), map_(str))
        assert await task() == "6"


class TestChain:
    @pytest.mark.asyncio
    async def test_chain_sequences_dependent_task(self):
        def fetch_user_details(user_id: int) -> Task[str]:
            return Task.of(f"User details for ID {user_id}")

        task = pipe(Task.of(10), chain(fetch_user_details))
        assert await task() == "User details for ID 10"

    @pytest.mark.asyncio
    async def test_chain_runs_stages_in_order(self):
        events: list[str] = []

        async def first() -> int:
            events.append("first-start")
            await asyncio.sleep(0.01)
            events.append("first-end")
            return 1

        def second(n: int) -> Task[int]:
            async def run() -> int:
                events.append("second-start")
                return n + 1

            return Task(run)

        assert await Task(first).chain(second)() == 2
        assert events == ["first-start", "first-end", "second-start"]

    @pytest.mark.asyncio
    async def test_rejection_propagates_to_caller(self):
        async def failing() -> int:
            raise RuntimeError("boom")

        calls: list[int] = []
        task = Task(failing).map(calls.append)
        with pytest.raises(RuntimeError, match="boom"):
            await task()
        assert calls == []

    @pytest.mark.asyncio
    async def test_flat_map_is_chain(self):
        assert await Task.of(1).flat_map(lambda n: Task.of(n + 1))() == 2


class TestHelpers:
    @pytest.mark.asyncio
    async def test_peek_passes_value_through(self):
        seen: list[str] = []
        assert await Task.of("x").peek(seen.append)() == "x"
        assert seen == ["x"]

    @pytest.mark.asyncio
    async def test_from_coroutine_function_defers_call(self):
        calls: list[int] = []

        async def fetch(n: int, *, offset: int = 0) -> int:
            calls.append(n)
            return n + offset

        task = Task.from_coroutine_function(fetch, 5, offset=1)
        assert calls == []
        assert await task() == 6
        assert await task() == 6
        assert calls == [5, 5]

    def test_run_drives_to_completion(self):
        assert Task.delayed(7, 0).run() == 7
