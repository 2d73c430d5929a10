"""Tests for pipe/flow and the point-free adapters built on them."""

from __future__ import annotations

import pytest

from fpkit import Absent, Failure, Present, Success, flow, identity, pipe
from fpkit import array as A
from fpkit import pointfree as P


def _add_five(n: int) -> int:
    return n + 5


def _double(n: int) -> int:
    return n * 2


def _negate(n: int) -> int:
    return -n


class TestPipe:
    @pytest.mark.parametrize("x", [0, 1, -4, 10])
    def test_pipe_applies_left_to_right(self, x):
        assert pipe(x, _add_five, _double, _negate) == _negate(_double(_add_five(x)))

    def test_pipe_without_functions_returns_input(self):
        sentinel = object()
        assert pipe(sentinel) is sentinel

    def test_pipe_changes_types_between_stages(self):
        assert pipe(10, _add_five, str, len) == 2

    def test_pipe_propagates_stage_exceptions(self):
        def boom(_: int) -> int:
            raise KeyError("stage")

        with pytest.raises(KeyError):
            pipe(1, _add_five, boom, _double)

    def test_pipe_handles_many_stages(self):
        assert pipe(0, *([lambda n: n + 1] * 50)) == 50


class TestFlow:
    def test_flow_composes_without_applying(self):
        calls: list[int] = []
        composed = flow(lambda n: calls.append(n) or n, _double)
        assert calls == []
        assert composed(3) == 6
        assert calls == [3]

    def test_flow_requires_functions(self):
        with pytest.raises(ValueError, match="at least one"):
            flow()

    def test_identity(self):
        assert identity("x") == "x"


class TestPointfree:
    def test_map_and_chain_over_result(self):
        result = pipe(
            Success(4),
            P.chain(lambda n: Success(n) if n > 0 else Failure("Number must be positive")),
            P.map_(_double),
        )
        assert result == Success(8)

    def test_same_adapters_work_for_option(self):
        assert pipe(Present(10), P.map_(_add_five)) == Present(15)
        assert pipe(Absent(), P.map_(_add_five), P.get_or_else(0)) == 0

    def test_ensure_and_map_failure(self):
        result = pipe(
            Success(3),
            P.ensure(lambda n: n % 2 == 0, "Number must be even"),
            P.map_failure(str.upper),
        )
        assert result == Failure("NUMBER MUST BE EVEN")

    def test_peek(self):
        seen: list[int] = []
        assert pipe(Success(1), P.peek(seen.append)) == Success(1)
        assert seen == [1]


class TestArray:
    def test_map_builds_new_list(self):
        numbers = [1, 2, 3, 4, 5]
        result = pipe(numbers, A.map_(lambda n: n + 10))
        assert result == [11, 12, 13, 14, 15]
        assert numbers == [1, 2, 3, 4, 5]
        assert result is not numbers

    def test_filter_builds_new_list(self):
        numbers = [11, 12, 15, 20]
        assert pipe(numbers, A.filter_(lambda n: n >= 15)) == [15, 20]
        assert numbers == [11, 12, 15, 20]

    def test_accepts_any_iterable(self):
        assert A.map_(_double)((1, 2)) == [2, 4]
        assert A.filter_(bool)(iter([0, 1, 2])) == [1, 2]
