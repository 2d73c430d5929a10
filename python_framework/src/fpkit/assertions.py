"""
Assertion helpers for tests that check Result and Option values.

    ResultAssertions.assert_success_value(divide(10, 2), 5)
    ResultAssertions.assert_failure_value(divide(10, 0), "Cannot divide by zero")
    OptionAssertions.assert_absent(Option.from_nullable(None))
"""

from __future__ import annotations

from typing import Any, TypeVar

from fpkit.option import Option
from fpkit.result import Result

T = TypeVar("T")


def _with_note(text: str, note: str) -> str:
    return f"{text} ({note})" if note else text


class ResultAssertions:
    @staticmethod
    def assert_success(result: Result[T, Any], message: str = "") -> T:
        """Fail unless ``result`` is a Success; hand back its value."""
        if result.is_failure():
            raise AssertionError(
                _with_note(f"Expected Success but got Failure({result.error()!r})", message)
            )
        return result.value()

    @staticmethod
    def assert_failure(result: Result[Any, Any], message: str = "") -> Any:
        """Fail unless ``result`` is a Failure; hand back its error."""
        if result.is_success():
            raise AssertionError(
                _with_note(f"Expected Failure but got Success({result.value()!r})", message)
            )
        return result.error()

    @staticmethod
    def assert_success_value(result: Result[Any, Any], expected_value: Any) -> None:
        actual = ResultAssertions.assert_success(result)
        assert actual == expected_value, f"Expected success value {expected_value!r} but got {actual!r}"

    @staticmethod
    def assert_failure_value(result: Result[Any, Any], expected_error: Any) -> None:
        actual = ResultAssertions.assert_failure(result)
        assert actual == expected_error, f"Expected failure {expected_error!r} but got {actual!r}"

    @staticmethod
    def assert_failure_message_contains(result: Result[Any, Any], substring: str) -> None:
        """Case-insensitive substring check on ``str(error)``."""
        message = str(ResultAssertions.assert_failure(result))
        assert substring.casefold() in message.casefold(), (
            f"Expected failure message to contain {substring!r}, got {message!r}"
        )


class OptionAssertions:
    @staticmethod
    def assert_present(option: Option[T]) -> T:
        if option.is_absent():
            raise AssertionError("Expected Present but got Absent()")
        return option.value()

    @staticmethod
    def assert_absent(option: Option[Any]) -> None:
        if option.is_present():
            raise AssertionError(f"Expected Absent() but got {option!r}")
