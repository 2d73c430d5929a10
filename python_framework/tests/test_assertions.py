"""Tests for ResultAssertions and OptionAssertions."""

import pytest

from fpkit import Absent, Failure, OptionAssertions, Present, ResultAssertions, Success


class TestResultAssertions:
    def test_assert_success_returns_value(self):
        assert ResultAssertions.assert_success(Success(42)) == 42

    def test_assert_success_reports_the_failure(self):
        with pytest.raises(AssertionError, match=r"Expected Success but got Failure\('Name is required'\)"):
            ResultAssertions.assert_success(Failure("Name is required"))

    def test_note_is_appended(self):
        with pytest.raises(AssertionError, match=r"\(while dividing\)$"):
            ResultAssertions.assert_success(Failure("x"), "while dividing")

    def test_assert_failure_returns_error(self):
        assert ResultAssertions.assert_failure(Failure("missing")) == "missing"
        with pytest.raises(AssertionError, match=r"Expected Failure but got Success\(42\)"):
            ResultAssertions.assert_failure(Success(42))

    def test_value_comparisons(self):
        ResultAssertions.assert_success_value(Success(5.0), 5)
        ResultAssertions.assert_failure_value(Failure("Number must be even"), "Number must be even")

        with pytest.raises(AssertionError, match="Expected success value 6 but got 5"):
            ResultAssertions.assert_success_value(Success(5), 6)
        with pytest.raises(AssertionError, match="Expected failure 'a' but got 'b'"):
            ResultAssertions.assert_failure_value(Failure("b"), "a")

    def test_message_contains_ignores_case(self):
        ResultAssertions.assert_failure_message_contains(Failure("CANNOT DIVIDE BY ZERO"), "divide")
        with pytest.raises(AssertionError, match="to contain 'name'"):
            ResultAssertions.assert_failure_message_contains(Failure("Age is required"), "name")


class TestOptionAssertions:
    def test_present(self):
        assert OptionAssertions.assert_present(Present(3)) == 3
        with pytest.raises(AssertionError, match="Expected Present"):
            OptionAssertions.assert_present(Absent())

    def test_absent(self):
        OptionAssertions.assert_absent(Absent())
        with pytest.raises(AssertionError, match=r"Expected Absent\(\) but got Present\(1\)"):
            OptionAssertions.assert_absent(Present(1))
