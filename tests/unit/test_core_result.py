"""Unit tests for Result and ValueResult.

Tests cover:
- Success/failure factories and the success <=> Error.NONE invariant
- Rejection of invariant-violating construction (ValueError)
- Conversions from errors and values
- match() dispatching to exactly one branch
- Structural pattern matching
- Immutability
"""

from dataclasses import FrozenInstanceError
from unittest.mock import MagicMock

import pytest

from src.core.errors import Error, NotFound, Problem
from src.core.result import Result, ValueResult


@pytest.mark.unit
class TestResult:
    """Unit tests for Result without value."""

    def test_success_carries_none_sentinel(self):
        result = Result.success()

        assert result.is_success
        assert not result.is_failure
        assert result.error == Error.NONE

    def test_failure_carries_error(self):
        error = Problem(code="Order-Closed", description="The order is closed.")

        result = Result.failure(error)

        assert result.is_failure
        assert not result.is_success
        assert result.error is error

    def test_failure_with_none_sentinel_is_rejected(self):
        with pytest.raises(ValueError, match="Invalid error"):
            Result.failure(Error.NONE)

    def test_failure_with_structural_none_is_rejected(self):
        with pytest.raises(ValueError):
            Result.failure(Error(code=""))

    def test_success_with_real_error_is_rejected(self):
        with pytest.raises(ValueError, match="Invalid error"):
            Result(is_success=True, error=Error.NULL_VALUE)

    def test_failure_without_an_error_is_rejected(self):
        with pytest.raises(ValueError, match="expected an Error"):
            Result.failure(None)  # type: ignore[arg-type]

    def test_value_failure_without_an_error_is_rejected(self):
        with pytest.raises(ValueError, match="expected an Error"):
            ValueResult.failure("User-NotFound")  # type: ignore[arg-type]

    def test_from_error_builds_failure(self):
        result = Result.from_error(Error.CONDITION_NOT_MET)

        assert result.is_failure
        assert result.error == Error.CONDITION_NOT_MET

    def test_result_is_immutable(self):
        result = Result.success()

        with pytest.raises(FrozenInstanceError):
            result.is_success = False  # type: ignore[misc]

    def test_results_compare_by_value(self):
        assert Result.success() == Result.success()
        assert Result.failure(Error.NULL_VALUE) == Result.failure(Error.NULL_VALUE)


@pytest.mark.unit
class TestResultMatch:
    """Unit tests for Result.match()."""

    def test_match_invokes_success_branch_only(self):
        on_success = MagicMock(return_value="ok")
        on_failure = MagicMock(return_value="failed")

        outcome = Result.success().match(on_success, on_failure)

        assert outcome == "ok"
        on_success.assert_called_once_with()
        on_failure.assert_not_called()

    def test_match_invokes_failure_branch_with_error(self):
        error = NotFound(code="User-NotFound", description="No such user.")
        on_success = MagicMock(return_value="ok")
        on_failure = MagicMock(return_value="failed")

        outcome = Result.failure(error).match(on_success, on_failure)

        assert outcome == "failed"
        on_failure.assert_called_once_with(error)
        on_success.assert_not_called()

    def test_structural_pattern_matching(self):
        error = Problem(code="Code", description="Description")

        match Result.failure(error):
            case Result(is_success=True):
                matched = "success"
            case Result(error=NotFound()):
                matched = "not found"
            case Result(error=Problem(code=code)):
                matched = code
            case _:
                matched = "other"

        assert matched == "Code"


@pytest.mark.unit
class TestValueResult:
    """Unit tests for ValueResult."""

    def test_success_carries_value(self):
        result = ValueResult.success(42)

        assert result.is_success
        assert result.value == 42
        assert result.error == Error.NONE

    def test_success_allows_none_value(self):
        result = ValueResult.success(None)

        assert result.is_success
        assert result.value is None

    def test_failure_has_no_value(self):
        result = ValueResult.failure(Error.NULL_VALUE)

        assert result.is_failure
        assert result.value is None
        assert result.error == Error.NULL_VALUE

    def test_failure_with_none_sentinel_is_rejected(self):
        with pytest.raises(ValueError):
            ValueResult.failure(Error.NONE)

    def test_failure_with_value_is_rejected(self):
        with pytest.raises(ValueError, match="Invalid value"):
            ValueResult(is_success=False, error=Error.NULL_VALUE, value=1)

    def test_from_value_and_from_error(self):
        assert ValueResult.from_value("x") == ValueResult.success("x")
        assert ValueResult.from_error(Error.NULL_VALUE) == ValueResult.failure(
            Error.NULL_VALUE
        )

    def test_value_result_is_a_result(self):
        assert isinstance(ValueResult.success(1), Result)

    def test_match_passes_value_to_success_branch(self):
        outcome = ValueResult.success(21).match(
            lambda value: value * 2,
            lambda error: -1,
        )

        assert outcome == 42

    def test_match_passes_error_to_failure_branch(self):
        error = Problem(code="Code", description="Description")

        outcome = ValueResult.failure(error).match(
            lambda value: "unreachable",
            lambda failure: failure.code,
        )

        assert outcome == "Code"

    def test_structural_pattern_matching_with_positional_fields(self):
        match ValueResult.success("payload"):
            case ValueResult(True, _, value):
                matched = value
            case _:
                matched = None

        assert matched == "payload"
