"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without using exceptions. This approach makes error handling explicit and
testable.

Two shapes are provided:
- Result: outcome of an operation that produces no value (commands).
- ValueResult[T]: outcome of an operation that produces a T on success.

Invariant (checked on construction):
    is_success is True  <=> error == Error.NONE
Breaking it is a programming error and raises ValueError; it is never a
business failure.

Usage:
    def divide(a: float, b: float) -> ValueResult[float]:
        if b == 0:
            return ValueResult.failure(
                Problem(code="Math-DivideByZero", description="Division by zero")
            )
        return ValueResult.success(a / b)

    message = divide(10, 2).match(
        lambda value: f"Result: {value}",
        lambda error: f"Error: {error}",
    )

    match divide(10, 0):
        case ValueResult(is_success=True, value=value):
            print(value)
        case ValueResult(error=error):
            print(error.code)
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from src.core.errors import Error

T = TypeVar("T")  # Success value type
R = TypeVar("R")  # Match return type


@dataclass(frozen=True, slots=True, kw_only=True)
class Result:
    """Outcome of an operation without a value.

    Attributes:
        is_success: Whether the operation succeeded.
        error: Error.NONE on success, the failure otherwise.

    Raises:
        ValueError: If is_success and error disagree with the invariant.
    """

    __match_args__ = ("is_success", "error")

    is_success: bool
    error: Error

    def __post_init__(self) -> None:
        """Validate success/error consistency."""
        if not isinstance(self.error, Error):
            raise ValueError(f"Invalid error: expected an Error, got {self.error!r}")
        if self.is_success == self.error.is_none:
            return
        raise ValueError(
            f"Invalid error: is_success={self.is_success} with error {self.error!r}"
        )

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @classmethod
    def success(cls) -> "Result":
        return cls(is_success=True, error=Error.NONE)

    @classmethod
    def failure(cls, error: Error) -> "Result":
        """Create a failed result.

        Args:
            error: The failure. Must not be Error.NONE.

        Raises:
            ValueError: If error is the success sentinel or not an Error.
        """
        return cls(is_success=False, error=error)

    @classmethod
    def from_error(cls, error: Error) -> "Result":
        """Convert an error straight into a failed result."""
        return cls.failure(error)

    def match(
        self,
        on_success: Callable[[], R],
        on_failure: Callable[[Error], R],
    ) -> R:
        """Dispatch on state, invoking exactly one of the two callables.

        Args:
            on_success: Called with no arguments when successful.
            on_failure: Called with the error when failed.

        Returns:
            Whatever the invoked callable returns.
        """
        if self.is_success:
            return on_success()
        return on_failure(self.error)


@dataclass(frozen=True, slots=True, kw_only=True)
class ValueResult(Result, Generic[T]):
    """Outcome of an operation that produces a value.

    The value may itself be None on success; only the success/error pairing
    is enforced. On failure the value is always None.

    Attributes:
        is_success: Whether the operation succeeded.
        error: Error.NONE on success, the failure otherwise.
        value: The produced value (None on failure).
    """

    __match_args__ = ("is_success", "error", "value")

    value: T | None = None

    def __post_init__(self) -> None:
        """Validate success/error consistency and that failures carry no value."""
        Result.__post_init__(self)
        if self.is_failure and self.value is not None:
            raise ValueError("Invalid value: a failed result cannot carry a value")

    @classmethod
    def success(cls, value: T) -> "ValueResult[T]":  # type: ignore[override]
        return cls(is_success=True, error=Error.NONE, value=value)

    @classmethod
    def failure(cls, error: Error) -> "ValueResult[T]":
        return cls(is_success=False, error=error)

    @classmethod
    def from_value(cls, value: T) -> "ValueResult[T]":
        """Convert a plain value straight into a successful result."""
        return cls.success(value)

    @classmethod
    def from_error(cls, error: Error) -> "ValueResult[T]":
        return cls.failure(error)

    def match(  # type: ignore[override]
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[Error], R],
    ) -> R:
        """Dispatch on state, invoking exactly one of the two callables.

        Args:
            on_success: Called with the value when successful.
            on_failure: Called with the error when failed.

        Returns:
            Whatever the invoked callable returns.
        """
        if self.is_success:
            return on_success(self.value)  # type: ignore[arg-type]
        return on_failure(self.error)
