"""Validation framework for exhaustive input validation.

Validation collects EVERY field-level failure instead of stopping at the
first one. Callers feed failures into a ValidationErrorBuilder and convert
it to a Result once at the end: success when nothing was recorded, otherwise
a single ValidationError carrying every message keyed by field/code.

The field validators below return ValueResult values whose failures are
Problem errors keyed by the field name, ready for ``add_error``.

Usage:
    from src.core.validation import (
        ValidationErrorBuilder,
        validate_all,
        validate_email,
        validate_not_empty,
    )

    builder = ValidationErrorBuilder.create()
    validate_all(
        builder,
        validate_not_empty(command.email, "Email"),
        validate_email(command.email, "Email"),
        validate_min_length(command.password, 8, "Password"),
    )
    result = builder.to_result()

Concurrency:
    A builder is owned by a single validation pass and is not thread-safe.
    Independent passes use their own builders and are combined with
    ``merge`` by one coordinating owner.
"""

import re
from types import MappingProxyType
from typing import Any

from src.core.errors import Error, Problem, ValidationError
from src.core.result import Result, ValueResult

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


class ValidationErrorBuilder:
    """Mutable accumulator of (code, description) validation failures.

    Internal state maps each code to its descriptions in insertion order.

    Example:
        >>> builder = ValidationErrorBuilder.create()
        >>> builder.add_error(Error(code="Email", description="Email is required"))
        >>> builder.to_result().is_failure
        True
    """

    __slots__ = ("_errors",)

    def __init__(self) -> None:
        self._errors: dict[str, list[str]] = {}

    @classmethod
    def create(cls) -> "ValidationErrorBuilder":
        """Create a new, empty builder."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self._errors

    def __len__(self) -> int:
        return len(self._errors)

    def add_error(self, error: Error) -> None:
        """Record an error's description under its code.

        Errors without a description carry nothing to report and are
        dropped. Duplicate descriptions are kept.

        Args:
            error: Any Error; its code is the key, its description the message.
        """
        if error.description is None:
            return

        self._errors.setdefault(error.code, []).append(error.description)

    def merge(self, other: "ValidationErrorBuilder") -> None:
        """Append every entry of ``other`` after this builder's entries.

        Per code, ``other``'s descriptions follow the ones already recorded
        here, in ``other``'s own order. Codes unknown to this builder are
        created. Merging a builder into itself duplicates its entries.

        Args:
            other: Builder whose entries are copied in. It is not modified.
        """
        for code, descriptions in list(other._errors.items()):
            self._errors[code] = [*self._errors.get(code, ()), *descriptions]

    def to_result(self) -> Result:
        """Convert the accumulated state into a Result.

        Does not modify the builder; repeated calls without intervening
        mutation return equal results.

        Returns:
            Result.success() when nothing was recorded, otherwise a failure
            wrapping a ValidationError with a read-only snapshot of every
            entry.
        """
        if not self._errors:
            return Result.success()

        snapshot = {code: tuple(d) for code, d in self._errors.items()}
        return Result.failure(ValidationError(errors=MappingProxyType(snapshot)))

    def __repr__(self) -> str:
        return f"ValidationErrorBuilder({self._errors!r})"


def validate_all(
    builder: ValidationErrorBuilder, *results: ValueResult[Any]
) -> ValidationErrorBuilder:
    """Record the error of every failed result into ``builder``.

    Args:
        builder: Builder to feed.
        *results: Outcomes of individual field validators.

    Returns:
        The same builder, for chaining into ``to_result()``.
    """
    for result in results:
        if result.is_failure:
            builder.add_error(result.error)
    return builder


def validate_not_empty(value: Any, field_name: str) -> ValueResult[Any]:
    """Validate that a value is not empty.

    Args:
        value: Value to validate.
        field_name: Name of the field being validated (used as error code).

    Returns:
        Success with value if not empty, Failure with Problem otherwise.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return ValueResult.failure(
            Problem(code=field_name, description=f"{field_name} is required")
        )
    return ValueResult.success(value)


def validate_email(email: str | None, field_name: str = "Email") -> ValueResult[str]:
    """Validate email format.

    Empty input is left to ``validate_not_empty`` and passes here, so a
    missing address is reported once.

    Args:
        email: Email address to validate.
        field_name: Name of the field being validated (used as error code).

    Returns:
        Success with email if valid, Failure with Problem otherwise.
    """
    if not email:
        return ValueResult.success(email)
    if not EMAIL_PATTERN.match(email):
        return ValueResult.failure(
            Problem(code=field_name, description=f"{field_name} format is invalid")
        )
    return ValueResult.success(email)


def validate_min_length(
    value: str | None, min_length: int, field_name: str
) -> ValueResult[str]:
    """Validate minimum string length.

    Args:
        value: String to validate. None is treated as empty.
        min_length: Minimum required length.
        field_name: Name of the field being validated (used as error code).

    Returns:
        Success with value if valid, Failure with Problem otherwise.
    """
    if len(value or "") < min_length:
        return ValueResult.failure(
            Problem(
                code=field_name,
                description=f"{field_name} must be at least {min_length} characters",
            )
        )
    return ValueResult.success(value)


def validate_max_length(
    value: str | None, max_length: int, field_name: str
) -> ValueResult[str]:
    """Validate maximum string length.

    Args:
        value: String to validate. None is treated as empty.
        max_length: Maximum allowed length.
        field_name: Name of the field being validated (used as error code).

    Returns:
        Success with value if valid, Failure with Problem otherwise.
    """
    if len(value or "") > max_length:
        return ValueResult.failure(
            Problem(
                code=field_name,
                description=f"{field_name} must be at most {max_length} characters",
            )
        )
    return ValueResult.success(value)
