"""Unit tests for core field validators.

Tests cover:
- validate_not_empty: null, empty string, whitespace
- validate_email: valid, invalid, empty input
- validate_min_length / validate_max_length: boundary cases
- validate_all: feeding failures into a builder

Architecture:
- Unit tests for pure validation functions
- No mocking required (pure functions)
"""

import pytest

from src.core.errors import Problem
from src.core.validation import (
    ValidationErrorBuilder,
    validate_all,
    validate_email,
    validate_max_length,
    validate_min_length,
    validate_not_empty,
)


@pytest.mark.unit
class TestValidateNotEmpty:
    """Test validate_not_empty function."""

    def test_validate_not_empty_with_valid_string(self):
        result = validate_not_empty("hello", "Name")

        assert result.is_success
        assert result.value == "hello"

    def test_validate_not_empty_with_non_string_value(self):
        assert validate_not_empty(0, "Age").is_success

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_validate_not_empty_fails(self, value):
        result = validate_not_empty(value, "Name")

        assert result.is_failure
        assert result.error == Problem(code="Name", description="Name is required")


@pytest.mark.unit
class TestValidateEmail:
    """Test validate_email function."""

    @pytest.mark.parametrize(
        "email", ["user@example.com", "first.last+tag@sub.example.org"]
    )
    def test_validate_email_with_valid_address(self, email):
        result = validate_email(email)

        assert result.is_success
        assert result.value == email

    @pytest.mark.parametrize("email", ["plainaddress", "user@", "@example.com", "a@b"])
    def test_validate_email_with_invalid_address(self, email):
        result = validate_email(email)

        assert result.is_failure
        assert result.error.code == "Email"
        assert result.error.description == "Email format is invalid"

    def test_validate_email_uses_field_name_as_code(self):
        result = validate_email("nope", "ContactEmail")

        assert result.error.code == "ContactEmail"

    @pytest.mark.parametrize("email", [None, ""])
    def test_validate_email_leaves_empty_input_to_not_empty(self, email):
        assert validate_email(email).is_success


@pytest.mark.unit
class TestValidateLength:
    """Test validate_min_length and validate_max_length functions."""

    def test_min_length_at_boundary_passes(self):
        assert validate_min_length("abcd", 4, "Password").is_success

    def test_min_length_below_boundary_fails(self):
        result = validate_min_length("abc", 4, "Password")

        assert result.is_failure
        assert result.error.description == "Password must be at least 4 characters"

    def test_min_length_treats_none_as_empty(self):
        assert validate_min_length(None, 1, "Password").is_failure

    def test_max_length_at_boundary_passes(self):
        assert validate_max_length("abcd", 4, "Username").is_success

    def test_max_length_above_boundary_fails(self):
        result = validate_max_length("abcde", 4, "Username")

        assert result.is_failure
        assert result.error.description == "Username must be at most 4 characters"


@pytest.mark.unit
class TestValidateAll:
    """Test validate_all function."""

    def test_validate_all_records_every_failure(self):
        builder = validate_all(
            ValidationErrorBuilder.create(),
            validate_not_empty("", "Username"),
            validate_email("not-an-email"),
            validate_min_length("abc", 8, "Password"),
            validate_max_length("abc", 8, "Password"),
        )

        result = builder.to_result()

        assert result.is_failure
        assert dict(result.error.errors) == {
            "Username": ("Username is required",),
            "Email": ("Email format is invalid",),
            "Password": ("Password must be at least 8 characters",),
        }

    def test_validate_all_with_only_successes_is_success(self):
        builder = validate_all(
            ValidationErrorBuilder.create(),
            validate_not_empty("alice", "Username"),
            validate_email("alice@example.com"),
        )

        assert builder.to_result().is_success

    def test_validate_all_returns_same_builder(self, builder):
        assert validate_all(builder) is builder
