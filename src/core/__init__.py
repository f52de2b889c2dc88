"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Error values and their kind tags
- Validation error builder for exhaustive input validation

The core module has NO dependencies on other application layers.
"""

from src.core.enums import ErrorKind
from src.core.errors import (
    Conflict,
    Error,
    Forbidden,
    GatewayTimeout,
    InternalServerError,
    NotFound,
    Problem,
    ResourceGone,
    ResourceLocked,
    ServiceUnavailable,
    TooManyRequests,
    Unauthorised,
    ValidationError,
)
from src.core.result import Result, ValueResult
from src.core.validation import ValidationErrorBuilder

__all__ = [
    "Conflict",
    "Error",
    "ErrorKind",
    "Forbidden",
    "GatewayTimeout",
    "InternalServerError",
    "NotFound",
    "Problem",
    "ResourceGone",
    "ResourceLocked",
    "Result",
    "ServiceUnavailable",
    "TooManyRequests",
    "Unauthorised",
    "ValidationError",
    "ValidationErrorBuilder",
    "ValueResult",
]
