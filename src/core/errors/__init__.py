"""Core errors package.

Exports the base Error value and all tagged variants for convenient importing.

Usage:
    from src.core.errors import Error, NotFound, ValidationError
"""

from src.core.errors.error import Error
from src.core.errors.error_types import (
    VALIDATION_ERROR_CODE,
    VALIDATION_ERROR_DESCRIPTION,
    Conflict,
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

__all__ = [
    "Error",
    "Problem",
    "ValidationError",
    "NotFound",
    "Conflict",
    "Forbidden",
    "Unauthorised",
    "ServiceUnavailable",
    "TooManyRequests",
    "GatewayTimeout",
    "ResourceLocked",
    "ResourceGone",
    "InternalServerError",
    "VALIDATION_ERROR_CODE",
    "VALIDATION_ERROR_DESCRIPTION",
]
