"""Tagged error variants used across all layers.

Each variant is structurally identical to Error (code + description) and
differs only by its ``kind`` tag, except ValidationError which also carries
a per-code mapping of messages.

Error Types:
- Problem: Generic business error
- ValidationError: Aggregate of field-level validation failures
- NotFound, Conflict, Forbidden, Unauthorised
- ServiceUnavailable, TooManyRequests, GatewayTimeout
- ResourceLocked, ResourceGone, InternalServerError

Usage:
    from src.core.errors import NotFound
    from src.core.result import ValueResult

    return ValueResult.failure(
        NotFound(code="User-NotFound", description="The user does not exist.")
    )
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import ClassVar

from src.core.enums import ErrorKind
from src.core.errors.error import Error

VALIDATION_ERROR_CODE = "Error-Validation"
VALIDATION_ERROR_DESCRIPTION = "A validation error has occured."


@dataclass(frozen=True, slots=True, kw_only=True)
class Problem(Error):
    """General business problem with an arbitrary code and description."""

    kind: ClassVar[ErrorKind] = ErrorKind.PROBLEM


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(Error):
    """One or more validation failures bundled into a single error.

    Attributes:
        errors: Field/code name mapped to its messages, in insertion order.
            Copied into a read-only mapping of tuples on construction.
        code: Always "Error-Validation" unless overridden.
        description: Always "A validation error has occured." unless overridden.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.VALIDATION

    errors: Mapping[str, tuple[str, ...]] = field(hash=False)
    code: str = VALIDATION_ERROR_CODE
    description: str | None = VALIDATION_ERROR_DESCRIPTION

    def __post_init__(self) -> None:
        frozen = {code: tuple(messages) for code, messages in self.errors.items()}
        object.__setattr__(self, "errors", MappingProxyType(frozen))


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFound(Error):
    """Requested resource does not exist."""

    kind: ClassVar[ErrorKind] = ErrorKind.NOT_FOUND


@dataclass(frozen=True, slots=True, kw_only=True)
class Conflict(Error):
    """Request conflicts with current state (duplicate, stale version)."""

    kind: ClassVar[ErrorKind] = ErrorKind.CONFLICT


@dataclass(frozen=True, slots=True, kw_only=True)
class Forbidden(Error):
    """Caller is known but not allowed to perform the operation."""

    kind: ClassVar[ErrorKind] = ErrorKind.FORBIDDEN


@dataclass(frozen=True, slots=True, kw_only=True)
class Unauthorised(Error):
    """Caller could not be authenticated."""

    kind: ClassVar[ErrorKind] = ErrorKind.UNAUTHORISED


@dataclass(frozen=True, slots=True, kw_only=True)
class ServiceUnavailable(Error):
    kind: ClassVar[ErrorKind] = ErrorKind.SERVICE_UNAVAILABLE


@dataclass(frozen=True, slots=True, kw_only=True)
class TooManyRequests(Error):
    kind: ClassVar[ErrorKind] = ErrorKind.TOO_MANY_REQUESTS


@dataclass(frozen=True, slots=True, kw_only=True)
class GatewayTimeout(Error):
    kind: ClassVar[ErrorKind] = ErrorKind.GATEWAY_TIMEOUT


@dataclass(frozen=True, slots=True, kw_only=True)
class ResourceLocked(Error):
    kind: ClassVar[ErrorKind] = ErrorKind.RESOURCE_LOCKED


@dataclass(frozen=True, slots=True, kw_only=True)
class ResourceGone(Error):
    """Resource existed once but has been permanently removed."""

    kind: ClassVar[ErrorKind] = ErrorKind.RESOURCE_GONE


@dataclass(frozen=True, slots=True, kw_only=True)
class InternalServerError(Error):
    """Unexpected failure inside the system."""

    kind: ClassVar[ErrorKind] = ErrorKind.INTERNAL_SERVER_ERROR
