"""Base error value for Railway-Oriented Programming.

Error is the base class for ALL failure values. Errors represent expected
failure paths (business rule violations, missing resources, invalid input).
They flow through the system as data inside Result values, not exceptions.

Architecture:
- Does NOT inherit from Exception (never raised, returned in a Result)
- Uses dataclass inheritance for the tagged variants (see error_types.py)
- Structural equality: same variant, same code, same description

Sentinels:
- Error.NONE: empty code, no description. Marks success, never a failure.
- Error.NULL_VALUE: a result value was unexpectedly null.
- Error.CONDITION_NOT_MET: a required condition was not met.

Usage:
    from src.core.errors import Error

    error = Error(code="User-NotFound", description="The user does not exist.")
"""

from dataclasses import dataclass
from typing import ClassVar

from src.core.enums import ErrorKind


@dataclass(frozen=True, slots=True, kw_only=True)
class Error:
    """Base error value (does NOT inherit from Exception).

    Attributes:
        code: Identifier of the error kind or field. Unique by convention.
        description: Optional human-readable message. None means "no message",
            which the validation builder treats as carrying no information.
    """

    NONE: ClassVar["Error"]
    NULL_VALUE: ClassVar["Error"]
    CONDITION_NOT_MET: ClassVar["Error"]

    kind: ClassVar[ErrorKind] = ErrorKind.ERROR

    code: str
    description: str | None = None

    @property
    def is_none(self) -> bool:
        """True only for a value equal to the success sentinel."""
        return self == Error.NONE

    def __str__(self) -> str:
        """String representation of error."""
        if self.description is None:
            return self.code
        return f"{self.code}: {self.description}"


Error.NONE = Error(code="")
Error.NULL_VALUE = Error(
    code="Error-NullValue",
    description="The specified result value is null.",
)
Error.CONDITION_NOT_MET = Error(
    code="Error-ConditionNotMet",
    description="The specified condition was not met.",
)
