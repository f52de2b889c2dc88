"""CQRS Metadata Types.

Dataclasses and enums describing handler registrations.

Design Principles:
- Immutable (frozen=True) - registry entries never change once recorded
- Type-safe (kw_only=True) - explicit field assignment
"""

import inspect
from dataclasses import dataclass
from enum import Enum
from types import UnionType
from typing import Any, Union, get_args, get_origin


class RequestKind(str, Enum):
    """Side of the CQRS split a request belongs to."""

    COMMAND = "command"  # Changes state, handler returns Result
    COMMAND_WITH_VALUE = "command_with_value"  # Changes state, returns ValueResult
    QUERY = "query"  # Reads state, handler returns ValueResult


@dataclass(frozen=True, kw_only=True)
class HandlerMetadata:
    """Registration entry linking a request class to its handler class.

    Attributes:
        request_class: The command/query class (e.g., RegisterUser).
        handler_class: The handler class (e.g., RegisterUserHandler).
        kind: Which CQRS side the request belongs to.
        description: Human-readable description for documentation.

    Example:
        >>> HandlerMetadata(
        ...     request_class=RegisterUser,
        ...     handler_class=RegisterUserHandler,
        ...     kind=RequestKind.COMMAND,
        ... )
    """

    request_class: type
    handler_class: type
    kind: RequestKind
    description: str = ""

    def __post_init__(self) -> None:
        """Validate that the handler class can actually handle requests."""
        if not inspect.isclass(self.handler_class):
            raise TypeError(f"Handler {self.handler_class!r} is not a class")
        if not callable(getattr(self.handler_class, "handle", None)):
            raise TypeError(
                f"Handler {self.handler_class.__name__} has no handle() method"
            )

    @property
    def is_command(self) -> bool:
        return self.kind != RequestKind.QUERY

    @property
    def returns_value(self) -> bool:
        return self.kind != RequestKind.COMMAND


def get_handler_dependencies(handler_class: type) -> list[str]:
    """Extract dependency names from handler __init__ signature.

    Used by the registry to determine what to inject when creating
    handler instances.

    Args:
        handler_class: The handler class to inspect.

    Returns:
        List of dependency parameter names from __init__ (without self).

    Example:
        >>> class RegisterUserHandler:
        ...     def __init__(self, user_repo, logger):
        ...         pass
        >>> get_handler_dependencies(RegisterUserHandler)
        ['user_repo', 'logger']
    """
    try:
        # Use getattr to avoid mypy's unsound __init__ access warning
        init_method = getattr(handler_class, "__init__", None)
        if init_method is None or init_method is object.__init__:
            return []
        sig = inspect.signature(init_method)
        # Skip 'self' and any *args/**kwargs catch-alls
        return [
            name
            for name, param in list(sig.parameters.items())[1:]
            if param.kind not in (param.VAR_POSITIONAL, param.VAR_KEYWORD)
        ]
    except (ValueError, TypeError):
        return []


def get_type_name(annotation: Any) -> str:
    """Extract type name from annotation.

    Handles class types, Optional/Union types and string forward references.

    Args:
        annotation: Type annotation (class or string).

    Returns:
        Type name as string.
    """
    if annotation is None or annotation is inspect.Parameter.empty:
        return "None"

    # Handle Optional types (Union with None)
    args = get_args(annotation)
    if args and get_origin(annotation) in (Union, UnionType):
        for arg in args:
            if arg is not type(None):
                return get_type_name(arg)
        return "None"

    # Handle class types
    if isinstance(annotation, type):
        return annotation.__name__

    # Handle string annotations
    if isinstance(annotation, str):
        return annotation.split(".")[-1].split("|")[0].strip()

    # Fallback
    return str(annotation).split(".")[-1].rstrip("'>")
