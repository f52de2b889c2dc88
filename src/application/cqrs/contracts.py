"""CQRS request markers and handler contracts.

Commands represent intent to change state; queries request data. Each
request class is handled by exactly one handler whose ``handle`` coroutine
returns a Result (never raises for expected failures).

Markers:
- Command: handler returns Result (no value)
- CommandOf[T]: handler returns ValueResult[T]
- Query[T]: handler returns ValueResult[T]

Handlers declare what they handle by subclassing the generic contract,
which lets HandlerRegistry discover them by scanning modules:

    @dataclass(frozen=True, kw_only=True)
    class RegisterUser(Command):
        email: str

    class RegisterUserHandler(CommandHandler[RegisterUser]):
        async def handle(self, command: RegisterUser) -> Result:
            ...
"""

from typing import Generic, Protocol, TypeVar

from src.core.result import Result, ValueResult

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class Command:
    """Marker for commands whose handler returns a Result without value."""


class CommandOf(Generic[T]):
    """Marker for commands whose handler returns a ValueResult[T]."""


class Query(Generic[T]):
    """Marker for queries whose handler returns a ValueResult[T]."""


C_contra = TypeVar("C_contra", bound=Command, contravariant=True)
CV_contra = TypeVar("CV_contra", bound=CommandOf, contravariant=True)  # type: ignore[type-arg]
Q_contra = TypeVar("Q_contra", bound=Query, contravariant=True)  # type: ignore[type-arg]


class CommandHandler(Protocol[C_contra]):
    """Handles a Command and reports the outcome as a Result."""

    async def handle(self, command: C_contra) -> Result: ...


class CommandOfHandler(Protocol[CV_contra, T_co]):
    """Handles a CommandOf[T] and reports the outcome as a ValueResult[T]."""

    async def handle(self, command: CV_contra) -> ValueResult[T_co]: ...


class QueryHandler(Protocol[Q_contra, T_co]):
    """Handles a Query[T] and reports the outcome as a ValueResult[T]."""

    async def handle(self, query: Q_contra) -> ValueResult[T_co]: ...


HANDLER_CONTRACTS: dict[type, type] = {
    CommandHandler: Command,
    CommandOfHandler: CommandOf,
    QueryHandler: Query,
}
