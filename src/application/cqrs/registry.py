"""CQRS Handler Registry - explicit registration and dispatch.

Maps each command/query class to the single handler class that handles it,
builds handler instances with their dependencies injected, and dispatches
requests to them. Handlers report outcomes as Result values; the registry
passes those back untouched and never turns them into exceptions.

Registration paths:
- register(request_class, handler_class): explicit, one entry at a time
- add_handlers(*modules): scan modules for classes subclassing
  CommandHandler[X], CommandOfHandler[X, T] or QueryHandler[X, T]

Lifetime:
    resolve() builds a NEW handler instance per call (request-scoped), so
    handlers may hold per-request state safely.

Usage:
    from src.application.cqrs import HandlerRegistry
    from src.core.container import get_logger

    registry = HandlerRegistry(logger=get_logger())
    registry.provide("user_repo", lambda: user_repo)
    registry.add_handlers("myapp.handlers")

    result = await registry.send(RegisterUser(email="user@example.com"))
    result.match(lambda: "created", lambda error: error.code)
"""

import importlib
import inspect
from collections.abc import Callable, Iterable
from types import ModuleType
from typing import Any, get_args, get_origin, get_type_hints

from src.application.cqrs.contracts import (
    HANDLER_CONTRACTS,
    Command,
    CommandHandler,
    CommandOf,
    CommandOfHandler,
    Query,
    QueryHandler,
)
from src.application.cqrs.metadata import (
    HandlerMetadata,
    RequestKind,
    get_handler_dependencies,
    get_type_name,
)
from src.core.result import Result
from src.domain.protocols.logger_protocol import LoggerProtocol

COMMAND_CONTRACTS: tuple[type, ...] = (CommandHandler, CommandOfHandler)
QUERY_CONTRACTS: tuple[type, ...] = (QueryHandler,)


def get_request_kind(request_class: type) -> RequestKind:
    """Classify a request class by the marker it derives from.

    Args:
        request_class: Command or query class.

    Returns:
        The matching RequestKind.

    Raises:
        TypeError: If the class derives from none of the markers.
    """
    if inspect.isclass(request_class):
        if issubclass(request_class, Command):
            return RequestKind.COMMAND
        if issubclass(request_class, CommandOf):
            return RequestKind.COMMAND_WITH_VALUE
        if issubclass(request_class, Query):
            return RequestKind.QUERY
    raise TypeError(f"{request_class!r} is not a Command, CommandOf or Query class")


def find_handled_requests(
    handler_class: type, contracts: Iterable[type] = tuple(HANDLER_CONTRACTS)
) -> list[type]:
    """List the request classes a handler class declares it handles.

    Inspects the parameterized generic bases of ``handler_class`` (including
    inherited ones) for any of ``contracts``.

    Args:
        handler_class: Class to inspect.
        contracts: Handler contracts to look for.

    Returns:
        Request classes bound by those bases, in declaration order.
    """
    contracts = tuple(contracts)
    handled: list[type] = []
    for klass in inspect.getmro(handler_class):
        for base in getattr(klass, "__orig_bases__", ()):
            if get_origin(base) not in contracts:
                continue
            args = get_args(base)
            if args and inspect.isclass(args[0]) and args[0] not in handled:
                handled.append(args[0])
    return handled


def _is_concrete_handler(candidate: Any) -> bool:
    return (
        inspect.isclass(candidate)
        and not inspect.isabstract(candidate)
        and not getattr(candidate, "_is_protocol", False)
    )


class HandlerRegistry:
    """Registry of request-to-handler mappings with dependency injection.

    Dependencies are supplied as zero-argument providers, keyed either by
    the handler's __init__ parameter name or by its annotated type name
    (e.g. "LoggerProtocol"). The registry's own logger is always available
    under "logger" and "LoggerProtocol".

    Not thread-safe for registration; populate it once at startup, then
    share it for dispatch.
    """

    def __init__(
        self,
        *,
        logger: LoggerProtocol,
        providers: dict[str, Callable[[], Any]] | None = None,
    ) -> None:
        """Initialize an empty registry.

        Args:
            logger: Structured logger for registration and dispatch events.
            providers: Initial dependency providers.
        """
        self._logger = logger
        self._entries: dict[type, HandlerMetadata] = {}
        self._providers: dict[str, Callable[[], Any]] = {
            "logger": lambda: self._logger,
            "LoggerProtocol": lambda: self._logger,
        }
        self._providers.update(providers or {})

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def provide(self, key: str, provider: Callable[[], Any]) -> None:
        """Register (or replace) a dependency provider.

        Args:
            key: Parameter name or annotated type name to satisfy.
            provider: Zero-argument callable returning the dependency.
        """
        self._providers[key] = provider

    def resolve_dependency(self, key: str) -> Any:
        """Return the dependency provided under ``key``.

        Raises:
            LookupError: If nothing is provided under key.
        """
        provider = self._providers.get(key)
        if provider is None:
            raise LookupError(f"No provider registered for '{key}'")
        return provider()

    def register(
        self,
        request_class: type,
        handler_class: type,
        *,
        description: str = "",
    ) -> HandlerMetadata:
        """Register ``handler_class`` as the handler for ``request_class``.

        Registering the same pair again is a no-op.

        Args:
            request_class: Command or query class.
            handler_class: Class with an async handle() method.
            description: Optional documentation string.

        Returns:
            The recorded metadata.

        Raises:
            TypeError: If request_class is not a request or handler_class
                has no handle() method.
            ValueError: If another handler is already registered for
                request_class.
        """
        metadata = HandlerMetadata(
            request_class=request_class,
            handler_class=handler_class,
            kind=get_request_kind(request_class),
            description=description or (inspect.getdoc(handler_class) or ""),
        )

        existing = self._entries.get(request_class)
        if existing is not None:
            if existing.handler_class is handler_class:
                return existing
            raise ValueError(
                f"{request_class.__name__} is already handled by "
                f"{existing.handler_class.__name__}; cannot register "
                f"{handler_class.__name__}"
            )

        self._entries[request_class] = metadata
        self._logger.info(
            "Handler registered",
            request=request_class.__name__,
            handler=handler_class.__name__,
            kind=metadata.kind.value,
        )
        return metadata

    def add_handlers(self, *modules: ModuleType | str) -> list[HandlerMetadata]:
        """Scan modules for command and query handlers and register them."""
        return self._scan(modules, tuple(HANDLER_CONTRACTS))

    def add_command_handlers(self, *modules: ModuleType | str) -> list[HandlerMetadata]:
        """Scan modules for command handlers only."""
        return self._scan(modules, COMMAND_CONTRACTS)

    def add_query_handlers(self, *modules: ModuleType | str) -> list[HandlerMetadata]:
        """Scan modules for query handlers only."""
        return self._scan(modules, QUERY_CONTRACTS)

    def _scan(
        self, modules: tuple[ModuleType | str, ...], contracts: tuple[type, ...]
    ) -> list[HandlerMetadata]:
        """Register every concrete handler class defined in ``modules``.

        Only classes defined in a scanned module count; classes it merely
        imports are skipped so each handler is discovered where it lives.

        Raises:
            ValueError: If no modules are given.
        """
        if not modules:
            raise ValueError("At least one module is required to scan for handlers")

        registered: list[HandlerMetadata] = []
        for module in modules:
            if isinstance(module, str):
                module = importlib.import_module(module)

            for _, candidate in inspect.getmembers(module, _is_concrete_handler):
                if candidate.__module__ != module.__name__:
                    continue
                for request_class in find_handled_requests(candidate, contracts):
                    registered.append(self.register(request_class, candidate))

        self._logger.debug(
            "Handler scan complete",
            modules=[m if isinstance(m, str) else m.__name__ for m in modules],
            registered=len(registered),
        )
        return registered

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_metadata(self, request_class: type) -> HandlerMetadata | None:
        return self._entries.get(request_class)

    def has_handler(self, request_class: type) -> bool:
        return request_class in self._entries

    @property
    def commands(self) -> list[HandlerMetadata]:
        """Registered command entries (with and without value), in order."""
        return [meta for meta in self._entries.values() if meta.is_command]

    @property
    def queries(self) -> list[HandlerMetadata]:
        return [meta for meta in self._entries.values() if not meta.is_command]

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, request_class: object) -> bool:
        return request_class in self._entries

    # ------------------------------------------------------------------
    # Resolution & dispatch
    # ------------------------------------------------------------------

    def resolve(self, request_class: type) -> Any:
        """Build a new handler instance for ``request_class``.

        Args:
            request_class: A registered command or query class.

        Returns:
            Handler instance with its dependencies injected.

        Raises:
            LookupError: If no handler is registered for request_class.
            ValueError: If a required dependency has no provider.
        """
        metadata = self._entries.get(request_class)
        if metadata is None:
            raise LookupError(f"No handler registered for {request_class.__name__}")

        handler_class = metadata.handler_class
        init_method = getattr(handler_class, "__init__")
        signature = inspect.signature(init_method)
        try:
            hints = get_type_hints(init_method)
        except (NameError, TypeError):
            hints = {}

        kwargs: dict[str, Any] = {}
        for name in get_handler_dependencies(handler_class):
            param = signature.parameters[name]
            type_name = get_type_name(hints.get(name, param.annotation))
            provider = self._providers.get(name) or self._providers.get(type_name)
            if provider is not None:
                kwargs[name] = provider()
            elif param.default is inspect.Parameter.empty:
                raise ValueError(
                    f"Cannot build {handler_class.__name__}: no provider for "
                    f"dependency '{name}' ({type_name})"
                )

        self._logger.debug(
            "Handler resolved",
            handler=handler_class.__name__,
            dependencies=sorted(kwargs),
        )
        return handler_class(**kwargs)

    async def send(self, request: Any) -> Result:
        """Dispatch ``request`` to its handler and return the handler's Result.

        Failed Results are returned as-is (and logged at warning level);
        only exceptions raised by the handler propagate.

        Args:
            request: Command or query instance.

        Returns:
            Result (or ValueResult) produced by the handler.

        Raises:
            LookupError: If no handler is registered for the request's class.
            TypeError: If the handler returns something other than a Result.
        """
        request_name = type(request).__name__
        log = self._logger.bind(request=request_name)

        handler = self.resolve(type(request))
        log.debug("Dispatching request", handler=type(handler).__name__)

        try:
            result = await handler.handle(request)
        except Exception as e:
            log.error("Handler raised", error=e)
            raise

        if not isinstance(result, Result):
            raise TypeError(
                f"{type(handler).__name__}.handle() returned "
                f"{type(result).__name__}, expected a Result"
            )

        if result.is_success:
            log.info("Request succeeded")
        else:
            log.warning(
                "Request failed",
                error_code=result.error.code,
                error_kind=result.error.kind.value,
            )
        return result
