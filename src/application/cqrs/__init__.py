"""CQRS contracts, metadata and handler registry.

Commands and queries are plain request classes; each is handled by exactly
one handler that returns a Result. HandlerRegistry links the two, either by
explicit registration or by scanning modules.

Usage:
    from src.application.cqrs import Command, CommandHandler, HandlerRegistry
"""

from src.application.cqrs.contracts import (
    Command,
    CommandHandler,
    CommandOf,
    CommandOfHandler,
    Query,
    QueryHandler,
)
from src.application.cqrs.metadata import HandlerMetadata, RequestKind
from src.application.cqrs.registry import (
    HandlerRegistry,
    find_handled_requests,
    get_request_kind,
)

__all__ = [
    # Request markers
    "Command",
    "CommandOf",
    "Query",
    # Handler contracts
    "CommandHandler",
    "CommandOfHandler",
    "QueryHandler",
    # Metadata
    "HandlerMetadata",
    "RequestKind",
    # Registry
    "HandlerRegistry",
    "find_handled_requests",
    "get_request_kind",
]
