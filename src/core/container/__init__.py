"""Container module - Centralized dependency injection.

Re-exports the application-scoped factories:

    from src.core.container import get_logger, get_handler_registry
"""

from src.core.container.infrastructure import get_handler_registry, get_logger

__all__ = [
    "get_handler_registry",
    "get_logger",
]
