"""Infrastructure dependency factories.

Application-scoped singletons:
- Logging (structlog console adapter)
- Handler registry (CQRS dispatch)

Reference:
    Tests clear the caches with get_logger.cache_clear() /
    get_handler_registry.cache_clear() after patching settings.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings

if TYPE_CHECKING:
    from src.application.cqrs.registry import HandlerRegistry
    from src.domain.protocols.logger_protocol import LoggerProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development/production: ConsoleAdapter (human-readable)
    - testing/ci: ConsoleAdapter (JSON)

    Every log line carries the application name and version.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    env = (
        settings.environment.value
        if hasattr(settings.environment, "value")
        else str(settings.environment)
    )

    use_json = env in {"testing", "ci"}
    return ConsoleAdapter(use_json=use_json, level=settings.log_level).bind(
        app=settings.app_name,
        version=settings.app_version,
    )


@lru_cache()
def get_handler_registry() -> "HandlerRegistry":
    """Return the application-scoped handler registry.

    The registry starts empty; the application populates it once at
    startup with register()/add_handlers() and provide().

    Returns:
        HandlerRegistry: Registry wired with the application logger.
    """
    from src.application.cqrs.registry import HandlerRegistry

    return HandlerRegistry(logger=get_logger())
