"""structlog adapter that writes one record per line to a text stream.

The container picks the renderer from the environment:
- testing/ci: JSON lines, so tests and log shippers can parse records
- development/production: colourised key=value console output

Every adapter wraps its own structlog logger instead of configuring structlog
globally, so several adapters (different levels or streams) can coexist in
one process. The class satisfies LoggerProtocol structurally.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog


def _build_processors(use_json: bool) -> list[structlog.types.Processor]:
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    return [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        renderer,
    ]


def _with_exception(
    context: dict[str, Any], error: Exception | None
) -> dict[str, Any]:
    """Flatten an exception into error_type/error_message fields."""
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context


class ConsoleAdapter:
    """LoggerProtocol implementation over structlog's PrintLogger.

    Args:
        use_json: Render JSON lines instead of console output.
        level: Minimum level name, any case ("debug", "WARNING", ...).
        stream: Destination, stdout when omitted.
    """

    def __init__(
        self,
        *,
        use_json: bool = False,
        level: str = "INFO",
        stream: TextIO | None = None,
    ) -> None:
        threshold = logging.getLevelNamesMapping()[level.upper()]
        self._logger = structlog.wrap_logger(
            structlog.PrintLogger(file=stream or sys.stdout),
            processors=_build_processors(use_json),
            wrapper_class=structlog.make_filtering_bound_logger(threshold),
            context_class=dict,
        )

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at error level; ``error`` adds error_type and error_message."""
        self._logger.error(message, **_with_exception(context, error))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._logger.critical(message, **_with_exception(context, error))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter whose records all carry ``context``.

        The receiver is left untouched; both share level and stream.
        """
        bound = ConsoleAdapter.__new__(ConsoleAdapter)
        bound._logger = self._logger.bind(**context)
        return bound

    with_context = bind
