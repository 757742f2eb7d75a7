"""Structlog configuration and logger setup.

Module loggers are lazy proxies: each log call resolves the structlog
configuration in effect at that moment, so a later ``configure_logging()``
call (or the host application's own ``structlog.configure``) applies to
loon's logs too.

Importing loon only routes structlog through the standard library when
nothing else has configured it; the host application keeps control of
handlers and levels. Applications that want loon's own rendering call
``configure_logging()`` at startup.

Usage:
    from loon.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
import sys
from typing import IO, List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from loon.settings import get_settings


def _is_test_environment() -> bool:
    """Detect if running in a test environment."""
    return "pytest" in sys.modules


def _install(processors: List[Processor]) -> None:
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            *processors,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        # Module loggers must pick up reconfiguration after import.
        cache_logger_on_first_use=False,
    )


def _resolve_level(log_level: Optional[str], default: str) -> int:
    if log_level is None and _is_test_environment():
        # Silent under pytest unless a level is asked for explicitly
        return logging.CRITICAL + 1
    return getattr(logging, (log_level or default).upper(), logging.INFO)


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    stream: Optional[IO[str]] = None,
) -> BoundLogger:
    """Configure structured logging for loon and the root logger.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL, or to silence under pytest.
        is_production: Optional override for production mode. Controls JSON
            vs console output. Defaults to settings.is_production.
        stream: Stream the root handler writes to. Defaults to stderr.

    Returns:
        Logger for the ``loon`` namespace.
    """
    settings = get_settings()
    prod_mode = is_production if is_production is not None else settings.is_production

    renderer = (
        structlog.processors.JSONRenderer()
        if prod_mode
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    _install(
        [
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.LINENO,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                ]
            ),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ]
    )

    logging.basicConfig(
        format="%(message)s",
        level=_resolve_level(log_level, settings.LOG_LEVEL),
        stream=stream,
        force=True,
    )

    return structlog.stdlib.get_logger("loon")


if not structlog.is_configured():
    _install(
        [
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ]
    )


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context.

    Example:
        # In loon/dictionary.py
        logger = get_module_logger()
        # context: {"component": "dictionary", "module_path": "loon.dictionary"}
    """
    current_frame = inspect.currentframe()
    if current_frame is None:
        return structlog.stdlib.get_logger()

    frame = current_frame.f_back
    if frame is None:
        return structlog.stdlib.get_logger()

    module = inspect.getmodule(frame)
    if module:
        module_name = module.__name__
        parts = module_name.split(".")
        return structlog.stdlib.get_logger(
            module_name,
            component=parts[-1],
            module_path=module_name,
        )

    return structlog.stdlib.get_logger(component="unknown")
