"""Structlog configuration and logger factories.

Logs are structured events rendered by the console renderer while
developing and as JSON lines in production. Under pytest nothing is
emitted, but processors still run so that logging calls are exercised.

Usage:
    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.info("locale_redirect_issued", target="/fr/estimate")
"""

import inspect
import logging
import sys
from types import FrameType
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from infrastructure.configuration import settings

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """True while running under pytest."""
    return "pytest" in sys.modules


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
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
    ]


def _apply(processors: list[Processor], level: int) -> BoundLogger:
    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=True)
    return structlog.stdlib.get_logger()


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog over the standard library root logger.

    Args:
        log_level: Level name; defaults to ``settings.LOG_LEVEL``.
        is_production: JSON output when True, console output otherwise;
            defaults to ``settings.is_production``.

    Returns:
        The root structlog logger.
    """
    if _is_test_environment():
        return _apply(
            [
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            SILENT_LEVEL,
        )

    production = settings.is_production if is_production is None else is_production
    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if production
        else structlog.dev.ConsoleRenderer()
    )
    level_name = (log_level or settings.LOG_LEVEL).upper()
    return _apply(
        _shared_processors() + [renderer],
        getattr(logging, level_name, logging.INFO),
    )


logger: BoundLogger = configure_logging()


def _caller_module_name(frame: Optional[FrameType]) -> Optional[str]:
    if frame is None or frame.f_back is None:
        return None
    module = inspect.getmodule(frame.f_back)
    return module.__name__ if module else None


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Logger tagged with ``logger_name`` (the calling module by default)."""
    name = name or _caller_module_name(inspect.currentframe()) or "unknown"
    return logger.bind(logger_name=name)


def get_module_logger() -> BoundLogger:
    """Logger for the calling module.

    Binds ``component`` (last dotted part) and ``module_path``, e.g.
    ``component="guard"``, ``module_path="infrastructure.routing.guard"``.
    """
    module_name = _caller_module_name(inspect.currentframe())
    if module_name is None:
        return logger.bind(component="unknown")
    return logger.bind(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )
