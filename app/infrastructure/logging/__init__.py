"""Structured logging for the fare estimator web app (structlog).

    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.info("locale_switched", locale="en")

Request handlers wrap their work in ``bind_request_context()`` so every
event carries the correlation id and request path.
"""

from infrastructure.logging.context import bind_request_context, get_correlation_id
from infrastructure.logging.setup import configure_logging, get_logger, get_module_logger

__all__ = [
    "bind_request_context",
    "configure_logging",
    "get_correlation_id",
    "get_logger",
    "get_module_logger",
]
