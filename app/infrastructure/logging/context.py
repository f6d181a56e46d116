"""Request-scoped logging context.

Everything logged while a request is routed (negotiation, redirects,
locale changes) carries the same correlation id and request fields.
"""

import uuid
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import structlog

CORRELATION_ID_KEY = "correlation_id"


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    request_path: Optional[str] = None,
    request_method: Optional[str] = None,
    **extra_context: Any,
) -> Iterator[None]:
    """Bind request fields to structlog's context variables for the block.

    A correlation id is generated when the caller has none. Values bound
    before entering are restored on exit.

    Example:
        with bind_request_context(request_path=request.url.path, request_method="GET"):
            guard.evaluate(path)
    """
    fields = {
        key: value
        for key, value in (
            ("request_path", request_path),
            ("request_method", request_method),
        )
        if value is not None
    }
    fields.update(extra_context)
    with structlog.contextvars.bound_contextvars(
        **{CORRELATION_ID_KEY: correlation_id or str(uuid.uuid4())},
        **fields,
    ):
        yield


def get_correlation_id() -> Optional[str]:
    """Correlation id of the request being handled, if any."""
    return structlog.contextvars.get_contextvars().get(CORRELATION_ID_KEY)
