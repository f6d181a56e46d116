"""Rate limiting (slowapi) for the system routes."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address


def client_key_func(request: Request) -> str:
    """Client address, taken from X-Forwarded-For behind the load balancer."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return get_remote_address(request)


limiter = Limiter(key_func=client_key_func)


async def rate_limit_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Answer 429 with a JSON body instead of slowapi's plain text."""
    limit = getattr(exc, "detail", None) if isinstance(exc, RateLimitExceeded) else None
    return JSONResponse(
        status_code=429,
        content={"message": "Rate limit exceeded", "limit": limit},
    )


def setup_rate_limiter(app: FastAPI) -> None:
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)


def get_limiter() -> Limiter:
    return limiter
