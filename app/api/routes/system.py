from fastapi import APIRouter, Request
from infrastructure.services import SettingsDep
from infrastructure.services.providers import get_settings
from api.dependencies.rate_limits import get_limiter

router = APIRouter(tags=["System"])
limiter = get_limiter()
SYSTEM_RATE_LIMIT = get_settings().server.SYSTEM_RATE_LIMIT


# Load balancer health checks hit these every few seconds; keep the limit generous.
@router.get("/version")
@limiter.limit(SYSTEM_RATE_LIMIT)
def get_version(request: Request, settings: SettingsDep):  # pylint: disable=unused-argument
    """Get the version of the application."""
    return {"version": settings.GIT_SHA}


@router.get("/health")
@limiter.limit(SYSTEM_RATE_LIMIT)
def get_health(request: Request):  # pylint: disable=unused-argument
    """Healthcheck endpoint."""
    return {"status": "ok"}
