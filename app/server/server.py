from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies.rate_limits import setup_rate_limiter
from api.router import api_router
from infrastructure.services import get_settings
from server.lifespan import lifespan
from server.locale_middleware import LocaleRouteMiddleware

settings = get_settings()


handler = FastAPI(lifespan=lifespan)
setup_rate_limiter(handler)


# Middleware added last runs first: CORS must answer preflights before the
# locale wrapper redirects anything.
handler.add_middleware(LocaleRouteMiddleware, localization=settings.localization)

allow_origins = ["*"] if settings.is_production else settings.server.CORS_ALLOWED_ORIGINS
handler.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


handler.include_router(api_router)
