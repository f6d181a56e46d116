from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.logging.setup import configure_logging
from infrastructure.services import get_settings, get_translation_service

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(
        log_level=settings.LOG_LEVEL,
        is_production=settings.is_production,
    )


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    """Log top-level values, then the keys of each settings section."""
    dumped = settings.model_dump()
    sections = {key: value for key, value in dumped.items() if isinstance(value, dict)}
    logger.info(
        "configuration_initialized",
        base_settings=[{key: value} for key, value in dumped.items() if key not in sections],
    )
    for section, values in sections.items():
        logger.info("configuration_loaded", config_setting=section, keys=list(values))


def _load_translations(app: FastAPI, logger: BoundLogger) -> None:
    try:
        translation_service = get_translation_service()
    except (FileNotFoundError, ValueError) as exc:
        logger.error("translations_load_failed", error=str(exc))
        raise
    app.state.translation_service = translation_service
    logger.info(
        "translations_loaded",
        locales=[
            locale.value
            for locale in translation_service.translator.get_available_locales()
        ],
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = _get_logger(settings)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _list_configs(settings, logger)
    _load_translations(app, logger)

    yield

    logger.info("application_shutdown")
