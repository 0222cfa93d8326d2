from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.logging.setup import configure_logging
from infrastructure.services import get_project_config, get_settings
from modules.translations.errors import ConfigurationError

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(
        log_level=settings.LOG_LEVEL, is_production=settings.is_production
    )


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


def _load_project(app: FastAPI, logger: BoundLogger) -> None:
    try:
        config = get_project_config()
    except ConfigurationError as exc:
        # Routes report the same error per request until the file is fixed.
        logger.warning("project_config_unavailable", error=str(exc))
        app.state.project_config = None
        return

    app.state.project_config = config
    logger.info(
        "project_loaded",
        master_language=config.master_language,
        languages=config.available_languages,
        db_path=str(config.db_path),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = _get_logger(settings)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _list_configs(settings, logger)
    _load_project(app, logger)

    yield

    logger.info("application_shutdown")
