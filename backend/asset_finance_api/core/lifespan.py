"""
Startup and shutdown of the API process.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from asset_finance_api.models import Base
from shared.config.logging import rest_api_logger as logger, setup_logging
from shared.config.settings import Settings, settings
from shared.infrastructure.db import engine


def check_configuration(config: Settings) -> None:
    """Raise RuntimeError, after logging each problem, if production config is unsafe."""
    problems = config.validate_production_config()
    for problem in problems:
        logger.error("Configuration error: %s", problem)
    if problems:
        raise RuntimeError("Refusing to start with unsafe production configuration: " + "; ".join(problems))


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    check_configuration(settings)

    if settings.create_schema_on_startup:
        # No migrations: tables come straight from the ORM metadata
        Base.metadata.create_all(bind=engine)

    logger.info(
        "Asset finance API started",
        port=settings.rest_api_port,
        environment=settings.environment,
        routes=len(app.routes),
    )
    try:
        yield
    finally:
        engine.dispose()
        logger.info("Asset finance API stopped, connection pool closed")
