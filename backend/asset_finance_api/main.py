"""
FastAPI application for the asset finance agreements API.

    uvicorn asset_finance_api.main:app
"""

from fastapi import FastAPI

from asset_finance_api.core.cors import configure_cors
from asset_finance_api.core.errors import register_exception_handlers
from asset_finance_api.core.lifespan import lifespan
from asset_finance_api.core.middlewares import register_middlewares
from asset_finance_api.resources import REGISTRY
from asset_finance_api.routers import build_routers
from asset_finance_api.services import ResourceRegistry
from shared.config.settings import settings
from shared.infrastructure.correlation import CorrelationIdMiddleware


def create_app(registry: ResourceRegistry = REGISTRY) -> FastAPI:
    """Application exposing one CRUD router per resource in ``registry``."""
    app = FastAPI(
        title="Asset Finance API",
        summary="Agreements, financed assets and their lifecycle records",
        version="0.1.0",
        lifespan=lifespan,
    )
    register_exception_handlers(app)

    # Outermost first on the way in: CORS, request ID, JSON check, headers
    register_middlewares(app)
    app.add_middleware(CorrelationIdMiddleware)
    configure_cors(app)

    for router in build_routers(registry):
        app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("asset_finance_api.main:app", host="0.0.0.0", port=settings.rest_api_port, reload=settings.debug)
