"""
CORS configuration.

The API is consumed by back-office frontends. Origins come from settings
(see Settings.cors_origins); no cookies or credentials are involved.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config.settings import settings
from shared.infrastructure.correlation import REQUEST_ID_HEADER


# Methods used by the resource routers
ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]

ALLOWED_HEADERS = ["Content-Type", "Accept", REQUEST_ID_HEADER]


def configure_cors(app: FastAPI) -> None:
    """Add the CORS middleware; preflight results are not cached in development."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=ALLOWED_METHODS,
        allow_headers=ALLOWED_HEADERS,
        expose_headers=[REQUEST_ID_HEADER],
        max_age=0 if settings.environment == "development" else 600,
    )
