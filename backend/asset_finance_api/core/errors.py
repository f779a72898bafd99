"""
Exception handlers.

Request validation failures (body, path and query) are client errors and are
reported as 400 with pydantic's error list.
"""

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.config.logging import get_logger

logger = get_logger(__name__)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    logger.warning(
        "Request validation failed",
        method=request.method,
        path=request.url.path,
        error_count=len(errors),
        fields=[".".join(str(part) for part in error.get("loc", ())) for error in errors],
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(errors)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
