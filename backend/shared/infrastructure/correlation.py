"""
Request correlation.

Every request gets an ID (the caller's X-Request-ID when it is usable, a new
UUID otherwise). The ID is kept in a context variable so every log line of
the request carries it, is echoed on the response, and closes the request
with one summary log line.

Usage:
    app.add_middleware(CorrelationIdMiddleware)
    handler.addFilter(CorrelationIdFilter())
"""

import re
import time
import uuid
from contextvars import ContextVar
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from shared.config.logging import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Caller-supplied IDs end up in logs: keep them short and printable
_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9._:\-]{1,128}$")

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def get_request_id() -> str:
    """ID of the request being served, empty outside a request."""
    return request_id_var.get()


def resolve_request_id(incoming: str | None) -> str:
    """Use the caller's ID when it is well-formed, otherwise generate one."""
    if incoming and _REQUEST_ID_PATTERN.match(incoming):
        return incoming
    return str(uuid.uuid4())


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Bind a request ID for the duration of the request and log its outcome."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        token = request_id_var.set(request_id)
        started = time.perf_counter()

        try:
            request.state.request_id = request_id
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id

            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 1),
            )
            return response
        finally:
            request_id_var.reset(token)


class CorrelationIdFilter:
    """Logging filter that stamps records with the current request ID ('-' if none)."""

    def filter(self, record) -> bool:
        record.request_id = request_id_var.get() or "-"
        return True
