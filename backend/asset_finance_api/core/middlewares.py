"""
HTTP hardening for the API: response security headers and JSON-only bodies.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from shared.config.settings import settings

# Agreement data must not be cached or framed by browsers
SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Cache-Control": "no-store",
}

HSTS_HEADER = "max-age=31536000; includeSubDomains"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Stamp SECURITY_HEADERS on every response; HSTS only in production."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.update(SECURITY_HEADERS)
        if settings.environment == "production":
            response.headers["Strict-Transport-Security"] = HSTS_HEADER
        if "server" in response.headers:
            del response.headers["server"]
        return response


def is_json_media_type(content_type: str) -> bool:
    """True for application/json with or without parameters such as charset."""
    return content_type.split(";", 1)[0].strip().lower() == "application/json"


class ContentTypeValidationMiddleware(BaseHTTPMiddleware):
    """
    Refuse request bodies that are not JSON with 415.

    Applies to every method, since list requests may carry a filter body.
    Requests without a Content-Type pass; health probes are exempt.
    """

    EXEMPT_PREFIXES = ("/api/health",)

    async def dispatch(self, request: Request, call_next):
        content_type = request.headers.get("content-type")
        if (
            content_type
            and not request.url.path.startswith(self.EXEMPT_PREFIXES)
            and not is_json_media_type(content_type)
        ):
            return JSONResponse(
                status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
                content={"detail": f"Unsupported Media Type '{content_type}'. Use application/json"},
            )
        return await call_next(request)


def register_middlewares(app: FastAPI) -> None:
    # Last added runs first: bodies are checked before headers are stamped
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(ContentTypeValidationMiddleware)
