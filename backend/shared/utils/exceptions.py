"""
HTTP errors raised by the service layer.

Each class fixes its status code and the level it is logged at; keyword
arguments given to an error go to the log record, never to the client.

    raise NotFoundError("Asset", asset_id, agreement_id=agreement_id)
    raise UnknownFieldError("Usage record", "colour")
"""

from typing import Any

from fastapi import HTTPException, status

from shared.config.logging import get_logger

logger = get_logger(__name__)


class AppException(HTTPException):
    """Base class: logs itself once, when raised by the service layer."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    log_level: str = "warning"

    def __init__(self, detail: str, headers: dict[str, str] | None = None, **log_context: Any):
        getattr(logger, self.log_level)(detail, status_code=self.status_code, **log_context)
        super().__init__(status_code=self.status_code, detail=detail, headers=headers)


class NotFoundError(AppException):
    """A resource, or one of the ancestors in its path, does not exist (404)."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, entity_id: Any = None, **log_context: Any):
        detail = f"{entity} not found" if entity_id is None else f"{entity} not found with id: {entity_id}"
        super().__init__(detail, entity=entity, entity_id=entity_id, **log_context)


class ValidationError(AppException):
    """Request input the service cannot use (400)."""

    status_code = status.HTTP_400_BAD_REQUEST


class UnknownFieldError(ValidationError):
    """Filter or sort names a field the resource does not have."""

    def __init__(self, entity: str, field: str, **log_context: Any):
        super().__init__(f"{entity} has no field '{field}'", entity=entity, field=field, **log_context)


class ConflictError(AppException):
    """The write conflicts with stored data (409)."""

    status_code = status.HTTP_409_CONFLICT


class ConstraintViolationError(ConflictError):
    """The database rejected a write: foreign key, not-null or unique."""

    def __init__(self, entity: str, operation: str, **log_context: Any):
        super().__init__(
            f"{entity} {operation} violates a data constraint",
            entity=entity,
            operation=operation,
            **log_context,
        )


class DatabaseError(AppException):
    """Storage failure that is not the caller's fault (500)."""

    log_level = "error"

    def __init__(self, operation: str, **log_context: Any):
        super().__init__(
            f"Database error during {operation}. Please try again.",
            operation=operation,
            **log_context,
        )
