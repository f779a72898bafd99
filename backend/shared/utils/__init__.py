"""HTTP error types shared by the services."""

from shared.utils.exceptions import (
    AppException,
    ConflictError,
    ConstraintViolationError,
    DatabaseError,
    NotFoundError,
    UnknownFieldError,
    ValidationError,
)

__all__ = [
    "AppException",
    "ConflictError",
    "ConstraintViolationError",
    "DatabaseError",
    "NotFoundError",
    "UnknownFieldError",
    "ValidationError",
]
