"""
Data access layer: generic repository and query specifications.
"""

from .base import ResourceRepository
from .specifications import (
    AllOf,
    AnyOf,
    FieldEquals,
    FieldInRange,
    MatchAll,
    Not,
    Specification,
)

__all__ = [
    "ResourceRepository",
    "Specification",
    "AllOf",
    "AnyOf",
    "Not",
    "MatchAll",
    "FieldEquals",
    "FieldInRange",
]
