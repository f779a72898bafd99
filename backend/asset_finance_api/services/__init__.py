"""
Application services.

- resource.py: ResourceDefinition and ResourceRegistry
- base_service.py: generic ResourceService (CRUD scoped by parent ids)
- mapper.py: EntityMapper between entities and transfer models
- cascade_delete.py: descendant deletion
- pagination.py: page arithmetic
"""

from .resource import API_PREFIX, ResourceDefinition, ResourceRegistry
from .mapper import EntityMapper
from .pagination import Pagination
from .cascade_delete import CascadeDeleteService
from .base_service import ResourceService

__all__ = [
    "API_PREFIX",
    "ResourceDefinition",
    "ResourceRegistry",
    "EntityMapper",
    "Pagination",
    "CascadeDeleteService",
    "ResourceService",
]
