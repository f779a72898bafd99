"""
HTTP routers.

- resource_router.py: CRUD router factory, one router per registered resource
- health.py: liveness and database health
"""

from fastapi import APIRouter

from asset_finance_api.services import ResourceRegistry
from .health import router as health_router
from .resource_router import build_resource_router


def build_routers(registry: ResourceRegistry) -> list[APIRouter]:
    """All routers of the application, health first."""
    return [health_router] + [build_resource_router(resource, registry) for resource in registry]


__all__ = ["build_routers", "build_resource_router", "health_router"]
