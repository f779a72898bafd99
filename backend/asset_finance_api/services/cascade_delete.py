"""
Cascade Delete Service.

Deletes an entity together with every descendant in the resource tree,
children before parents, inside the caller's transaction. The foreign keys
also declare ON DELETE CASCADE; walking the tree here keeps the behaviour
identical on databases that do not enforce it.

Usage:
    from asset_finance_api.services.cascade_delete import CascadeDeleteService

    service = CascadeDeleteService(db, registry)
    affected = service.delete(AGREEMENTS, agreement)
    # Returns count of removed rows (agreement + assets + records)
"""

from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.orm import Session

from asset_finance_api.repositories import ResourceRepository
from shared.config.logging import get_logger
from shared.infrastructure.db import safe_commit
from .resource import ResourceDefinition, ResourceRegistry

logger = get_logger(__name__)


class CascadeDeleteService:
    """Hard delete of an entity and its descendants."""

    def __init__(self, db: Session, registry: ResourceRegistry):
        self._db = db
        self._registry = registry

    def delete(self, resource: ResourceDefinition, entity: Any, commit: bool = True) -> int:
        """
        Delete entity with all descendant rows.

        Args:
            resource: Definition of the entity's resource
            entity: Loaded entity to delete
            commit: Commit when done; pass False to leave the transaction open

        Returns:
            Count of deleted rows, entity included
        """
        entity_id = getattr(entity, resource.id_field)

        affected = self._delete_descendants(resource, [entity_id])
        ResourceRepository(resource.model, self._db, resource.id_field).delete(entity)
        affected += 1

        if commit:
            safe_commit(self._db)

        logger.info(
            f"{resource.entity_name} cascade deleted",
            entity_id=str(entity_id),
            affected_records=affected,
        )
        return affected

    def _delete_descendants(self, resource: ResourceDefinition, parent_ids: Sequence[UUID]) -> int:
        """Delete rows below the given parents, deepest level first."""
        affected = 0
        for child in self._registry.children_of(resource):
            repo = ResourceRepository(child.model, self._db, child.id_field)
            child_ids = repo.ids_where(child.parent_field, parent_ids)
            if not child_ids:
                continue
            affected += self._delete_descendants(child, child_ids)
            affected += repo.delete_where(child.parent_field, parent_ids)
        return affected
