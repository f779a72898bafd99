"""
Generic resource service.

One class serves every resource: the ResourceDefinition supplies the model,
the transfer models and the parent linkage, so agreements, assets and the
asset records share the same create/read/update/delete semantics.

Architecture:
    Router (thin) -> ResourceService -> ResourceRepository -> Model

Every operation receives the ancestor ids taken from the URL, root first:
    ()                       agreements
    (agreement_id,)          assets, end options
    (agreement_id, asset_id) delivery/pickup/return records, service events, usage records

Rules shared by all resources:
- the ancestor chain must exist and be consistent, otherwise NotFoundError
- lookups and lists only see rows under the parent named in the URL
- the parent link is always stamped from the URL, never read from the body
- updates replace every mutable field; last write wins
- deletes remove all descendants in the same transaction

Usage:
    service = ResourceService(db, ASSETS, registry)
    asset = service.create((agreement_id,), AssetInput(assetDescription="Forklift"))
    page = service.find_all((agreement_id,), FilterRequest(filters={"isActive": True}))
"""

from __future__ import annotations

from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

import pydantic
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from asset_finance_api.repositories import (
    FieldEquals,
    FieldInRange,
    MatchAll,
    ResourceRepository,
    Specification,
)
from asset_finance_api.schemas import FilterRequest, PageRequest, PaginationResponse
from shared.config.logging import get_logger
from shared.config.settings import settings
from shared.infrastructure.db import safe_commit
from shared.utils.exceptions import (
    ConstraintViolationError,
    DatabaseError,
    NotFoundError,
    UnknownFieldError,
    ValidationError,
)
from .cascade_delete import CascadeDeleteService
from .mapper import EntityMapper
from .pagination import Pagination
from .resource import ResourceDefinition, ResourceRegistry

logger = get_logger(__name__)

OutputT = TypeVar("OutputT", bound=pydantic.BaseModel)

DEFAULT_SORT_FIELD = "created_at"


class ResourceService(Generic[OutputT]):
    """
    CRUD operations for one resource, scoped by its ancestors.

    Create one instance per request (it holds the request's session).
    """

    def __init__(self, db: Session, resource: ResourceDefinition, registry: ResourceRegistry):
        self._db = db
        self._resource = resource
        self._registry = registry
        self._repo = ResourceRepository(resource.model, db, resource.id_field)

        read_only = {resource.id_field}
        if resource.parent_field:
            read_only.add(resource.parent_field)
        self._mapper: EntityMapper[OutputT] = EntityMapper(
            resource.model, resource.output_schema, read_only=read_only
        )

    @property
    def resource(self) -> ResourceDefinition:
        return self._resource

    @property
    def entity_name(self) -> str:
        return self._resource.entity_name

    @property
    def mapper(self) -> EntityMapper[OutputT]:
        return self._mapper

    # =========================================================================
    # Read Operations
    # =========================================================================

    def find_all(
        self,
        parent_ids: Sequence[UUID],
        filter_request: FilterRequest | None = None,
    ) -> PaginationResponse[OutputT]:
        """
        List entities under the parent, filtered, sorted and paged.

        Raises:
            NotFoundError: If an ancestor does not exist
            ValidationError: If a filter or sort field is unknown or a value does not fit
        """
        self._resolve_parents(parent_ids)
        filter_request = filter_request or FilterRequest()

        spec = self._scope_spec(parent_ids) & self._filter_spec(filter_request)
        page_request = filter_request.pagination
        pagination = Pagination(
            page_number=page_request.page_number,
            page_size=page_request.page_size or settings.default_page_size,
            max_page_size=settings.max_page_size,
        )

        order_by = self._order_by(page_request)
        total = self._repo.count_by_spec(spec)
        # Pages past the end are empty without asking the database
        entities = []
        if pagination.offset < total:
            entities = self._repo.find_by_spec(
                spec,
                limit=pagination.limit,
                offset=pagination.offset,
                order_by=order_by,
            )

        response_class = PaginationResponse[self._resource.output_schema]
        return response_class(
            content=self._mapper.to_outputs(entities),
            total_elements=total,
            total_pages=pagination.total_pages(total),
            current_page=pagination.page_number,
            page_size=pagination.page_size,
        )

    def get_by_id(self, parent_ids: Sequence[UUID], entity_id: UUID) -> OutputT:
        """
        Get entity by ID under the parent.

        Raises:
            NotFoundError: If the entity or an ancestor does not exist
        """
        entity = self._get_entity(parent_ids, entity_id)
        return self._mapper.to_output(entity)

    # =========================================================================
    # Write Operations
    # =========================================================================

    def create(self, parent_ids: Sequence[UUID], data: pydantic.BaseModel) -> OutputT:
        """
        Create entity under the parent.

        The identifier and timestamps are assigned by storage; the parent
        link comes from parent_ids.

        Raises:
            NotFoundError: If an ancestor does not exist
            ConstraintViolationError / DatabaseError: If the write fails
        """
        self._resolve_parents(parent_ids)

        entity = self._mapper.to_entity(data, **self._parent_link(parent_ids))
        self._repo.add(entity)
        self._commit("create", parent_ids=parent_ids)
        self._repo.refresh(entity)

        entity_id = getattr(entity, self._resource.id_field)
        logger.info(f"{self.entity_name} created", entity_id=str(entity_id), **self._log_parents(parent_ids))
        return self._mapper.to_output(entity)

    def update(self, parent_ids: Sequence[UUID], entity_id: UUID, data: pydantic.BaseModel) -> OutputT:
        """
        Replace every mutable field of an existing entity.

        Identity and creation time are kept; the parent link is re-stamped
        from parent_ids. No version check: the last write wins.

        Raises:
            NotFoundError: If the entity or an ancestor does not exist
            ConstraintViolationError / DatabaseError: If the write fails
        """
        entity = self._get_entity(parent_ids, entity_id)

        self._mapper.apply(entity, data, **self._parent_link(parent_ids))
        self._commit("update", entity_id=entity_id)
        self._repo.refresh(entity)

        logger.info(f"{self.entity_name} updated", entity_id=str(entity_id), **self._log_parents(parent_ids))
        return self._mapper.to_output(entity)

    def delete(self, parent_ids: Sequence[UUID], entity_id: UUID) -> int:
        """
        Delete entity and all its descendants.

        Returns:
            Count of deleted rows

        Raises:
            NotFoundError: If the entity or an ancestor does not exist
            DatabaseError: If the delete fails
        """
        entity = self._get_entity(parent_ids, entity_id)

        cascade = CascadeDeleteService(self._db, self._registry)
        try:
            affected = cascade.delete(self._resource, entity, commit=False)
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.error(f"Failed to delete {self.entity_name}", error=str(e), entity_id=str(entity_id))
            raise DatabaseError(f"{self.entity_name.lower()} delete", entity_id=str(entity_id)) from e
        self._commit("delete", entity_id=entity_id)
        return affected

    # =========================================================================
    # Helpers
    # =========================================================================

    def _resolve_parents(self, parent_ids: Sequence[UUID]) -> None:
        """
        Check the ancestor chain named by the URL.

        Each ancestor must exist and belong to the one before it.
        """
        ancestors = self._resource.ancestors
        if len(parent_ids) != len(ancestors):
            raise ValueError(
                f"{self.entity_name} expects {len(ancestors)} parent ids, got {len(parent_ids)}"
            )

        for depth, (ancestor, ancestor_id) in enumerate(zip(ancestors, parent_ids)):
            scope = None
            if ancestor.parent_field is not None:
                scope = {ancestor.parent_field: parent_ids[depth - 1]}
            repo = ResourceRepository(ancestor.model, self._db, ancestor.id_field)
            if not repo.exists(ancestor_id, scope=scope):
                raise NotFoundError(ancestor.entity_name, ancestor_id)

    def _get_entity(self, parent_ids: Sequence[UUID], entity_id: UUID) -> Any:
        self._resolve_parents(parent_ids)
        entity = self._repo.find_by_id(entity_id, scope=self._parent_link(parent_ids))
        if entity is None:
            raise NotFoundError(self.entity_name, entity_id, **self._log_parents(parent_ids))
        return entity

    def _parent_link(self, parent_ids: Sequence[UUID]) -> dict[str, UUID]:
        """{parent_field: immediate parent id}, empty for the root resource."""
        if self._resource.parent_field is None:
            return {}
        return {self._resource.parent_field: parent_ids[-1]}

    def _log_parents(self, parent_ids: Sequence[UUID]) -> dict[str, str]:
        return {
            param: str(value)
            for param, value in zip(self._resource.parent_params, parent_ids)
        }

    def _scope_spec(self, parent_ids: Sequence[UUID]) -> Specification:
        spec: Specification = MatchAll()
        for field_name, value in self._parent_link(parent_ids).items():
            spec = spec & FieldEquals(self._mapper.column(field_name), value)
        return spec

    def _resolve(self, name: str) -> str:
        field_name = self._mapper.resolve_field(name)
        if field_name is None:
            raise UnknownFieldError(self.entity_name, name)
        return field_name

    def _coerce(self, field_name: str, value: Any) -> Any:
        try:
            return self._mapper.coerce(field_name, value)
        except pydantic.ValidationError as e:
            raise ValidationError(
                f"Invalid value for {self.entity_name} field '{field_name}': {value!r}",
                field=field_name,
                errors=e.error_count(),
            ) from e

    def _filter_spec(self, filter_request: FilterRequest) -> Specification:
        """Translate equality and range filters into a specification."""
        spec: Specification = MatchAll()

        for name, raw_value in filter_request.filters.items():
            field_name = self._resolve(name)
            value = self._coerce(field_name, raw_value)
            spec = spec & FieldEquals(self._mapper.column(field_name), value)

        for name, bounds in filter_request.range_filters.items():
            field_name = self._resolve(name)
            lower = self._coerce(field_name, bounds.from_value)
            upper = self._coerce(field_name, bounds.to_value)
            spec = spec & FieldInRange(self._mapper.column(field_name), lower, upper)

        return spec

    def _order_by(self, page_request: PageRequest) -> list[Any]:
        """Requested sort column, then the primary key for a stable order."""
        field_name = self._resolve(page_request.sort_by) if page_request.sort_by else DEFAULT_SORT_FIELD
        column = self._mapper.column(field_name)
        primary = column.desc() if page_request.sort_direction == "DESC" else column.asc()
        return [primary, self._mapper.column(self._resource.id_field).asc()]

    def _commit(self, operation: str, **log_context: Any) -> None:
        """Commit the unit of work, translating storage failures."""
        context = {key: str(value) for key, value in log_context.items()}
        try:
            safe_commit(self._db)
        except IntegrityError as e:
            logger.error(f"Failed to {operation} {self.entity_name}", error=str(e.orig), **context)
            raise ConstraintViolationError(self.entity_name, operation, **context) from e
        except SQLAlchemyError as e:
            logger.error(f"Failed to {operation} {self.entity_name}", error=str(e), **context)
            raise DatabaseError(f"{self.entity_name.lower()} {operation}", **context) from e
