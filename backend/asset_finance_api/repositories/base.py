"""
Generic data access for resource tables.

A repository wraps one model and its UUID primary key. Lookups take an
optional ``scope``: column/value pairs that must also match, which is how
a child is only found under the parent named in its path.

    repo = ResourceRepository(DeliveryRecord, db, "delivery_record_id")
    record = repo.find_by_id(record_id, scope={"asset_finance_asset_id": asset_id})

Repositories never commit; the service owns the transaction.
"""

from __future__ import annotations

from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from asset_finance_api.models import Base
from .specifications import FieldEquals, MatchAll, Specification

ModelT = TypeVar("ModelT", bound=Base)


class ResourceRepository(Generic[ModelT]):
    def __init__(self, model: type[ModelT], session: Session, id_field: str):
        self.model = model
        self.session = session
        self.id_column = getattr(model, id_field)

    def _identity(self, entity_id: UUID, scope: dict[str, Any] | None) -> Specification:
        spec: Specification = FieldEquals(self.id_column, entity_id)
        for column_name, value in (scope or {}).items():
            spec = spec & FieldEquals(getattr(self.model, column_name), value)
        return spec

    def find_by_id(self, entity_id: UUID, *, scope: dict[str, Any] | None = None) -> ModelT | None:
        """The row with this key inside ``scope``, or None."""
        return self.session.scalar(select(self.model).where(self._identity(entity_id, scope).to_expression()))

    def exists(self, entity_id: UUID, *, scope: dict[str, Any] | None = None) -> bool:
        query = select(self.id_column).where(self._identity(entity_id, scope).to_expression()).limit(1)
        return self.session.scalar(query) is not None

    def find_by_spec(
        self,
        spec: Specification | None = None,
        *,
        limit: int | None = None,
        offset: int | None = None,
        order_by: Sequence[Any] = (),
    ) -> Sequence[ModelT]:
        """
        Rows matching ``spec`` (every row when None), ordered then sliced.

        Callers paging through results should always pass an ``order_by``
        that ends with a unique column so pages do not overlap.
        """
        query = select(self.model).where((spec or MatchAll()).to_expression()).order_by(*order_by)
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return self.session.scalars(query).all()

    def count_by_spec(self, spec: Specification | None = None) -> int:
        query = select(func.count()).select_from(self.model).where((spec or MatchAll()).to_expression())
        return self.session.scalar(query) or 0

    def ids_where(self, column_name: str, values: Sequence[Any]) -> list[UUID]:
        """Keys of rows whose ``column_name`` is one of ``values``."""
        if not values:
            return []
        query = select(self.id_column).where(getattr(self.model, column_name).in_(values))
        return list(self.session.scalars(query))

    def add(self, entity: ModelT) -> ModelT:
        self.session.add(entity)
        return entity

    def delete(self, entity: ModelT) -> None:
        self.session.delete(entity)

    def delete_where(self, column_name: str, values: Sequence[Any]) -> int:
        """Bulk DELETE of rows whose ``column_name`` is in ``values``; returns the row count."""
        if not values:
            return 0
        statement = delete(self.model).where(getattr(self.model, column_name).in_(values))
        result = self.session.execute(statement, execution_options={"synchronize_session": "evaluate"})
        return result.rowcount or 0

    def refresh(self, entity: ModelT) -> ModelT:
        self.session.refresh(entity)
        return entity
