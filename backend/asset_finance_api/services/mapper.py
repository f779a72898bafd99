"""
Entity Mapper.

Converts between pydantic transfer models and SQLAlchemy entities by
matching field names, and resolves the client-facing field names used in
list filters and sorting back to model columns.

Usage:
    mapper = EntityMapper(DeliveryRecord, DeliveryRecordOutput, read_only={"delivery_record_id"})

    entity = mapper.to_entity(dto)        # new, unsaved entity
    mapper.apply(entity, dto)             # full replace of mutable columns
    output = mapper.to_output(entity)     # DeliveryRecordOutput

    field = mapper.resolve_field("deliveryStatus")   # "delivery_status"
    value = mapper.coerce(field, "DELIVERED")
"""

from typing import Any, Generic, Iterable, TypeVar

from pydantic import BaseModel, TypeAdapter
from sqlalchemy import JSON, inspect as sa_inspect

T = TypeVar("T", bound=BaseModel)

# Columns every entity manages itself
AUDIT_FIELDS = frozenset({"created_at", "updated_at"})


class EntityMapper(Generic[T]):
    """
    Field-by-field mapper between one model and its output schema.

    Entity attribute names and transfer model field names are identical,
    so mapping is a matter of choosing which fields may be written.
    """

    def __init__(self, model: type, output_class: type[T], read_only: Iterable[str] = ()):
        self.model = model
        self.output_class = output_class

        columns = {attr.key: attr for attr in sa_inspect(model).column_attrs}
        self._columns = frozenset(columns)
        self._writable = self._columns - AUDIT_FIELDS - frozenset(read_only)
        # JSON documents cannot be compared or ordered portably
        self._queryable = frozenset(
            name for name, attr in columns.items()
            if not isinstance(attr.columns[0].type, JSON)
        )

        self._field_lookup: dict[str, str] = {}
        for name, field in output_class.model_fields.items():
            if name not in self._columns:
                continue
            self._field_lookup[name] = name
            if field.alias:
                self._field_lookup[field.alias] = name

        self._adapters: dict[str, TypeAdapter] = {}

    @property
    def writable_fields(self) -> frozenset[str]:
        """Columns a client may set through create/update bodies."""
        return self._writable

    # =========================================================================
    # Transfer model <-> entity
    # =========================================================================

    def _writable_values(self, dto: BaseModel) -> dict[str, Any]:
        include = self._writable & set(type(dto).model_fields)
        return dto.model_dump(include=include)

    def to_entity(self, dto: BaseModel, **overrides: Any) -> Any:
        """
        Build a new entity from a transfer model.

        Read-only and audit fields in the DTO are ignored; overrides are
        applied last (used to stamp the parent link).
        """
        values = self._writable_values(dto)
        values.update(overrides)
        return self.model(**values)

    def apply(self, entity: Any, dto: BaseModel, **overrides: Any) -> Any:
        """Overwrite every writable column of entity from dto (full replace)."""
        values = self._writable_values(dto)
        values.update(overrides)
        for name, value in values.items():
            setattr(entity, name, value)
        return entity

    def to_output(self, entity: Any) -> T:
        """Build the output schema from the entity attributes."""
        return self.output_class.model_validate(entity)

    def to_outputs(self, entities: Iterable[Any]) -> list[T]:
        return [self.to_output(entity) for entity in entities]

    # =========================================================================
    # Field resolution for filters and sorting
    # =========================================================================

    def resolve_field(self, name: str) -> str | None:
        """
        Map a camelCase or snake_case field name to a queryable column name.

        Returns None when the resource has no such field.
        """
        field_name = self._field_lookup.get(name)
        if field_name is None or field_name not in self._queryable:
            return None
        return field_name

    def column(self, field_name: str) -> Any:
        """The model attribute for a resolved field name."""
        return getattr(self.model, field_name)

    def coerce(self, field_name: str, value: Any) -> Any:
        """
        Convert a raw JSON value to the field's Python type.

        Raises pydantic.ValidationError when the value does not fit.
        """
        if value is None:
            return None
        adapter = self._adapters.get(field_name)
        if adapter is None:
            annotation = self.output_class.model_fields[field_name].annotation
            adapter = TypeAdapter(annotation)
            self._adapters[field_name] = adapter
        return adapter.validate_python(value)
