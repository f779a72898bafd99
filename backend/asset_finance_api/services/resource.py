"""
Resource definitions.

A ResourceDefinition carries everything the generic service and router need
to serve one entity: model, transfer models, key names and parent linkage.
Resources form a tree (agreement -> asset -> records); the registry knows the
whole tree so deletes can cascade.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator

from asset_finance_api.models import Base
from asset_finance_api.schemas import TransferModel


API_PREFIX = "/api/v1"


@dataclass(frozen=True, eq=False)
class ResourceDefinition:
    """Configuration for one REST resource."""

    # Required
    path: str  # URL segment, e.g. "delivery-records"
    entity_name: str  # Human-readable name for error messages
    model: type[Base]
    input_schema: type[TransferModel]
    output_schema: type[TransferModel]
    id_field: str  # Primary key attribute on the model
    id_param: str  # Path parameter name for the identifier

    # Parent linkage (None for the root resource)
    parent: "ResourceDefinition | None" = None
    parent_field: str | None = None

    tag: str | None = None

    def __post_init__(self):
        if (self.parent is None) != (self.parent_field is None):
            raise ValueError(f"{self.entity_name}: parent and parent_field must be set together")

    @property
    def lineage(self) -> tuple["ResourceDefinition", ...]:
        """Resources from the root down to this one."""
        if self.parent is None:
            return (self,)
        return self.parent.lineage + (self,)

    @property
    def ancestors(self) -> tuple["ResourceDefinition", ...]:
        return self.lineage[:-1]

    @property
    def depth(self) -> int:
        """Number of parent ids in this resource's URLs (0, 1 or 2)."""
        return len(self.ancestors)

    @property
    def parent_params(self) -> tuple[str, ...]:
        """Path parameter names of the ancestors, root first."""
        return tuple(ancestor.id_param for ancestor in self.ancestors)

    @property
    def collection_path(self) -> str:
        if self.parent is None:
            return f"{API_PREFIX}/{self.path}"
        return f"{self.parent.item_path}/{self.path}"

    @property
    def item_path(self) -> str:
        return f"{self.collection_path}/{{{self.id_param}}}"


class ResourceRegistry:
    """
    The set of resources served by the application.

    Built once at startup and handed to the services and routers.
    """

    def __init__(self, resources: Iterable[ResourceDefinition]):
        self._resources = tuple(resources)
        for resource in self._resources:
            if resource.parent is not None and resource.parent not in self._resources:
                raise ValueError(f"{resource.entity_name}: parent resource is not registered")

    def __iter__(self) -> Iterator[ResourceDefinition]:
        return iter(self._resources)

    def __len__(self) -> int:
        return len(self._resources)

    def children_of(self, resource: ResourceDefinition) -> list[ResourceDefinition]:
        """Resources whose direct parent is the given resource."""
        return [r for r in self._resources if r.parent is resource]

    def get(self, path: str) -> ResourceDefinition:
        """Look up a resource by its collection path."""
        for resource in self._resources:
            if resource.collection_path == path:
                return resource
        raise KeyError(path)
