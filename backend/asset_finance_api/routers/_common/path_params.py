"""
Path parameter dependencies for nested resources.

Nested routes carry a different number of ids (/agreements/{agreement_id}/
assets/{asset_id}/...). path_ids() builds a FastAPI dependency that declares
exactly the named UUID path parameters and returns them as a tuple, root
first, so one endpoint function can serve every nesting depth.

Usage:
    ids = path_ids("agreement_id", "asset_id")

    @router.get("/{asset_id}")
    def get_asset(ids: tuple[UUID, ...] = Depends(ids)):
        agreement_id, asset_id = ids
"""

import inspect
from typing import Callable
from uuid import UUID


def path_ids(*names: str) -> Callable[..., tuple[UUID, ...]]:
    """Dependency returning the given UUID path parameters in order."""

    def dependency(**values: UUID) -> tuple[UUID, ...]:
        return tuple(values[name] for name in names)

    # FastAPI reads parameters from the signature
    dependency.__signature__ = inspect.Signature([
        inspect.Parameter(name, inspect.Parameter.KEYWORD_ONLY, annotation=UUID)
        for name in names
    ])
    dependency.__name__ = f"path_ids_{'_'.join(names) or 'root'}"
    return dependency
