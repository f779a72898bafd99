"""
Router factory for resources.

Every resource gets the same five endpoints:

    GET    {collection}          list (filter/sort/page body, optional)
    POST   {collection}          create
    GET    {collection}/{id}     read
    PUT    {collection}/{id}     replace
    DELETE {collection}/{id}     delete with descendants (204)
"""

from uuid import UUID

from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.orm import Session

from asset_finance_api.schemas import FilterRequest, PaginationResponse
from asset_finance_api.services import ResourceDefinition, ResourceRegistry, ResourceService
from shared.infrastructure.db import get_db
from ._common import path_ids


def build_resource_router(resource: ResourceDefinition, registry: ResourceRegistry) -> APIRouter:
    """Create the CRUD router for one resource."""
    router = APIRouter(prefix=resource.collection_path, tags=[resource.tag or resource.path])

    input_schema = resource.input_schema
    output_schema = resource.output_schema
    parent_ids = path_ids(*resource.parent_params)
    entity_ids = path_ids(*resource.parent_params, resource.id_param)
    name = resource.entity_name.lower()

    def get_service(db: Session = Depends(get_db)) -> ResourceService:
        return ResourceService(db, resource, registry)

    @router.get(
        "",
        response_model=PaginationResponse[output_schema],
        summary=f"List {name}s",
    )
    def list_resources(
        filter_request: FilterRequest | None = Body(default=None),
        ids: tuple[UUID, ...] = Depends(parent_ids),
        service: ResourceService = Depends(get_service),
    ):
        """List with optional filters, sorting and pagination in the body."""
        return service.find_all(ids, filter_request)

    @router.post(
        "",
        response_model=output_schema,
        summary=f"Create {name}",
    )
    def create_resource(
        data: input_schema,
        ids: tuple[UUID, ...] = Depends(parent_ids),
        service: ResourceService = Depends(get_service),
    ):
        return service.create(ids, data)

    @router.get(
        f"/{{{resource.id_param}}}",
        response_model=output_schema,
        summary=f"Get {name}",
    )
    def get_resource(
        ids: tuple[UUID, ...] = Depends(entity_ids),
        service: ResourceService = Depends(get_service),
    ):
        return service.get_by_id(ids[:-1], ids[-1])

    @router.put(
        f"/{{{resource.id_param}}}",
        response_model=output_schema,
        summary=f"Replace {name}",
    )
    def update_resource(
        data: input_schema,
        ids: tuple[UUID, ...] = Depends(entity_ids),
        service: ResourceService = Depends(get_service),
    ):
        return service.update(ids[:-1], ids[-1], data)

    @router.delete(
        f"/{{{resource.id_param}}}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        summary=f"Delete {name}",
    )
    def delete_resource(
        ids: tuple[UUID, ...] = Depends(entity_ids),
        service: ResourceService = Depends(get_service),
    ):
        """Delete the entity and everything below it."""
        service.delete(ids[:-1], ids[-1])
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
