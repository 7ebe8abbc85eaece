from fastapi import APIRouter, Depends, Path, Query, Request

from ..dependencies import get_store
from ..models.common import ErrorResponse
from ..resources import Resource
from ..services.query_service import RESERVED_PARAMS, get_record, list_records
from ..services.store import ResourceStore


def _filter_parameters(resource: Resource) -> list[dict]:
    # Filters are read from the raw query string, so they are documented by hand
    return [
        {
            "name": field,
            "in": "query",
            "required": False,
            "description": f"Only return {resource.name} whose {field} equals this value",
            "schema": {"type": "integer" if annotation is int else "string"},
        }
        for field, annotation in resource.fields.items()
    ]


def build_router(resource: Resource) -> APIRouter:
    """List and get-by-id routes for one collection."""
    router = APIRouter(tags=[resource.name])
    not_found = f"{resource.singular.capitalize()} not found"

    @router.get(
        f"/{resource.name}",
        response_model=resource.list_response,
        summary=resource.list_summary,
        description=resource.list_description,
        responses={400: {"model": ErrorResponse, "description": "Unknown filter or sort field"}},
        openapi_extra={"parameters": _filter_parameters(resource)},
    )
    def list_items(
        request: Request,
        sort: str | None = Query(None, description="Field to sort by, prefix with '-' for descending order"),
        limit: int | None = Query(None, ge=0, description="Maximum number of records to return"),
        offset: int | None = Query(None, ge=0, description="Number of matching records to skip"),
        store: ResourceStore = Depends(get_store),
    ):
        filters = [(k, v) for k, v in request.query_params.multi_items() if k not in RESERVED_PARAMS]
        records, total = list_records(store, resource.name, filters, sort, limit, offset)
        return {resource.name: records, "total": total}

    @router.get(
        f"/{resource.name}/{{id}}",
        response_model=resource.item_response,
        summary=resource.item_summary,
        description=resource.item_description,
        responses={
            400: {"model": ErrorResponse, "description": "ID is not an integer"},
            404: {"model": ErrorResponse, "description": not_found},
        },
    )
    def get_item(
        id: int = Path(description=f"{resource.singular.capitalize()} ID", examples=[1]),
        store: ResourceStore = Depends(get_store),
    ):
        record = get_record(store, resource.name, id)
        return {resource.singular: record}

    return router
