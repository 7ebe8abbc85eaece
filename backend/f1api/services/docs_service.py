from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from ..resources import CROSS_REFERENCES


def _describe_collections(app: FastAPI) -> dict:
    collections = {}
    for resource in app.state.store.resources:
        collections[resource.name] = {
            "singular": resource.singular,
            "schema": resource.model.__name__,
            "list_path": f"/{resource.name}",
            "item_path": f"/{resource.name}/{{id}}",
            "fields": list(resource.fields),
            "references": [
                {"field": field, "collection": target, "target_field": target_field}
                for source, field, target, target_field in CROSS_REFERENCES
                if source == resource.name
            ],
        }
    return collections


def describe(app: FastAPI) -> dict:
    """Build the OpenAPI document from the routes registered on ``app``.

    The result is cached on the app, like FastAPI's own ``app.openapi()``.
    Collection metadata goes under the ``x-collections`` extension key.
    """
    if app.openapi_schema:
        return app.openapi_schema

    schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )
    schema["x-collections"] = _describe_collections(app)
    app.openapi_schema = schema
    return schema
