from fastapi import APIRouter, Request

from ..services.docs_service import describe

router = APIRouter(tags=["docs"])


@router.get("/docs", summary="Machine-readable API schema")
def get_docs(request: Request):
    """OpenAPI document describing every route; rendered as HTML at ``/docs/ui``."""
    return describe(request.app)
