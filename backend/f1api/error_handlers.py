import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .errors import F1ApiError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Map every failure to a JSON body of the form ``{"error": ...}``."""

    @app.exception_handler(F1ApiError)
    async def api_error_handler(request: Request, exc: F1ApiError):
        if exc.http_status >= 500:
            logger.error(
                "Internal fault on %s: %s", request.url.path, getattr(exc, "reason", exc.message),
                extra={"path": request.url.path, "status_code": exc.http_status},
            )
        else:
            logger.info(
                "%s on %s", exc.message, request.url.path,
                extra={"path": request.url.path, "status_code": exc.http_status},
            )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        parameter = str(errors[0]["loc"][-1]) if errors and errors[0].get("loc") else "request"
        logger.warning(
            "Validation error on %s: %s", request.url.path, errors,
            extra={"path": request.url.path, "parameter": parameter},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": f"invalid parameter '{parameter}'",
                "parameter": parameter,
                "details": [
                    {
                        "field": ".".join(str(loc) for loc in e["loc"]),
                        "message": e["msg"],
                        "type": e["type"],
                    }
                    for e in errors
                ],
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            "Unhandled exception on %s: %s", request.url.path, exc,
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "internal server error"},
        )
