import logging
from contextlib import asynccontextmanager
from functools import partial

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import (
    API_DESCRIPTION,
    API_TITLE,
    API_VERSION,
    CHECK_REFERENCES,
    CORS_ORIGINS,
    LOG_FORMAT,
    LOG_LEVEL,
    SEED_FILE,
)
from .error_handlers import register_error_handlers
from .infrastructure.observability import setup_logging
from .routers import docs, records
from .services.docs_service import describe
from .services.seed_data import load_seed_file
from .services.store import ResourceStore

logger = logging.getLogger(__name__)


def default_store() -> ResourceStore:
    if SEED_FILE:
        return ResourceStore(
            seed_loader=partial(load_seed_file, SEED_FILE),
            check_references=CHECK_REFERENCES,
        )
    return ResourceStore(check_references=CHECK_REFERENCES)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(LOG_LEVEL, LOG_FORMAT)
    app.state.store.initialize()
    logger.info("%s started", app.title)
    yield
    logger.info("%s shutting down", app.title)


def create_app(store: ResourceStore | None = None) -> FastAPI:
    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=API_VERSION,
        lifespan=lifespan,
        docs_url="/docs/ui",
        redoc_url=None,
    )
    app.state.store = store if store is not None else default_store()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(docs.router)
    for resource in app.state.store.resources:
        app.include_router(records.build_router(resource))
    app.openapi = partial(describe, app)

    @app.get("/health", tags=["health"])
    def health():
        if not app.state.store.ready:
            return JSONResponse(status_code=503, content={"status": "starting"})
        return {"status": "ok"}

    return app


app = create_app()
