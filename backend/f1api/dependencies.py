from fastapi import Request

from .services.store import ResourceStore


def get_store(request: Request) -> ResourceStore:
    return request.app.state.store
