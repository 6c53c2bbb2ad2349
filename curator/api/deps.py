from fastapi import HTTPException, Request

from curator.services.carousel_store import CarouselStore
from curator.services.catalog import ContentCatalog
from curator.services.session import PreviewSession, SessionRegistry


def get_catalog(request: Request) -> ContentCatalog:
    return request.app.state.catalog


def get_store(request: Request) -> CarouselStore:
    return request.app.state.store


def get_registry(request: Request) -> SessionRegistry:
    return request.app.state.registry


def get_session(session_id: str, request: Request) -> PreviewSession:
    session = get_registry(request).get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Unknown preview session.")
    return session
