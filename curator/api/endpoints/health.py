from fastapi import APIRouter, Depends

from curator.api.deps import get_catalog, get_registry
from curator.services.catalog import ContentCatalog
from curator.services.session import SessionRegistry

router = APIRouter(tags=["health"])


@router.get("/health", summary="Simple readiness probe")
async def health_check() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/metrics", summary="Runtime metrics (lightweight)")
async def metrics(
    catalog: ContentCatalog = Depends(get_catalog),
    registry: SessionRegistry = Depends(get_registry),
) -> dict:
    return {"catalog_items": len(catalog), "active_sessions": len(registry)}
