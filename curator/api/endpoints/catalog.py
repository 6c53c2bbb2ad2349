from fastapi import APIRouter, Depends, Request

from curator.api.deps import get_catalog
from curator.models.content import ContentItem
from curator.services.catalog import FILTER_DIMENSIONS, ContentCatalog

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("", response_model=list[ContentItem])
async def search_catalog(request: Request, q: str = "", catalog: ContentCatalog = Depends(get_catalog)):
    """Search by title or tag; repeat a facet parameter to select several values."""
    filters = {dimension: request.query_params.getlist(dimension) for dimension in FILTER_DIMENSIONS}
    return catalog.search(q, filters)


@router.get("/filters")
async def catalog_filters(catalog: ContentCatalog = Depends(get_catalog)) -> dict[str, list[str]]:
    return catalog.available_filters()
