from fastapi import APIRouter, Depends, HTTPException

from curator.api.deps import get_store
from curator.models.carousel import Carousel, RouteNode
from curator.services.carousel_store import CarouselStore

router = APIRouter(prefix="/routes", tags=["routes"])


@router.get("", response_model=list[RouteNode])
async def list_routes(store: CarouselStore = Depends(get_store)):
    return store.routes()


@router.get("/{route_id}/carousels", response_model=list[Carousel])
async def route_carousels(route_id: str, active_only: bool = False, store: CarouselStore = Depends(get_store)):
    if store.find_route(route_id) is None:
        raise HTTPException(status_code=404, detail="Unknown route.")
    return store.carousels_for(route_id, active_only=active_only)
