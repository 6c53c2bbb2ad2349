from fastapi import APIRouter

from .endpoints.catalog import router as catalog_router
from .endpoints.health import router as health_router
from .endpoints.routes import router as routes_router
from .endpoints.sessions import router as sessions_router

api_router = APIRouter()


@api_router.get("/")
async def root():
    return {"message": "Carousel Curator API is running"}


api_router.include_router(health_router)
api_router.include_router(catalog_router)
api_router.include_router(routes_router)
api_router.include_router(sessions_router)
