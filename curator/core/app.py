import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from curator.api.main import api_router
from curator.services.carousel_store import CarouselStore, load_carousel_store
from curator.services.catalog import ContentCatalog, load_catalog
from curator.services.session import SessionRegistry

from .config import settings
from .version import __version__


def configure_logging() -> None:
    logger.remove()
    logger.add(sys.stderr, level=settings.LOG_LEVEL.upper())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events (startup/shutdown).
    """
    configure_logging()
    logger.info(f"Carousel Curator {__version__} started ({settings.APP_ENV})")
    yield
    logger.info(f"Discarding {len(app.state.registry)} preview sessions")


def create_app(catalog: ContentCatalog | None = None, store: CarouselStore | None = None) -> FastAPI:
    app = FastAPI(
        title="Carousel Curator",
        description="Preview simulation and recommended carousel synthesis for content merchandising",
        version=__version__,
        lifespan=lifespan,
        docs_url=None if settings.APP_ENV == "production" else "/docs",
        redoc_url=None if settings.APP_ENV == "production" else "/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.catalog = catalog if catalog is not None else load_catalog()
    app.state.store = store if store is not None else load_carousel_store()
    app.state.registry = SessionRegistry(app.state.catalog, app.state.store)

    app.include_router(api_router)
    return app


app = create_app()
