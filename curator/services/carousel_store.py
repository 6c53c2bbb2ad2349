import json
import uuid
from collections.abc import Iterator
from datetime import date
from pathlib import Path

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from curator.core.config import DATA_DIR, settings
from curator.models.carousel import Carousel, CarouselDraft, CarouselStatus, RouteNode

_routes_adapter = TypeAdapter(list[RouteNode])
_carousels_adapter = TypeAdapter(dict[str, list[Carousel]])


class CarouselStore:
    """
    In-memory store for the navigation tree and the carousels of each page.

    Owns id, date and position assignment for new carousels and keeps the
    aggregate carousel count of every route node current.
    """

    def __init__(
        self,
        routes: list[RouteNode] | None = None,
        carousels_by_route: dict[str, list[Carousel]] | None = None,
    ):
        self._routes: list[RouteNode] = routes or []
        self._carousels: dict[str, list[Carousel]] = {
            route_id: sorted(carousels, key=lambda c: c.position)
            for route_id, carousels in (carousels_by_route or {}).items()
        }
        self.total_entries = sum(len(carousels) for carousels in self._carousels.values())

    def routes(self) -> list[RouteNode]:
        return self._routes

    def _walk(self, nodes: list[RouteNode] | None = None) -> Iterator[RouteNode]:
        for node in self._routes if nodes is None else nodes:
            yield node
            yield from self._walk(node.children)

    def find_route(self, route_id: str) -> RouteNode | None:
        return next((node for node in self._walk() if node.id == route_id), None)

    def carousels_for(self, route_id: str, active_only: bool = False) -> list[Carousel]:
        carousels = self._carousels.get(route_id, [])
        if active_only:
            carousels = [c for c in carousels if c.status == CarouselStatus.ACTIVE]
        return list(carousels)

    def create_carousel(self, draft: CarouselDraft, route: RouteNode | str) -> Carousel:
        """
        Persist a draft at the top of a page.

        The new carousel takes position 1 and the existing ones are renumbered
        contiguously behind it. The page and its parent folder each gain one
        to their count.
        """
        route_id = route if isinstance(route, str) else route.id
        node = self.find_route(route_id)
        if node is None:
            raise KeyError(f"Unknown route: {route_id}")

        carousel = Carousel(
            **draft.model_dump(),
            id=uuid.uuid4().hex[:12],
            position=1,
            modified=date.today(),
        )

        existing = self._carousels.get(route_id, [])
        self._carousels[route_id] = [
            c.model_copy(update={"position": index + 1}) for index, c in enumerate([carousel, *existing])
        ]

        self._bump_count(node, 1)
        self.total_entries += 1

        logger.info(f"Created carousel {carousel.id} '{carousel.editorial_name}' on route {route_id}")
        return self._carousels[route_id][0]

    def _bump_count(self, node: RouteNode, change: int) -> None:
        node.count = max(0, node.count + change)
        if node.parent_id:
            parent = self.find_route(node.parent_id)
            if parent is not None:
                parent.count = max(0, parent.count + change)


def load_carousel_store(path: Path | None = None) -> CarouselStore:
    """
    Seed a store from a JSON document with ``routes`` and ``carousels`` keys.

    Falls back to the bundled routes when the file is missing or invalid.
    """
    path = Path(path or settings.ROUTES_PATH)
    fallback = DATA_DIR / "routes.json"
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        routes = _routes_adapter.validate_python(raw.get("routes", []))
        carousels = _carousels_adapter.validate_python(raw.get("carousels", {}))
    except (OSError, json.JSONDecodeError, AttributeError, ValidationError) as exc:
        if path == fallback:
            raise
        logger.warning(f"Failed to load routes from {path}: {exc}. Using bundled routes.")
        return load_carousel_store(fallback)

    return CarouselStore(routes=routes, carousels_by_route=carousels)
