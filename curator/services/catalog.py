from collections.abc import Iterable, Iterator
from pathlib import Path

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from curator.core.config import DATA_DIR, settings
from curator.models.content import ContentItem

# Filter facets offered by catalog search, content type first
FILTER_DIMENSIONS: tuple[str, ...] = ("content_type", "genre", "theme", "mood", "cast", "audience")

_catalog_adapter = TypeAdapter(list[ContentItem])


class ContentCatalog:
    """
    Read-only, ordered collection of content items.

    Catalog order is significant: candidate pools are filled in this order.
    """

    def __init__(self, items: Iterable[ContentItem] = ()):
        self._items: tuple[ContentItem, ...] = tuple(items)
        self._by_id: dict[str, ContentItem] = {}
        for item in self._items:
            self._by_id.setdefault(item.id, item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ContentItem]:
        return iter(self._items)

    @property
    def items(self) -> tuple[ContentItem, ...]:
        return self._items

    def find(self, content_id: str | None = None, title: str | None = None) -> ContentItem | None:
        """
        Resolve an item by id, falling back to title.

        Titles are only assumed unique for compatibility with logs that carry
        no id; the first catalog match wins.
        """
        if content_id and content_id in self._by_id:
            return self._by_id[content_id]
        if title is not None:
            return next((item for item in self._items if item.title == title), None)
        return None

    def with_tag(self, dimension: str, value: str) -> list[ContentItem]:
        return [item for item in self._items if item.has_tag(dimension, value)]

    def search(self, query: str = "", filters: dict[str, list[str]] | None = None) -> list[ContentItem]:
        """
        Free-text search combined with facet filters.

        A facet passes when any selected value is among the item's tags; all
        facets must pass. The query matches the title or any tag value,
        case-insensitively.
        """
        needle = (query or "").strip().lower()
        active = {key: values for key, values in (filters or {}).items() if values}

        if not needle and not active:
            return list(self._items)

        results = []
        for item in self._items:
            if not self._passes_filters(item, active):
                continue
            if needle and not self._matches_query(item, needle):
                continue
            results.append(item)
        return results

    def available_filters(self) -> dict[str, list[str]]:
        """Distinct sorted values per facet, omitting empty facets."""
        options: dict[str, set[str]] = {dimension: set() for dimension in FILTER_DIMENSIONS}
        for item in self._items:
            for dimension in FILTER_DIMENSIONS:
                options[dimension].update(self._facet_values(item, dimension))
        return {dimension: sorted(values) for dimension, values in options.items() if values}

    @staticmethod
    def _facet_values(item: ContentItem, dimension: str) -> list[str]:
        if dimension == "content_type":
            return [item.content_type] if item.content_type else []
        return item.tags(dimension)

    def _passes_filters(self, item: ContentItem, filters: dict[str, list[str]]) -> bool:
        for dimension, selected in filters.items():
            values = self._facet_values(item, dimension)
            if not any(value in values for value in selected):
                return False
        return True

    @staticmethod
    def _matches_query(item: ContentItem, needle: str) -> bool:
        if needle in item.title.lower():
            return True
        return any(needle in value.lower() for _, value in item.tag_pairs())


def load_catalog(path: Path | None = None) -> ContentCatalog:
    """
    Load a catalog from a JSON array of content items.

    Falls back to the bundled sample catalog when the file is missing or
    invalid.
    """
    path = Path(path or settings.CATALOG_PATH)
    try:
        items = _catalog_adapter.validate_json(path.read_bytes())
    except (OSError, ValidationError) as exc:
        fallback = DATA_DIR / "catalog.json"
        if path == fallback:
            raise
        logger.warning(f"Failed to load catalog from {path}: {exc}. Using bundled catalog.")
        items = _catalog_adapter.validate_json(fallback.read_bytes())

    logger.info(f"Loaded {len(items)} catalog items")
    return ContentCatalog(items)
