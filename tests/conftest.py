import pytest

from curator.models.carousel import RouteNode
from curator.models.content import ContentItem
from curator.models.preview import PreviewProfile
from curator.services.carousel_store import CarouselStore
from curator.services.catalog import ContentCatalog
from curator.services.session import PreviewSession


def _make_item(content_id: str, title: str | None = None, **metadata) -> ContentItem:
    return ContentItem(id=content_id, title=title or content_id, metadata=metadata)


@pytest.fixture
def make_item():
    return _make_item


@pytest.fixture
def action_catalog():
    """A, B, D share the Action genre; E is a drama."""
    return ContentCatalog(
        [
            _make_item("a", "A", genre=["Action"], cast=["Star One"], mood=["Intense"]),
            _make_item("b", "B", genre=["Action"], cast=["Star One", "Star Two"], mood=["Uplifting"]),
            _make_item("d", "D", genre=["Action", "Drama"], cast=["Star Two"], mood=["Intense"]),
            _make_item("e", "E", genre=["Drama"], cast=["Star One"], mood=["Uplifting"]),
        ]
    )


@pytest.fixture
def routes():
    return [
        RouteNode(
            id="home",
            type="folder",
            name="Home",
            count=1,
            children=[RouteNode(id="home-main", type="page", name="Main", count=1, parent_id="home")],
        )
    ]


@pytest.fixture
def store(routes):
    return CarouselStore(routes=routes)


@pytest.fixture
def preview_profile():
    return PreviewProfile(user_id="viewer-1", username="Preview Viewer")


@pytest.fixture
def session(action_catalog, store, preview_profile):
    session = PreviewSession(action_catalog, store)
    session.load(preview_profile, store.find_route("home-main"))
    return session
