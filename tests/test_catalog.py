import json

from curator.services.catalog import ContentCatalog, load_catalog


class TestContentCatalog:
    def test_find_prefers_id_then_title(self, make_item):
        catalog = ContentCatalog([make_item("1", "Twin"), make_item("2", "Twin")])

        assert catalog.find(content_id="2").id == "2"
        assert catalog.find(title="Twin").id == "1"
        assert catalog.find(content_id="missing", title="Twin").id == "1"
        assert catalog.find(content_id="missing") is None

    def test_search_matches_title_and_tags(self, action_catalog):
        assert [item.id for item in action_catalog.search("star two")] == ["b", "d"]
        assert [item.id for item in action_catalog.search("  DRAMA ")] == ["d", "e"]

    def test_search_without_query_or_filters_returns_everything(self, action_catalog):
        assert len(action_catalog.search()) == len(action_catalog)

    def test_filters_combine(self, action_catalog):
        results = action_catalog.search(filters={"genre": ["Drama", "Comedy"], "mood": ["Intense"]})

        assert [item.id for item in results] == ["d"]

    def test_filter_on_content_type(self, make_item):
        catalog = ContentCatalog(
            [
                make_item("1", genre=["Drama"]).model_copy(update={"content_type": "Drama Series"}),
                make_item("2", genre=["Drama"]).model_copy(update={"content_type": "Drama Movie"}),
            ]
        )

        assert [item.id for item in catalog.search(filters={"content_type": ["Drama Movie"]})] == ["2"]

    def test_available_filters(self, action_catalog):
        filters = action_catalog.available_filters()

        assert list(filters) == ["genre", "cast", "mood"]
        assert filters["genre"] == ["Action", "Drama"]
        assert filters["cast"] == ["Star One", "Star Two"]


class TestLoadCatalog:
    def test_bundled_catalog(self):
        catalog = load_catalog()

        assert len(catalog) > 10
        assert catalog.find(title="Desert Storm").primary_genre == "Action"

    def test_custom_catalog(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([{"id": "z", "title": "Zed", "metadata": {"genre": ["Sci-Fi"]}}]))

        catalog = load_catalog(path)

        assert [item.title for item in catalog] == ["Zed"]

    def test_invalid_catalog_falls_back(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([{"title": "no id"}]))

        catalog = load_catalog(path)

        assert catalog.find(title="Desert Storm") is not None
