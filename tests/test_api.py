import pytest
from fastapi.testclient import TestClient

from curator.core.app import create_app
from curator.services.carousel_store import load_carousel_store
from curator.services.catalog import load_catalog


@pytest.fixture
def client():
    app = create_app(catalog=load_catalog(), store=load_carousel_store())
    return TestClient(app)


@pytest.fixture
def session_id(client):
    response = client.post(
        "/sessions",
        json={"profile": {"user_id": "viewer-1", "country": "UAE"}, "page_id": "home-main"},
    )
    assert response.status_code == 200
    return response.json()["session_id"]


class TestHealthAndCatalog:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_catalog_search_with_facets(self, client):
        response = client.get("/catalog", params={"genre": ["Comedy"], "audience": ["Family"]})

        assert response.status_code == 200
        assert [item["title"] for item in response.json()] == ["Laugh Out Loud", "The Neighbours"]

    def test_catalog_filters(self, client):
        filters = client.get("/catalog/filters").json()

        assert list(filters)[0] == "content_type"
        assert "Action" in filters["genre"]


class TestRoutes:
    def test_list_routes(self, client):
        routes = client.get("/routes").json()

        assert [route["id"] for route in routes] == ["home", "movies"]

    def test_active_carousels(self, client):
        carousels = client.get("/routes/home-main/carousels", params={"active_only": True}).json()

        assert [c["editorial_name"] for c in carousels] == ["Trending Now"]

    def test_unknown_route(self, client):
        assert client.get("/routes/nowhere/carousels").status_code == 404


class TestSessionFlow:
    def test_unknown_page(self, client):
        response = client.post("/sessions", json={"profile": {"user_id": "v"}, "page_id": "nowhere"})

        assert response.status_code == 404

    def test_record_action_returns_interests_and_acknowledgement(self, client, session_id):
        response = client.post(
            f"/sessions/{session_id}/actions",
            json={"content_title": "Desert Storm", "action": "play", "detail": "75%"},
        )

        body = response.json()
        assert response.status_code == 200
        assert body["revision"] == 2
        assert body["entry"]["content_id"] == "c101"
        assert body["interests"]["genre:Action"] == 0.4
        assert body["notifications"] == ["'Desert Storm' interaction logged for recommendations."]

    def test_action_requires_content_reference(self, client, session_id):
        response = client.post(f"/sessions/{session_id}/actions", json={"action": "like"})

        assert response.status_code == 422

    def test_unknown_content(self, client, session_id):
        response = client.post(f"/sessions/{session_id}/actions", json={"content_id": "nope", "action": "like"})

        assert response.status_code == 404

    def test_unknown_session(self, client):
        assert client.get("/sessions/nope/log").status_code == 404

    def test_share_reports_zero_weight_interests(self, client, session_id):
        response = client.post(f"/sessions/{session_id}/actions", json={"content_id": "c109", "action": "share"})

        assert response.status_code == 200
        assert response.json()["interests"]["genre:Comedy"] == 0.0

    def test_log_and_interests(self, client, session_id):
        client.post(f"/sessions/{session_id}/actions", json={"content_id": "c101", "action": "like"})
        client.post(f"/sessions/{session_id}/actions", json={"content_id": "c109", "action": "share"})

        log = client.get(f"/sessions/{session_id}/log").json()
        interests = client.get(f"/sessions/{session_id}/interests", params={"limit": 3}).json()

        assert [entry["action"] for entry in log] == ["share", "like"]
        assert len(interests) == 3
        assert interests[0] == {"key": "genre:Action", "weight": 0.3}

    def test_recommend_then_promote(self, client, session_id):
        client.post(f"/sessions/{session_id}/actions", json={"content_id": "c101", "action": "like"})

        candidates = client.get(f"/sessions/{session_id}/recommendations").json()
        liked = next(c for c in candidates if c["id"] == "rec-liked-c101")
        response = client.post(f"/sessions/{session_id}/recommendations/{liked['id']}/promote")

        assert liked["title"] == "Because you liked Desert Storm"
        assert [item["title"] for item in liked["items"]] == [
            "The Last Caravan",
            "Midnight Heist",
            "Red Sea Rescue",
        ]
        assert response.status_code == 200
        carousel = response.json()
        assert carousel["status"] == "Draft"
        assert carousel["items"] == 3
        assert carousel["position"] == 1
        assert len(carousel["variants"]) == 1

        page = client.get("/routes/home-main/carousels").json()
        assert page[0]["id"] == carousel["id"]
        assert [c["position"] for c in page] == [1, 2, 3]

    def test_promote_unknown_candidate(self, client, session_id):
        response = client.post(f"/sessions/{session_id}/recommendations/rec-liked-zzz/promote")

        assert response.status_code == 404

    def test_promote_without_page(self, client):
        session_id = client.post("/sessions", json={"profile": {"user_id": "v"}}).json()["session_id"]

        response = client.post(f"/sessions/{session_id}/recommendations/rec-liked-c101/promote")

        assert response.status_code == 409
