import asyncio

import pytest

from curator.models.activity import ActionKind
from curator.services.refresher import RecommendationRefresher


class TestRecommendationRefresher:
    @pytest.mark.asyncio
    async def test_publishes_after_debounce(self, session, action_catalog):
        published = []
        refresher = RecommendationRefresher(session, debounce_seconds=0, on_refresh=published.append)
        session.record_action(action_catalog.find(content_id="e"), ActionKind.LIKE)

        refresher.schedule()
        candidates = await refresher.wait()

        assert candidates == session.recommendations()
        assert published == [candidates]
        assert refresher.published_revision == session.revision

    @pytest.mark.asyncio
    async def test_newer_action_supersedes_in_flight_refresh(self, session, action_catalog):
        published = []
        refresher = RecommendationRefresher(session, debounce_seconds=0.05, on_refresh=published.append)

        session.record_action(action_catalog.find(content_id="a"), ActionKind.SHARE)
        stale = refresher.schedule()
        session.record_action(action_catalog.find(content_id="e"), ActionKind.LIKE)
        refresher.schedule()
        await refresher.wait()

        assert stale.cancelled()
        assert len(published) == 1
        assert refresher.published_revision == session.revision

    @pytest.mark.asyncio
    async def test_stale_run_does_not_publish(self, session, action_catalog):
        refresher = RecommendationRefresher(session, debounce_seconds=0.05)
        session.record_action(action_catalog.find(content_id="e"), ActionKind.LIKE)

        task = refresher.schedule()
        await asyncio.sleep(0)
        session.record_action(action_catalog.find(content_id="a"), ActionKind.LIKE)

        assert await task is None
        assert refresher.published_revision is None
        assert refresher.latest == []

    @pytest.mark.asyncio
    async def test_close_cancels_pending_run(self, session):
        refresher = RecommendationRefresher(session, debounce_seconds=10)
        task = refresher.schedule()

        await refresher.close()

        assert task.cancelled()
