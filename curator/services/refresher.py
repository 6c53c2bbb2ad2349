import asyncio
from collections.abc import Callable

from loguru import logger

from curator.core.config import settings
from curator.services.recommendation import CandidateCarousel
from curator.services.session import PreviewSession


class RecommendationRefresher:
    """
    Debounced, asynchronous recomputation of a session's candidates.

    Scheduling cancels any in-flight run, and a run only publishes if the
    session has not moved on since it was scheduled. A newer interaction
    always supersedes a stale result.
    """

    def __init__(
        self,
        session: PreviewSession,
        debounce_seconds: float | None = None,
        on_refresh: Callable[[list[CandidateCarousel]], None] | None = None,
    ):
        self.session = session
        self.debounce_seconds = settings.REFRESH_DEBOUNCE_SECONDS if debounce_seconds is None else debounce_seconds
        self.on_refresh = on_refresh
        self.latest: list[CandidateCarousel] = []
        self.published_revision: int | None = None
        self._task: asyncio.Task | None = None

    def schedule(self) -> asyncio.Task:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = asyncio.create_task(self._run(self.session.revision))
        return self._task

    async def _run(self, revision: int) -> list[CandidateCarousel] | None:
        await asyncio.sleep(self.debounce_seconds)
        if self.session.revision != revision:
            logger.debug(f"[{self.session.id}] Skipping stale refresh for revision {revision}")
            return None

        candidates = self.session.recommendations()
        self.latest = candidates
        self.published_revision = revision
        if self.on_refresh is not None:
            self.on_refresh(candidates)
        return candidates

    async def wait(self) -> list[CandidateCarousel]:
        """Wait for the latest scheduled run and return what is published."""
        if self._task is not None:
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        return self.latest

    async def close(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        self._task = None
