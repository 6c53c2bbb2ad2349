import uuid

from loguru import logger
from pydantic import BaseModel, ConfigDict

from curator.core.config import settings
from curator.models.activity import ActionKind, ActionLog
from curator.models.carousel import Carousel, RouteNode
from curator.models.content import ContentItem
from curator.models.interest import InterestKey, InterestProfile
from curator.models.preview import PreviewProfile
from curator.services.carousel_store import CarouselStore
from curator.services.catalog import ContentCatalog
from curator.services.notifications import InteractionSink, notify_interaction
from curator.services.profile import InterestAccumulator
from curator.services.promotion import PromotionSynthesizer
from curator.services.recommendation import CandidateCarousel, CandidateGenerator


class SessionSnapshot(BaseModel):
    """The (log, profile) pair a session publishes as one unit."""

    model_config = ConfigDict(frozen=True)

    log: ActionLog
    profile: InterestProfile
    revision: int = 0


class PreviewSession:
    """
    One simulated viewer previewing one page.

    All mutable state lives here and is replaced, never edited: every
    interaction swaps in a new snapshot, so readers see either the old or the
    new (log, profile) pair. Reloading discards both.
    """

    def __init__(
        self,
        catalog: ContentCatalog,
        store: CarouselStore,
        accumulator: InterestAccumulator | None = None,
        generator: CandidateGenerator | None = None,
        on_interaction_logged: InteractionSink | None = None,
        log_capacity: int | None = None,
        session_id: str | None = None,
    ):
        self.id = session_id or uuid.uuid4().hex
        self.catalog = catalog
        self.store = store
        self.accumulator = accumulator or InterestAccumulator()
        self.generator = generator or CandidateGenerator()
        self.promoter = PromotionSynthesizer(store)
        self.on_interaction_logged = on_interaction_logged
        self.log_capacity = settings.ACTION_LOG_CAPACITY if log_capacity is None else log_capacity

        self.preview_profile: PreviewProfile | None = None
        self.page: RouteNode | None = None
        self._snapshot = self._empty_snapshot(revision=0)

    def _empty_snapshot(self, revision: int) -> SessionSnapshot:
        return SessionSnapshot(
            log=ActionLog(capacity=self.log_capacity),
            profile=InterestProfile(),
            revision=revision,
        )

    @property
    def snapshot(self) -> SessionSnapshot:
        return self._snapshot

    @property
    def log(self) -> ActionLog:
        return self._snapshot.log

    @property
    def interest_profile(self) -> InterestProfile:
        return self._snapshot.profile

    @property
    def revision(self) -> int:
        return self._snapshot.revision

    @property
    def is_loaded(self) -> bool:
        return self.preview_profile is not None and self.page is not None

    def load(self, profile: PreviewProfile, page: RouteNode | None) -> None:
        """(Re)load a viewer and page, discarding the log and interest profile."""
        self.preview_profile = profile
        self.page = page
        self._snapshot = self._empty_snapshot(revision=self.revision + 1)
        page_name = page.name if page else "no page"
        logger.info(f"[{self.id}] Loaded profile {profile.user_id} on {page_name}")

    def select_page(self, page: RouteNode | None) -> None:
        self.page = page

    def record_action(
        self, content: ContentItem, action: ActionKind | str, detail: str | None = None
    ) -> SessionSnapshot:
        """Apply one interaction and publish the new snapshot atomically."""
        current = self._snapshot
        profile, log = self.accumulator.record_action(current.profile, current.log, content, action, detail)
        if log is current.log:
            return current

        self._snapshot = SessionSnapshot(log=log, profile=profile, revision=current.revision + 1)

        notify_interaction(self.on_interaction_logged, content, log.entries[0].action)
        return self._snapshot

    def recommendations(self) -> list[CandidateCarousel]:
        if not self.is_loaded:
            return []
        snapshot = self._snapshot
        return self.generator.generate(self.catalog, snapshot.log, snapshot.profile)

    def find_candidate(self, candidate_id: str) -> CandidateCarousel | None:
        return next((c for c in self.recommendations() if c.id == candidate_id), None)

    def promote(self, candidate: CandidateCarousel) -> Carousel | None:
        """Promote a candidate to the session's page; a no-op without a page."""
        return self.promoter.promote(candidate, self.page)

    def interest_summary(self, limit: int | None = None) -> list[tuple[InterestKey, float]]:
        """Positive interests, strongest first."""
        limit = settings.INTEREST_SUMMARY_LIMIT if limit is None else limit
        ranked = self.interest_profile.get_top_interests(limit=len(self.interest_profile))
        return [(key, weight) for key, weight in ranked if weight > 0][:limit]

    def metadata_weights(self, content: ContentItem) -> list[tuple[InterestKey, float]]:
        """Current weight of every tag on one item, in metadata order."""
        profile = self.interest_profile
        return [
            (key, profile.weight(key))
            for key in (InterestKey(dimension, value) for dimension, value in content.tag_pairs())
        ]


class SessionRegistry:
    """In-memory sessions keyed by id. Nothing survives a restart."""

    def __init__(self, catalog: ContentCatalog, store: CarouselStore):
        self.catalog = catalog
        self.store = store
        self._sessions: dict[str, PreviewSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def create(
        self,
        profile: PreviewProfile,
        page: RouteNode | None,
        on_interaction_logged: InteractionSink | None = None,
    ) -> PreviewSession:
        session = PreviewSession(self.catalog, self.store, on_interaction_logged=on_interaction_logged)
        session.load(profile, page)
        self._sessions[session.id] = session
        return session

    def get(self, session_id: str) -> PreviewSession | None:
        return self._sessions.get(session_id)

    def discard(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)
