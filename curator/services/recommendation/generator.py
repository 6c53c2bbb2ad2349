from loguru import logger

from curator.core.config import settings
from curator.models.activity import ActionLog
from curator.models.interest import InterestProfile
from curator.services.catalog import ContentCatalog
from curator.services.recommendation.models import CandidateCarousel, CandidateStrategy, GenerationContext
from curator.services.recommendation.strategies import (
    ActorStrategy,
    InterestStrategy,
    LikedStrategy,
    WatchedStrategy,
)


def default_strategies() -> list[CandidateStrategy]:
    """Strategies in priority order; earlier ones win title collisions."""
    return [
        LikedStrategy(),
        WatchedStrategy(),
        ActorStrategy(),
        InterestStrategy(),
    ]


class CandidateGenerator:
    """
    Synthesizes candidate carousels from the action log and interest profile.

    Pure and deterministic: the same catalog, log and profile always give the
    same list. Strategies run in priority order; the first candidate to use a
    title claims it and later ones with the same title are dropped.
    """

    def __init__(
        self,
        strategies: list[CandidateStrategy] | None = None,
        pool_limit: int | None = None,
        min_items: int | None = None,
    ):
        self.strategies = strategies if strategies is not None else default_strategies()
        self.pool_limit = settings.CANDIDATE_POOL_LIMIT if pool_limit is None else pool_limit
        self.min_items = settings.CANDIDATE_MIN_ITEMS if min_items is None else min_items

    def generate(
        self,
        catalog: ContentCatalog,
        log: ActionLog,
        profile: InterestProfile,
    ) -> list[CandidateCarousel]:
        if log.is_empty:
            return []

        context = GenerationContext(
            catalog=catalog,
            log=log,
            profile=profile,
            interacted_titles=frozenset(log.interacted_titles()),
            pool_limit=self.pool_limit,
        )

        accepted: list[CandidateCarousel] = []
        claimed_titles: set[str] = set()

        for strategy in self.strategies:
            for candidate in strategy.generate(context):
                if candidate.title in claimed_titles:
                    logger.debug(f"[{strategy.name}] '{candidate.title}' already claimed, dropping")
                    continue
                if candidate.item_count < self.min_items:
                    logger.debug(f"[{strategy.name}] '{candidate.title}' has {candidate.item_count} items, dropping")
                    continue

                claimed_titles.add(candidate.title)
                accepted.append(candidate.model_copy(update={"position": len(accepted) + 1}))

        return accepted
