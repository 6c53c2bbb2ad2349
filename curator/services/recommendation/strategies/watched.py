from curator.core.config import settings
from curator.models.activity import ActionKind, ActionLogEntry
from curator.services.recommendation.models import GenerationContext
from curator.services.recommendation.strategies.source import SourceGenreStrategy


class WatchedStrategy(SourceGenreStrategy):
    """One row per recently played item, capped to the latest few distinct titles."""

    name = "watched"
    title_template = "Because you watched {title}"

    def __init__(self, seed_limit: int | None = None):
        self.seed_limit = settings.WATCHED_SEED_LIMIT if seed_limit is None else seed_limit

    def seed_entries(self, context: GenerationContext) -> list[ActionLogEntry]:
        return context.log.distinct_entries(ActionKind.PLAY)[: self.seed_limit]
