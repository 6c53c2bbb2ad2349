from curator.models.activity import ActionKind, ActionLogEntry
from curator.services.recommendation.models import GenerationContext
from curator.services.recommendation.strategies.source import SourceGenreStrategy


class LikedStrategy(SourceGenreStrategy):
    """One row per liked item, most recent like first."""

    name = "liked"
    title_template = "Because you liked {title}"

    def seed_entries(self, context: GenerationContext) -> list[ActionLogEntry]:
        return context.log.distinct_entries(ActionKind.LIKE)
