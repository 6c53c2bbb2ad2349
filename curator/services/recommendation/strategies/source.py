from abc import abstractmethod

from loguru import logger

from curator.models.activity import ActionLogEntry
from curator.services.recommendation.models import CandidateCarousel, CandidateStrategy, GenerationContext
from curator.services.recommendation.utils import genre_pool


class SourceGenreStrategy(CandidateStrategy):
    """
    "Because you ..." rows seeded from individual items in the action log.

    Each seed item yields one row of catalog items sharing its primary genre.
    """

    title_template: str

    @abstractmethod
    def seed_entries(self, context: GenerationContext) -> list[ActionLogEntry]:
        """Log entries whose items seed one row each, in row order."""

    def generate(self, context: GenerationContext) -> list[CandidateCarousel]:
        candidates = []
        for entry in self.seed_entries(context):
            source = context.catalog.find(content_id=entry.content_id, title=entry.content_title)
            if source is None:
                logger.debug(f"[{self.name}] No catalog match for '{entry.content_title}'")
                continue
            if not source.primary_genre:
                logger.debug(f"[{self.name}] '{source.title}' has no genre, skipping")
                continue

            candidates.append(
                CandidateCarousel(
                    id=f"rec-{self.name}-{source.id}",
                    title=self.title_template.format(title=source.title),
                    items=genre_pool(source, context),
                    strategy=self.name,
                )
            )
        return candidates
