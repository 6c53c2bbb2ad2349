import re

from curator.models.content import ContentItem
from curator.services.recommendation.models import GenerationContext


def compact(value: str) -> str:
    """Strip all whitespace, for use inside candidate ids."""
    return re.sub(r"\s+", "", value)


def genre_pool(source: ContentItem, context: GenerationContext) -> list[ContentItem]:
    """Items sharing the source's primary genre, excluding anything already interacted with."""
    genre = source.primary_genre
    if not genre:
        return []
    pool = [
        item
        for item in context.catalog
        if item.id != source.id and item.title not in context.interacted_titles and item.has_tag("genre", genre)
    ]
    return pool[: context.pool_limit]
