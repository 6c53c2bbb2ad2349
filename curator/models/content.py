from typing import Any, Literal

from pydantic import BaseModel, Field


class ContentItem(BaseModel):
    """
    A catalog entry with multi-valued metadata tags.

    ``metadata`` maps a dimension ("genre", "cast", "mood", ...) to an ordered
    list of tag values. Anything that is not a list of strings is tolerated on
    input and ignored by ``tags``.
    """

    id: str
    title: str
    type: Literal["Movie", "Series", "Episode"] = "Movie"
    content_type: str = ""
    duration: str | None = None
    image_url: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    def tags(self, dimension: str) -> list[str]:
        """Return the usable tag values for a dimension."""
        values = self.metadata.get(dimension)
        if not isinstance(values, list):
            return []
        return [value for value in values if isinstance(value, str) and value]

    def tag_pairs(self) -> list[tuple[str, str]]:
        """Every (dimension, value) pair carried by the item, in metadata order."""
        return [(dimension, value) for dimension in self.metadata for value in self.tags(dimension)]

    def has_tag(self, dimension: str, value: str) -> bool:
        return value in self.tags(dimension)

    @property
    def primary_genre(self) -> str | None:
        genres = self.tags("genre")
        return genres[0] if genres else None
