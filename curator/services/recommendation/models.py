from abc import ABC, abstractmethod
from dataclasses import dataclass

from pydantic import BaseModel, Field

from curator.models.activity import ActionLog
from curator.models.content import ContentItem
from curator.models.interest import InterestProfile
from curator.services.catalog import ContentCatalog


class CandidateCarousel(BaseModel):
    """
    An ephemeral, computed grouping of content proposed by one strategy.

    Recomputed on every generation pass and never persisted directly.
    """

    id: str  # rec-<strategy>-<seed>, e.g. rec-liked-c101
    title: str
    items: list[ContentItem] = Field(default_factory=list)
    strategy: str
    position: int = 0

    @property
    def item_count(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class GenerationContext:
    """Snapshot shared by all strategies during one generation pass."""

    catalog: ContentCatalog
    log: ActionLog
    profile: InterestProfile
    interacted_titles: frozenset[str]
    pool_limit: int


class CandidateStrategy(ABC):
    """
    Interface for a candidate generation strategy.
    """

    name: str

    @abstractmethod
    def generate(self, context: GenerationContext) -> list[CandidateCarousel]:
        """
        Propose candidates from the context, in the strategy's own order.
        """
        pass
