"""
Candidate carousel generation.

Four heuristics (liked, watched, actor, general interest) propose rows that
are deduplicated by title in priority order.
"""

from curator.services.recommendation.generator import CandidateGenerator, default_strategies
from curator.services.recommendation.models import CandidateCarousel, CandidateStrategy, GenerationContext

__all__ = [
    "CandidateCarousel",
    "CandidateGenerator",
    "CandidateStrategy",
    "GenerationContext",
    "default_strategies",
]
