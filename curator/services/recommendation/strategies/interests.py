from curator.core.config import settings
from curator.models.interest import InterestKey
from curator.services.recommendation.models import CandidateCarousel, CandidateStrategy, GenerationContext
from curator.services.recommendation.utils import compact


class InterestStrategy(CandidateStrategy):
    """
    "More in {value}" rows from the strongest interests of the profile.

    Only dimensions marked eligible take part; by default cast is left to the
    actor rows.
    """

    name = "interest"

    def __init__(
        self,
        min_weight: float | None = None,
        top_n: int | None = None,
        dimension_eligibility: dict[str, bool] | None = None,
    ):
        self.min_weight = settings.INTEREST_MIN_WEIGHT if min_weight is None else min_weight
        self.top_n = settings.INTEREST_TOP_N if top_n is None else top_n
        self.dimension_eligibility = (
            settings.INTEREST_DIMENSION_ELIGIBILITY if dimension_eligibility is None else dimension_eligibility
        )

    def is_eligible(self, key: InterestKey) -> bool:
        if not key.dimension or not key.value:
            return False
        return self.dimension_eligibility.get(key.dimension, True)

    def generate(self, context: GenerationContext) -> list[CandidateCarousel]:
        top_interests = context.profile.get_top_interests(
            limit=self.top_n, min_weight=self.min_weight, eligible=self.is_eligible
        )

        candidates = []
        for key, _weight in top_interests:
            pool = [
                item
                for item in context.catalog
                if item.has_tag(key.dimension, key.value) and item.title not in context.interacted_titles
            ][: context.pool_limit]
            candidates.append(
                CandidateCarousel(
                    id=f"rec-interest-{key.dimension}-{compact(key.value)}",
                    title=f"More in {key.value}",
                    items=pool,
                    strategy=self.name,
                )
            )
        return candidates
