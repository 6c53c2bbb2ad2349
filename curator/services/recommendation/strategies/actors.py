from curator.services.recommendation.models import CandidateCarousel, CandidateStrategy, GenerationContext
from curator.services.recommendation.utils import compact


class ActorStrategy(CandidateStrategy):
    """
    "Because you like {actor}" rows.

    Actors are drawn from the cast of high-interest items (liked, or played
    past 85%). Pools exclude the high-interest items themselves but not other
    items the viewer touched.
    """

    name = "actor"

    def generate(self, context: GenerationContext) -> list[CandidateCarousel]:
        high_interest = context.log.high_interest_titles()
        if not high_interest:
            return []

        # dict keeps first-seen catalog order
        actors: dict[str, None] = {}
        for item in context.catalog:
            if item.title in high_interest:
                actors.update(dict.fromkeys(item.tags("cast")))

        candidates = []
        for actor in actors:
            pool = [
                item
                for item in context.catalog
                if item.has_tag("cast", actor) and item.title not in high_interest
            ][: context.pool_limit]
            candidates.append(
                CandidateCarousel(
                    id=f"rec-actor-{compact(actor)}",
                    title=f"Because you like {actor}",
                    items=pool,
                    strategy=self.name,
                )
            )
        return candidates
