import uuid

from loguru import logger

from curator.models.carousel import (
    Carousel,
    CarouselDraft,
    CarouselStatus,
    CarouselVariant,
    RegionConfig,
    RouteNode,
)
from curator.services.carousel_store import CarouselStore
from curator.services.recommendation.models import CandidateCarousel

# Broad targeting applied to every promoted carousel
DEFAULT_CAROUSEL_TYPE = "Normal Carousel Component"
DEFAULT_RECOMMENDATION_TYPE = "Editorials (Manual)"
DEFAULT_MONETIZATION = "SVOD"
DEFAULT_PACKAGES = ["vip"]
DEFAULT_AGE = ["all"]
DEFAULT_DEVICES = ["web", "mobile_android", "mobile_ios", "android_tv"]
DEFAULT_REGION = "GCC"
GCC_COUNTRIES = ["KSA", "UAE", "QATAR", "BAHRAIN", "OMAN", "KUWAIT"]


class PromotionSynthesizer:
    """
    Turns an accepted candidate into a draft production carousel.

    Promotion is one-way and deliberately not idempotent: promoting the same
    candidate again creates another draft.
    """

    def __init__(self, store: CarouselStore):
        self.store = store

    @staticmethod
    def build_draft(candidate: CandidateCarousel) -> CarouselDraft:
        variant = CarouselVariant(
            id=f"variant-{uuid.uuid4().hex[:8]}",
            weight=100,
            editorial_name=candidate.title,
            carousel_comp_type=DEFAULT_CAROUSEL_TYPE,
            packages=list(DEFAULT_PACKAGES),
            age=list(DEFAULT_AGE),
            device_type=list(DEFAULT_DEVICES),
            region_config=RegionConfig(selected_region=DEFAULT_REGION, included=list(GCC_COUNTRIES)),
            recommendation_type=DEFAULT_RECOMMENDATION_TYPE,
            avod_svod=DEFAULT_MONETIZATION,
        )
        return CarouselDraft(
            editorial_name=candidate.title,
            type=DEFAULT_CAROUSEL_TYPE,
            items=candidate.item_count,
            platforms=list(DEFAULT_DEVICES),
            recommendation_type=DEFAULT_RECOMMENDATION_TYPE,
            avod_svod=DEFAULT_MONETIZATION,
            status=CarouselStatus.DRAFT,
            pinned=False,
            variants=[variant],
        )

    def promote(self, candidate: CandidateCarousel, route: RouteNode | None) -> Carousel | None:
        """
        Hand a draft for ``candidate`` to the store.

        Returns:
            The persisted carousel, or None when no target route is selected
        """
        if route is None:
            logger.warning(f"Rejected promotion of '{candidate.title}': no target route selected")
            return None

        carousel = self.store.create_carousel(self.build_draft(candidate), route)
        logger.info(f"Promoted '{candidate.title}' to route {route.id} as draft {carousel.id}")
        return carousel
