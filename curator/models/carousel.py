from datetime import date
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


class CarouselStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    DRAFT = "Draft"


class RegionConfig(BaseModel):
    selected_region: str
    included: list[str] = Field(default_factory=list)
    excluded: list[str] = Field(default_factory=list)


class CarouselVariant(BaseModel):
    """One targeting/behaviour option of a carousel, compared in A/B tests."""

    id: str
    weight: int = 100
    editorial_name: str
    carousel_comp_type: str
    packages: list[str] = Field(default_factory=list)
    age: list[str] = Field(default_factory=list)
    device_type: list[str] = Field(default_factory=list)
    region_config: RegionConfig
    recommendation_type: str
    vod_available: bool = True
    allow_previous: bool = True
    remove_previous: bool = False
    episode_order: bool = True
    include_exclude: str = ""
    avod_svod: str = "SVOD"


class ABTestConfig(BaseModel):
    enabled: bool = False
    duration_days: int = 14


class CarouselDraft(BaseModel):
    """
    A carousel creation request.

    The store assigns ``id``, ``position`` and ``modified`` when it persists
    the draft.
    """

    editorial_name: str
    type: str
    items: int = Field(ge=0, description="Number of content items in the carousel")
    platforms: list[str] = Field(default_factory=list)
    recommendation_type: str
    avod_svod: str
    status: CarouselStatus = CarouselStatus.DRAFT
    pinned: bool = False
    variants: list[CarouselVariant] = Field(min_length=1, max_length=4)
    ab_test_config: ABTestConfig | None = None


class Carousel(CarouselDraft):
    """A persisted production carousel."""

    id: str
    position: int = Field(ge=1)
    modified: date


class RouteNode(BaseModel):
    """A node in the navigation tree; pages own carousels, folders group pages."""

    id: str
    type: Literal["folder", "page"]
    name: str
    status: Literal["active", "inactive"] | None = None
    count: int = 0
    parent_id: str | None = None
    children: list["RouteNode"] = Field(default_factory=list)
