from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from pydantic import BaseModel, Field, model_validator

from curator.api.deps import get_catalog, get_registry, get_session, get_store
from curator.models.activity import ActionKind, ActionLogEntry
from curator.models.carousel import Carousel
from curator.models.preview import PreviewProfile
from curator.services.carousel_store import CarouselStore
from curator.services.catalog import ContentCatalog
from curator.services.notifications import NotificationBuffer
from curator.services.recommendation import CandidateCarousel
from curator.services.session import PreviewSession, SessionRegistry

router = APIRouter(prefix="/sessions", tags=["sessions"])


class SessionRequest(BaseModel):
    profile: PreviewProfile
    page_id: str | None = Field(default=None, description="Route node the session previews")


class SessionResponse(BaseModel):
    session_id: str
    profile: PreviewProfile
    page_id: str | None = None


class ActionRequest(BaseModel):
    content_id: str | None = Field(default=None, description="Catalog id of the item acted on")
    content_title: str | None = Field(default=None, description="Title, used when no id is given")
    action: ActionKind
    detail: str | None = Field(default=None, description="Completion bucket for play, e.g. '>85%'")

    @model_validator(mode="after")
    def require_reference(self) -> "ActionRequest":
        if not (self.content_id or self.content_title):
            raise ValueError("Provide content_id or content_title.")
        return self


class ActionResponse(BaseModel):
    revision: int
    entry: ActionLogEntry
    interests: dict[str, float]
    notifications: list[str] = Field(default_factory=list)


class InterestWeight(BaseModel):
    key: str  # dimension:value
    weight: float


@router.post("", response_model=SessionResponse)
async def create_session(
    payload: SessionRequest,
    registry: SessionRegistry = Depends(get_registry),
    store: CarouselStore = Depends(get_store),
) -> SessionResponse:
    page = None
    if payload.page_id:
        page = store.find_route(payload.page_id)
        if page is None:
            raise HTTPException(status_code=404, detail="Unknown route.")

    session = registry.create(payload.profile, page, on_interaction_logged=NotificationBuffer())
    return SessionResponse(session_id=session.id, profile=payload.profile, page_id=payload.page_id)


@router.post("/{session_id}/actions", response_model=ActionResponse)
async def record_action(
    payload: ActionRequest,
    session: PreviewSession = Depends(get_session),
    catalog: ContentCatalog = Depends(get_catalog),
) -> ActionResponse:
    content = catalog.find(content_id=payload.content_id, title=payload.content_title)
    if content is None:
        raise HTTPException(status_code=404, detail="Unknown content item.")

    snapshot = session.record_action(content, payload.action, payload.detail)

    sink = session.on_interaction_logged
    notifications = sink.drain() if isinstance(sink, NotificationBuffer) else []
    return ActionResponse(
        revision=snapshot.revision,
        entry=snapshot.log.entries[0],
        interests=snapshot.profile.as_dict(),
        notifications=notifications,
    )


@router.get("/{session_id}/log", response_model=list[ActionLogEntry])
async def action_log(session: PreviewSession = Depends(get_session)):
    return list(session.log.entries)


@router.get("/{session_id}/interests", response_model=list[InterestWeight])
async def interests(limit: int | None = None, session: PreviewSession = Depends(get_session)):
    return [InterestWeight(key=str(key), weight=weight) for key, weight in session.interest_summary(limit)]


@router.get("/{session_id}/recommendations", response_model=list[CandidateCarousel])
async def recommendations(session: PreviewSession = Depends(get_session)):
    return session.recommendations()


@router.post("/{session_id}/recommendations/{candidate_id}/promote", response_model=Carousel)
async def promote_candidate(candidate_id: str, session: PreviewSession = Depends(get_session)):
    if session.page is None:
        raise HTTPException(status_code=409, detail="Select a page before promoting a carousel.")

    candidate = session.find_candidate(candidate_id)
    if candidate is None:
        raise HTTPException(status_code=404, detail="Unknown candidate carousel.")

    carousel = session.promote(candidate)
    if carousel is None:
        logger.warning(f"[{session.id}] Promotion of {candidate_id} produced no carousel")
        raise HTTPException(status_code=409, detail="Promotion was rejected.")
    return carousel
