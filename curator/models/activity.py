from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Completion buckets offered for a play action
COMPLETION_BUCKETS: tuple[str, ...] = ("25%", "50%", "75%", ">85%")
NEAR_COMPLETE_BUCKET = ">85%"


class ActionKind(str, Enum):
    PLAY = "play"
    LIKE = "like"
    SHARE = "share"
    DOWNLOAD = "download"


class ActionLogEntry(BaseModel):
    """One simulated viewer interaction."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    action: ActionKind
    content_title: str
    content_id: str | None = None
    detail: str | None = Field(default=None, description="Completion bucket for play actions")

    def describe(self) -> str:
        text = f'{self.action.value} on "{self.content_title}"'
        if self.detail:
            text += f" ({self.detail})"
        return text


class ActionLog(BaseModel):
    """
    Bounded, most-recent-first interaction history.

    Immutable: ``record`` returns a new log and never touches existing entries.
    Once ``capacity`` is exceeded the oldest entries fall off the end.
    """

    model_config = ConfigDict(frozen=True)

    entries: tuple[ActionLogEntry, ...] = ()
    capacity: int = Field(default=100, gt=0)

    def record(self, entry: ActionLogEntry) -> "ActionLog":
        return self.model_copy(update={"entries": (entry, *self.entries)[: self.capacity]})

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def interacted_titles(self) -> set[str]:
        return {entry.content_title for entry in self.entries}

    def distinct_entries(self, action: ActionKind) -> list[ActionLogEntry]:
        """
        First entry per title for one action kind.

        The log is newest-first, so first-seen order is most-recent-first.
        """
        seen: set[str] = set()
        distinct = []
        for entry in self.entries:
            if entry.action != action or entry.content_title in seen:
                continue
            seen.add(entry.content_title)
            distinct.append(entry)
        return distinct

    def high_interest_titles(self) -> set[str]:
        """Titles that were liked or played to near completion."""
        return {
            entry.content_title
            for entry in self.entries
            if entry.action == ActionKind.LIKE
            or (entry.action == ActionKind.PLAY and entry.detail == NEAR_COMPLETE_BUCKET)
        }
