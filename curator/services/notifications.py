from collections.abc import Callable

from loguru import logger

from curator.models.activity import ActionKind
from curator.models.content import ContentItem

InteractionSink = Callable[[str], None]

# Share is logged but not acknowledged
ACKNOWLEDGED_ACTIONS = frozenset({ActionKind.LIKE, ActionKind.PLAY, ActionKind.DOWNLOAD})


def interaction_message(content: ContentItem) -> str:
    return f"'{content.title}' interaction logged for recommendations."


def notify_interaction(sink: InteractionSink | None, content: ContentItem, action: ActionKind) -> None:
    """
    Fire-and-forget acknowledgement of a logged interaction.

    Sink failures are logged and never retried.
    """
    if sink is None or action not in ACKNOWLEDGED_ACTIONS:
        return
    try:
        sink(interaction_message(content))
    except Exception as exc:
        logger.warning(f"Interaction notification failed for '{content.title}': {exc}")


class NotificationBuffer:
    """Keeps the most recent acknowledgements, e.g. for toasts in a UI."""

    def __init__(self, limit: int = 5):
        self.limit = limit
        self.messages: list[str] = []

    def __call__(self, message: str) -> None:
        self.messages = [*self.messages, message][-self.limit :]

    def drain(self) -> list[str]:
        messages, self.messages = self.messages, []
        return messages
