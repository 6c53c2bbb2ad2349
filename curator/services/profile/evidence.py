from curator.models.activity import ActionKind
from curator.services.profile.constants import (
    INCREMENT_DOWNLOAD,
    INCREMENT_LIKE,
    INCREMENT_SHARE,
    PLAY_COMPLETION_INCREMENTS,
)


class EvidenceCalculator:
    """
    Maps an interaction to the weight it adds to the interest profile.

    Pure function: no side effects, easy to test.
    """

    @staticmethod
    def get_increment(action: ActionKind | str, detail: str | None = None) -> float:
        """
        Get the profile increment for an interaction.

        Args:
            action: Interaction kind
            detail: Completion bucket, only meaningful for play

        Returns:
            Increment value; zero for anything not in the table
        """
        try:
            action = ActionKind(action)
        except ValueError:
            return 0.0

        if action == ActionKind.LIKE:
            return INCREMENT_LIKE
        if action == ActionKind.DOWNLOAD:
            return INCREMENT_DOWNLOAD
        if action == ActionKind.SHARE:
            return INCREMENT_SHARE
        return PLAY_COMPLETION_INCREMENTS.get(detail or "", 0.0)
