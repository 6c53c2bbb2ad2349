from loguru import logger

from curator.models.activity import ActionKind, ActionLog, ActionLogEntry
from curator.models.content import ContentItem
from curator.models.interest import InterestProfile
from curator.services.profile.evidence import EvidenceCalculator


class InterestAccumulator:
    """
    Folds interactions into the interest profile using additive accumulation.

    Design principles:
    - Pure accumulation: weight += increment, no decay, no normalization
    - Same increment to every tag of an item
    - Never mutates its inputs; callers publish the returned pair
    """

    def __init__(self, evidence_calculator: EvidenceCalculator | None = None):
        self.evidence_calculator = evidence_calculator or EvidenceCalculator()

    def record_action(
        self,
        profile: InterestProfile,
        log: ActionLog,
        content: ContentItem,
        action: ActionKind | str,
        detail: str | None = None,
    ) -> tuple[InterestProfile, ActionLog]:
        """
        Apply one interaction.

        Zero-increment interactions still create their tag entries at weight
        zero. An action outside ``ActionKind`` is ignored and both inputs are
        returned unchanged.

        Args:
            profile: Current interest profile
            log: Current action log
            content: Item the viewer acted on
            action: Interaction kind
            detail: Completion bucket for play actions

        Returns:
            Tuple of (new profile, new log)
        """
        try:
            action = ActionKind(action)
        except ValueError:
            logger.warning(f"Ignoring unrecognized action '{action}' on '{content.title}'")
            return profile, log

        increment = self.evidence_calculator.get_increment(action, detail)

        entry = ActionLogEntry(
            action=action,
            content_title=content.title,
            content_id=content.id,
            detail=detail,
        )
        new_log = log.record(entry)

        if increment <= 0:
            logger.debug(f"{action.value} on '{content.title}' logged without weight")

        new_profile = profile.add(content.tag_pairs(), increment)
        return new_profile, new_log
