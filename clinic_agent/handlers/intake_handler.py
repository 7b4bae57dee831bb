"""Handler for collecting the caller's name, age and complaint."""
from clinic_agent.config.prompts import DEFAULT_NAME, REASK_PROMPTS, TRANSITION_PROMPTS
from clinic_agent.core.models import (
    ConversationStep,
    PatientProfile,
    StepOutcome,
    step_after,
)
from clinic_agent.core.validators import FieldExtractor
from clinic_agent.utils.logger import get_logger

logger = get_logger(__name__)


class IntakeHandler:
    """Handles the askName, askAge and askIssue steps."""

    STEPS = (
        ConversationStep.ASK_NAME,
        ConversationStep.ASK_AGE,
        ConversationStep.ASK_ISSUE,
    )

    def process_input(
        self,
        user_input: str,
        step: ConversationStep,
        profile: PatientProfile,
    ) -> StepOutcome:
        """Process input for one of the intake steps."""

        if step == ConversationStep.ASK_NAME:
            return self._handle_name(user_input, profile)
        elif step == ConversationStep.ASK_AGE:
            return self._handle_age(user_input, profile)
        elif step == ConversationStep.ASK_ISSUE:
            return self._handle_issue(user_input, profile)
        raise ValueError(f"IntakeHandler cannot handle step {step.value}")

    def _reask(self, step: ConversationStep, profile: PatientProfile) -> StepOutcome:
        logger.debug(f"No {step.value} answer found, asking again")
        return StepOutcome(
            replies=[REASK_PROMPTS[step.value]],
            next_step=step,
            profile=profile,
        )

    def _handle_name(self, user_input: str, profile: PatientProfile) -> StepOutcome:
        """Extract the caller's full name."""

        name = FieldExtractor.extract_name(user_input)
        if not name:
            return self._reask(ConversationStep.ASK_NAME, profile)

        return StepOutcome(
            replies=[TRANSITION_PROMPTS["askName"].format(name=name)],
            next_step=step_after(ConversationStep.ASK_NAME),
            profile=profile.model_copy(update={"name": name}),
            consumed=True,
        )

    def _handle_age(self, user_input: str, profile: PatientProfile) -> StepOutcome:
        """Extract the caller's age."""

        age = FieldExtractor.extract_age(user_input)
        if age is None:
            return self._reask(ConversationStep.ASK_AGE, profile)

        updated = profile.model_copy(update={"age": age})
        return StepOutcome(
            replies=[TRANSITION_PROMPTS["askAge"].format(name=updated.name or DEFAULT_NAME)],
            next_step=step_after(ConversationStep.ASK_AGE),
            profile=updated,
            consumed=True,
        )

    def _handle_issue(self, user_input: str, profile: PatientProfile) -> StepOutcome:
        """Capture the presenting complaint."""

        issue = FieldExtractor.sanitize_issue(user_input)
        if not issue:
            return self._reask(ConversationStep.ASK_ISSUE, profile)

        return StepOutcome(
            replies=[TRANSITION_PROMPTS["askIssue"]],
            next_step=step_after(ConversationStep.ASK_ISSUE),
            profile=profile.model_copy(update={"issue": issue}),
            consumed=True,
        )
