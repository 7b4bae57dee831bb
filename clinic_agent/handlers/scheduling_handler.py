"""Handler for appointment slot selection and post-booking changes."""
from clinic_agent.config.phrases import RESCHEDULE_PATTERN
from clinic_agent.config.prompts import (
    BOOKING_PROMPTS,
    DEFAULT_ISSUE,
    DEFAULT_NAME,
    IDLE_PROMPT,
    REASK_PROMPTS,
    RESCHEDULE_PROMPTS,
    RESCHEDULE_REQUEST_PROMPT,
)
from clinic_agent.core.models import (
    ClinicProfile,
    ConversationStep,
    PatientProfile,
    StepOutcome,
    step_after,
)
from clinic_agent.core.validators import FieldExtractor
from clinic_agent.utils.logger import get_logger

logger = get_logger(__name__)


class SchedulingHandler:
    """Handles the askTime step and the completed (reschedule) step."""

    STEPS = (
        ConversationStep.ASK_TIME,
        ConversationStep.COMPLETED,
    )

    def __init__(self, clinic: ClinicProfile):
        self.clinic = clinic

    def process_input(
        self,
        user_input: str,
        step: ConversationStep,
        profile: PatientProfile,
    ) -> StepOutcome:
        """Process scheduling-related input."""

        if step == ConversationStep.ASK_TIME:
            return self._handle_slot_selection(user_input, profile)
        elif step == ConversationStep.COMPLETED:
            return self._handle_follow_up(user_input, profile)
        raise ValueError(f"SchedulingHandler cannot handle step {step.value}")

    def _format(self, template: str, profile: PatientProfile) -> str:
        return template.format(
            name=profile.name or DEFAULT_NAME,
            slot=profile.slot,
            issue=profile.issue or DEFAULT_ISSUE,
            doctor=self.clinic.doctor,
        )

    def _handle_slot_selection(self, user_input: str, profile: PatientProfile) -> StepOutcome:
        """Capture the preferred slot and confirm the booking."""

        slot = FieldExtractor.sanitize_slot(user_input)
        if not slot:
            return StepOutcome(
                replies=[REASK_PROMPTS["askTime"]],
                next_step=ConversationStep.ASK_TIME,
                profile=profile,
            )

        updated = profile.model_copy(update={"slot": slot})
        logger.info("Appointment slot captured, booking confirmed")
        return StepOutcome(
            replies=[self._format(template, updated) for template in BOOKING_PROMPTS],
            next_step=step_after(ConversationStep.ASK_TIME),
            profile=updated,
            consumed=True,
        )

    def _handle_follow_up(self, user_input: str, profile: PatientProfile) -> StepOutcome:
        """Handle input after the booking is confirmed."""

        # A parsable slot is a silent reschedule
        new_slot = FieldExtractor.sanitize_slot(user_input)
        if new_slot:
            updated = profile.model_copy(update={"slot": new_slot})
            logger.info("Confirmed appointment moved to a new slot")
            return StepOutcome(
                replies=[self._format(template, updated) for template in RESCHEDULE_PROMPTS],
                next_step=ConversationStep.COMPLETED,
                profile=updated,
                consumed=True,
            )

        # Wants a change but gave no slot yet
        if RESCHEDULE_PATTERN.search(user_input):
            return StepOutcome(
                replies=[RESCHEDULE_REQUEST_PROMPT],
                next_step=ConversationStep.ASK_TIME,
                profile=profile,
            )

        return StepOutcome(
            replies=[IDLE_PROMPT],
            next_step=ConversationStep.COMPLETED,
            profile=profile,
        )
