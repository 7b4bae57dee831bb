"""Dialogue engine for the intake call.

Functional core: each turn takes (utterance, step, profile) by value and
returns the replies plus the new (step, profile). Nothing is stored between
turns; the session manager owns the transcript and the current snapshot.
"""
from typing import Dict, List, Optional, Tuple, Union

from clinic_agent.config.prompts import (
    DEFAULT_NAME,
    GREETING_PROMPT,
    QUICK_REPLIES,
    STEP_PROMPTS,
)
from clinic_agent.core.models import (
    ClinicProfile,
    ConversationStep,
    PatientProfile,
    StepOutcome,
    TurnResult,
)
from clinic_agent.handlers.intake_handler import IntakeHandler
from clinic_agent.handlers.scheduling_handler import SchedulingHandler
from clinic_agent.services.faq_service import FaqService

StepHandler = Union[IntakeHandler, SchedulingHandler]


class DialogueEngine:
    """Runs one caller utterance through the FAQ matcher and the step handler."""

    def __init__(self, clinic: Optional[ClinicProfile] = None):
        if clinic is None:
            from clinic_agent.config.settings import get_settings
            clinic = get_settings().clinic_profile()

        self.clinic = clinic
        self.faq_service = FaqService(clinic)

        intake = IntakeHandler()
        scheduling = SchedulingHandler(clinic)
        self._handlers: Dict[ConversationStep, StepHandler] = {}
        for handler in (intake, scheduling):
            for step in handler.STEPS:
                self._handlers[step] = handler

    @staticmethod
    def initial_state() -> Tuple[ConversationStep, PatientProfile]:
        """Fresh (step, profile) pair for a new or reset session."""
        return ConversationStep.ASK_NAME, PatientProfile()

    def greeting(self) -> str:
        """Opening line of every call."""
        return GREETING_PROMPT.format(clinic=self.clinic.name)

    @staticmethod
    def prompt_for(step: ConversationStep, profile: PatientProfile) -> str:
        """Question to ask while waiting on ``step``."""
        return STEP_PROMPTS[step.value].format(name=profile.name or DEFAULT_NAME)

    @staticmethod
    def quick_replies(step: ConversationStep) -> List[str]:
        """Suggested shortcut utterances for the caller."""
        key = "completed" if step == ConversationStep.COMPLETED else "intake"
        return list(QUICK_REPLIES[key])

    def advance(
        self,
        user_input: str,
        step: ConversationStep,
        profile: PatientProfile,
    ) -> StepOutcome:
        """Run the handler for the active step."""
        return self._handlers[step].process_input(user_input, step, profile)

    def handle_turn(
        self,
        user_input: str,
        step: ConversationStep,
        profile: PatientProfile,
    ) -> TurnResult:
        """Process one utterance end to end.

        Reply order: FAQ answer (if any), then the current step's prompt when
        the utterance did not also satisfy the step, then the step handler's
        own replies. When an FAQ matched and the step was not satisfied the
        caller therefore hears the prompt and the handler's re-ask back to back.
        """
        topic = self.faq_service.classify(user_input)
        outcome = self.advance(user_input, step, profile)

        replies: List[str] = []
        if topic is not None:
            replies.append(self.faq_service.answer_for(topic))
            if not outcome.consumed:
                replies.append(self.prompt_for(step, profile))
        replies.extend(outcome.replies)

        return TurnResult(
            replies=replies,
            next_step=outcome.next_step,
            profile=outcome.profile,
            consumed=outcome.consumed,
            faq_topic=topic,
        )
