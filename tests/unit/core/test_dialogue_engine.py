"""Unit tests for the dialogue engine."""
import pytest
from clinic_agent.config.prompts import REASK_PROMPTS, RESCHEDULE_REQUEST_PROMPT
from clinic_agent.core.dialogue_engine import DialogueEngine
from clinic_agent.core.models import ConversationStep, FaqTopic, PatientProfile


@pytest.mark.unit
class TestDialogueEngine:
    """Test step progression, FAQ interception and prompts."""

    def test_initial_state(self):
        """Test a new call starts on askName with an empty profile."""
        step, profile = DialogueEngine.initial_state()
        assert step == ConversationStep.ASK_NAME
        assert profile == PatientProfile()

    def test_full_intake_sequence(self, engine):
        """Test valid answers visit every step once and fill the profile."""
        step, profile = DialogueEngine.initial_state()
        visited = [step]

        for utterance in [
            "Mera naam Rahul Verma hai",
            "Meri umar 32 hai",
            "Mujhe bal girne ki problem hai",
            "Kal dopahar 3 baje",
        ]:
            result = engine.handle_turn(utterance, step, profile)
            assert result.consumed is True
            step, profile = result.next_step, result.profile
            visited.append(step)

        assert visited == [
            ConversationStep.ASK_NAME,
            ConversationStep.ASK_AGE,
            ConversationStep.ASK_ISSUE,
            ConversationStep.ASK_TIME,
            ConversationStep.COMPLETED,
        ]
        assert profile == PatientProfile(
            name="Rahul Verma",
            age=32,
            issue="bal girne ki problem hai",
            slot="Kal dopahar 3 baje",
        )
        assert profile.is_complete

    @pytest.mark.parametrize("step, profile, utterance", [
        (ConversationStep.ASK_NAME, PatientProfile(), "   "),
        (ConversationStep.ASK_AGE, PatientProfile(name="Rahul Verma"), "pata nahi"),
        (ConversationStep.ASK_ISSUE, PatientProfile(name="Rahul Verma", age=32), "mujhe "),
        (ConversationStep.ASK_TIME, PatientProfile(name="Rahul Verma", age=32, issue="dard"), "I am fine"),
    ])
    def test_invalid_input_changes_nothing(self, engine, step, profile, utterance):
        """Test an unusable answer keeps step and profile as they were."""
        result = engine.handle_turn(utterance, step, profile)

        assert result.consumed is False
        assert result.next_step == step
        assert result.profile == profile
        assert result.replies == [REASK_PROMPTS[step.value]]

    def test_faq_during_unsatisfied_step(self, engine, clinic, empty_profile):
        """Test FAQ answer, repeated prompt and re-ask come in that order."""
        result = engine.handle_turn(
            "Consultation ka charge kitna hai, pehle yeh bataiye please ji",
            ConversationStep.ASK_NAME,
            empty_profile,
        )

        assert result.faq_topic == FaqTopic.FEES
        assert result.consumed is False
        assert result.next_step == ConversationStep.ASK_NAME
        assert result.replies == [
            engine.faq_service.answer_for(FaqTopic.FEES),
            engine.prompt_for(ConversationStep.ASK_NAME, empty_profile),
            REASK_PROMPTS["askName"],
        ]
        assert clinic.consultation_fee in result.replies[0]

    def test_faq_during_satisfied_step(self, engine):
        """Test no repeated prompt when the same utterance also answers the step."""
        profile = PatientProfile(name="Rahul Verma", age=32)
        result = engine.handle_turn(
            "Mujhe bal girne ki problem hai", ConversationStep.ASK_ISSUE, profile
        )

        assert result.faq_topic == FaqTopic.SERVICES
        assert result.consumed is True
        assert result.next_step == ConversationStep.ASK_TIME
        assert len(result.replies) == 2
        assert result.replies[0] == engine.faq_service.answer_for(FaqTopic.SERVICES)

    def test_no_faq(self, engine, empty_profile):
        """Test a plain answer only gets the step reply."""
        result = engine.handle_turn("Mera naam Rahul Verma hai", ConversationStep.ASK_NAME, empty_profile)
        assert result.faq_topic is None
        assert len(result.replies) == 1

    def test_reschedule_with_new_slot(self, engine, booked_profile):
        """Test a new day/time after booking updates the slot and stays completed."""
        result = engine.handle_turn(
            "Mangalvaar shaam 6 baje", ConversationStep.COMPLETED, booked_profile
        )

        assert result.next_step == ConversationStep.COMPLETED
        assert result.profile.slot == "Mangalvaar shaam 6 baje"
        assert result.consumed is True

    def test_reschedule_without_slot(self, engine, booked_profile):
        """Test a change request goes back to askTime."""
        result = engine.handle_turn(
            "mujhe time change karna hai", ConversationStep.COMPLETED, booked_profile
        )

        assert result.next_step == ConversationStep.ASK_TIME
        assert result.profile == booked_profile
        assert result.consumed is False
        # "time" also matches the hours FAQ
        assert result.faq_topic == FaqTopic.HOURS
        assert result.replies[-1] == RESCHEDULE_REQUEST_PROMPT

    def test_prompt_for_personalizes_age_question(self, engine):
        """Test the age prompt uses the known name."""
        assert engine.prompt_for(ConversationStep.ASK_AGE, PatientProfile(name="Rahul")) == (
            "Rahul ji, aapki umar kitni hai ji?"
        )
        assert engine.prompt_for(ConversationStep.ASK_AGE, PatientProfile()).startswith("Aap ji")

    def test_prompt_for_every_step(self, engine, empty_profile):
        """Test each step has a prompt."""
        for step in ConversationStep:
            assert engine.prompt_for(step, empty_profile)

    def test_greeting_names_clinic(self, engine, clinic):
        """Test the opening line names the clinic and asks for the name."""
        greeting = engine.greeting()
        assert clinic.name in greeting
        assert "naam" in greeting

    def test_quick_replies(self):
        """Test shortcut sets switch after booking."""
        intake = DialogueEngine.quick_replies(ConversationStep.ASK_AGE)
        completed = DialogueEngine.quick_replies(ConversationStep.COMPLETED)
        assert "Meri umar 32 hai." in intake
        assert "Mujhe dusra time chahiye." in completed

    def test_default_clinic_from_settings(self):
        """Test the engine falls back to the configured clinic."""
        from clinic_agent.config.settings import get_settings

        engine = DialogueEngine()
        assert engine.clinic == get_settings().clinic_profile()
