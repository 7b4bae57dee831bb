"""Canned answers for questions asked out of sequence."""
from typing import Optional

from clinic_agent.config.phrases import FAQ_TOPIC_PATTERNS
from clinic_agent.config.prompts import FAQ_ANSWERS
from clinic_agent.core.models import ClinicProfile, FaqTopic


class FaqService:
    """Matches caller questions about the clinic to a fixed set of answers."""

    def __init__(self, clinic: ClinicProfile):
        self.clinic = clinic

    def classify(self, text: str) -> Optional[FaqTopic]:
        """Return the first topic (in priority order) the text mentions."""
        lowered = text.lower()
        for topic, pattern in FAQ_TOPIC_PATTERNS:
            if pattern.search(lowered):
                return topic
        return None

    def answer_for(self, topic: FaqTopic) -> str:
        """Render the answer template for a topic."""
        return FAQ_ANSWERS[topic.value].format(
            clinic=self.clinic.name,
            services=self.clinic.services,
            hours=self.clinic.working_hours,
            doctor=self.clinic.doctor,
            specialization=self.clinic.specialization,
            fee=self.clinic.consultation_fee,
        )

    def answer(self, text: str) -> Optional[str]:
        """Answer the question in ``text``, or None if it is not an FAQ."""
        topic = self.classify(text)
        if topic is None:
            return None
        return self.answer_for(topic)
