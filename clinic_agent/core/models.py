"""Data models for the clinic receptionist agent."""
from typing import Optional, List
from datetime import datetime, timezone
from uuid import uuid4
from pydantic import BaseModel, ConfigDict, Field
from enum import Enum


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ConversationStep(str, Enum):
    """Steps of the intake call, in the order they are visited."""
    ASK_NAME = "askName"
    ASK_AGE = "askAge"
    ASK_ISSUE = "askIssue"
    ASK_TIME = "askTime"
    COMPLETED = "completed"


STEP_ORDER = (
    ConversationStep.ASK_NAME,
    ConversationStep.ASK_AGE,
    ConversationStep.ASK_ISSUE,
    ConversationStep.ASK_TIME,
    ConversationStep.COMPLETED,
)


def step_after(step: ConversationStep) -> ConversationStep:
    """Next step in the linear intake order. ``completed`` maps to itself."""
    index = STEP_ORDER.index(step)
    return STEP_ORDER[min(index + 1, len(STEP_ORDER) - 1)]


class Speaker(str, Enum):
    """Who produced an utterance."""
    AGENT = "agent"
    PATIENT = "patient"


class FaqTopic(str, Enum):
    """Out-of-sequence questions the agent can answer."""
    SERVICES = "services"
    HOURS = "hours"
    DOCTOR = "doctor"
    FEES = "fees"
    ADDRESS = "address"


class ClinicProfile(BaseModel):
    """Static clinic details quoted in replies."""
    model_config = ConfigDict(frozen=True)

    name: str
    doctor: str
    specialization: str
    services: str
    working_hours: str
    consultation_fee: str


class PatientProfile(BaseModel):
    """Fields collected from the caller.

    Frozen: every turn produces a new profile via ``model_copy``.
    """
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    age: Optional[int] = Field(None, ge=1, le=120)
    issue: Optional[str] = None
    slot: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return None not in (self.name, self.age, self.issue, self.slot)


class Message(BaseModel):
    """One utterance in the transcript."""
    model_config = ConfigDict(frozen=True)

    id: str
    speaker: Speaker
    text: str
    created_at: datetime = Field(default_factory=_utcnow)

    @classmethod
    def create(cls, speaker: Speaker, text: str) -> "Message":
        """Create a message with a fresh identifier."""
        return cls(id=f"{speaker.value}-{uuid4()}", speaker=speaker, text=text)


class StepOutcome(BaseModel):
    """Result of running the handler for the active step."""
    replies: List[str] = Field(default_factory=list)
    next_step: ConversationStep
    profile: PatientProfile
    consumed: bool = False


class TurnResult(StepOutcome):
    """Step outcome merged with any FAQ answer for the same utterance."""
    faq_topic: Optional[FaqTopic] = None


class ConversationSession(BaseModel):
    """Session state owned by the session manager."""
    session_id: str
    step: ConversationStep = ConversationStep.ASK_NAME
    profile: PatientProfile = Field(default_factory=PatientProfile)
    transcript: List[Message] = Field(default_factory=list)
    turn_count: int = 0
    started_at: datetime = Field(default_factory=_utcnow)

    def add_message(self, speaker: Speaker, text: str) -> Message:
        """Append an utterance to the transcript."""
        message = Message.create(speaker, text)
        self.transcript.append(message)
        return message


class AppliedTurn(BaseModel):
    """Messages appended by one utterance and the snapshot they produced."""
    messages: List[Message] = Field(default_factory=list)
    step: ConversationStep
    profile: PatientProfile
