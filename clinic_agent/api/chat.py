"""Chat endpoints that drive a receptionist session over HTTP."""
from typing import List, Optional

from fastapi import HTTPException
from pydantic import BaseModel, Field

from clinic_agent.core.dialogue_engine import DialogueEngine
from clinic_agent.core.models import (
    ConversationSession,
    ConversationStep,
    Message,
    PatientProfile,
)
from clinic_agent.core.session_manager import session_manager
from clinic_agent.utils.logger import get_logger

logger = get_logger(__name__)


class CreateSessionRequest(BaseModel):
    """Optional client-chosen session id."""
    session_id: Optional[str] = Field(default=None, min_length=1, max_length=64)


class MessageRequest(BaseModel):
    """One caller utterance."""
    message: str = Field(max_length=1000)


class SessionView(BaseModel):
    """Snapshot of a session returned to the client."""
    session_id: str
    step: ConversationStep
    profile: PatientProfile
    transcript: List[Message]
    quick_replies: List[str]


class TurnView(BaseModel):
    """Messages appended by one utterance plus the new snapshot."""
    session_id: str
    messages: List[Message]
    step: ConversationStep
    profile: PatientProfile
    quick_replies: List[str]


def _session_view(session: ConversationSession) -> SessionView:
    return SessionView(
        session_id=session.session_id,
        step=session.step,
        profile=session.profile,
        transcript=list(session.transcript),
        quick_replies=DialogueEngine.quick_replies(session.step),
    )


def _not_found(session_id: str) -> HTTPException:
    logger.warning(f"Unknown session requested: {session_id}")
    return HTTPException(status_code=404, detail="Unknown session")


async def handle_create_session(payload: Optional[CreateSessionRequest] = None) -> SessionView:
    """Start a new call."""
    session_id = payload.session_id if payload else None
    session = await session_manager.create_session(session_id)
    if session is None:
        raise HTTPException(status_code=409, detail="Session already exists")
    return _session_view(session)


async def handle_get_session(session_id: str) -> SessionView:
    """Return the current transcript and snapshot."""
    session = await session_manager.get_session(session_id)
    if session is None:
        raise _not_found(session_id)
    return _session_view(session)


async def handle_message(session_id: str, payload: MessageRequest) -> TurnView:
    """Apply one caller utterance."""
    applied = await session_manager.handle_utterance(session_id, payload.message)
    if applied is None:
        raise _not_found(session_id)

    return TurnView(
        session_id=session_id,
        messages=applied.messages,
        step=applied.step,
        profile=applied.profile,
        quick_replies=DialogueEngine.quick_replies(applied.step),
    )


async def handle_reset(session_id: str) -> SessionView:
    """Start the call over in the same session."""
    session = await session_manager.reset_session(session_id)
    if session is None:
        raise _not_found(session_id)
    return _session_view(session)


async def handle_delete(session_id: str) -> None:
    """End a session."""
    if await session_manager.get_session(session_id) is None:
        raise _not_found(session_id)
    await session_manager.cleanup_session(session_id)
