"""In-memory session manager for receptionist conversations."""
from typing import Dict, Optional
from uuid import uuid4
import asyncio
import time

from clinic_agent.core.dialogue_engine import DialogueEngine
from clinic_agent.core.models import (
    AppliedTurn,
    ConversationSession,
    ConversationStep,
    Speaker,
)
from clinic_agent.utils import metrics
from clinic_agent.utils.logger import get_logger
from clinic_agent.utils.structured_logging import log_session_event, log_turn, log_utterance

logger = get_logger(__name__)


class InMemorySessionManager:
    """Holds every live session and applies utterances one at a time.

    Stores sessions in a Python dictionary:
    - State is lost on restart
    - Cannot scale horizontally

    The dialogue engine is pure; this class is the only owner of mutable
    conversation state. All updates happen under a single lock, after the
    engine call returns.
    """

    def __init__(self, engine: Optional[DialogueEngine] = None):
        self.engine = engine or DialogueEngine()
        self._sessions: Dict[str, ConversationSession] = {}
        self._lock = asyncio.Lock()

    @property
    def active_session_count(self) -> int:
        return len(self._sessions)

    def _new_session(self, session_id: str) -> ConversationSession:
        step, profile = self.engine.initial_state()
        session = ConversationSession(session_id=session_id, step=step, profile=profile)
        session.add_message(Speaker.AGENT, self.engine.greeting())
        return session

    async def create_session(self, session_id: Optional[str] = None) -> Optional[ConversationSession]:
        """Create a new session seeded with the greeting.

        Returns None if ``session_id`` already belongs to a live session;
        only ``reset_session`` may start an existing call over.
        """
        async with self._lock:
            session_id = session_id or uuid4().hex
            if session_id in self._sessions:
                logger.warning(f"Session id already in use: {session_id}")
                return None

            session = self._new_session(session_id)
            self._sessions[session_id] = session
            metrics.sessions_created.inc()
            metrics.active_sessions.set(len(self._sessions))
            log_session_event(logger, "session_created", session_id)
            return session

    async def get_session(self, session_id: str) -> Optional[ConversationSession]:
        """Get a session by id."""
        async with self._lock:
            return self._sessions.get(session_id)

    async def handle_utterance(self, session_id: str, text: str) -> Optional[AppliedTurn]:
        """Apply one caller utterance.

        Returns the messages appended to the transcript (the caller's own
        message first, then the agent replies) together with the step and
        profile they left behind, or None if the session does not exist.
        Blank input appends nothing.
        """
        async with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None

            cleaned = text.strip()
            if not cleaned:
                return AppliedTurn(step=session.step, profile=session.profile)

            log_utterance(logger, cleaned, session_id)

            step = session.step
            started = time.perf_counter()
            result = self.engine.handle_turn(cleaned, step, session.profile)
            duration = time.perf_counter() - started

            appended = [session.add_message(Speaker.PATIENT, cleaned)]
            session.step = result.next_step
            session.profile = result.profile
            session.turn_count += 1
            appended.extend(session.add_message(Speaker.AGENT, reply) for reply in result.replies)

            metrics.track_turn(
                step.value,
                result.consumed,
                result.faq_topic.value if result.faq_topic else None,
                duration,
            )
            if result.consumed and result.profile.is_complete:
                metrics.track_booking(
                    rescheduled=step == ConversationStep.COMPLETED,
                    turn_count=session.turn_count,
                )
            log_turn(
                logger,
                session_id,
                step,
                result.next_step,
                result.consumed,
                result.profile,
                result.faq_topic,
            )
            return AppliedTurn(messages=appended, step=session.step, profile=session.profile)

    async def reset_session(self, session_id: str) -> Optional[ConversationSession]:
        """Discard step, profile and transcript and start the call over."""
        async with self._lock:
            if session_id not in self._sessions:
                return None
            session = self._new_session(session_id)
            self._sessions[session_id] = session
            metrics.sessions_reset.inc()
            log_session_event(logger, "session_reset", session_id)
            return session

    async def cleanup_session(self, session_id: str) -> None:
        """Remove a session."""
        async with self._lock:
            if session_id in self._sessions:
                del self._sessions[session_id]
                metrics.active_sessions.set(len(self._sessions))
                log_session_event(logger, "session_closed", session_id)

    async def clear(self) -> None:
        """Remove every session."""
        async with self._lock:
            self._sessions.clear()
            metrics.active_sessions.set(0)


# Process-wide session store
session_manager = InMemorySessionManager()
