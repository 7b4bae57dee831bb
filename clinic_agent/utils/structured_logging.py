"""Structured logging utilities for the receptionist agent.

Event fields go into ``extra`` so a JSON formatter can pick them up.
Utterance text and profile data are always passed through the PHI redactor.
"""
import logging
from typing import Any, Optional

from clinic_agent.config.constants import LoggingConfig
from clinic_agent.core.models import ConversationStep, FaqTopic, PatientProfile, Speaker
from clinic_agent.utils.phi_redactor import get_phi_redactor


def log_session_event(
    logger: logging.Logger,
    event: str,
    session_id: str,
    level: int = logging.INFO,
    **extra_fields: Any
) -> None:
    """Log a session lifecycle event.

    Args:
        logger: Logger instance to use
        event: Event name (e.g., "session_created", "session_reset")
        session_id: Session identifier
        level: Log level
        **extra_fields: Additional fields to include in the log
    """
    logger.log(
        level,
        event,
        extra={
            "event": event,
            "session_id": session_id,
            **extra_fields
        }
    )


def log_turn(
    logger: logging.Logger,
    session_id: str,
    step: ConversationStep,
    next_step: ConversationStep,
    consumed: bool,
    profile: PatientProfile,
    faq_topic: Optional[FaqTopic] = None,
    level: int = logging.INFO,
) -> None:
    """Log the outcome of one dialogue turn with the profile redacted."""
    redactor = get_phi_redactor()
    logger.log(
        level,
        f"turn {step.value} -> {next_step.value} (consumed={consumed})",
        extra={
            "event": "turn_processed",
            "session_id": session_id,
            "step": step.value,
            "next_step": next_step.value,
            "consumed": consumed,
            "faq_topic": faq_topic.value if faq_topic else None,
            "profile": redactor.redact_dict(profile.model_dump()),
        }
    )


def log_utterance(
    logger: logging.Logger,
    text: str,
    session_id: str,
    speaker: Speaker = Speaker.PATIENT,
    redact_phi: bool = True,
    level: int = logging.DEBUG,
) -> None:
    """Log an utterance with automatic PHI redaction.

    Args:
        logger: Logger instance to use
        text: Utterance text
        session_id: Session identifier
        speaker: Who said it
        redact_phi: Whether to redact PHI (default: True)
        level: Log level
    """
    if redact_phi:
        text = get_phi_redactor().redact(text, redact_level="partial")

    logger.log(
        level,
        "utterance_received",
        extra={
            "event": "utterance",
            "session_id": session_id,
            "speaker": speaker.value,
            "text": text[:LoggingConfig.MAX_LOG_TEXT_LENGTH],
        }
    )
