"""Prometheus metrics for the receptionist agent.

Metrics Categories:
- Session Metrics: Track session lifecycle
- Dialogue Metrics: Track step progression, re-asks and FAQ answers
- Business Metrics: Track bookings
"""

from prometheus_client import Counter, Histogram, Gauge, Info
from clinic_agent.config.constants import MetricsConfig

# =============================================================================
# Application Info
# =============================================================================

app_info = Info('receptionist_app', 'Receptionist agent application information')
app_info.info({
    'version': '1.0.0',
    'description': 'Clinic intake receptionist agent'
})

# =============================================================================
# Session Metrics
# =============================================================================

active_sessions = Gauge(
    'receptionist_active_sessions',
    'Number of sessions currently held in memory'
)

sessions_created = Counter(
    'receptionist_sessions_created_total',
    'Total number of sessions started'
)

sessions_reset = Counter(
    'receptionist_sessions_reset_total',
    'Total number of sessions reset to the first step'
)

# =============================================================================
# Dialogue Metrics
# =============================================================================

turns_processed = Counter(
    'receptionist_turns_total',
    'Total utterances processed',
    ['step']  # askName, askAge, askIssue, askTime, completed
)

reasks = Counter(
    'receptionist_reasks_total',
    'Utterances that did not satisfy the active step',
    ['step']
)

faq_answers = Counter(
    'receptionist_faq_answers_total',
    'FAQ answers given',
    ['topic']  # services, hours, doctor, fees, address
)

turn_processing_time = Histogram(
    'receptionist_turn_processing_seconds',
    'Time spent in the dialogue engine per utterance',
    buckets=MetricsConfig.LATENCY_BUCKETS
)

# =============================================================================
# Business Logic Metrics
# =============================================================================

appointments = Counter(
    'receptionist_appointments_total',
    'Appointment bookings',
    ['kind']  # booked, rescheduled
)

turns_to_booking = Histogram(
    'receptionist_turns_to_booking',
    'Utterances needed to reach a confirmed booking',
    buckets=MetricsConfig.TURN_COUNT_BUCKETS
)

# =============================================================================
# Helper Functions
# =============================================================================

def track_turn(step: str, consumed: bool, faq_topic: str = None, duration: float = 0.0) -> None:
    """Record one processed utterance.

    Args:
        step: Step that was active when the utterance arrived
        consumed: Whether the utterance satisfied the step
        faq_topic: FAQ topic answered in the same turn, if any
        duration: Engine processing time in seconds
    """
    turns_processed.labels(step=step).inc()
    if not consumed:
        reasks.labels(step=step).inc()
    if faq_topic:
        faq_answers.labels(topic=faq_topic).inc()
    turn_processing_time.observe(duration)


def track_booking(rescheduled: bool, turn_count: int) -> None:
    """Record a confirmed or moved appointment.

    Args:
        rescheduled: True when an existing booking got a new slot
        turn_count: Utterances processed in the session so far
    """
    appointments.labels(kind='rescheduled' if rescheduled else 'booked').inc()
    if not rescheduled:
        turns_to_booking.observe(turn_count)
