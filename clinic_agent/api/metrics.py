"""Prometheus metrics endpoint.

Exposes application metrics in Prometheus format for scraping.
"""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter()


@router.get("/metrics")
async def metrics() -> Response:
    """Prometheus metrics endpoint.

    Metrics exposed:
        - receptionist_active_sessions: Sessions held in memory
        - receptionist_turns_total: Utterances processed per step
        - receptionist_reasks_total: Utterances that needed a re-ask
        - receptionist_faq_answers_total: FAQ answers per topic
        - receptionist_appointments_total: Bookings and reschedules
        - ... see clinic_agent/utils/metrics.py
    """
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )
