"""Health check endpoints."""
from typing import Dict, Any
from datetime import datetime, timezone

from fastapi import APIRouter

from clinic_agent.config.settings import get_settings
from clinic_agent.core.session_manager import session_manager

router = APIRouter()


@router.get("/health")
async def health() -> Dict[str, Any]:
    """Service health with session store status.

    The receptionist has no external dependencies, so the service is healthy
    whenever it can answer.
    """
    settings = get_settings()
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.app_env,
        "clinic": settings.clinic_name,
        "active_sessions": session_manager.active_session_count,
    }


@router.get("/health/live")
async def liveness() -> Dict[str, str]:
    """Kubernetes liveness probe."""
    return {"status": "alive"}
