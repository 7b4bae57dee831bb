"""Main entry point for the clinic receptionist agent."""
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from contextlib import asynccontextmanager

from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from clinic_agent.config.settings import get_settings
from clinic_agent.config.constants import RateLimitConfig
from clinic_agent.core.session_manager import session_manager
from clinic_agent.utils.logger import get_logger
from clinic_agent.api.health import router as health_router
from clinic_agent.api.metrics import router as metrics_router
from clinic_agent.api.chat import (
    CreateSessionRequest,
    MessageRequest,
    SessionView,
    TurnView,
    handle_create_session,
    handle_delete,
    handle_get_session,
    handle_message,
    handle_reset,
)

logger = get_logger(__name__)
settings = get_settings()

# Rate limiter - uses remote IP address as key
limiter = Limiter(key_func=get_remote_address)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and drop in-memory sessions on shutdown."""
    logger.info(f"Starting receptionist agent for {settings.clinic_name}...")

    yield

    logger.info(f"Shutting down, discarding {session_manager.active_session_count} session(s)")
    await session_manager.clear()
    logger.info("Application shutdown complete")


app = FastAPI(
    title="Clinic Receptionist Agent",
    description="Scripted intake receptionist that books clinic appointments",
    version="1.0.0",
    lifespan=lifespan
)

# Add rate limiter to app state
app.state.limiter = limiter

# Add rate limit exceeded handler
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Include health check router
app.include_router(health_router)

# Include Prometheus metrics router
app.include_router(metrics_router)


@app.post("/sessions", response_model=SessionView, status_code=201)
@limiter.limit(f"{RateLimitConfig.SESSIONS_PER_MINUTE}/minute")
async def create_session_endpoint(request: Request, payload: Optional[CreateSessionRequest] = None):
    """Start a new call and return the greeting."""
    return await handle_create_session(payload)


@app.get("/sessions/{session_id}", response_model=SessionView)
async def get_session_endpoint(session_id: str):
    """Return the transcript and current snapshot."""
    return await handle_get_session(session_id)


@app.post("/sessions/{session_id}/messages", response_model=TurnView)
@limiter.limit(f"{RateLimitConfig.MESSAGES_PER_MINUTE}/minute")
async def message_endpoint(session_id: str, payload: MessageRequest, request: Request):
    """Submit one caller utterance.

    Rate limited to prevent abuse.
    """
    return await handle_message(session_id, payload)


@app.post("/sessions/{session_id}/reset", response_model=SessionView)
async def reset_endpoint(session_id: str):
    """Start the call over."""
    return await handle_reset(session_id)


@app.delete("/sessions/{session_id}", status_code=204)
async def delete_endpoint(session_id: str):
    """End a session."""
    await handle_delete(session_id)


# Debug endpoint with rate limiting
@app.get("/debug/sessions/{session_id}")
@limiter.limit(f"{RateLimitConfig.DEBUG_PER_MINUTE}/minute")
async def debug_session_endpoint(session_id: str, request: Request):
    """Return the full session state for debugging.

    Raises:
        HTTPException: If admin key required but not provided/invalid
    """
    # Optional admin API key check (guard in production)
    if settings.is_production:
        api_key = settings.admin_api_key.strip()
        incoming = request.headers.get("x-admin-key", "").strip()
        if api_key and incoming != api_key:
            raise HTTPException(status_code=403, detail="Forbidden")

    session = await session_manager.get_session(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Unknown session")

    return session.model_dump(mode="json")


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting server on port {settings.port}")

    uvicorn.run(
        "clinic_agent.main:app",
        host="0.0.0.0",
        port=settings.port,
        log_level="info"
    )
