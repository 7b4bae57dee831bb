"""Tests for the HTTP surface."""
import pytest
from fastapi.testclient import TestClient

from clinic_agent import main
from clinic_agent.config.settings import Settings


@pytest.fixture
def client():
    """Test client with fresh rate limits and an empty session store."""
    main.limiter.reset()
    with TestClient(main.app) as test_client:
        yield test_client


def _start(client, session_id="call-1"):
    response = client.post("/sessions", json={"session_id": session_id})
    assert response.status_code == 201
    return response.json()


@pytest.mark.unit
class TestSessionEndpoints:
    """Test the session lifecycle over HTTP."""

    def test_create_session_returns_greeting(self, client):
        """Test a new session starts on askName with the greeting."""
        body = _start(client)

        assert body["session_id"] == "call-1"
        assert body["step"] == "askName"
        assert len(body["transcript"]) == 1
        assert body["transcript"][0]["speaker"] == "agent"
        assert "Aarogyam Care Clinic" in body["transcript"][0]["text"]
        assert body["quick_replies"]

    def test_create_session_without_body(self, client):
        """Test the id is generated when none is given."""
        response = client.post("/sessions")

        assert response.status_code == 201
        assert response.json()["session_id"]

    def test_create_session_with_existing_id_conflicts(self, client):
        """Test re-creating a live session is refused and leaves it intact."""
        _start(client)
        client.post("/sessions/call-1/messages", json={"message": "Mera naam Rahul Verma hai"})

        response = client.post("/sessions", json={"session_id": "call-1"})

        assert response.status_code == 409
        body = client.get("/sessions/call-1").json()
        assert body["step"] == "askAge"
        assert body["profile"]["name"] == "Rahul Verma"
        assert len(body["transcript"]) == 3

    def test_message_flow_to_completed(self, client):
        """Test a whole booking over the message endpoint."""
        _start(client)

        for text in [
            "Mera naam Rahul Verma hai",
            "32",
            "Mujhe bal girne ki problem hai",
            "Kal dopahar 3 baje",
        ]:
            response = client.post("/sessions/call-1/messages", json={"message": text})
            assert response.status_code == 200

        body = response.json()
        assert body["step"] == "completed"
        assert body["profile"] == {
            "name": "Rahul Verma",
            "age": 32,
            "issue": "bal girne ki problem hai",
            "slot": "Kal dopahar 3 baje",
        }
        assert body["messages"][0]["speaker"] == "patient"
        assert len(body["messages"]) == 5
        assert "Mujhe dusra time chahiye." in body["quick_replies"]

    def test_get_session(self, client):
        """Test the transcript grows with each turn."""
        _start(client)
        client.post("/sessions/call-1/messages", json={"message": "Mera naam Rahul hai"})

        response = client.get("/sessions/call-1")

        assert response.status_code == 200
        body = response.json()
        assert body["step"] == "askAge"
        assert [m["speaker"] for m in body["transcript"]] == ["agent", "patient", "agent"]

    def test_blank_message_appends_nothing(self, client):
        """Test whitespace-only input is ignored."""
        _start(client)

        response = client.post("/sessions/call-1/messages", json={"message": "   "})

        assert response.status_code == 200
        assert response.json()["messages"] == []
        assert response.json()["step"] == "askName"

    def test_unknown_session_returns_404(self, client):
        """Test every session route rejects unknown ids."""
        assert client.get("/sessions/missing").status_code == 404
        assert client.post("/sessions/missing/messages", json={"message": "hi"}).status_code == 404
        assert client.post("/sessions/missing/reset").status_code == 404
        assert client.delete("/sessions/missing").status_code == 404

    def test_message_too_long_rejected(self, client):
        """Test oversized utterances fail validation."""
        _start(client)

        response = client.post("/sessions/call-1/messages", json={"message": "a" * 1001})
        assert response.status_code == 422

    def test_reset_session(self, client):
        """Test reset starts the call over."""
        _start(client)
        client.post("/sessions/call-1/messages", json={"message": "Mera naam Rahul hai"})

        response = client.post("/sessions/call-1/reset")

        assert response.status_code == 200
        body = response.json()
        assert body["step"] == "askName"
        assert body["profile"]["name"] is None
        assert len(body["transcript"]) == 1

    def test_delete_session(self, client):
        """Test a deleted session is gone."""
        _start(client)

        assert client.delete("/sessions/call-1").status_code == 204
        assert client.get("/sessions/call-1").status_code == 404


@pytest.mark.unit
class TestOperationalEndpoints:
    """Test health, metrics and debug endpoints."""

    def test_health(self, client):
        """Test health check reports the clinic and session count."""
        _start(client)

        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["clinic"] == "Aarogyam Care Clinic"
        assert body["active_sessions"] == 1

    def test_liveness(self, client):
        """Test liveness probe."""
        assert client.get("/health/live").json() == {"status": "alive"}

    def test_metrics_exposed(self, client):
        """Test Prometheus output includes dialogue metrics."""
        _start(client)
        client.post("/sessions/call-1/messages", json={"message": "Mera naam Rahul hai"})

        response = client.get("/metrics")

        assert response.status_code == 200
        assert "receptionist_turns_total" in response.text

    def test_debug_session(self, client):
        """Test full state dump outside production."""
        _start(client)

        response = client.get("/debug/sessions/call-1")

        assert response.status_code == 200
        assert response.json()["session_id"] == "call-1"
        assert response.json()["turn_count"] == 0

    def test_debug_requires_admin_key_in_production(self, client, monkeypatch):
        """Test the admin key guard."""
        monkeypatch.setattr(
            main,
            "settings",
            Settings(_env_file=None, app_env="production", admin_api_key="secret"),
        )
        _start(client)

        assert client.get("/debug/sessions/call-1").status_code == 403
        response = client.get("/debug/sessions/call-1", headers={"x-admin-key": "secret"})
        assert response.status_code == 200

    def test_session_creation_rate_limited(self, client):
        """Test session creation is throttled per client."""
        from clinic_agent.config.constants import RateLimitConfig

        for _ in range(RateLimitConfig.SESSIONS_PER_MINUTE):
            assert client.post("/sessions").status_code == 201

        assert client.post("/sessions").status_code == 429
