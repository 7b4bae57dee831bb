"""Pytest configuration and shared fixtures."""
import os

os.environ.setdefault("APP_ENV", "testing")

import pytest

from clinic_agent.core.dialogue_engine import DialogueEngine
from clinic_agent.core.models import ClinicProfile, PatientProfile
from clinic_agent.core.session_manager import InMemorySessionManager


@pytest.fixture
def clinic():
    """Clinic profile used across tests."""
    return ClinicProfile(
        name="Aarogyam Care Clinic",
        doctor="Dr. Kavya Sharma",
        specialization="Skin, Hair aur Pain Management Specialist",
        services="skin rejuvenation, hair fall treatment, pain therapy aur preventive health check-up",
        working_hours="Somvaar se Shaniwaar, subah 9 baje se shaam 7 baje tak",
        consultation_fee="INR 700 ka consultation fee",
    )


@pytest.fixture
def engine(clinic):
    """Dialogue engine bound to the test clinic."""
    return DialogueEngine(clinic)


@pytest.fixture
def empty_profile():
    """Profile at the start of a call."""
    return PatientProfile()


@pytest.fixture
def booked_profile():
    """Profile after a confirmed booking."""
    return PatientProfile(
        name="Rahul Verma",
        age=32,
        issue="bal girne ki problem hai",
        slot="Kal dopahar 3 baje",
    )


@pytest.fixture
async def session_manager(engine):
    """Create a fresh session manager for each test."""
    manager = InMemorySessionManager(engine)
    yield manager
    # Cleanup after test
    await manager.clear()
