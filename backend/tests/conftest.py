"""
Pytest configuration and shared fixtures
"""
import pytest
from datetime import datetime, timedelta
from fastapi.testclient import TestClient

from propcore.engine import EventBus
from propdash.config import Settings
from propdash.dependencies import get_dashboard
from propdash.main import app
from propdash.services.dashboard import Dashboard
from propdash.services.notification_service import NotificationService


class FakeClock:
    """Deterministic clock; every call advances one minute"""

    def __init__(self, start: datetime = datetime(2025, 10, 23, 9, 0)):
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(minutes=1)
        return value


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def test_settings():
    """Settings without demo data"""
    return Settings(SEED_DEMO_DATA=False, NOTIFICATION_HISTORY_SIZE=200)


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def notifications(bus):
    return NotificationService(bus)


@pytest.fixture
def dashboard(test_settings, clock):
    """Empty dashboard"""
    return Dashboard(test_settings, clock=clock)


@pytest.fixture(scope="function")
def client(dashboard):
    """Test client bound to the empty dashboard"""
    app.dependency_overrides[get_dashboard] = lambda: dashboard
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ============== Form payloads ==============

@pytest.fixture
def room_form():
    return {
        "number": "101",
        "room_type": "Standard",
        "price": "15000",
        "capacity": "2",
        "floor": "1",
        "amenities": "WiFi, TV, Air conditioning",
    }


@pytest.fixture
def reservation_form():
    return {
        "client_name": "Jean Kouadio",
        "client_phone": "+225 07 12 34 56 78",
        "client_email": "jean.k@email.com",
        "room_number": "205",
        "check_in": "2025-10-23",
        "check_out": "2025-10-25",
        "guests": "2",
    }


@pytest.fixture
def service_request_form():
    return {
        "room_number": "205",
        "service_type": "room-service",
        "description": "Breakfast for 2",
        "priority": "medium",
    }


@pytest.fixture
def table_form():
    return {"number": "12", "capacity": "4", "zone": "terrace"}


@pytest.fixture
def maintenance_form():
    return {
        "task_type": "repair",
        "description": "Pump seal replacement",
        "priority": "high",
        "scheduled_date": "2025-10-24",
        "assignee": "Koffi Marc",
    }
