import pytest
from fastapi.testclient import TestClient

from tests.doubles import SpyAuditLogger
from travel_booking.api.app import create_app
from travel_booking.application import BookingSystem
from travel_booking.shared.config import Settings


@pytest.fixture
def audit_logger() -> SpyAuditLogger:
    return SpyAuditLogger()


@pytest.fixture
def booking_system(audit_logger: SpyAuditLogger) -> BookingSystem:
    return BookingSystem(audit_logger=audit_logger)


@pytest.fixture
def api_client():
    app = create_app(Settings(app_version="9.9.9", reservation_id_prefix="RES-"))
    with TestClient(app) as client:
        yield client
