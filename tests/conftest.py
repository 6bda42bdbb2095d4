"""Pytest configuration and fixtures for lablink tests."""

import pytest

from helpers import (
    FakeClock,
    InMemoryAttachmentRepository,
    InMemoryOrderRepository,
    InMemoryRateLimitStore,
    InMemoryStorage,
    RecordingAlertRepository,
    make_token,
    png_bytes,
)


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def attachment_repository():
    return InMemoryAttachmentRepository()


@pytest.fixture
def rate_limit_store():
    return InMemoryRateLimitStore()


@pytest.fixture
def alert_repository():
    return RecordingAlertRepository()


@pytest.fixture
def order_repository():
    return InMemoryOrderRepository()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def png_content():
    return png_bytes()


@pytest.fixture
def auth_token():
    return make_token()


@pytest.fixture
def valid_order_payload():
    return {
        "doctorName": "Dr. Amal Haddad",
        "patientName": "Samir Khoury",
        "restorationType": "Zirconia",
        "teethShade": "A2",
        "shadeSystem": "VITA Classical",
        "teethNumber": "11-14",
        "urgency": "Normal",
        "biologicalNotes": "Patient has mild bruxism",
    }
