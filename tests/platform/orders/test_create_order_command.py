"""Tests for the create-order command."""

from datetime import timedelta

import pytest

from lablink.core.exceptions import InvalidOrderError, QueryError
from lablink.platform.orders import CreateOrderCommand


DOCTOR_ID = "7d9f3c1e-2a4b-4c5d-8e6f-0a1b2c3d4e5f"


@pytest.fixture
def command(order_repository, clock):
    return CreateOrderCommand(order_repository, clock=clock)


class TestCreateOrderCommand:
    @pytest.mark.asyncio
    async def test_creates_order(self, command, order_repository, valid_order_payload):
        result = await command.execute(DOCTOR_ID, valid_order_payload)

        assert result.warnings == []
        assert order_repository.orders[0][0] == DOCTOR_ID
        response = result.to_response()
        assert response["success"] is True
        assert response["message"] == "Order created successfully"
        assert response["order"]["patientName"] == "Samir Khoury"
        assert response["order"]["status"] == "Pending"
        assert response["order"]["orderNumber"].startswith("ORD-")

    @pytest.mark.asyncio
    async def test_invalid_payload_raises(self, command, order_repository):
        with pytest.raises(InvalidOrderError) as exc_info:
            await command.execute(DOCTOR_ID, {"doctorName": "Dr. X"})

        error = exc_info.value
        assert error.message == "One or more fields contain invalid data"
        assert error.error_code == "VALIDATION_FAILED"
        assert any(field_error.field == "patientName" for field_error in error.errors)
        assert order_repository.orders == []

    @pytest.mark.asyncio
    async def test_duplicate_warning(self, command, order_repository, clock, valid_order_payload):
        order_repository.duplicate = "ORD-20260301-abc123"

        result = await command.execute(DOCTOR_ID, valid_order_payload)

        assert result.warnings == ["Similar order found: ORD-20260301-abc123"]
        assert len(order_repository.orders) == 1
        _, patient, teeth, since = order_repository.lookups[0]
        assert patient == "Samir Khoury"
        assert teeth == "11-14"
        assert since == clock.now - timedelta(hours=24)

    @pytest.mark.asyncio
    async def test_duplicate_lookup_failure_is_ignored(self, command, order_repository, valid_order_payload):
        order_repository.fail_lookup = True

        result = await command.execute(DOCTOR_ID, valid_order_payload)

        assert result.warnings == []
        assert len(order_repository.orders) == 1

    @pytest.mark.asyncio
    async def test_insert_failure_propagates(self, command, order_repository, valid_order_payload):
        order_repository.fail_insert = True

        with pytest.raises(QueryError):
            await command.execute(DOCTOR_ID, valid_order_payload)
