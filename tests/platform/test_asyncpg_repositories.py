"""Tests for the asyncpg-backed repositories using a stubbed connection."""

import json
from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock
from uuid import uuid4

import asyncpg
import pytest

from lablink.config.constants import AlertSeverity
from lablink.core.exceptions import QueryError
from lablink.platform.files.core.protocols.attachment_repository import AttachmentRecord
from lablink.platform.files.infrastructure.repositories import AsyncPGAttachmentRepository
from lablink.platform.orders.core.entities.order import OrderDraft
from lablink.platform.orders.infrastructure.repositories import AsyncPGOrderRepository
from lablink.platform.ratelimit.core.entities.rate_limit_record import RateLimitRecord
from lablink.platform.ratelimit.infrastructure.repositories import AsyncPGRateLimitStore
from lablink.platform.security.core.entities.security_alert import SecurityAlert
from lablink.platform.security.infrastructure.repositories import AsyncPGSecurityAlertRepository


NOW = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)


class StubDatabase:
    """Hands out a single mocked connection."""

    def __init__(self):
        self.conn = AsyncMock()

    @asynccontextmanager
    async def acquire(self):
        yield self.conn


@pytest.fixture
def database():
    return StubDatabase()


DRAFT = OrderDraft(
    doctor_name="Dr. Amal Haddad",
    patient_name="Samir Khoury",
    restoration_type="Zirconia",
    teeth_shade="A2",
    shade_system="VITA Classical",
    teeth_number="11-14",
    urgency="Urgent",
)


class TestAsyncPGOrderRepository:
    @pytest.mark.asyncio
    async def test_insert_order(self, database):
        order_id = uuid4()
        database.conn.fetchrow.return_value = {
            "id": order_id,
            "order_number": "ORD-20260301-1a2b3c",
            "patient_name": "Samir Khoury",
            "restoration_type": "Zirconia",
            "urgency": "Urgent",
            "status": "Pending",
            "created_at": NOW,
            "assigned_lab_id": None,
        }
        repository = AsyncPGOrderRepository(database)

        order = await repository.insert_order("doctor-1", DRAFT)

        assert order.id == str(order_id)
        assert order.order_number == "ORD-20260301-1a2b3c"
        args = database.conn.fetchrow.call_args.args
        assert args[1] == "doctor-1"
        assert args[10] == "Pending"

    @pytest.mark.asyncio
    async def test_missing_order_number_is_an_error(self, database):
        database.conn.fetchrow.return_value = {"id": uuid4(), "order_number": None}
        repository = AsyncPGOrderRepository(database)

        with pytest.raises(QueryError, match="response structure is invalid"):
            await repository.insert_order("doctor-1", DRAFT)

    @pytest.mark.asyncio
    async def test_postgres_error_is_wrapped(self, database):
        database.conn.fetchrow.side_effect = asyncpg.ForeignKeyViolationError("lab missing")
        repository = AsyncPGOrderRepository(database)

        with pytest.raises(QueryError):
            await repository.insert_order("doctor-1", DRAFT)

    @pytest.mark.asyncio
    async def test_find_recent_duplicate(self, database):
        database.conn.fetchval.return_value = "ORD-20260228-ffffff"
        repository = AsyncPGOrderRepository(database)

        found = await repository.find_recent_duplicate(
            "doctor-1", "Samir Khoury", "11-14", NOW - timedelta(hours=24)
        )

        assert found == "ORD-20260228-ffffff"


class TestAsyncPGAttachmentRepository:
    @pytest.mark.asyncio
    async def test_insert_attachment(self, database):
        database.conn.fetchrow.return_value = {"id": "a1", "file_path": "u/o/x.png"}
        repository = AsyncPGAttachmentRepository(database)
        record = AttachmentRecord("o", "u", "x.png", "u/o/x.png", "image/png", 512, "general")

        row = await repository.insert_attachment(record)

        assert row == {"id": "a1", "file_path": "u/o/x.png"}

    @pytest.mark.asyncio
    async def test_unique_violation_is_wrapped(self, database):
        database.conn.fetchrow.side_effect = asyncpg.UniqueViolationError("duplicate key")
        repository = AsyncPGAttachmentRepository(database)
        record = AttachmentRecord("o", "u", "x.png", "u/o/x.png", "image/png", 512, "general")

        with pytest.raises(QueryError):
            await repository.insert_attachment(record)


class TestAsyncPGRateLimitStore:
    def row(self, count=1):
        return {
            "id": "r1",
            "identifier": "user-1",
            "endpoint": "create-order_minute",
            "window_start": NOW,
            "request_count": count,
        }

    @pytest.mark.asyncio
    async def test_find_active(self, database):
        database.conn.fetchrow.return_value = self.row(4)
        store = AsyncPGRateLimitStore(database)

        record = await store.find_active("user-1", "create-order_minute", NOW - timedelta(minutes=1))

        assert record.request_count == 4
        assert record.id == "r1"

    @pytest.mark.asyncio
    async def test_increment_missing_row(self, database):
        database.conn.fetchrow.return_value = None
        store = AsyncPGRateLimitStore(database)

        with pytest.raises(QueryError):
            await store.increment(RateLimitRecord("user-1", "create-order_minute", NOW, 3, id="r1"))

    @pytest.mark.asyncio
    async def test_create(self, database):
        database.conn.fetchrow.return_value = self.row()
        store = AsyncPGRateLimitStore(database)

        record = await store.create("user-1", "create-order_minute", NOW, timedelta(minutes=1))

        assert record.request_count == 1


class TestAsyncPGSecurityAlertRepository:
    @pytest.mark.asyncio
    async def test_metadata_is_serialized(self, database):
        repository = AsyncPGSecurityAlertRepository(database)
        alert = SecurityAlert(
            alert_type="malicious_file_upload",
            severity=AlertSeverity.HIGH,
            title="t",
            description="d",
            metadata={"fileName": "x.exe"},
        )

        await repository.create_security_alert(alert)

        args = database.conn.execute.call_args.args
        assert args[2] == "high"
        assert json.loads(args[-1]) == {"fileName": "x.exe"}

    @pytest.mark.asyncio
    async def test_errors_are_wrapped(self, database):
        database.conn.execute.side_effect = asyncpg.InterfaceError("connection closed")
        repository = AsyncPGSecurityAlertRepository(database)
        alert = SecurityAlert("malicious_file_upload", AlertSeverity.HIGH, "t", "d")

        with pytest.raises(QueryError):
            await repository.create_security_alert(alert)
