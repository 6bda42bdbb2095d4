"""In-memory fakes and helpers shared by lablink tests."""

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Optional
from uuid import uuid4

import jwt

from lablink.core.exceptions import (
    ObjectAlreadyExistsError,
    QueryError,
    StorageDeleteError,
    StorageUploadError,
)
from lablink.platform.files.core.protocols.attachment_repository import (
    AttachmentRecord,
    AttachmentRepository,
)
from lablink.platform.files.core.protocols.storage_provider import StorageProviderProtocol
from lablink.platform.orders.core.entities.order import CreatedOrder, OrderDraft
from lablink.platform.orders.core.protocols.order_repository import OrderRepository
from lablink.platform.ratelimit.core.entities.rate_limit_record import RateLimitRecord
from lablink.platform.ratelimit.core.protocols.rate_limit_store import RateLimitStore
from lablink.platform.security.core.entities.security_alert import AdminNotification, SecurityAlert
from lablink.platform.security.core.protocols.security_alert_repository import (
    SecurityAlertRepository,
)


TEST_JWT_SECRET = "test-secret-with-enough-length-for-hs256"
TEST_USER_ID = "7d9f3c1e-2a4b-4c5d-8e6f-0a1b2c3d4e5f"
TEST_ORDER_ID = "0f8e7d6c-5b4a-4321-9876-abcdef012345"


PNG_HEADER = b"\x89PNG\r\n\x1a\n"
JPEG_HEADER = b"\xff\xd8\xff\xe0"
PDF_HEADER = b"%PDF-1.7\n"


class InMemoryStorage(StorageProviderProtocol):
    """Dictionary backed object storage with failure switches."""

    def __init__(self, upload_delay: float = 0.0):
        self.objects: Dict[tuple, bytes] = {}
        self.fail_upload = False
        self.fail_remove = False
        self.upload_delay = upload_delay
        self.in_flight = 0
        self.max_in_flight = 0

    async def upload(self, bucket, path, content, content_type=None, upsert=False):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.upload_delay:
                await asyncio.sleep(self.upload_delay)
            if self.fail_upload:
                raise StorageUploadError("bucket unavailable")
            if not upsert and (bucket, path) in self.objects:
                raise ObjectAlreadyExistsError(f"Object already exists: {bucket}/{path}")
            self.objects[(bucket, path)] = content
            return path
        finally:
            self.in_flight -= 1

    async def download(self, bucket, path):
        return self.objects.get((bucket, path))

    async def remove(self, bucket, paths: Iterable[str]) -> List[str]:
        if self.fail_remove:
            raise StorageDeleteError("delete refused")
        removed = []
        for path in paths:
            if self.objects.pop((bucket, path), None) is not None:
                removed.append(path)
        return removed

    async def exists(self, bucket, path):
        return (bucket, path) in self.objects


class InMemoryAttachmentRepository(AttachmentRepository):
    def __init__(self):
        self.records: List[AttachmentRecord] = []
        self.fail = False

    async def insert_attachment(self, record: AttachmentRecord) -> Dict[str, Any]:
        if self.fail:
            raise QueryError("insert or update on table violates foreign key constraint")
        self.records.append(record)
        return {"id": str(uuid4()), "file_path": record.file_path}


class InMemoryRateLimitStore(RateLimitStore):
    """Rate limit rows kept in a list, newest last."""

    def __init__(self):
        self.records: List[RateLimitRecord] = []
        self.fail = False

    async def find_active(self, identifier, endpoint, since):
        self._check()
        matches = [
            record for record in self.records
            if record.identifier == identifier
            and record.endpoint == endpoint
            and record.window_start > since
        ]
        if not matches:
            return None
        return max(matches, key=lambda record: record.window_start)

    async def increment(self, record):
        self._check()
        record.request_count += 1
        return record

    async def create(self, identifier, endpoint, window_start, window):
        self._check()
        record = RateLimitRecord(
            identifier=identifier,
            endpoint=endpoint,
            window_start=window_start,
            request_count=1,
            id=str(uuid4()),
        )
        self.records.append(record)
        return record

    def _check(self):
        if self.fail:
            raise QueryError("Rate limit store unavailable")


class RecordingAlertRepository(SecurityAlertRepository):
    def __init__(self):
        self.alerts: List[SecurityAlert] = []
        self.notifications: List[AdminNotification] = []
        self.fail = False

    async def create_security_alert(self, alert: SecurityAlert) -> None:
        if self.fail:
            raise QueryError("alerts table missing")
        self.alerts.append(alert)

    async def create_admin_notification(self, notification: AdminNotification) -> None:
        if self.fail:
            raise QueryError("notifications table missing")
        self.notifications.append(notification)


class InMemoryOrderRepository(OrderRepository):
    def __init__(self):
        self.orders: List[tuple] = []
        self.duplicate: Optional[str] = None
        self.fail_insert = False
        self.fail_lookup = False
        self.lookups: List[tuple] = []

    async def insert_order(self, doctor_id: str, draft: OrderDraft) -> CreatedOrder:
        if self.fail_insert:
            raise QueryError("connection reset")
        self.orders.append((doctor_id, draft))
        return CreatedOrder(
            id=str(uuid4()),
            order_number=f"ORD-20260101-{len(self.orders):06d}",
            patient_name=draft.patient_name,
            restoration_type=draft.restoration_type,
            urgency=draft.urgency,
            status="Pending",
            created_at=datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc),
            assigned_lab_id=draft.assigned_lab_id,
        )

    async def find_recent_duplicate(self, doctor_id, patient_name, teeth_number, since):
        self.lookups.append((doctor_id, patient_name, teeth_number, since))
        if self.fail_lookup:
            raise QueryError("lookup failed")
        return self.duplicate


class FakeClock:
    """Settable UTC clock."""

    def __init__(self, now: Optional[datetime] = None):
        self.now = now or datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


def make_token(
    sub: str = TEST_USER_ID,
    email: Optional[str] = "doctor@example.com",
    expires_in: int = 3600,
    audience: str = "authenticated",
    secret: str = TEST_JWT_SECRET
) -> str:
    payload = {
        "sub": sub,
        "aud": audience,
        "role": "authenticated",
        "exp": datetime.now(timezone.utc) + timedelta(seconds=expires_in),
    }
    if email:
        payload["email"] = email
    return jwt.encode(payload, secret, algorithm="HS256")


def png_bytes(size: int = 512) -> bytes:
    return PNG_HEADER + b"\x00" * (size - len(PNG_HEADER))


