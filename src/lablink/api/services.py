"""Service wiring for the gateway.

Builds the platform services from settings and holds them for the
lifetime of the application on ``app.state.services``.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import redis.asyncio as redis

from ..config.settings import LabLinkSettings
from ..core.exceptions import ConfigurationError
from ..database.connection import DatabaseManager, create_database_manager
from ..platform.files.application.commands.upload_file import (
    UploadFileCommand,
    create_upload_file_command,
)
from ..platform.files.application.validators.file_integrity_validator import (
    FileIntegrityValidator,
    create_server_file_validator,
)
from ..platform.files.core.protocols.storage_provider import StorageProviderProtocol
from ..platform.files.infrastructure.adapters.local_storage_provider import (
    create_local_storage_provider,
)
from ..platform.files.infrastructure.repositories.asyncpg_attachment_repository import (
    AsyncPGAttachmentRepository,
)
from ..platform.orders.application.commands.create_order import (
    CreateOrderCommand,
    create_create_order_command,
)
from ..platform.orders.infrastructure.repositories.asyncpg_order_repository import (
    AsyncPGOrderRepository,
)
from ..platform.ratelimit.application.services.rate_limiter import RateLimiter, create_rate_limiter
from ..platform.ratelimit.core.protocols.rate_limit_store import RateLimitStore
from ..platform.ratelimit.infrastructure.repositories.asyncpg_rate_limit_store import (
    AsyncPGRateLimitStore,
)
from ..platform.ratelimit.infrastructure.repositories.redis_rate_limit_store import (
    RedisRateLimitStore,
)
from ..platform.security.application.services.security_alert_service import (
    SecurityAlertService,
    create_security_alert_service,
)
from ..platform.security.infrastructure.repositories.asyncpg_security_alert_repository import (
    AsyncPGSecurityAlertRepository,
)
from .auth import BearerTokenVerifier

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Everything the routers need, resolved once per application."""

    settings: LabLinkSettings
    token_verifier: BearerTokenVerifier
    file_validator: FileIntegrityValidator
    upload_command: UploadFileCommand
    security_alerts: SecurityAlertService
    create_order_command: CreateOrderCommand
    rate_limiter: Optional[RateLimiter] = None
    storage: Optional[StorageProviderProtocol] = None
    database: Optional[DatabaseManager] = None
    redis_client: Optional[redis.Redis] = None

    async def close(self) -> None:
        if self.redis_client is not None:
            await self.redis_client.aclose()
        if self.database is not None:
            await self.database.close()


def _create_rate_limit_store(
    settings: LabLinkSettings,
    database: DatabaseManager
) -> Tuple[RateLimitStore, Optional[redis.Redis]]:
    if not settings.uses_redis_rate_limits:
        return AsyncPGRateLimitStore(database), None

    if not settings.redis_url:
        raise ConfigurationError(
            "REDIS_URL is required when RATE_LIMIT_BACKEND is 'redis'",
            error_code="MISSING_REDIS_URL",
        )
    client = redis.from_url(settings.redis_url)
    return RedisRateLimitStore(client), client


async def build_services(settings: LabLinkSettings) -> ServiceContainer:
    """Create database, storage and platform services from settings."""
    database = create_database_manager(settings)
    if settings.db_ensure_schema:
        await database.ensure_schema()

    storage = create_local_storage_provider(settings.storage_root)
    security_alerts = create_security_alert_service(AsyncPGSecurityAlertRepository(database))

    rate_limiter = None
    redis_client = None
    if settings.rate_limit_enabled:
        store, redis_client = _create_rate_limit_store(settings, database)
        rate_limiter = create_rate_limiter(
            store,
            per_minute=settings.rate_limit_per_minute,
            per_hour=settings.rate_limit_per_hour,
            notifier=security_alerts,
            fail_open=settings.rate_limit_fail_open,
        )

    logger.info(
        f"Services ready: storage={settings.storage_root}, "
        f"rate_limit_backend={settings.rate_limit_backend if rate_limiter else 'disabled'}"
    )

    return ServiceContainer(
        settings=settings,
        token_verifier=BearerTokenVerifier(
            settings.jwt_secret.get_secret_value(),
            algorithm=settings.jwt_algorithm,
            audience=settings.jwt_audience,
        ),
        file_validator=create_server_file_validator(settings.server_max_file_size),
        upload_command=create_upload_file_command(
            storage=storage,
            repository=AsyncPGAttachmentRepository(database),
            bucket=settings.attachments_bucket,
            progress_interval=settings.upload_progress_interval,
        ),
        security_alerts=security_alerts,
        create_order_command=create_create_order_command(AsyncPGOrderRepository(database)),
        rate_limiter=rate_limiter,
        storage=storage,
        database=database,
        redis_client=redis_client,
    )
