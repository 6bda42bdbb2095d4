"""LabLink API entry point."""

import logging

import uvicorn

from ..config.logging_config import LoggingConfig
from ..config.settings import get_settings
from .app import create_app

settings = get_settings()
LoggingConfig.configure(settings)

logger = logging.getLogger(__name__)

app = create_app(settings)


def main() -> None:
    """Run the application."""
    logger.info(f"Starting LabLink API on {settings.host}:{settings.port}")

    uvicorn.run(
        "lablink.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
        access_log=True,
    )


if __name__ == "__main__":
    main()
