"""Configuration for the LabLink gateway."""

from .settings import LabLinkSettings, get_settings
from .logging_config import LoggingConfig

__all__ = [
    "LabLinkSettings",
    "get_settings",
    "LoggingConfig",
]
