"""HTTP surface of the LabLink gateway."""

from .app import create_app
from .services import ServiceContainer, build_services

__all__ = ["create_app", "ServiceContainer", "build_services"]
