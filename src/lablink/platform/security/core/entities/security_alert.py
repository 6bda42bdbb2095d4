"""Security alert and admin notification entities."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .....config.constants import AlertSeverity


@dataclass
class SecurityAlert:
    """Audit record of a blocked or suspicious action."""

    alert_type: str
    severity: AlertSeverity
    title: str
    description: str
    user_id: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class AdminNotification:
    """Message surfaced to platform administrators."""

    title: str
    message: str
    severity: AlertSeverity
    category: str
    metadata: Dict[str, Any] = field(default_factory=dict)
