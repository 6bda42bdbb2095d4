"""Constants and enumerations shared across LabLink platforms."""

from enum import Enum


KB = 1024
MB = 1024 * KB


class RestorationType(str, Enum):
    """Dental prosthetic categories accepted on new orders."""
    ZIRCONIA = "Zirconia"
    ZIRCONIA_LAYER = "Zirconia Layer"
    ZIRCO_MAX = "Zirco-Max"
    PFM = "PFM"
    ACRYLIC = "Acrylic"
    E_MAX = "E-max"


class ShadeSystem(str, Enum):
    """Shade guides a doctor can reference."""
    VITA_CLASSICAL = "VITA Classical"
    VITA_3D_MASTER = "VITA 3D-Master"


class UrgencyLevel(str, Enum):
    """Order urgency levels."""
    NORMAL = "Normal"
    URGENT = "Urgent"


class OrderStatus(str, Enum):
    """Initial and terminal order states written by the gateway."""
    PENDING = "Pending"


class AlertSeverity(str, Enum):
    """Severity levels for security alerts and admin notifications."""
    LOW = "low"
    WARNING = "warning"
    HIGH = "high"
    CRITICAL = "critical"


class AlertType(str, Enum):
    """Security alert types raised by the gateway."""
    MALICIOUS_FILE_UPLOAD = "malicious_file_upload"


# Upload limits
SERVER_MAX_FILE_SIZE = 10 * MB
CLIENT_MAX_FILE_SIZE = 20 * MB
MIN_FILE_SIZE = 100
MAX_FILENAME_LENGTH = 255
SCAN_WINDOW_BYTES = 4 * KB

SERVER_ALLOWED_MIME_TYPES = frozenset({
    "image/jpeg",
    "image/png",
    "image/webp",
    "application/pdf",
})

# Browsers report STL/OBJ under several names, text/plain included for ASCII OBJ.
MODEL_MIME_TYPES = frozenset({
    "model/stl",
    "model/x.stl-binary",
    "model/x.stl-ascii",
    "application/sla",
    "application/vnd.ms-pki.stl",
    "model/obj",
    "text/plain",
})

CLIENT_ALLOWED_MIME_TYPES = SERVER_ALLOWED_MIME_TYPES | MODEL_MIME_TYPES

MODEL_EXTENSIONS = frozenset({"stl", "obj"})

# Storage buckets
ORDER_ATTACHMENTS_BUCKET = "order-attachments"
DEFAULT_ATTACHMENT_CATEGORY = "general"

CREATE_ORDER_ENDPOINT = "create-order"
