"""Order entities.

ONLY order creation data - the normalized draft written to the store and
the created order returned from it.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class OrderDraft:
    """Validated, normalized order payload ready to be inserted."""

    doctor_name: str
    patient_name: str
    restoration_type: str
    teeth_shade: str
    shade_system: str
    teeth_number: str
    urgency: str
    biological_notes: str = ""
    photos_link: str = ""
    html_export: str = ""
    assigned_lab_id: Optional[str] = None


@dataclass(frozen=True)
class CreatedOrder:
    """Order row as stored by the backend."""

    id: str
    order_number: str
    patient_name: str
    restoration_type: str
    urgency: str
    status: str
    created_at: datetime
    assigned_lab_id: Optional[str] = None

    def to_response(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "orderNumber": self.order_number,
            "patientName": self.patient_name,
            "restorationType": self.restoration_type,
            "urgency": self.urgency,
            "status": self.status,
            "createdAt": self.created_at.isoformat(),
            "assignedLabId": self.assigned_lab_id,
        }
