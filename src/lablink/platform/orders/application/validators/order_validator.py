"""Order payload validator.

ONLY order payload validation - required fields, length bounds, enum
allow-lists, tooth notation and optional field types.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Mapping, Optional

from .....config.constants import RestorationType, ShadeSystem, UrgencyLevel
from .....utils.validation import is_valid_uuid, sanitize_input
from ...core.entities.order import OrderDraft
from ...core.value_objects.order_validation_result import OrderValidationResult


VALID_RESTORATION_TYPES = [member.value for member in RestorationType]
VALID_SHADE_SYSTEMS = [member.value for member in ShadeSystem]
VALID_URGENCY_LEVELS = [member.value for member in UrgencyLevel]

MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100
MAX_SHADE_LENGTH = 50
MAX_TEETH_LENGTH = 100
MAX_NOTES_LENGTH = 1000
MIN_TOOTH = 1
MAX_TOOTH = 48


def validate_teeth_number(teeth_number: str) -> Optional[str]:
    """Check tooth notation such as ``11``, ``11-14`` or ``11,12,21``.

    Returns:
        The first error message, or None when the notation is valid
    """
    trimmed = teeth_number.strip()
    if not trimmed:
        return "Teeth number cannot be empty"

    for part in (p.strip() for p in trimmed.split(",")):
        if "-" in part:
            start_text, _, end_text = part.partition("-")
            start = _parse_tooth(start_text)
            end = _parse_tooth(end_text)
            if start is None or end is None:
                return "Invalid range format. Use format: 11-14"
            if not (MIN_TOOTH <= start <= MAX_TOOTH and MIN_TOOTH <= end <= MAX_TOOTH):
                return "Tooth numbers must be between 1 and 48"
            if start >= end:
                return "Range start must be less than end"
        else:
            tooth = _parse_tooth(part)
            if tooth is None:
                return "Tooth number must be numeric"
            if not MIN_TOOTH <= tooth <= MAX_TOOTH:
                return "Tooth numbers must be between 1 and 48"

    return None


def _parse_tooth(text: str) -> Optional[int]:
    text = text.strip()
    return int(text) if text.isascii() and text.isdigit() else None


class OrderValidator:
    """Validates create-order payloads field by field.

    Every field is checked and all failures are reported together.
    """

    def validate(self, data: Any) -> OrderValidationResult:
        """Validate a decoded JSON payload.

        Args:
            data: Decoded request body; anything but an object fails every
                required field

        Returns:
            OrderValidationResult listing field errors
        """
        if not isinstance(data, Mapping):
            data = {}

        result = OrderValidationResult()

        self._check_name(result, data.get("doctorName"), "doctorName", "Doctor name")
        self._check_name(result, data.get("patientName"), "patientName", "Patient name")

        restoration_type = data.get("restorationType")
        if not restoration_type or not isinstance(restoration_type, str):
            result.add("restorationType", "Restoration type is required")
        elif restoration_type not in VALID_RESTORATION_TYPES:
            result.add(
                "restorationType",
                f"Invalid restoration type. Must be one of: {', '.join(VALID_RESTORATION_TYPES)}",
            )

        shade = data.get("teethShade")
        if not shade or not isinstance(shade, str):
            result.add("teethShade", "Teeth shade is required")
        elif not sanitize_input(shade, MAX_SHADE_LENGTH):
            result.add("teethShade", "Teeth shade cannot be empty")
        elif len(shade) > MAX_SHADE_LENGTH:
            result.add("teethShade", "Teeth shade must be less than 50 characters")

        shade_system = data.get("shadeSystem")
        if not shade_system or not isinstance(shade_system, str):
            result.add("shadeSystem", "Shade system is required")
        elif shade_system not in VALID_SHADE_SYSTEMS:
            result.add(
                "shadeSystem",
                f"Invalid shade system. Must be one of: {', '.join(VALID_SHADE_SYSTEMS)}",
            )

        teeth_number = data.get("teethNumber")
        if not teeth_number or not isinstance(teeth_number, str):
            result.add("teethNumber", "Teeth number is required")
        elif not teeth_number.strip():
            result.add("teethNumber", "At least one tooth must be selected")
        elif len(teeth_number) > MAX_TEETH_LENGTH:
            result.add("teethNumber", "Teeth number must be less than 100 characters")
        else:
            notation_error = validate_teeth_number(teeth_number)
            if notation_error:
                result.add("teethNumber", notation_error)

        urgency = data.get("urgency")
        if not urgency or not isinstance(urgency, str):
            result.add("urgency", "Urgency level is required")
        elif urgency not in VALID_URGENCY_LEVELS:
            result.add(
                "urgency",
                f"Invalid urgency level. Must be one of: {', '.join(VALID_URGENCY_LEVELS)}",
            )

        notes = data.get("biologicalNotes")
        if notes is not None and not isinstance(notes, str):
            result.add("biologicalNotes", "Biological notes must be a string")
        elif notes and len(notes) > MAX_NOTES_LENGTH:
            result.add("biologicalNotes", "Biological notes must be less than 1000 characters")

        html_export = data.get("htmlExport")
        if html_export is not None and not isinstance(html_export, str):
            result.add("htmlExport", "HTML export must be a string")

        photos_link = data.get("photosLink")
        if photos_link is not None and not isinstance(photos_link, str):
            result.add("photosLink", "Photos link must be a string")

        lab_id = data.get("assignedLabId")
        if lab_id is not None:
            if not isinstance(lab_id, str):
                result.add("assignedLabId", "Lab ID must be a string")
            elif lab_id and not is_valid_uuid(lab_id):
                result.add("assignedLabId", "Lab ID must be a valid UUID")

        return result

    def to_draft(self, data: Mapping[str, Any]) -> OrderDraft:
        """Normalize a payload that passed :meth:`validate`."""
        return OrderDraft(
            doctor_name=sanitize_input(data["doctorName"], MAX_NAME_LENGTH),
            patient_name=sanitize_input(data["patientName"], MAX_NAME_LENGTH),
            restoration_type=data["restorationType"],
            teeth_shade=sanitize_input(data["teethShade"], MAX_SHADE_LENGTH),
            shade_system=data["shadeSystem"],
            teeth_number=data["teethNumber"].strip(),
            urgency=data["urgency"],
            biological_notes=sanitize_input(data.get("biologicalNotes") or "", MAX_NOTES_LENGTH),
            photos_link=data.get("photosLink") or "",
            html_export=data.get("htmlExport") or "",
            assigned_lab_id=data.get("assignedLabId") or None,
        )

    def _check_name(self, result: OrderValidationResult, value: Any, field_name: str, label: str) -> None:
        if not value or not isinstance(value, str):
            result.add(field_name, f"{label} is required")
        elif len(sanitize_input(value, MAX_NAME_LENGTH)) < MIN_NAME_LENGTH:
            result.add(field_name, f"{label} must be at least 2 characters")
        elif len(value) > MAX_NAME_LENGTH:
            result.add(field_name, f"{label} must be less than 100 characters")


def create_order_validator() -> OrderValidator:
    """Create order validator."""
    return OrderValidator()
