"""Validation result value object.

ONLY integrity inspection outcome - hard errors, soft warnings and
the metadata computed for the inspected file.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class FileMetadata:
    """Facts about the inspected file."""

    file_size: int
    file_name: str
    detected_type: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "detectedType": self.detected_type,
            "fileSize": self.file_size,
            "fileName": self.file_name,
        }


@dataclass
class ValidationResult:
    """Outcome of integrity inspection.

    Validity is derived from the error list; warnings never affect it.
    """

    metadata: FileMetadata
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "metadata": self.metadata.to_dict(),
        }
