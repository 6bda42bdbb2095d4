"""Order validation result value objects."""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class FieldError:
    """Validation failure for one payload field."""

    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass
class OrderValidationResult:
    """Outcome of order payload validation."""

    errors: List[FieldError] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def add(self, field_name: str, message: str) -> None:
        self.errors.append(FieldError(field_name, message))
