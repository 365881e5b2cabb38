from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from Security.input_sanitization import sanitize_contact_data
from Security.input_validation import ValidationResult, validate_contact_data

from .schemas import ContactDetails


@dataclass(frozen=True)
class GateOutcome:
    verdict: ValidationResult
    contact: Optional[ContactDetails] = None

    @property
    def accepted(self) -> bool:
        return self.verdict.is_valid


def check_contact_submission(field_map: Mapping[str, Any]) -> GateOutcome:
    """
    Validate a submitted field map and, only when it passes, sanitize it.
    Shared by the create and update routes.
    """
    verdict = validate_contact_data(field_map)
    if not verdict.is_valid:
        return GateOutcome(verdict=verdict)
    cleaned = sanitize_contact_data(field_map)
    return GateOutcome(verdict=verdict, contact=ContactDetails.from_field_map(cleaned))
