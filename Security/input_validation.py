"""
INPUT VALIDATION
================
Structural checks for contact form submissions.
"""

# FLOW:
# - validate_contact_data() checks the raw field map and returns a verdict.
# - The verdict keeps named failures; error_message renders them for the view.
# HOW:
# - Names must be letters only, email gets a coarse local@domain.tld shape check.
# - Every rule is evaluated, failures are reported in field order.

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

FIRST_NAME = "firstName"
LAST_NAME = "lastName"
EMAIL_ADDRESS = "emailAddress"
NOTES = "notes"
CONTACT_FIELDS = (FIRST_NAME, LAST_NAME, EMAIL_ADDRESS, NOTES)

NAME_PATTERN = r"[A-Za-z]+"
# Shape check only, not RFC 5322.
EMAIL_PATTERN = r"\S+@\S+\.\S+"

ERROR_PREAMBLE = "Please correct the following issues:"


class ValidationFailure(Enum):
    FIRST_NAME = "First name should contain only letters."
    LAST_NAME = "Last name should contain only letters."
    EMAIL_ADDRESS = "Please provide a valid email address."

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class ValidationResult:
    failures: tuple[ValidationFailure, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.failures

    @property
    def error_message(self) -> str:
        return ERROR_PREAMBLE + "".join(f" {failure.message}" for failure in self.failures)

    def has_failure(self, failure: ValidationFailure) -> bool:
        return failure in self.failures


def validate_allowlist(value: str | None, pattern: str) -> str | None:
    if value is None:
        return None
    if not re.fullmatch(pattern, value):
        return None
    return value


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _is_valid_name(value: Any) -> bool:
    return _is_non_empty_string(value) and validate_allowlist(value, NAME_PATTERN) is not None


def _is_invalid_email(value: Any) -> bool:
    if not value:
        return False
    return validate_allowlist(str(value), EMAIL_PATTERN) is None


def validate_contact_data(data: Mapping[str, Any]) -> ValidationResult:
    failures = []
    if not _is_valid_name(data.get(FIRST_NAME)):
        failures.append(ValidationFailure.FIRST_NAME)
    if not _is_valid_name(data.get(LAST_NAME)):
        failures.append(ValidationFailure.LAST_NAME)
    if _is_invalid_email(data.get(EMAIL_ADDRESS)):
        failures.append(ValidationFailure.EMAIL_ADDRESS)
    return ValidationResult(failures=tuple(failures))
