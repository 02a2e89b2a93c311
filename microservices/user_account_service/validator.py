"""
User payload validation

Pure field checks for POST and PUT bodies. Every rule is evaluated so a
single response can report all problems at once. Never touches the store.
"""

import re
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, List, Optional

EMAIL_PATTERN = re.compile(r'^[^@]+@[^@]+\.[^@]+$')
COUNTRY_CODE_PATTERN = re.compile(r'^[A-Z]{2}$')
ISO_DATE_PATTERN = re.compile(r'^[0-9]{4}-[0-9]{2}-[0-9]{2}$')

DOCUMENT_FIELD = "personalIdDocument"


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


@dataclass
class ValidationResult:
    """Outcome of validating one payload; valid when no errors were found"""
    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


class UserValidator:
    """
    Validates a raw user representation

    Args:
        clock: Returns the current date; defaults to today in UTC
    """

    def __init__(self, clock: Optional[Callable[[], date]] = None):
        self._today = clock or _utc_today

    def validate(self, candidate: Any) -> ValidationResult:
        """
        Check a full user payload against every field rule

        Args:
            candidate: Decoded request body

        Returns:
            ValidationResult listing every violated rule
        """
        if not isinstance(candidate, dict):
            return ValidationResult(errors=["Request body must be a JSON object"])

        errors: List[str] = []
        today = self._today()

        self._require_text(candidate, "firstName", errors)
        self._require_text(candidate, "lastName", errors)

        email = self._require_text(candidate, "email", errors)
        if email is not None and not EMAIL_PATTERN.match(email):
            errors.append("email must be a valid email address")

        date_of_birth = self._require_date(candidate, "dateOfBirth", errors)
        if date_of_birth is not None and date_of_birth > today:
            errors.append("dateOfBirth must not be in the future")

        self._validate_document(candidate.get(DOCUMENT_FIELD), today, errors)

        return ValidationResult(errors=errors)

    def _validate_document(self, document: Any, today: date, errors: List[str]) -> None:
        if document is None:
            errors.append(f"{DOCUMENT_FIELD} is required")
            return
        if not isinstance(document, dict):
            errors.append(f"{DOCUMENT_FIELD} must be an object")
            return

        self._require_text(document, "documentId", errors, prefix=DOCUMENT_FIELD)

        country = self._require_text(document, "countryOfIssue", errors, prefix=DOCUMENT_FIELD)
        if country is not None and not COUNTRY_CODE_PATTERN.match(country):
            errors.append(
                f"{DOCUMENT_FIELD}.countryOfIssue must be an ISO 3166-1 alpha-2 code (two uppercase letters)"
            )

        valid_until = self._require_date(document, "validUntil", errors, prefix=DOCUMENT_FIELD)
        if valid_until is not None and valid_until < today:
            errors.append(f"{DOCUMENT_FIELD}.validUntil must not be in the past")

    @staticmethod
    def _require_text(
        data: Dict[str, Any], name: str, errors: List[str], prefix: str = ""
    ) -> Optional[str]:
        """Return the trimmed value, or None after recording an error"""
        label = f"{prefix}.{name}" if prefix else name
        value = data.get(name)
        if value is None:
            errors.append(f"{label} is required")
            return None
        if not isinstance(value, str):
            errors.append(f"{label} must be a string")
            return None
        if not value.strip():
            errors.append(f"{label} must not be empty")
            return None
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            # Lone surrogates decode from JSON escapes but cannot be stored or echoed
            errors.append(f"{label} must be valid text")
            return None
        return value.strip()

    @classmethod
    def _require_date(
        cls, data: Dict[str, Any], name: str, errors: List[str], prefix: str = ""
    ) -> Optional[date]:
        label = f"{prefix}.{name}" if prefix else name
        text = cls._require_text(data, name, errors, prefix=prefix)
        if text is None:
            return None
        if not ISO_DATE_PATTERN.match(text):
            errors.append(f"{label} must be an ISO 8601 date (YYYY-MM-DD)")
            return None
        try:
            return date.fromisoformat(text)
        except ValueError:
            errors.append(f"{label} is not a valid calendar date")
            return None
