"""
Email Value Object - Wraps an email address with validation.
"""

from dataclasses import dataclass

from education_platform.domain.exceptions.validation_error import (
    DomainValidationError,
    ValidationRule,
)
from education_platform.domain.services import validator

LOCAL_PART_SYMBOLS = frozenset("._%+-")
DOMAIN_SYMBOLS = frozenset(".-")


@dataclass(frozen=True)
class Email:
    value: str  # email address, stored trimmed

    def __post_init__(self):
        trimmed = (self.value or "").strip()
        validator.validate_not_empty(trimmed, "Email")

        parts = trimmed.split("@")
        if len(parts) != 2:
            raise DomainValidationError(
                f"Email must contain exactly one '@': {trimmed}",
                ValidationRule.INVALID_FORMAT,
            )
        local_part, domain = parts
        validator.validate_not_empty(local_part, "Email local part")
        validator.validate_not_empty(domain, "Email domain")
        if "." not in domain:
            raise DomainValidationError(
                f"Missing domain in email address: {trimmed}",
                ValidationRule.INVALID_FORMAT,
            )
        if not all(c.isalnum() or c in LOCAL_PART_SYMBOLS for c in local_part) or not all(
            c.isalnum() or c in DOMAIN_SYMBOLS for c in domain
        ):
            raise DomainValidationError(
                f"Email contains invalid characters: {trimmed}",
                ValidationRule.INVALID_CHARACTERS,
            )
        if not validator.is_valid_email(trimmed):
            raise DomainValidationError(
                f"Invalid email: {trimmed}", ValidationRule.INVALID_FORMAT
            )
        object.__setattr__(self, "value", trimmed)

    @property
    def local_part(self) -> str:
        return self.value.split("@")[0]

    @property
    def domain(self) -> str:
        return self.value.split("@")[1]

    def __str__(self) -> str:
        return self.value
