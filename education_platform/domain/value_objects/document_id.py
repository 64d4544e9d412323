"""
DocumentId Value Object - Peruvian national identity number (DNI).

Format: XXXXXXXX-Y, eight digits and a check character. The check character
is either the numeric or the alphabetic entry of a modulo-11 checksum over
the digits weighted 3, 2, 7, 6, 5, 4, 3, 2.

Example: 12345678-1 (or 12345678-E)
"""

from dataclasses import dataclass
import re

from education_platform.domain.exceptions.validation_error import (
    DomainValidationError,
    ValidationRule,
)
from education_platform.domain.services import validator


@dataclass(frozen=True)
class DocumentId:
    value: str  # full document, XXXXXXXX-Y

    _DNI_PATTERN = re.compile(r"^[0-9]{8}-[0-9A-K]$")

    def __post_init__(self):
        trimmed = (self.value or "").strip()
        validator.validate_not_empty(trimmed, "Document")
        if not self._DNI_PATTERN.match(trimmed):
            raise DomainValidationError(
                f"Incorrect document format (expected XXXXXXXX-Y where X is a digit "
                f"and Y is 0-9 or A-K): {trimmed}",
                ValidationRule.INVALID_FORMAT,
            )

        number, check_character = trimmed.split("-")
        expected_numeric, expected_alpha = validator.dni_check_characters(number)
        if check_character not in (expected_numeric, expected_alpha):
            raise DomainValidationError(
                f"Incorrect check character: expected {expected_numeric} or "
                f"{expected_alpha}, received {check_character}",
                ValidationRule.INVALID_CHECKSUM,
            )
        object.__setattr__(self, "value", trimmed)

    @property
    def number(self) -> str:
        return self.value.split("-")[0]

    @property
    def check_character(self) -> str:
        return self.value.split("-")[1]

    def __str__(self) -> str:
        return self.value
