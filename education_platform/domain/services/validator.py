"""
Validator - Stateless checks shared by value objects and entities.

Every ``validate_*`` function returns the value it checked so calls can be
chained, and raises DomainValidationError naming the violated rule.
"""

import re

from education_platform.domain.exceptions.validation_error import (
    DomainValidationError,
    ValidationRule,
)

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$")
NAME_CHARACTERS_PATTERN = re.compile(r"^[^\W\d_]+(?:[ '\-.]+[^\W\d_]+)*\.?$")

# Peruvian DNI check character tables, indexed by (11 - sum % 11) % 11
DNI_WEIGHTS = (3, 2, 7, 6, 5, 4, 3, 2)
DNI_NUMERIC_SERIES = "67890112345"
DNI_ALPHA_SERIES = "KABCDEFGHIJ"


def validate_not_empty(value: str, field: str = "value") -> str:
    if not value or not value.strip():
        raise DomainValidationError(f"{field} cannot be empty", ValidationRule.EMPTY)
    return value


def validate_min_length(value: str, min_length: int, field: str = "value") -> str:
    if len(value) < min_length:
        raise DomainValidationError(
            f"{field} must have at least {min_length} characters",
            ValidationRule.TOO_SHORT,
        )
    return value


def validate_max_length(value: str, max_length: int, field: str = "value") -> str:
    if len(value) > max_length:
        raise DomainValidationError(
            f"{field} must have at most {max_length} characters",
            ValidationRule.TOO_LONG,
        )
    return value


def validate_name_characters(value: str, field: str = "name") -> str:
    """Letters, plus spaces, apostrophes, hyphens and periods between them."""
    if not NAME_CHARACTERS_PATTERN.match(value):
        raise DomainValidationError(
            f"{field} contains invalid characters: {value}",
            ValidationRule.INVALID_CHARACTERS,
        )
    return value


def validate_whole_number(value: int, field: str = "value") -> int:
    """Plain ints only; bools and floats are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise DomainValidationError(
            f"{field} must be a whole number: {value!r}", ValidationRule.INVALID_FORMAT
        )
    return value


def validate_non_negative(value: int, field: str = "value") -> int:
    if value < 0:
        raise DomainValidationError(
            f"{field} cannot be negative: {value}", ValidationRule.NEGATIVE_VALUE
        )
    return value


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value))


def dni_check_characters(digits: str) -> tuple[str, str]:
    """Return the (numeric, alphabetic) check characters valid for ``digits``."""
    if len(digits) != len(DNI_WEIGHTS) or not digits.isdigit():
        raise DomainValidationError(
            f"Document number must have {len(DNI_WEIGHTS)} digits: {digits}",
            ValidationRule.INVALID_FORMAT,
        )
    checksum = sum(int(d) * w for d, w in zip(digits, DNI_WEIGHTS))
    index = (11 - checksum % 11) % 11
    return DNI_NUMERIC_SERIES[index], DNI_ALPHA_SERIES[index]
