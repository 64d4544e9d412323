"""
DomainValidationError - Raised when a value object or entity rule is violated.
Maps to: HTTP 422 Unprocessable Entity
"""

from enum import Enum

from education_platform.domain.exceptions.domain_error import DomainError


class ValidationRule(str, Enum):
    """Which construction rule was violated."""

    EMPTY = "empty"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    INVALID_FORMAT = "invalid_format"
    INVALID_CHARACTERS = "invalid_characters"
    INVALID_CHECKSUM = "invalid_checksum"
    NEGATIVE_VALUE = "negative_value"
    ZERO_VALUE = "zero_value"
    INVALID_DATE = "invalid_date"
    UNDERFLOW = "underflow"


class DomainValidationError(DomainError):
    """Exception raised for domain validation errors."""

    def __init__(self, message: str, rule: ValidationRule = ValidationRule.INVALID_FORMAT):
        super().__init__(message)
        self.rule = rule
