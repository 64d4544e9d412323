"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and caught by the API layer,
which maps each kind to a response:

- DomainValidationError    → 422 Unprocessable Entity
- EntityNotFoundError      → 404 Not Found
- IndexOutOfRangeError     → 422 Unprocessable Entity
- DuplicateIdentifierError → 409 Conflict
- InvalidStateError        → 409 Conflict
"""

from education_platform.domain.exceptions.domain_error import DomainError
from education_platform.domain.exceptions.validation_error import (
    DomainValidationError,
    ValidationRule,
)
from education_platform.domain.exceptions.entity_not_found import EntityNotFoundError
from education_platform.domain.exceptions.index_out_of_range import IndexOutOfRangeError
from education_platform.domain.exceptions.duplicate_identifier import (
    DuplicateIdentifierError,
)
from education_platform.domain.exceptions.invalid_state import InvalidStateError

__all__ = [
    "DomainError",
    "DomainValidationError",
    "ValidationRule",
    "EntityNotFoundError",
    "IndexOutOfRangeError",
    "DuplicateIdentifierError",
    "InvalidStateError",
]
