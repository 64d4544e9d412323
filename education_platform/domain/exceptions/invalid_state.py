"""
InvalidStateError - Raised when a lifecycle transition is not allowed
from the current state (e.g. ending a lesson that never started).
Maps to: HTTP 409 Conflict
"""

from education_platform.domain.exceptions.domain_error import DomainError


class InvalidStateError(DomainError):
    """Raised when an entity cannot move to the requested state"""
