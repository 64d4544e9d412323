"""
EntityNotFoundError - Raised when an operation references an identifier
that is absent from the collection.
Maps to: HTTP 404 Not Found
"""

from typing import Optional

from education_platform.domain.exceptions.domain_error import DomainError


class EntityNotFoundError(DomainError):
    """Exception raised when a requested entity is not found."""

    def __init__(self, entity: str, identifier: Optional[object] = None):
        if identifier is None:
            message = f"{entity} was not found."
        else:
            message = f"{entity} {identifier} was not found."
        super().__init__(message)
        self.entity = entity
        self.identifier = identifier
