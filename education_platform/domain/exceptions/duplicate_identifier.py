"""
DuplicateIdentifierError - Raised when adding an entity whose identifier
already exists in the target collection.
Maps to: HTTP 409 Conflict
"""

from education_platform.domain.exceptions.domain_error import DomainError


class DuplicateIdentifierError(DomainError):
    """Raised when an identifier is already present in the collection"""

    def __init__(self, entity: str, identifier: object):
        super().__init__(f"{entity} {identifier} already exists.")
        self.entity = entity
        self.identifier = identifier
