"""
Person Entity - An identified individual on the platform.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from education_platform.domain.value_objects.document_id import DocumentId
from education_platform.domain.value_objects.email import Email
from education_platform.domain.value_objects.identifier import Identifier
from education_platform.domain.value_objects.person_name import PersonName


class Segment(str, Enum):
    """Grouping used for reporting; derived, never stored."""

    DOCUMENTED = "documented"
    UNDOCUMENTED = "undocumented"


@dataclass(frozen=True, eq=False)
class Person:
    id: Identifier
    name: PersonName
    email: Email
    document: Optional[DocumentId] = None

    @classmethod
    def create(
        cls,
        first_name: str,
        last_name: str,
        email: str,
        document: Optional[str] = None,
        middle_name: Optional[str] = None,
        second_last_name: Optional[str] = None,
    ) -> Person:
        """Factory method to create a new Person with a generated ID."""
        return cls(
            id=Identifier.generate(),
            name=PersonName.create(first_name, last_name, middle_name, second_last_name),
            email=Email(email),
            document=DocumentId(document) if document is not None else None,
        )

    @property
    def segment(self) -> Segment:
        if self.document is not None:
            return Segment.DOCUMENTED
        return Segment.UNDOCUMENTED

    def with_name(self, name: PersonName) -> Person:
        return replace(self, name=name)

    def with_email(self, email: str) -> Person:
        return replace(self, email=Email(email))

    def with_document(self, document: Optional[str]) -> Person:
        return replace(self, document=DocumentId(document) if document is not None else None)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
