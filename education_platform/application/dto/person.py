"""Person DTOs for API request/response."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from education_platform.domain.entities.person import Person


class PersonDTO(BaseModel):
    id: str
    full_name: str
    email: str
    document: Optional[str] = None
    segment: str

    @classmethod
    def from_entity(cls, person: Person) -> PersonDTO:
        return cls(
            id=str(person.id),
            full_name=person.name.full_name,
            email=person.email.value,
            document=str(person.document) if person.document else None,
            segment=person.segment.value,
        )


class SegmentGroupDTO(BaseModel):
    segment: str
    people: list[PersonDTO]
    total: int
