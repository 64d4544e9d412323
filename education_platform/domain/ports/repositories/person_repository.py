"""
Person Repository Port - Interface for person persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional

from education_platform.domain.entities.person import Person
from education_platform.domain.value_objects.email import Email
from education_platform.domain.value_objects.identifier import Identifier


class PersonRepository(ABC):
    @abstractmethod
    async def get_by_id(self, person_id: Identifier) -> Optional[Person]: ...

    @abstractmethod
    async def get_by_email(self, email: Email) -> Optional[Person]: ...

    @abstractmethod
    async def list_all(self, limit: int = 100) -> list[Person]: ...

    @abstractmethod
    async def save(self, person: Person) -> None: ...
