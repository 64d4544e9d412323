"""
Register Person Command.

Emails are unique across the platform; registering an email that already
belongs to someone raises DuplicateIdentifierError.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from education_platform.application.common.interfaces import Command, CommandHandler
from education_platform.domain.entities.person import Person
from education_platform.domain.exceptions import DuplicateIdentifierError
from education_platform.domain.ports.repositories import PersonRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegisterPersonCommand(Command[Person]):
    first_name: str
    last_name: str
    email: str
    document: Optional[str] = None
    middle_name: Optional[str] = None
    second_last_name: Optional[str] = None


class RegisterPersonHandler(CommandHandler[Person]):
    def __init__(self, person_repository: PersonRepository):
        self._person_repository = person_repository

    async def execute(self, command: RegisterPersonCommand) -> Person:
        person = Person.create(
            first_name=command.first_name,
            last_name=command.last_name,
            email=command.email,
            document=command.document,
            middle_name=command.middle_name,
            second_last_name=command.second_last_name,
        )
        if await self._person_repository.get_by_email(person.email):
            raise DuplicateIdentifierError("Person", person.email)

        await self._person_repository.save(person)
        logger.info(f"[PERSON] Registered {person.id} segment={person.segment.value}")
        return person
