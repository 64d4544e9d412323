"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class AddChapterCommand(Command[Course]):
        course_id: Identifier
        name: str

    class AddChapterHandler(CommandHandler[Course]):
        def __init__(self, course_repository: CourseRepository):
            self._course_repository = course_repository

        async def execute(self, command: AddChapterCommand) -> Course:
            course = await self._course_repository.get_by_id(command.course_id)
            updated = course.add_chapter(command.name)
            await self._course_repository.save(updated)
            return updated
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")
class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass

class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...

class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass

class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
