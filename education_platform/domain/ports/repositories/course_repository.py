"""
Course Repository Port - Interface for course aggregate persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional

from education_platform.domain.entities.course import Course
from education_platform.domain.value_objects.identifier import Identifier


class CourseRepository(ABC):
    @abstractmethod
    async def get_by_id(self, course_id: Identifier) -> Optional[Course]: ...

    @abstractmethod
    async def save(self, course: Course) -> None: ...

    @abstractmethod
    async def delete(self, course_id: Identifier) -> bool: ...
