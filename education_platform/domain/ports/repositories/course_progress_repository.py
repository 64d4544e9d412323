"""
CourseProgress Repository Port - Interface for learner progress persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional

from education_platform.domain.entities.course_progress import CourseProgress
from education_platform.domain.value_objects.identifier import Identifier


class CourseProgressRepository(ABC):
    @abstractmethod
    async def get_by_id(self, progress_id: Identifier) -> Optional[CourseProgress]: ...

    @abstractmethod
    async def save(self, progress: CourseProgress) -> None: ...
