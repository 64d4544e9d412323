"""Get Course Query."""

from dataclasses import dataclass

from education_platform.application.common.interfaces import Query, QueryHandler
from education_platform.application.dto.course import CourseDTO
from education_platform.domain.exceptions import EntityNotFoundError
from education_platform.domain.ports.repositories import CourseRepository
from education_platform.domain.value_objects.identifier import Identifier


@dataclass(frozen=True)
class GetCourseQuery(Query[CourseDTO]):
    course_id: Identifier


class GetCourseHandler(QueryHandler[CourseDTO]):
    def __init__(self, course_repository: CourseRepository):
        self._course_repository = course_repository

    async def execute(self, query: GetCourseQuery) -> CourseDTO:
        course = await self._course_repository.get_by_id(query.course_id)
        if not course:
            raise EntityNotFoundError("Course", query.course_id)
        return CourseDTO.from_entity(course)
