"""Shared lookup for course commands."""

from education_platform.domain.entities.course import Course
from education_platform.domain.exceptions import EntityNotFoundError
from education_platform.domain.ports.repositories import CourseRepository
from education_platform.domain.value_objects.identifier import Identifier


async def load_course(course_repository: CourseRepository, course_id: Identifier) -> Course:
    course = await course_repository.get_by_id(course_id)
    if not course:
        raise EntityNotFoundError("Course", course_id)
    return course
