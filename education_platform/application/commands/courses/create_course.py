"""
Create Course Command.

Creates an empty course (no chapters) and stores it.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from education_platform.application.common.interfaces import Command, CommandHandler
from education_platform.domain.entities.course import Course
from education_platform.domain.ports.repositories import CourseRepository
from education_platform.domain.value_objects.date import Date

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateCourseCommand(Command[Course]):
    name: str
    date: Optional[Date] = None


class CreateCourseHandler(CommandHandler[Course]):
    _course_repository: CourseRepository

    def __init__(self, course_repository: CourseRepository):
        self._course_repository = course_repository

    async def execute(self, command: CreateCourseCommand) -> Course:
        course = Course.create(name=command.name, date=command.date)
        await self._course_repository.save(course)
        logger.info(f"[COURSE] Created course {course.id} '{course.name}'")
        return course
