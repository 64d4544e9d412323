"""Add Chapter Command."""

import logging
from dataclasses import dataclass
from typing import Optional

from education_platform.application.commands.courses.course_loader import load_course
from education_platform.application.common.interfaces import Command, CommandHandler
from education_platform.domain.entities.course import Course
from education_platform.domain.ports.repositories import CourseRepository
from education_platform.domain.value_objects.identifier import Identifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddChapterCommand(Command[Course]):
    course_id: Identifier
    name: str
    position: Optional[int] = None


class AddChapterHandler(CommandHandler[Course]):
    def __init__(self, course_repository: CourseRepository):
        self._course_repository = course_repository

    async def execute(self, command: AddChapterCommand) -> Course:
        course = await load_course(self._course_repository, command.course_id)
        updated = course.add_chapter(command.name, command.position)
        await self._course_repository.save(updated)
        logger.info(
            f"[COURSE] Added chapter '{command.name}' to course {course.id}, "
            f"chapters={updated.chapter_count}"
        )
        return updated
