"""Reorder Chapter Command."""

import logging
from dataclasses import dataclass

from education_platform.application.commands.courses.course_loader import load_course
from education_platform.application.common.interfaces import Command, CommandHandler
from education_platform.domain.entities.course import Course
from education_platform.domain.ports.repositories import CourseRepository
from education_platform.domain.value_objects.identifier import Identifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReorderChapterCommand(Command[Course]):
    course_id: Identifier
    chapter_id: Identifier
    new_index: int


class ReorderChapterHandler(CommandHandler[Course]):
    def __init__(self, course_repository: CourseRepository):
        self._course_repository = course_repository

    async def execute(self, command: ReorderChapterCommand) -> Course:
        course = await load_course(self._course_repository, command.course_id)
        updated = course.reorder_chapter(command.chapter_id, command.new_index)
        await self._course_repository.save(updated)
        logger.info(
            f"[COURSE] Moved chapter {command.chapter_id} to index {command.new_index} "
            f"in course {course.id}"
        )
        return updated
