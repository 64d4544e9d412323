"""Remove Lesson From Chapter Command."""

import logging
from dataclasses import dataclass

from education_platform.application.commands.courses.course_loader import load_course
from education_platform.application.common.interfaces import Command, CommandHandler
from education_platform.domain.entities.course import Course
from education_platform.domain.ports.repositories import CourseRepository
from education_platform.domain.value_objects.identifier import Identifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemoveLessonFromChapterCommand(Command[Course]):
    course_id: Identifier
    chapter_id: Identifier
    lesson_id: Identifier


class RemoveLessonFromChapterHandler(CommandHandler[Course]):
    def __init__(self, course_repository: CourseRepository):
        self._course_repository = course_repository

    async def execute(self, command: RemoveLessonFromChapterCommand) -> Course:
        course = await load_course(self._course_repository, command.course_id)
        updated = course.remove_lesson_from_chapter(command.chapter_id, command.lesson_id)
        await self._course_repository.save(updated)
        logger.info(
            f"[COURSE] Removed lesson {command.lesson_id} from chapter {command.chapter_id}"
        )
        return updated
