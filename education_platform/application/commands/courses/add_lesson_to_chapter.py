"""
Add Lesson To Chapter Command.

Builds the Lesson from raw input, then inserts it into the chapter.
Duration is given in seconds.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from education_platform.application.commands.courses.course_loader import load_course
from education_platform.application.common.interfaces import Command, CommandHandler
from education_platform.domain.entities.course import Course
from education_platform.domain.entities.lesson import Lesson
from education_platform.domain.ports.repositories import CourseRepository
from education_platform.domain.value_objects.identifier import Identifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddLessonToChapterCommand(Command[Course]):
    course_id: Identifier
    chapter_id: Identifier
    name: str
    duration_seconds: int
    video_url: Optional[str] = None
    position: Optional[int] = None


class AddLessonToChapterHandler(CommandHandler[Course]):
    def __init__(self, course_repository: CourseRepository):
        self._course_repository = course_repository

    async def execute(self, command: AddLessonToChapterCommand) -> Course:
        course = await load_course(self._course_repository, command.course_id)
        lesson = Lesson.create(
            name=command.name,
            duration=command.duration_seconds,
            video_url=command.video_url,
        )
        updated = course.add_lesson_to_chapter(command.chapter_id, lesson, command.position)
        await self._course_repository.save(updated)
        logger.info(
            f"[COURSE] Added lesson {lesson.id} to chapter {command.chapter_id}, "
            f"course total={updated.total_duration}"
        )
        return updated
