"""
Update Lesson Command.

Only the fields that are set are changed; the lesson keeps its identity
and position in the chapter.
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
class UpdateLessonCommand(Command[Course]):
    course_id: Identifier
    chapter_id: Identifier
    lesson_id: Identifier
    name: Optional[str] = None
    duration_seconds: Optional[int] = None
    video_url: Optional[str] = None


class UpdateLessonHandler(CommandHandler[Course]):
    def __init__(self, course_repository: CourseRepository):
        self._course_repository = course_repository

    async def execute(self, command: UpdateLessonCommand) -> Course:
        course = await load_course(self._course_repository, command.course_id)

        def apply(lesson: Lesson) -> Lesson:
            if command.name is not None:
                lesson = lesson.with_name(command.name)
            if command.duration_seconds is not None:
                lesson = lesson.with_duration(command.duration_seconds)
            if command.video_url is not None:
                lesson = lesson.with_video_url(command.video_url)
            return lesson

        updated = course.update_lesson_in_chapter(command.chapter_id, command.lesson_id, apply)
        await self._course_repository.save(updated)
        logger.info(f"[COURSE] Updated lesson {command.lesson_id} in course {course.id}")
        return updated
