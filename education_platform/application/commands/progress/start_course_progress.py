"""
Start Course Progress Command.

Creates the progress tracker for one learner on one course, with every
lesson not started and the first lesson selected.
"""

import logging
from dataclasses import dataclass

from education_platform.application.commands.courses.course_loader import load_course
from education_platform.application.common.interfaces import Command, CommandHandler
from education_platform.domain.entities.course_progress import CourseProgress
from education_platform.domain.ports.repositories import (
    CourseProgressRepository,
    CourseRepository,
)
from education_platform.domain.value_objects.identifier import Identifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StartCourseProgressCommand(Command[CourseProgress]):
    course_id: Identifier
    user_email: str


class StartCourseProgressHandler(CommandHandler[CourseProgress]):
    def __init__(
        self,
        course_repository: CourseRepository,
        progress_repository: CourseProgressRepository,
    ):
        self._course_repository = course_repository
        self._progress_repository = progress_repository

    async def execute(self, command: StartCourseProgressCommand) -> CourseProgress:
        course = await load_course(self._course_repository, command.course_id)
        progress = CourseProgress.from_course(course, command.user_email)
        await self._progress_repository.save(progress)
        logger.info(
            f"[PROGRESS] Started progress {progress.id} on course {course.id} "
            f"with {progress.lesson_count} lessons"
        )
        return progress
