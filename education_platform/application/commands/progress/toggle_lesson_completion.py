"""Toggle Lesson Completion Command."""

import logging
from dataclasses import dataclass

from education_platform.application.common.interfaces import Command, CommandHandler
from education_platform.domain.entities.course_progress import CourseProgress
from education_platform.domain.exceptions import EntityNotFoundError
from education_platform.domain.ports.repositories import CourseProgressRepository
from education_platform.domain.value_objects.identifier import Identifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToggleLessonCompletionCommand(Command[CourseProgress]):
    progress_id: Identifier
    lesson_id: Identifier


class ToggleLessonCompletionHandler(CommandHandler[CourseProgress]):
    def __init__(self, progress_repository: CourseProgressRepository):
        self._progress_repository = progress_repository

    async def execute(self, command: ToggleLessonCompletionCommand) -> CourseProgress:
        progress = await self._progress_repository.get_by_id(command.progress_id)
        if not progress:
            raise EntityNotFoundError("CourseProgress", command.progress_id)

        updated = progress.toggle_lesson_completion(command.lesson_id)
        await self._progress_repository.save(updated)
        logger.info(
            f"[PROGRESS] Toggled lesson {command.lesson_id} in {progress.id}, "
            f"completed={updated.percentage_completed}%"
        )
        return updated
