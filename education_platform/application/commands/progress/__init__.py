"""Course progress commands."""

from .start_course_progress import StartCourseProgressCommand, StartCourseProgressHandler
from .toggle_lesson_completion import (
    ToggleLessonCompletionCommand,
    ToggleLessonCompletionHandler,
)

__all__ = [
    "StartCourseProgressCommand",
    "StartCourseProgressHandler",
    "ToggleLessonCompletionCommand",
    "ToggleLessonCompletionHandler",
]
