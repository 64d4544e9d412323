"""Course commands."""

from .create_course import CreateCourseCommand, CreateCourseHandler
from .add_chapter import AddChapterCommand, AddChapterHandler
from .remove_chapter import RemoveChapterCommand, RemoveChapterHandler
from .reorder_chapter import ReorderChapterCommand, ReorderChapterHandler
from .add_lesson_to_chapter import AddLessonToChapterCommand, AddLessonToChapterHandler
from .remove_lesson_from_chapter import (
    RemoveLessonFromChapterCommand,
    RemoveLessonFromChapterHandler,
)
from .reorder_lesson_in_chapter import (
    ReorderLessonInChapterCommand,
    ReorderLessonInChapterHandler,
)
from .update_lesson import UpdateLessonCommand, UpdateLessonHandler

__all__ = [
    "CreateCourseCommand",
    "CreateCourseHandler",
    "AddChapterCommand",
    "AddChapterHandler",
    "RemoveChapterCommand",
    "RemoveChapterHandler",
    "ReorderChapterCommand",
    "ReorderChapterHandler",
    "AddLessonToChapterCommand",
    "AddLessonToChapterHandler",
    "RemoveLessonFromChapterCommand",
    "RemoveLessonFromChapterHandler",
    "ReorderLessonInChapterCommand",
    "ReorderLessonInChapterHandler",
    "UpdateLessonCommand",
    "UpdateLessonHandler",
]
