"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique Identifier and compares equal by it
- Is immutable; operations return a new instance or raise
- Pure Python dataclasses (no ORM, no Pydantic)

Aggregates:
- Course (root) -> Chapter -> Lesson
- CourseProgress (root) -> LessonProgress
- Person
"""

from education_platform.domain.entities.lesson import Lesson
from education_platform.domain.entities.chapter import Chapter
from education_platform.domain.entities.course import Course
from education_platform.domain.entities.person import Person, Segment
from education_platform.domain.entities.lesson_progress import LessonProgress
from education_platform.domain.entities.course_progress import CourseEnded, CourseProgress

__all__ = [
    "Lesson",
    "Chapter",
    "Course",
    "Person",
    "Segment",
    "LessonProgress",
    "CourseProgress",
    "CourseEnded",
]
