"""Course DTOs for API request/response."""

from __future__ import annotations

import datetime
from typing import Optional

from pydantic import BaseModel

from education_platform.domain.entities.chapter import Chapter
from education_platform.domain.entities.course import Course
from education_platform.domain.entities.lesson import Lesson


class LessonDTO(BaseModel):
    id: str
    name: str
    index: int
    duration_seconds: int
    duration: str
    video_url: Optional[str] = None

    @classmethod
    def from_entity(cls, lesson: Lesson) -> LessonDTO:
        return cls(
            id=str(lesson.id),
            name=lesson.name.value,
            index=lesson.index.value,
            duration_seconds=lesson.duration.total_seconds,
            duration=lesson.duration.format_hours(),
            video_url=str(lesson.video_url) if lesson.video_url else None,
        )


class ChapterDTO(BaseModel):
    id: str
    name: str
    index: int
    lesson_count: int
    total_duration_seconds: int
    lessons: list[LessonDTO]

    @classmethod
    def from_entity(cls, chapter: Chapter) -> ChapterDTO:
        return cls(
            id=str(chapter.id),
            name=chapter.name.value,
            index=chapter.index.value,
            lesson_count=chapter.lesson_count,
            total_duration_seconds=chapter.total_duration.total_seconds,
            lessons=[LessonDTO.from_entity(lesson) for lesson in chapter.lessons],
        )


class CourseDTO(BaseModel):
    """Full course tree returned to the frontend."""

    id: str
    name: str
    date: datetime.date
    chapter_count: int
    lesson_count: int
    total_duration_seconds: int
    total_duration: str
    chapters: list[ChapterDTO]

    @classmethod
    def from_entity(cls, course: Course) -> CourseDTO:
        return cls(
            id=str(course.id),
            name=course.name.value,
            date=course.date.value,
            chapter_count=course.chapter_count,
            lesson_count=course.lesson_count,
            total_duration_seconds=course.total_duration.total_seconds,
            total_duration=course.total_duration.format_hours(),
            chapters=[ChapterDTO.from_entity(chapter) for chapter in course.chapters],
        )
