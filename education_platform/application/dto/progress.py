"""Progress DTOs for API request/response."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from education_platform.domain.entities.course_progress import CourseProgress
from education_platform.domain.entities.lesson_progress import LessonProgress


class LessonProgressDTO(BaseModel):
    lesson_id: str
    lesson_name: str
    duration_seconds: int
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    completed: bool

    @classmethod
    def from_entity(cls, lesson: LessonProgress) -> LessonProgressDTO:
        return cls(
            lesson_id=str(lesson.lesson_id),
            lesson_name=lesson.lesson_name.value,
            duration_seconds=lesson.duration.total_seconds,
            start_date=lesson.start_date.value if lesson.start_date else None,
            end_date=lesson.end_date.value if lesson.end_date else None,
            completed=lesson.is_completed,
        )


class ProgressSummaryDTO(BaseModel):
    """Learner progress with completion and fraud indicators."""

    id: str
    course_id: str
    course_name: str
    user_email: str
    selected_lesson_id: str
    percentage_completed: int
    lessons_started: int
    lessons_completed: int
    fraud_risk_score: int
    end_date: Optional[datetime] = None
    lessons: list[LessonProgressDTO]

    @classmethod
    def from_entity(cls, progress: CourseProgress, fraud_risk_score: int) -> ProgressSummaryDTO:
        return cls(
            id=str(progress.id),
            course_id=str(progress.course_id),
            course_name=progress.course_name.value,
            user_email=progress.user_email.value,
            selected_lesson_id=str(progress.selected_lesson_id),
            percentage_completed=progress.percentage_completed,
            lessons_started=progress.lessons_started_count,
            lessons_completed=progress.lessons_completed_count,
            fraud_risk_score=fraud_risk_score,
            end_date=progress.end_date.value if progress.end_date else None,
            lessons=[LessonProgressDTO.from_entity(lp) for lp in progress.lessons],
        )
