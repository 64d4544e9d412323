"""
LessonProgress Entity - One learner's state for one course lesson.

Identity is the lesson id it tracks. Lifecycle: not started -> started -> ended,
and restart returns to not started.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from education_platform.domain.entities.lesson import Lesson
from education_platform.domain.exceptions import InvalidStateError
from education_platform.domain.exceptions.validation_error import (
    DomainValidationError,
    ValidationRule,
)
from education_platform.domain.value_objects.date_time import DateTime
from education_platform.domain.value_objects.duration import Duration
from education_platform.domain.value_objects.identifier import Identifier
from education_platform.domain.value_objects.simple_name import SimpleName


@dataclass(frozen=True)
class LessonProgress:
    lesson_id: Identifier
    lesson_name: SimpleName
    duration: Duration
    start_date: Optional[DateTime] = None
    end_date: Optional[DateTime] = None

    def __post_init__(self):
        if self.duration.is_zero():
            raise DomainValidationError(
                "Duration must be different from zero", ValidationRule.ZERO_VALUE
            )

    @classmethod
    def from_lesson(cls, lesson: Lesson) -> LessonProgress:
        return cls(lesson_id=lesson.id, lesson_name=lesson.name, duration=lesson.duration)

    @property
    def has_started(self) -> bool:
        return self.start_date is not None

    @property
    def has_ended(self) -> bool:
        return self.end_date is not None

    @property
    def is_in_progress(self) -> bool:
        return self.has_started and not self.has_ended

    @property
    def is_completed(self) -> bool:
        return self.has_ended

    def start(self, at: Optional[DateTime] = None) -> LessonProgress:
        if self.has_started:
            return self
        return replace(self, start_date=at or DateTime.now())

    def end(self, at: Optional[DateTime] = None) -> LessonProgress:
        if not self.has_started:
            raise InvalidStateError("Cannot end a lesson that has not started")
        if self.has_ended:
            return self
        return replace(self, end_date=at or DateTime.now())

    def restart(self) -> LessonProgress:
        if not self.has_started:
            return self
        return replace(self, start_date=None, end_date=None)
