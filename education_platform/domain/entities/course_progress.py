"""
CourseProgress Aggregate Root - One learner's progress through a course.

Holds a LessonProgress per course lesson (in course order), the lesson the
learner has selected, and the date the course was concluded. When the last
lesson is completed a CourseEnded event is published once through the
progress' DomainEventDispatcher.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Optional

from education_platform.domain.entities.course import Course
from education_platform.domain.entities.lesson_progress import LessonProgress
from education_platform.domain.exceptions import (
    DuplicateIdentifierError,
    EntityNotFoundError,
)
from education_platform.domain.exceptions.validation_error import (
    DomainValidationError,
    ValidationRule,
)
from education_platform.domain.services.event_dispatcher import DomainEventDispatcher
from education_platform.domain.value_objects.date_time import DateTime
from education_platform.domain.value_objects.duration import Duration
from education_platform.domain.value_objects.email import Email
from education_platform.domain.value_objects.identifier import Identifier
from education_platform.domain.value_objects.simple_name import SimpleName

LESSON_PROGRESS = "LessonProgress"
DEFAULT_MIN_COMPLETION_RATIO = 0.2


@dataclass(frozen=True)
class CourseEnded:
    """Published when every lesson of a course progress is completed."""

    progress_id: Identifier
    course_id: Identifier
    user_email: Email
    ended_at: DateTime


@dataclass(frozen=True, eq=False)
class CourseProgress:
    id: Identifier
    course_id: Identifier
    course_name: SimpleName
    user_email: Email
    lessons: tuple[LessonProgress, ...]
    selected_lesson_id: Identifier
    creation_date: DateTime
    end_date: Optional[DateTime] = None
    dispatcher: DomainEventDispatcher = field(
        default_factory=DomainEventDispatcher, repr=False
    )

    def __post_init__(self):
        lessons = tuple(self.lessons)
        if not lessons:
            raise DomainValidationError(
                "Lessons can't be empty. At least one lesson must be added to the course.",
                ValidationRule.EMPTY,
            )
        seen: set[Identifier] = set()
        for lesson in lessons:
            if lesson.lesson_id in seen:
                raise DuplicateIdentifierError(LESSON_PROGRESS, lesson.lesson_id)
            seen.add(lesson.lesson_id)
        if self.selected_lesson_id not in seen:
            raise EntityNotFoundError(LESSON_PROGRESS, self.selected_lesson_id)
        object.__setattr__(self, "lessons", lessons)

    @classmethod
    def create(
        cls,
        course_id: Identifier,
        course_name: str,
        user_email: str,
        lessons: Iterable[LessonProgress],
        selected_lesson_id: Optional[Identifier] = None,
        creation_date: Optional[DateTime] = None,
        end_date: Optional[DateTime] = None,
        dispatcher: Optional[DomainEventDispatcher] = None,
    ) -> CourseProgress:
        lessons = tuple(lessons)
        if selected_lesson_id is None and lessons:
            selected_lesson_id = lessons[0].lesson_id
        now = DateTime.now()
        concluded = end_date
        if concluded is None and lessons and all(lp.is_completed for lp in lessons):
            concluded = max(lp.end_date for lp in lessons)
        progress = cls(
            id=Identifier.generate(),
            course_id=course_id,
            course_name=SimpleName(course_name),
            user_email=Email(user_email),
            lessons=lessons,
            selected_lesson_id=selected_lesson_id,
            creation_date=creation_date or now,
            end_date=concluded,
            dispatcher=dispatcher or DomainEventDispatcher(),
        )
        if end_date is None and concluded is not None:
            progress.publish_ended()
        return progress

    @classmethod
    def from_course(
        cls,
        course: Course,
        user_email: str,
        dispatcher: Optional[DomainEventDispatcher] = None,
    ) -> CourseProgress:
        """Start tracking ``course`` for a learner; every lesson begins not started."""
        return cls.create(
            course_id=course.id,
            course_name=course.name.value,
            user_email=user_email,
            lessons=[LessonProgress.from_lesson(lesson) for lesson in course.all_lessons()],
            dispatcher=dispatcher,
        )

    def sync_with(self, course: Course) -> CourseProgress:
        """Follow structural changes of ``course``.

        Lessons still present keep their progress (with refreshed name and
        duration), new lessons start fresh, removed lessons are dropped.
        """
        existing = {lp.lesson_id: lp for lp in self.lessons}
        lessons = []
        for lesson in course.all_lessons():
            current = existing.get(lesson.id)
            if current is None:
                lessons.append(LessonProgress.from_lesson(lesson))
            else:
                lessons.append(
                    replace(current, lesson_name=lesson.name, duration=lesson.duration)
                )
        if not lessons:
            raise DomainValidationError(
                "Lessons can't be empty. At least one lesson must be added to the course.",
                ValidationRule.EMPTY,
            )
        selected = self.selected_lesson_id
        if all(lp.lesson_id != selected for lp in lessons):
            selected = lessons[0].lesson_id
        return self._evolve(
            tuple(lessons),
            selected_lesson_id=selected,
            course_name=course.name,
        )

    # ==================== LESSON LIFECYCLE ====================

    def start_lesson(self, lesson_id: Identifier, at: Optional[DateTime] = None) -> CourseProgress:
        position = self._position(lesson_id)
        return self._replace_lesson(position, self.lessons[position].start(at))

    def end_lesson(self, lesson_id: Identifier, at: Optional[DateTime] = None) -> CourseProgress:
        position = self._position(lesson_id)
        if self.is_completed:
            return self
        return self._replace_lesson(position, self.lessons[position].end(at), at)

    def restart_lesson(self, lesson_id: Identifier) -> CourseProgress:
        position = self._position(lesson_id)
        return self._replace_lesson(position, self.lessons[position].restart())

    def toggle_lesson_completion(
        self, lesson_id: Identifier, at: Optional[DateTime] = None
    ) -> CourseProgress:
        """Complete the lesson (starting it first if needed), or restart it if completed."""
        position = self._position(lesson_id)
        lesson = self.lessons[position]
        if lesson.is_completed:
            return self._replace_lesson(position, lesson.restart())
        return self._replace_lesson(position, lesson.start(at).end(at), at)

    def start_selected_lesson(self, at: Optional[DateTime] = None) -> CourseProgress:
        return self.start_lesson(self.selected_lesson_id, at)

    def end_selected_lesson(self, at: Optional[DateTime] = None) -> CourseProgress:
        return self.end_lesson(self.selected_lesson_id, at)

    def end_and_select_next_lesson(self, at: Optional[DateTime] = None) -> CourseProgress:
        return self.end_selected_lesson(at).select_next_lesson()

    # ==================== NAVIGATION ====================

    @property
    def selected_lesson(self) -> LessonProgress:
        return self.lessons[self._position(self.selected_lesson_id)]

    def select_lesson(self, lesson_id: Identifier) -> CourseProgress:
        self._position(lesson_id)
        return replace(self, selected_lesson_id=lesson_id)

    def select_next_lesson(self) -> CourseProgress:
        position = self._position(self.selected_lesson_id)
        if position + 1 >= len(self.lessons):
            return self
        return replace(self, selected_lesson_id=self.lessons[position + 1].lesson_id)

    def select_previous_lesson(self) -> CourseProgress:
        position = self._position(self.selected_lesson_id)
        if position == 0:
            return self
        return replace(self, selected_lesson_id=self.lessons[position - 1].lesson_id)

    def is_first_lesson_selected(self) -> bool:
        return self._position(self.selected_lesson_id) == 0

    def is_last_lesson_selected(self) -> bool:
        return self._position(self.selected_lesson_id) == len(self.lessons) - 1

    def get_lesson_progress(self, lesson_id: Identifier) -> LessonProgress:
        return self.lessons[self._position(lesson_id)]

    # ==================== CALCULATIONS ====================

    @property
    def lesson_count(self) -> int:
        return len(self.lessons)

    @property
    def is_completed(self) -> bool:
        return all(lp.is_completed for lp in self.lessons)

    @property
    def total_duration(self) -> Duration:
        return sum((lp.duration for lp in self.lessons), Duration.zero())

    @property
    def completed_duration(self) -> Duration:
        return sum((lp.duration for lp in self.lessons if lp.has_ended), Duration.zero())

    @property
    def percentage_completed(self) -> int:
        """Share of the course duration already completed, 0-100, rounded down."""
        total = self.total_duration.total_seconds
        if total == 0:
            return 0
        return self.completed_duration.total_seconds * 100 // total

    @property
    def lessons_started_count(self) -> int:
        return sum(1 for lp in self.lessons if lp.has_started)

    @property
    def lessons_completed_count(self) -> int:
        return sum(1 for lp in self.lessons if lp.is_completed)

    def fraud_risk_score(self, min_completion_ratio: float = DEFAULT_MIN_COMPLETION_RATIO) -> int:
        """Percentage of consecutive started lessons whose start times are suspiciously close.

        A pair is suspicious when the next lesson started sooner than
        ``min_completion_ratio`` of the previous lesson's duration.
        """
        suspicious = 0
        evaluated = 0
        for current, following in zip(self.lessons, self.lessons[1:]):
            if current.start_date is None or following.start_date is None:
                continue
            min_expected_gap = int(current.duration.total_seconds * min_completion_ratio)
            actual_gap = abs(current.start_date.seconds_until(following.start_date))
            evaluated += 1
            if actual_gap < min_expected_gap:
                suspicious += 1
        if evaluated == 0:
            return 0
        return suspicious * 100 // evaluated

    # ==================== EVENTS ====================

    def publish_ended(self) -> None:
        self.dispatcher.notify(
            CourseEnded(
                progress_id=self.id,
                course_id=self.course_id,
                user_email=self.user_email,
                ended_at=self.end_date or DateTime.now(),
            )
        )

    def _position(self, lesson_id: Identifier) -> int:
        for position, lesson in enumerate(self.lessons):
            if lesson.lesson_id == lesson_id:
                return position
        raise EntityNotFoundError(LESSON_PROGRESS, lesson_id)

    def _replace_lesson(
        self, position: int, lesson: LessonProgress, at: Optional[DateTime] = None
    ) -> CourseProgress:
        lessons = (*self.lessons[:position], lesson, *self.lessons[position + 1 :])
        return self._evolve(lessons, at=at)

    def _evolve(
        self,
        lessons: tuple[LessonProgress, ...],
        selected_lesson_id: Optional[Identifier] = None,
        course_name: Optional[SimpleName] = None,
        at: Optional[DateTime] = None,
    ) -> CourseProgress:
        end_date = self.end_date
        if end_date is None and all(lp.is_completed for lp in lessons):
            end_date = at or DateTime.now()
        progress = replace(
            self,
            lessons=lessons,
            selected_lesson_id=selected_lesson_id or self.selected_lesson_id,
            course_name=course_name or self.course_name,
            end_date=end_date,
        )
        if self.end_date is None and end_date is not None:
            progress.publish_ended()
        return progress

    def __eq__(self, other) -> bool:
        if not isinstance(other, CourseProgress):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
