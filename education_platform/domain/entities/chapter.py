"""
Chapter Entity - An ordered group of Lessons inside a Course.

Invariants, re-established on every construction:
- lesson Index values are 0..lesson_count-1 in tuple order
- lesson identifiers are unique within the chapter
- lesson_count and total_duration are derived from the lessons

Every operation returns a new Chapter; the receiver is never modified.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable, Iterable, Optional, Union

from education_platform.domain.entities import ordering
from education_platform.domain.entities.lesson import Lesson, as_index
from education_platform.domain.exceptions import EntityNotFoundError
from education_platform.domain.value_objects.duration import Duration
from education_platform.domain.value_objects.identifier import Identifier
from education_platform.domain.value_objects.index import Index
from education_platform.domain.value_objects.simple_name import SimpleName

LESSON = "Lesson"


@dataclass(frozen=True, eq=False)
class Chapter:
    id: Identifier
    name: SimpleName
    index: Index = field(default_factory=Index.first)
    lessons: tuple[Lesson, ...] = ()
    lesson_count: int = field(init=False)
    total_duration: Duration = field(init=False)

    def __post_init__(self):
        lessons = tuple(self.lessons)
        ordering.ensure_unique(lessons, LESSON)
        lessons = tuple(
            lesson if lesson.index.value == position else lesson.with_index(position)
            for position, lesson in enumerate(lessons)
        )
        object.__setattr__(self, "lessons", lessons)
        object.__setattr__(self, "lesson_count", len(lessons))
        object.__setattr__(
            self, "total_duration", sum((lesson.duration for lesson in lessons), Duration.zero())
        )

    @classmethod
    def create(
        cls,
        name: str,
        lessons: Iterable[Lesson] = (),
        index: Union[Index, int] = 0,
    ) -> Chapter:
        """Factory method; lessons are ordered by their current Index, then re-sequenced."""
        return cls(
            id=Identifier.generate(),
            name=SimpleName(name),
            index=as_index(index),
            lessons=tuple(sorted(lessons, key=lambda lesson: lesson.index)),
        )

    # ==================== LESSON OPERATIONS ====================

    def add_lesson(self, lesson: Lesson, position: Optional[Union[Index, int]] = None) -> Chapter:
        """Append ``lesson``, or insert it at ``position`` (clamped to the end)."""
        return self._with_lessons(ordering.insert_at(self.lessons, lesson, LESSON, position))

    def remove_lesson(self, lesson_id: Identifier) -> Chapter:
        return self._with_lessons(ordering.remove(self.lessons, lesson_id, LESSON))

    def reorder_lesson(self, lesson_id: Identifier, new_index: Union[Index, int]) -> Chapter:
        return self._with_lessons(ordering.move_to(self.lessons, lesson_id, new_index, LESSON))

    def move_lesson_up(self, lesson_id: Identifier) -> Chapter:
        position = ordering.position_of(self.lessons, lesson_id, LESSON)
        if position == 0:
            return self
        return self.reorder_lesson(lesson_id, position - 1)

    def move_lesson_down(self, lesson_id: Identifier) -> Chapter:
        position = ordering.position_of(self.lessons, lesson_id, LESSON)
        if position == self.lesson_count - 1:
            return self
        return self.reorder_lesson(lesson_id, position + 1)

    def update_lesson(self, lesson_id: Identifier, updater: Callable[[Lesson], Lesson]) -> Chapter:
        """Replace the name, duration and video URL of one lesson with ``updater``'s result.

        Identity and position are kept from the current lesson.
        """
        position = ordering.position_of(self.lessons, lesson_id, LESSON)
        current = self.lessons[position]
        updated = updater(current)
        merged = replace(
            current, name=updated.name, duration=updated.duration, video_url=updated.video_url
        )
        return self._with_lessons(ordering.replace_at(self.lessons, position, merged))

    def replace_lesson(self, lesson: Lesson) -> Chapter:
        return self.update_lesson(lesson.id, lambda _: lesson)

    # ==================== CHAPTER FIELDS ====================

    def rename(self, name: str) -> Chapter:
        return replace(self, name=SimpleName(name))

    def with_index(self, index: Union[Index, int]) -> Chapter:
        return replace(self, index=as_index(index))

    # ==================== QUERIES ====================

    @property
    def lesson_ids(self) -> tuple[Identifier, ...]:
        return tuple(lesson.id for lesson in self.lessons)

    def has_lesson(self, lesson_id: Identifier) -> bool:
        return any(lesson.id == lesson_id for lesson in self.lessons)

    def get_lesson(self, lesson_id: Identifier) -> Lesson:
        return self.lessons[ordering.position_of(self.lessons, lesson_id, LESSON)]

    def first_lesson(self) -> Lesson:
        if not self.lessons:
            raise EntityNotFoundError(LESSON)
        return self.lessons[0]

    def last_lesson(self) -> Lesson:
        if not self.lessons:
            raise EntityNotFoundError(LESSON)
        return self.lessons[-1]

    def _with_lessons(self, lessons: tuple[Lesson, ...]) -> Chapter:
        return replace(self, lessons=lessons)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Chapter):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
