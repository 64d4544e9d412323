"""
Course Aggregate Root - Owns an ordered tuple of Chapters.

All chapter and lesson mutation goes through Course methods. Each method
returns a new Course in which:
- chapter Index values are 0..chapter_count-1 in tuple order
- every chapter satisfies its own lesson invariants
- a lesson identifier appears in at most one chapter
- total_duration and lesson_count are recomputed from all chapters

A failing method raises and leaves the receiver untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable, Iterable, Optional, Union

from education_platform.domain.entities import ordering
from education_platform.domain.entities.chapter import Chapter
from education_platform.domain.entities.lesson import Lesson
from education_platform.domain.exceptions import EntityNotFoundError
from education_platform.domain.value_objects.date import Date
from education_platform.domain.value_objects.duration import Duration
from education_platform.domain.value_objects.identifier import Identifier
from education_platform.domain.value_objects.index import Index
from education_platform.domain.value_objects.simple_name import SimpleName

CHAPTER = "Chapter"
LESSON = "Lesson"


@dataclass(frozen=True, eq=False)
class Course:
    id: Identifier
    name: SimpleName
    date: Date = field(default_factory=Date.today)
    chapters: tuple[Chapter, ...] = ()
    lesson_count: int = field(init=False)
    total_duration: Duration = field(init=False)

    def __post_init__(self):
        chapters = tuple(self.chapters)
        ordering.ensure_unique(chapters, CHAPTER)
        ordering.ensure_unique(
            [lesson for chapter in chapters for lesson in chapter.lessons], LESSON
        )
        chapters = tuple(
            chapter if chapter.index.value == position else chapter.with_index(position)
            for position, chapter in enumerate(chapters)
        )
        object.__setattr__(self, "chapters", chapters)
        object.__setattr__(
            self, "lesson_count", sum(chapter.lesson_count for chapter in chapters)
        )
        object.__setattr__(
            self,
            "total_duration",
            sum((chapter.total_duration for chapter in chapters), Duration.zero()),
        )

    @classmethod
    def create(
        cls,
        name: str,
        chapters: Iterable[Chapter] = (),
        date: Optional[Date] = None,
    ) -> Course:
        """Factory method; chapters are ordered by their current Index, then re-sequenced."""
        return cls(
            id=Identifier.generate(),
            name=SimpleName(name),
            date=date if date is not None else Date.today(),
            chapters=tuple(sorted(chapters, key=lambda chapter: chapter.index)),
        )

    # ==================== CHAPTER OPERATIONS ====================

    def add_chapter(self, name: str, position: Optional[Union[Index, int]] = None) -> Course:
        """Create an empty chapter and append it (or insert it at ``position``)."""
        return self.insert_chapter(Chapter.create(name), position)

    def insert_chapter(
        self, chapter: Chapter, position: Optional[Union[Index, int]] = None
    ) -> Course:
        return self._with_chapters(ordering.insert_at(self.chapters, chapter, CHAPTER, position))

    def remove_chapter(self, chapter_id: Identifier) -> Course:
        return self._with_chapters(ordering.remove(self.chapters, chapter_id, CHAPTER))

    def reorder_chapter(self, chapter_id: Identifier, new_index: Union[Index, int]) -> Course:
        return self._with_chapters(
            ordering.move_to(self.chapters, chapter_id, new_index, CHAPTER)
        )

    def move_chapter_up(self, chapter_id: Identifier) -> Course:
        position = ordering.position_of(self.chapters, chapter_id, CHAPTER)
        if position == 0:
            return self
        return self.reorder_chapter(chapter_id, position - 1)

    def move_chapter_down(self, chapter_id: Identifier) -> Course:
        position = ordering.position_of(self.chapters, chapter_id, CHAPTER)
        if position == self.chapter_count - 1:
            return self
        return self.reorder_chapter(chapter_id, position + 1)

    def rename_chapter(self, chapter_id: Identifier, name: str) -> Course:
        return self._with_chapter(chapter_id, lambda chapter: chapter.rename(name))

    # ==================== LESSON OPERATIONS ====================

    def add_lesson_to_chapter(
        self,
        chapter_id: Identifier,
        lesson: Lesson,
        position: Optional[Union[Index, int]] = None,
    ) -> Course:
        return self._with_chapter(chapter_id, lambda chapter: chapter.add_lesson(lesson, position))

    def remove_lesson_from_chapter(self, chapter_id: Identifier, lesson_id: Identifier) -> Course:
        return self._with_chapter(chapter_id, lambda chapter: chapter.remove_lesson(lesson_id))

    def reorder_lesson_in_chapter(
        self, chapter_id: Identifier, lesson_id: Identifier, new_index: Union[Index, int]
    ) -> Course:
        return self._with_chapter(
            chapter_id, lambda chapter: chapter.reorder_lesson(lesson_id, new_index)
        )

    def update_lesson_in_chapter(
        self,
        chapter_id: Identifier,
        lesson_id: Identifier,
        updater: Callable[[Lesson], Lesson],
    ) -> Course:
        return self._with_chapter(
            chapter_id, lambda chapter: chapter.update_lesson(lesson_id, updater)
        )

    def update_lesson(self, lesson: Lesson) -> Course:
        """Replace a lesson wherever it lives in the course."""
        chapter = self.chapter_of_lesson(lesson.id)
        return self._with_chapter(chapter.id, lambda current: current.replace_lesson(lesson))

    # ==================== COURSE FIELDS ====================

    def rename(self, name: str) -> Course:
        return replace(self, name=SimpleName(name))

    # ==================== QUERIES ====================

    @property
    def chapter_count(self) -> int:
        return len(self.chapters)

    @property
    def chapter_ids(self) -> tuple[Identifier, ...]:
        return tuple(chapter.id for chapter in self.chapters)

    def get_chapter(self, chapter_id: Identifier) -> Chapter:
        return self.chapters[ordering.position_of(self.chapters, chapter_id, CHAPTER)]

    def first_chapter(self) -> Chapter:
        if not self.chapters:
            raise EntityNotFoundError(CHAPTER)
        return self.chapters[0]

    def last_chapter(self) -> Chapter:
        if not self.chapters:
            raise EntityNotFoundError(CHAPTER)
        return self.chapters[-1]

    def all_lessons(self) -> tuple[Lesson, ...]:
        """All lessons, chapter by chapter, in order."""
        return tuple(lesson for chapter in self.chapters for lesson in chapter.lessons)

    def chapter_of_lesson(self, lesson_id: Identifier) -> Chapter:
        for chapter in self.chapters:
            if chapter.has_lesson(lesson_id):
                return chapter
        raise EntityNotFoundError(LESSON, lesson_id)

    def _with_chapter(self, chapter_id: Identifier, change: Callable[[Chapter], Chapter]) -> Course:
        position = ordering.position_of(self.chapters, chapter_id, CHAPTER)
        updated = change(self.chapters[position])
        return self._with_chapters(ordering.replace_at(self.chapters, position, updated))

    def _with_chapters(self, chapters: tuple[Chapter, ...]) -> Course:
        return replace(self, chapters=chapters)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Course):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
