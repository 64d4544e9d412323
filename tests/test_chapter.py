"""
Unit tests for the Chapter entity: ordering, uniqueness and derived totals.
"""

import pytest

from education_platform.domain.entities import Chapter, Lesson
from education_platform.domain.exceptions import (
    DuplicateIdentifierError,
    EntityNotFoundError,
    IndexOutOfRangeError,
)
from education_platform.domain.value_objects import Duration, Identifier


def indices(chapter):
    return [lesson.index.value for lesson in chapter.lessons]


def names(chapter):
    return [lesson.name.value for lesson in chapter.lessons]


class TestChapterConstruction:
    def test_create_resequences_lessons(self, three_lessons):
        chapter = Chapter.create("Basics", three_lessons)
        assert indices(chapter) == [0, 1, 2]
        assert chapter.lesson_count == 3
        assert chapter.total_duration == Duration.from_minutes(35)

    def test_create_orders_lessons_by_their_index(self):
        late = Lesson.create("Late", 10, index=5)
        early = Lesson.create("Early", 10, index=1)
        chapter = Chapter.create("Basics", [late, early])
        assert names(chapter) == ["Early", "Late"]
        assert indices(chapter) == [0, 1]

    def test_empty_chapter(self):
        chapter = Chapter.create("Empty")
        assert chapter.lesson_count == 0
        assert chapter.total_duration == Duration.zero()

    def test_duplicate_lessons_are_rejected(self):
        lesson = Lesson.create("Intro", 10)
        with pytest.raises(DuplicateIdentifierError):
            Chapter.create("Basics", [lesson, lesson.with_name("Copy")])


class TestChapterOperations:
    def test_remove_middle_lesson_recomputes_total(self, chapter, three_lessons):
        updated = chapter.remove_lesson(three_lessons[1].id)
        assert updated.total_duration == Duration.from_minutes(30)
        assert indices(updated) == [0, 1]
        assert names(updated) == ["Intro", "Deep dive"]

    def test_receiver_is_unchanged(self, chapter, three_lessons):
        chapter.remove_lesson(three_lessons[1].id)
        assert chapter.lesson_count == 3
        assert chapter.total_duration == Duration.from_minutes(35)

    def test_add_lesson_appends(self, chapter):
        updated = chapter.add_lesson(Lesson.create("Outro", 60))
        assert names(updated)[-1] == "Outro"
        assert indices(updated) == [0, 1, 2, 3]
        assert updated.total_duration == Duration.from_minutes(36)

    def test_add_lesson_at_position(self, chapter):
        updated = chapter.add_lesson(Lesson.create("Warmup", 60), position=0)
        assert names(updated) == ["Warmup", "Intro", "Setup", "Deep dive"]
        assert indices(updated) == [0, 1, 2, 3]

    def test_add_lesson_position_is_clamped(self, chapter):
        updated = chapter.add_lesson(Lesson.create("Outro", 60), position=99)
        assert names(updated)[-1] == "Outro"

    def test_add_duplicate_lesson_fails(self, chapter, three_lessons):
        with pytest.raises(DuplicateIdentifierError):
            chapter.add_lesson(three_lessons[0])

    def test_remove_unknown_lesson_fails(self, chapter):
        with pytest.raises(EntityNotFoundError):
            chapter.remove_lesson(Identifier.generate())

    def test_reorder_moves_and_shifts(self, chapter, three_lessons):
        updated = chapter.reorder_lesson(three_lessons[2].id, 0)
        assert names(updated) == ["Deep dive", "Intro", "Setup"]
        assert indices(updated) == [0, 1, 2]

    def test_reorder_to_current_index_is_identity(self, chapter, three_lessons):
        updated = chapter.reorder_lesson(three_lessons[1].id, 1)
        assert names(updated) == names(chapter)

    def test_reorder_out_of_range_fails(self, chapter, three_lessons):
        with pytest.raises(IndexOutOfRangeError) as exc:
            chapter.reorder_lesson(three_lessons[0].id, 3)
        assert exc.value.size == 3

    def test_move_up_and_down_stop_at_edges(self, chapter, three_lessons):
        assert chapter.move_lesson_up(three_lessons[0].id) is chapter
        assert chapter.move_lesson_down(three_lessons[2].id) is chapter
        assert names(chapter.move_lesson_down(three_lessons[0].id)) == [
            "Setup",
            "Intro",
            "Deep dive",
        ]
        assert names(chapter.move_lesson_up(three_lessons[2].id)) == [
            "Intro",
            "Deep dive",
            "Setup",
        ]

    def test_update_lesson_keeps_identity_and_position(self, chapter, three_lessons):
        target = three_lessons[1]
        updated = chapter.update_lesson(
            target.id, lambda lesson: lesson.with_duration(600).with_index(0)
        )
        lesson = updated.get_lesson(target.id)
        assert lesson.index.value == 1
        assert lesson.duration == Duration(600)
        assert updated.total_duration == Duration.from_minutes(40)

    def test_queries(self, chapter, three_lessons):
        assert chapter.lesson_ids == tuple(lesson.id for lesson in three_lessons)
        assert chapter.has_lesson(three_lessons[0].id)
        assert chapter.first_lesson() == three_lessons[0]
        assert chapter.last_lesson() == three_lessons[2]
        with pytest.raises(EntityNotFoundError):
            Chapter.create("Empty").first_lesson()
