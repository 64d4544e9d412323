"""
Tests for command and query handlers against in-memory repositories.

Run with: pytest tests/test_application.py -v
"""

import asyncio

import pytest

from conftest import InMemoryCourseProgressRepository, InMemoryCourseRepository
from education_platform.application.commands.courses import (
    AddChapterCommand,
    AddChapterHandler,
    AddLessonToChapterCommand,
    AddLessonToChapterHandler,
    CreateCourseCommand,
    CreateCourseHandler,
    RemoveChapterCommand,
    RemoveChapterHandler,
    RemoveLessonFromChapterCommand,
    RemoveLessonFromChapterHandler,
    ReorderChapterCommand,
    ReorderChapterHandler,
    ReorderLessonInChapterCommand,
    ReorderLessonInChapterHandler,
    UpdateLessonCommand,
    UpdateLessonHandler,
)
from education_platform.application.commands.people import (
    RegisterPersonCommand,
    RegisterPersonHandler,
)
from education_platform.application.commands.progress import (
    StartCourseProgressCommand,
    StartCourseProgressHandler,
    ToggleLessonCompletionCommand,
    ToggleLessonCompletionHandler,
)
from education_platform.application.queries.courses import GetCourseHandler, GetCourseQuery
from education_platform.application.queries.people import (
    GroupPeopleBySegmentHandler,
    GroupPeopleBySegmentQuery,
)
from education_platform.application.queries.progress import (
    GetProgressSummaryHandler,
    GetProgressSummaryQuery,
)
from education_platform.domain.entities import CourseProgress
from education_platform.domain.exceptions import (
    DomainValidationError,
    DuplicateIdentifierError,
    EntityNotFoundError,
    IndexOutOfRangeError,
)
from education_platform.domain.value_objects import DateTime, Duration, Identifier


def run(coro):
    return asyncio.run(coro)


class TestCourseCommands:
    """Course commands load, change and save the aggregate."""

    def test_create_course(self):
        repository = InMemoryCourseRepository()
        course = run(CreateCourseHandler(repository).execute(CreateCourseCommand(name="Rust 101")))
        assert repository.courses[course.id] is course
        assert course.chapter_count == 0

    def test_add_chapter_saves_new_version(self, course, course_repository):
        updated = run(
            AddChapterHandler(course_repository).execute(
                AddChapterCommand(course_id=course.id, name="D", position=0)
            )
        )
        assert course_repository.courses[course.id] is updated
        assert updated.first_chapter().name.value == "D"

    def test_unknown_course_raises_not_found(self, course_repository):
        with pytest.raises(EntityNotFoundError):
            run(
                AddChapterHandler(course_repository).execute(
                    AddChapterCommand(course_id=Identifier.generate(), name="D")
                )
            )

    def test_failed_change_is_not_saved(self, course, course_repository):
        a, _, _ = course.chapter_ids
        with pytest.raises(IndexOutOfRangeError):
            run(
                ReorderChapterHandler(course_repository).execute(
                    ReorderChapterCommand(course_id=course.id, chapter_id=a, new_index=7)
                )
            )
        assert course_repository.saved == []
        assert course_repository.courses[course.id] is course

    def test_chapter_and_lesson_workflow(self, course, course_repository):
        a, b, c = course.chapter_ids
        updated = run(
            AddLessonToChapterHandler(course_repository).execute(
                AddLessonToChapterCommand(
                    course_id=course.id,
                    chapter_id=c,
                    name="C1",
                    duration_seconds=90,
                    video_url="https://cdn.example.com/c1.mp4",
                )
            )
        )
        assert updated.total_duration == Duration(600)

        lesson = updated.get_chapter(b).last_lesson()
        updated = run(
            ReorderLessonInChapterHandler(course_repository).execute(
                ReorderLessonInChapterCommand(
                    course_id=course.id, chapter_id=b, lesson_id=lesson.id, new_index=0
                )
            )
        )
        assert updated.get_chapter(b).first_lesson() == lesson

        updated = run(
            UpdateLessonHandler(course_repository).execute(
                UpdateLessonCommand(
                    course_id=course.id, chapter_id=b, lesson_id=lesson.id, duration_seconds=60
                )
            )
        )
        assert updated.get_chapter(b).get_lesson(lesson.id).name.value == "B2"
        assert updated.total_duration == Duration(630)

        updated = run(
            RemoveLessonFromChapterHandler(course_repository).execute(
                RemoveLessonFromChapterCommand(course_id=course.id, chapter_id=b, lesson_id=lesson.id)
            )
        )
        assert updated.lesson_count == 4

        updated = run(
            ReorderChapterHandler(course_repository).execute(
                ReorderChapterCommand(course_id=course.id, chapter_id=c, new_index=0)
            )
        )
        updated = run(
            RemoveChapterHandler(course_repository).execute(
                RemoveChapterCommand(course_id=course.id, chapter_id=a)
            )
        )
        assert [ch.name.value for ch in updated.chapters] == ["C", "B"]
        assert updated.total_duration == Duration(390)
        assert len(course_repository.saved) == 6

    def test_invalid_lesson_input_is_rejected(self, course, course_repository):
        a, _, _ = course.chapter_ids
        with pytest.raises(DomainValidationError):
            run(
                AddLessonToChapterHandler(course_repository).execute(
                    AddLessonToChapterCommand(
                        course_id=course.id, chapter_id=a, name="Broken", duration_seconds=0
                    )
                )
            )


class TestGetCourse:
    def test_returns_dto(self, course, course_repository):
        dto = run(GetCourseHandler(course_repository).execute(GetCourseQuery(course.id)))
        assert dto.id == str(course.id)
        assert dto.total_duration_seconds == 510
        assert dto.total_duration == "08m 30s"
        assert [ch.index for ch in dto.chapters] == [0, 1, 2]
        assert dto.chapters[0].lessons[1].duration_seconds == 120

    def test_missing_course(self, course_repository):
        with pytest.raises(EntityNotFoundError):
            run(GetCourseHandler(course_repository).execute(GetCourseQuery(Identifier.generate())))


class TestPeople:
    def test_register_and_group(self, person_repository):
        handler = RegisterPersonHandler(person_repository)
        run(
            handler.execute(
                RegisterPersonCommand("Ana", "García", "ana@example.com", document="12345678-1")
            )
        )
        run(handler.execute(RegisterPersonCommand("Luis", "Pérez", "luis@example.com")))
        run(
            handler.execute(
                RegisterPersonCommand("Eva", "Soto", "eva@example.com", document="00000001-I")
            )
        )

        groups = run(
            GroupPeopleBySegmentHandler(person_repository).execute(GroupPeopleBySegmentQuery())
        )
        assert [g.segment for g in groups] == ["documented", "undocumented"]
        assert [g.total for g in groups] == [2, 1]
        assert groups[0].people[1].full_name == "Eva Soto"
        assert groups[1].people[0].document is None

    def test_duplicate_email_is_rejected(self, person_repository):
        handler = RegisterPersonHandler(person_repository)
        run(handler.execute(RegisterPersonCommand("Ana", "García", "ana@example.com")))
        with pytest.raises(DuplicateIdentifierError):
            run(handler.execute(RegisterPersonCommand("Ana", "Ruiz", "ana@example.com")))
        assert len(person_repository.people) == 1


class TestProgress:
    def test_start_toggle_and_summarize(self, course, course_repository):
        progress_repository = InMemoryCourseProgressRepository()
        progress = run(
            StartCourseProgressHandler(course_repository, progress_repository).execute(
                StartCourseProgressCommand(course_id=course.id, user_email="learner@example.com")
            )
        )
        first = progress.lessons[0].lesson_id
        run(
            ToggleLessonCompletionHandler(progress_repository).execute(
                ToggleLessonCompletionCommand(progress_id=progress.id, lesson_id=first)
            )
        )
        summary = run(
            GetProgressSummaryHandler(progress_repository).execute(
                GetProgressSummaryQuery(progress.id)
            )
        )
        assert summary.percentage_completed == 11
        assert summary.lessons_completed == 1
        assert summary.lessons[0].completed
        assert summary.fraud_risk_score == 0

    def test_summary_uses_configured_ratio(self, course):
        t0 = DateTime.of(2024, 5, 1, 9, 0, 0)
        progress = CourseProgress.from_course(course, "learner@example.com")
        ids = [lp.lesson_id for lp in progress.lessons]
        progress = progress.start_lesson(ids[0], t0).start_lesson(ids[1], t0.add_seconds(30))
        repository = InMemoryCourseProgressRepository(progress)

        strict = run(
            GetProgressSummaryHandler(repository, min_completion_ratio=1.0).execute(
                GetProgressSummaryQuery(progress.id)
            )
        )
        lenient = run(
            GetProgressSummaryHandler(repository, min_completion_ratio=0.1).execute(
                GetProgressSummaryQuery(progress.id)
            )
        )
        assert strict.fraud_risk_score == 100
        assert lenient.fraud_risk_score == 0

    def test_missing_progress(self):
        with pytest.raises(EntityNotFoundError):
            run(
                ToggleLessonCompletionHandler(InMemoryCourseProgressRepository()).execute(
                    ToggleLessonCompletionCommand(
                        progress_id=Identifier.generate(), lesson_id=Identifier.generate()
                    )
                )
            )
