import os
import sys
from typing import Optional

import pytest

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + "/.."))

from education_platform.domain.entities import Chapter, Course, CourseProgress, Lesson, Person
from education_platform.domain.ports.repositories import (
    CourseProgressRepository,
    CourseRepository,
    PersonRepository,
)
from education_platform.domain.value_objects import Duration, Email, Identifier


class InMemoryCourseRepository(CourseRepository):
    def __init__(self, *courses: Course):
        self.courses: dict[Identifier, Course] = {course.id: course for course in courses}
        self.saved: list[Course] = []

    async def get_by_id(self, course_id: Identifier) -> Optional[Course]:
        return self.courses.get(course_id)

    async def save(self, course: Course) -> None:
        self.courses[course.id] = course
        self.saved.append(course)

    async def delete(self, course_id: Identifier) -> bool:
        return self.courses.pop(course_id, None) is not None


class InMemoryPersonRepository(PersonRepository):
    def __init__(self, *people: Person):
        self.people: dict[Identifier, Person] = {person.id: person for person in people}

    async def get_by_id(self, person_id: Identifier) -> Optional[Person]:
        return self.people.get(person_id)

    async def get_by_email(self, email: Email) -> Optional[Person]:
        return next((p for p in self.people.values() if p.email == email), None)

    async def list_all(self, limit: int = 100) -> list[Person]:
        return list(self.people.values())[:limit]

    async def save(self, person: Person) -> None:
        self.people[person.id] = person


class InMemoryCourseProgressRepository(CourseProgressRepository):
    def __init__(self, *progresses: CourseProgress):
        self.progresses: dict[Identifier, CourseProgress] = {p.id: p for p in progresses}

    async def get_by_id(self, progress_id: Identifier) -> Optional[CourseProgress]:
        return self.progresses.get(progress_id)

    async def save(self, progress: CourseProgress) -> None:
        self.progresses[progress.id] = progress


@pytest.fixture()
def three_lessons():
    """Lessons of 10m, 5m and 20m."""
    return [
        Lesson.create("Intro", Duration.from_minutes(10)),
        Lesson.create("Setup", Duration.from_minutes(5)),
        Lesson.create("Deep dive", Duration.from_minutes(20)),
    ]


@pytest.fixture()
def chapter(three_lessons):
    return Chapter.create("Basics", three_lessons)


@pytest.fixture()
def course():
    """Course with chapters A, B, C; A and B hold two lessons each, C is empty."""
    course = Course.create("Python 101").add_chapter("A").add_chapter("B").add_chapter("C")
    a, b, _ = course.chapter_ids
    course = course.add_lesson_to_chapter(a, Lesson.create("A1", 60))
    course = course.add_lesson_to_chapter(a, Lesson.create("A2", 120))
    course = course.add_lesson_to_chapter(b, Lesson.create("B1", 300))
    course = course.add_lesson_to_chapter(b, Lesson.create("B2", 30))
    return course


@pytest.fixture()
def course_repository(course):
    return InMemoryCourseRepository(course)


@pytest.fixture()
def person_repository():
    return InMemoryPersonRepository()


@pytest.fixture()
def progress_repository():
    return InMemoryCourseProgressRepository()
