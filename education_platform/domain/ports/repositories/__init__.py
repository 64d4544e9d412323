"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Stores and returns whole aggregates
- Does NOT specify implementation
"""

from education_platform.domain.ports.repositories.course_repository import CourseRepository
from education_platform.domain.ports.repositories.person_repository import PersonRepository
from education_platform.domain.ports.repositories.course_progress_repository import (
    CourseProgressRepository,
)

__all__ = [
    "CourseRepository",
    "PersonRepository",
    "CourseProgressRepository",
]
