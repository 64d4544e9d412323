"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- course.py   → LessonDTO, ChapterDTO, CourseDTO
- person.py   → PersonDTO, SegmentGroupDTO
- progress.py → LessonProgressDTO, ProgressSummaryDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
DTOs compare by field values, so two DTOs built from courses with the
same structure are equal.
"""

from education_platform.application.dto.course import ChapterDTO, CourseDTO, LessonDTO
from education_platform.application.dto.person import PersonDTO, SegmentGroupDTO
from education_platform.application.dto.progress import (
    LessonProgressDTO,
    ProgressSummaryDTO,
)

__all__ = [
    "LessonDTO",
    "ChapterDTO",
    "CourseDTO",
    "PersonDTO",
    "SegmentGroupDTO",
    "LessonProgressDTO",
    "ProgressSummaryDTO",
]
