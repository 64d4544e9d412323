"""Course queries."""

from .get_course import GetCourseQuery, GetCourseHandler

__all__ = [
    "GetCourseQuery",
    "GetCourseHandler",
]
