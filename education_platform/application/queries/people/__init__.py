"""Person queries."""

from .group_people_by_segment import GroupPeopleBySegmentQuery, GroupPeopleBySegmentHandler

__all__ = [
    "GroupPeopleBySegmentQuery",
    "GroupPeopleBySegmentHandler",
]
