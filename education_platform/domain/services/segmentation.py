"""
Segmentation - Group people by their derived Segment.
"""

from typing import Iterable

from education_platform.domain.entities.person import Person, Segment


def group_by_segment(people: Iterable[Person]) -> dict[Segment, list[Person]]:
    """Group ``people`` by segment, keeping input order inside each group."""
    grouped: dict[Segment, list[Person]] = {}
    for person in people:
        grouped.setdefault(person.segment, []).append(person)
    return grouped
