"""
Lesson Entity - A teaching unit inside a Chapter.

Lessons are immutable; every ``with_*`` method returns a new Lesson with the
same identity and one field replaced.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Union

from education_platform.domain.exceptions.validation_error import (
    DomainValidationError,
    ValidationRule,
)
from education_platform.domain.value_objects.duration import Duration
from education_platform.domain.value_objects.identifier import Identifier
from education_platform.domain.value_objects.index import Index
from education_platform.domain.value_objects.simple_name import SimpleName
from education_platform.domain.value_objects.url import Url


def as_duration(duration: Union[Duration, int]) -> Duration:
    return duration if isinstance(duration, Duration) else Duration.from_seconds(duration)


def as_index(index: Union[Index, int]) -> Index:
    return index if isinstance(index, Index) else Index(index)


@dataclass(frozen=True, eq=False)
class Lesson:
    id: Identifier
    name: SimpleName
    duration: Duration
    index: Index = field(default_factory=Index.first)
    video_url: Optional[Url] = None

    def __post_init__(self):
        if self.duration.is_zero():
            raise DomainValidationError(
                "Lesson duration must be different from zero", ValidationRule.ZERO_VALUE
            )

    @classmethod
    def create(
        cls,
        name: str,
        duration: Union[Duration, int],
        index: Union[Index, int] = 0,
        video_url: Optional[str] = None,
    ) -> Lesson:
        """Factory method to create a new Lesson with a generated ID.

        ``duration`` is a Duration or a number of seconds.
        """
        return cls(
            id=Identifier.generate(),
            name=SimpleName(name),
            duration=as_duration(duration),
            index=as_index(index),
            video_url=Url(video_url) if video_url is not None else None,
        )

    def with_name(self, name: str) -> Lesson:
        return replace(self, name=SimpleName(name))

    def with_duration(self, duration: Union[Duration, int]) -> Lesson:
        return replace(self, duration=as_duration(duration))

    def with_index(self, index: Union[Index, int]) -> Lesson:
        return replace(self, index=as_index(index))

    def with_video_url(self, video_url: Optional[str]) -> Lesson:
        return replace(self, video_url=Url(video_url) if video_url is not None else None)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Lesson):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
