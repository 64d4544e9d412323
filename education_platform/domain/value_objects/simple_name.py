"""
SimpleName Value Object - Title text for courses, chapters and lessons.

Same trimming and length bounds as Name, without the character restriction,
so "Chapter 1: Getting started" is accepted.
"""

from dataclasses import dataclass, field

from education_platform.domain.value_objects.name import NameConfig, validate_bounded_text


@dataclass(frozen=True)
class SimpleName:
    value: str
    config: NameConfig = field(default_factory=NameConfig, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(
            self, "value", validate_bounded_text(self.value, self.config, "Name")
        )

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)
