"""
Index Value Object - Zero-based ordinal position inside a collection.
"""

from __future__ import annotations

from dataclasses import dataclass

from education_platform.domain.exceptions.validation_error import (
    DomainValidationError,
    ValidationRule,
)
from education_platform.domain.services import validator


@dataclass(frozen=True, order=True)
class Index:
    value: int = 0

    def __post_init__(self):
        validator.validate_whole_number(self.value, "Index")
        validator.validate_non_negative(self.value, "Index")

    @classmethod
    def first(cls) -> Index:
        return cls(0)

    def next(self) -> Index:
        return Index(self.value + 1)

    def previous(self) -> Index:
        if self.value == 0:
            raise DomainValidationError(
                "Index underflow: cannot decrement below zero", ValidationRule.UNDERFLOW
            )
        return Index(self.value - 1)

    def is_first(self) -> bool:
        return self.value == 0

    def distance_from(self, other: Index) -> int:
        return abs(self.value - other.value)

    def __index__(self) -> int:
        return self.value

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
