"""
DateTime Value Object - Local timestamp with second precision.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from education_platform.domain.exceptions.validation_error import (
    DomainValidationError,
    ValidationRule,
)

ISO_FORMAT = "%Y-%m-%dT%H:%M:%S"


@dataclass(frozen=True, order=True)
class DateTime:
    value: datetime

    def __post_init__(self):
        if not isinstance(self.value, datetime):
            raise DomainValidationError(
                f"Invalid datetime: {self.value!r}", ValidationRule.INVALID_DATE
            )
        object.__setattr__(self, "value", self.value.replace(microsecond=0))

    @classmethod
    def of(
        cls, year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0
    ) -> DateTime:
        try:
            return cls(datetime(year, month, day, hour, minute, second))
        except ValueError as e:
            raise DomainValidationError(
                f"Invalid datetime: {year}-{month}-{day}T{hour}:{minute}:{second}",
                ValidationRule.INVALID_DATE,
            ) from e

    @classmethod
    def from_iso(cls, text: str) -> DateTime:
        try:
            return cls(datetime.strptime(text.strip(), ISO_FORMAT))
        except (AttributeError, ValueError) as e:
            raise DomainValidationError(
                f"Failed to parse datetime from '{text}'", ValidationRule.INVALID_DATE
            ) from e

    @classmethod
    def now(cls) -> DateTime:
        return cls(datetime.now())

    def add_seconds(self, seconds: int) -> DateTime:
        return DateTime(self.value + timedelta(seconds=seconds))

    def sub_seconds(self, seconds: int) -> DateTime:
        return self.add_seconds(-seconds)

    def seconds_until(self, other: DateTime) -> int:
        return int((other.value - self.value).total_seconds())

    def format_iso(self) -> str:
        return self.value.strftime(ISO_FORMAT)

    def __str__(self) -> str:
        return self.format_iso()
