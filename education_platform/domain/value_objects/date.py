"""
Date Value Object - Calendar date without time zone.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from education_platform.domain.exceptions.validation_error import (
    DomainValidationError,
    ValidationRule,
)

ISO_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True, order=True)
class Date:
    value: date

    def __post_init__(self):
        if isinstance(self.value, datetime):
            object.__setattr__(self, "value", self.value.date())
        if not isinstance(self.value, date):
            raise DomainValidationError(
                f"Invalid date: {self.value!r}", ValidationRule.INVALID_DATE
            )

    @classmethod
    def of(cls, year: int, month: int, day: int) -> Date:
        try:
            return cls(date(year, month, day))
        except ValueError as e:
            raise DomainValidationError(
                f"Invalid date: {year}-{month}-{day}", ValidationRule.INVALID_DATE
            ) from e

    @classmethod
    def from_iso(cls, text: str) -> Date:
        try:
            return cls(date.fromisoformat(text.strip()))
        except (AttributeError, ValueError) as e:
            raise DomainValidationError(
                f"Failed to parse date from '{text}'", ValidationRule.INVALID_DATE
            ) from e

    @classmethod
    def today(cls) -> Date:
        return cls(date.today())

    @staticmethod
    def is_leap_year(year: int) -> bool:
        return calendar.isleap(year)

    @staticmethod
    def days_in_month(year: int, month: int) -> int:
        if not 1 <= month <= 12:
            return 0
        return calendar.monthrange(year, month)[1]

    @property
    def year(self) -> int:
        return self.value.year

    @property
    def month(self) -> int:
        return self.value.month

    @property
    def day(self) -> int:
        return self.value.day

    @property
    def day_of_year(self) -> int:
        return self.value.timetuple().tm_yday

    @property
    def week_number(self) -> int:
        return self.value.isocalendar()[1]

    @property
    def weekday(self) -> int:
        """ISO weekday, Monday is 1 and Sunday is 7."""
        return self.value.isoweekday()

    def add_days(self, days: int) -> Date:
        return Date(self.value + timedelta(days=days))

    def sub_days(self, days: int) -> Date:
        return self.add_days(-days)

    def days_until(self, other: Date) -> int:
        return (other.value - self.value).days

    def format_iso(self) -> str:
        return self.value.strftime(ISO_FORMAT)

    def format(self, fmt: str) -> str:
        return self.value.strftime(fmt)

    def is_past(self) -> bool:
        return self < Date.today()

    def is_future(self) -> bool:
        return self > Date.today()

    def is_today(self) -> bool:
        return self == Date.today()

    def __str__(self) -> str:
        return self.format_iso()
