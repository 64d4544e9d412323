"""
Duration Value Object - Non-negative time span in whole seconds.

Durations add with ``+`` (and therefore ``sum``); zero is the identity.
"""

from __future__ import annotations

from dataclasses import dataclass

from education_platform.domain.services import validator

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600


@dataclass(frozen=True, order=True)
class Duration:
    seconds: int = 0

    def __post_init__(self):
        validator.validate_whole_number(self.seconds, "Duration")
        validator.validate_non_negative(self.seconds, "Duration")

    @classmethod
    def zero(cls) -> Duration:
        return cls(0)

    @classmethod
    def from_seconds(cls, seconds: int) -> Duration:
        return cls(seconds)

    @classmethod
    def from_minutes(cls, minutes: int) -> Duration:
        return cls(minutes * SECONDS_PER_MINUTE)

    @classmethod
    def from_hours(cls, hours: int) -> Duration:
        return cls(hours * SECONDS_PER_HOUR)

    @classmethod
    def from_hms(cls, hours: int, minutes: int, seconds: int) -> Duration:
        return cls(hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds)

    @property
    def total_seconds(self) -> int:
        return self.seconds

    @property
    def hours(self) -> int:
        return self.seconds // SECONDS_PER_HOUR

    @property
    def minutes(self) -> int:
        return (self.seconds % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE

    @property
    def remaining_seconds(self) -> int:
        return self.seconds % SECONDS_PER_MINUTE

    def is_zero(self) -> bool:
        return self.seconds == 0

    def __add__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.seconds + other.seconds)

    def __radd__(self, other):
        # sum() starts from the int 0
        if other == 0:
            return self
        return NotImplemented

    def format_minutes(self) -> str:
        return f"{self.hours:02d}h {self.minutes:02d}m"

    def format_hours(self) -> str:
        h, m, s = self.hours, self.minutes, self.remaining_seconds
        if h == 0:
            return f"{m:02d}m {s:02d}s"
        if m == 0 and s == 0:
            return f"{h:02d}h"
        if s == 0:
            return f"{h:02d}h {m:02d}m"
        return f"{h:02d}h {m:02d}m {s:02d}s"

    def __str__(self) -> str:
        return self.format_hours()
