"""
Name Value Objects - Trimmed, length-bounded text.

- Name: person name part, letters plus ' - . and spaces
- NameConfig: length bounds, defaults to 1..100 characters
"""

from dataclasses import dataclass, field

from education_platform.domain.services import validator

DEFAULT_MIN_LENGTH = 1
DEFAULT_MAX_LENGTH = 100


@dataclass(frozen=True)
class NameConfig:
    min_length: int = DEFAULT_MIN_LENGTH
    max_length: int = DEFAULT_MAX_LENGTH

    def __post_init__(self):
        if self.min_length < 0 or self.min_length > self.max_length:
            raise ValueError(
                f"Invalid name bounds: min_length={self.min_length}, max_length={self.max_length}"
            )


def validate_bounded_text(value: str, config: NameConfig, field_name: str) -> str:
    """Trim ``value`` and check it is non-empty and within ``config`` bounds."""
    trimmed = (value or "").strip()
    validator.validate_not_empty(trimmed, field_name)
    validator.validate_min_length(trimmed, config.min_length, field_name)
    validator.validate_max_length(trimmed, config.max_length, field_name)
    return trimmed


@dataclass(frozen=True)
class Name:
    value: str
    config: NameConfig = field(default_factory=NameConfig, compare=False, repr=False)

    def __post_init__(self):
        trimmed = validate_bounded_text(self.value, self.config, "Name")
        validator.validate_name_characters(trimmed, "Name")
        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)
