"""
PersonName Value Object - First, optional middle, last and optional
second last name, each a validated Name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from education_platform.domain.value_objects.name import Name


@dataclass(frozen=True)
class PersonName:
    first_name: Name
    last_name: Name
    middle_name: Optional[Name] = None
    second_last_name: Optional[Name] = None

    @classmethod
    def create(
        cls,
        first_name: str,
        last_name: str,
        middle_name: Optional[str] = None,
        second_last_name: Optional[str] = None,
    ) -> PersonName:
        return cls(
            first_name=Name(first_name),
            last_name=Name(last_name),
            middle_name=Name(middle_name) if middle_name is not None else None,
            second_last_name=Name(second_last_name) if second_last_name is not None else None,
        )

    @property
    def full_name(self) -> str:
        parts = (self.first_name, self.middle_name, self.last_name, self.second_last_name)
        return " ".join(part.value for part in parts if part is not None)

    def __str__(self) -> str:
        return self.full_name
