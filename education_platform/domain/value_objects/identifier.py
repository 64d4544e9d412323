"""
Identifier Value Object - Sortable unique token for entity identity.

Format (26 characters, Crockford base32):
- first 10 characters: 48-bit millisecond timestamp
- last 16 characters: 80 random bits
- Example: 01J9ZQ6M7W3X5R2B8N4KD0VHTF

Parsing is case-insensitive and accepts the Crockford aliases
O -> 0 and I/L -> 1.
"""

from __future__ import annotations

import secrets
import time
from dataclasses import dataclass

from education_platform.domain.exceptions.validation_error import (
    DomainValidationError,
    ValidationRule,
)

CROCKFORD_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
IDENTIFIER_LENGTH = 26
RANDOM_BITS = 80
_ALIASES = str.maketrans({"O": "0", "I": "1", "L": "1"})


@dataclass(frozen=True, order=True)
class Identifier:
    value: str

    def __post_init__(self):
        if not self.value or not self.value.strip():
            raise DomainValidationError("Identifier cannot be empty", ValidationRule.EMPTY)

        normalized = self.value.strip().upper().translate(_ALIASES)
        if len(normalized) != IDENTIFIER_LENGTH:
            raise DomainValidationError(
                f"Invalid identifier length: expected {IDENTIFIER_LENGTH} characters, got {len(normalized)}",
                ValidationRule.INVALID_FORMAT,
            )
        if any(char not in CROCKFORD_ALPHABET for char in normalized):
            raise DomainValidationError(
                f"Invalid character in identifier: {self.value}",
                ValidationRule.INVALID_CHARACTERS,
            )
        object.__setattr__(self, "value", normalized)

    @classmethod
    def generate(cls) -> Identifier:
        """Create a new identifier from the current time and fresh randomness."""
        timestamp_ms = time.time_ns() // 1_000_000
        return cls(_encode((timestamp_ms << RANDOM_BITS) | secrets.randbits(RANDOM_BITS)))

    @classmethod
    def parse(cls, text: str) -> Identifier:
        return cls(text)

    @property
    def timestamp_ms(self) -> int:
        return _decode(self.value) >> RANDOM_BITS

    def __str__(self) -> str:
        return self.value


def _encode(number: int) -> str:
    return "".join(
        CROCKFORD_ALPHABET[(number >> (5 * shift)) & 0x1F]
        for shift in range(IDENTIFIER_LENGTH - 1, -1, -1)
    )


def _decode(text: str) -> int:
    number = 0
    for char in text:
        number = (number << 5) | CROCKFORD_ALPHABET.index(char)
    return number
