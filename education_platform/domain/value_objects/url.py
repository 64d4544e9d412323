"""
Url Value Object - http(s) resource locator: scheme, host, optional port and path.
"""

from dataclasses import dataclass
import re
from typing import Optional
from urllib.parse import urlsplit

from education_platform.domain.exceptions.validation_error import (
    DomainValidationError,
    ValidationRule,
)
from education_platform.domain.services import validator

MAX_URL_LENGTH = 2048


@dataclass(frozen=True)
class Url:
    value: str

    _URL_PATTERN = re.compile(
        r"^(https?://)([a-zA-Z0-9.-]+|\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3})(:\d{1,5})?(/?[^\s]*)?$"
    )

    def __post_init__(self):
        trimmed = (self.value or "").strip()
        validator.validate_not_empty(trimmed, "URL")
        validator.validate_max_length(trimmed, MAX_URL_LENGTH, "URL")
        if not trimmed.startswith(("http://", "https://")):
            raise DomainValidationError(
                f"URL must start with http:// or https://: {trimmed}",
                ValidationRule.INVALID_FORMAT,
            )
        if not self._URL_PATTERN.match(trimmed):
            raise DomainValidationError(
                f"URL format is invalid: {trimmed}", ValidationRule.INVALID_FORMAT
            )
        try:
            urlsplit(trimmed).port
        except ValueError as e:
            raise DomainValidationError(
                f"URL port is out of range: {trimmed}", ValidationRule.INVALID_FORMAT
            ) from e
        object.__setattr__(self, "value", trimmed)

    @property
    def scheme(self) -> str:
        return urlsplit(self.value).scheme

    @property
    def host(self) -> str:
        return urlsplit(self.value).hostname or ""

    @property
    def port(self) -> Optional[int]:
        return urlsplit(self.value).port

    @property
    def path(self) -> str:
        return urlsplit(self.value).path

    @property
    def is_secure(self) -> bool:
        return self.value.startswith("https://")

    def __str__(self) -> str:
        return self.value
