"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation, raising DomainValidationError
- Pure Python (no framework dependencies)
"""

from education_platform.domain.value_objects.identifier import Identifier
from education_platform.domain.value_objects.name import Name, NameConfig
from education_platform.domain.value_objects.simple_name import SimpleName
from education_platform.domain.value_objects.person_name import PersonName
from education_platform.domain.value_objects.email import Email
from education_platform.domain.value_objects.date import Date
from education_platform.domain.value_objects.date_time import DateTime
from education_platform.domain.value_objects.duration import Duration
from education_platform.domain.value_objects.index import Index
from education_platform.domain.value_objects.url import Url
from education_platform.domain.value_objects.document_id import DocumentId

__all__ = [
    "Identifier",
    "Name",
    "NameConfig",
    "SimpleName",
    "PersonName",
    "Email",
    "Date",
    "DateTime",
    "Duration",
    "Index",
    "Url",
    "DocumentId",
]
