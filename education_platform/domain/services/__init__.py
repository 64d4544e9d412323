"""
DOMAIN SERVICES - Pure logic shared across the model (no I/O)
"""

from education_platform.domain.services import validator
from education_platform.domain.services.event_dispatcher import DomainEventDispatcher

__all__ = [
    "validator",
    "DomainEventDispatcher",
]
