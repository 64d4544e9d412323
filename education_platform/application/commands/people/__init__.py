"""Person commands."""

from .register_person import RegisterPersonCommand, RegisterPersonHandler

__all__ = [
    "RegisterPersonCommand",
    "RegisterPersonHandler",
]
