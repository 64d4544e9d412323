"""
DomainError - Common base for every failure raised by the domain layer.
"""


class DomainError(Exception):
    """Base class for domain failures"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
