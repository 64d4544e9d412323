"""
IndexOutOfRangeError - Raised when a reorder target is outside [0, size - 1].
Maps to: HTTP 422 Unprocessable Entity
"""

from education_platform.domain.exceptions.domain_error import DomainError


class IndexOutOfRangeError(DomainError):
    """Raised when a target position does not exist in the collection"""

    def __init__(self, index: int, size: int):
        super().__init__(
            f"Index {index} is out of range, expected a value in [0, {size - 1}]"
            if size
            else f"Index {index} is out of range, the collection is empty"
        )
        self.index = index
        self.size = size
