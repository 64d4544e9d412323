"""
Ordering helpers shared by Chapter (lessons) and Course (chapters).

All helpers work on tuples of identified items and return new tuples;
positions are plain ints, re-sequencing to Index values happens in the
owning entity.
"""

from typing import Optional, Protocol, Sequence, TypeVar, Union

from education_platform.domain.exceptions import (
    DuplicateIdentifierError,
    EntityNotFoundError,
    IndexOutOfRangeError,
)
from education_platform.domain.value_objects.identifier import Identifier
from education_platform.domain.value_objects.index import Index


class Identified(Protocol):
    id: Identifier


T = TypeVar("T", bound=Identified)


def ensure_unique(items: Sequence[T], entity: str) -> None:
    seen: set[Identifier] = set()
    for item in items:
        if item.id in seen:
            raise DuplicateIdentifierError(entity, item.id)
        seen.add(item.id)


def position_of(items: Sequence[T], item_id: Identifier, entity: str) -> int:
    for position, item in enumerate(items):
        if item.id == item_id:
            return position
    raise EntityNotFoundError(entity, item_id)


def insert_at(
    items: Sequence[T], item: T, entity: str, position: Optional[Union[int, Index]] = None
) -> tuple[T, ...]:
    """Insert ``item`` at ``position`` clamped to [0, len]; append when None."""
    if any(existing.id == item.id for existing in items):
        raise DuplicateIdentifierError(entity, item.id)
    target = len(items) if position is None else max(0, min(int(position), len(items)))
    return (*items[:target], item, *items[target:])


def remove(items: Sequence[T], item_id: Identifier, entity: str) -> tuple[T, ...]:
    position = position_of(items, item_id, entity)
    return (*items[:position], *items[position + 1 :])


def move_to(
    items: Sequence[T], item_id: Identifier, new_index: Union[int, Index], entity: str
) -> tuple[T, ...]:
    """List-move: items between the old and new slot shift one place toward the vacated slot."""
    old = position_of(items, item_id, entity)
    target = int(new_index)
    if not 0 <= target < len(items):
        raise IndexOutOfRangeError(target, len(items))
    reordered = list(items)
    reordered.insert(target, reordered.pop(old))
    return tuple(reordered)


def replace_at(items: Sequence[T], position: int, item: T) -> tuple[T, ...]:
    return (*items[:position], item, *items[position + 1 :])
