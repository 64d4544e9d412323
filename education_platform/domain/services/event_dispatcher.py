"""
DomainEventDispatcher - In-process observer list for domain events.
"""

from threading import Lock
from typing import Callable, Generic, TypeVar

E = TypeVar("E")


class DomainEventDispatcher(Generic[E]):
    def __init__(self):
        self._observers: list[Callable[[E], None]] = []
        self._lock = Lock()

    def subscribe(self, observer: Callable[[E], None]) -> None:
        with self._lock:
            self._observers.append(observer)

    def notify(self, event: E) -> None:
        with self._lock:
            observers = list(self._observers)
        for observer in observers:
            observer(event)

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def __repr__(self) -> str:
        return f"DomainEventDispatcher(observer_count={self.observer_count})"
