"""Lazily created, one-per-class instances."""

from __future__ import annotations

import threading
from typing import ClassVar, Dict, TypeVar

S = TypeVar("S", bound="Singleton")


class Singleton:
    """Base class whose subclasses each have one shared instance made on first use."""

    _instances: ClassVar[Dict[type, "Singleton"]] = {}
    _lock: ClassVar[threading.RLock] = threading.RLock()

    @classmethod
    def get(cls: type[S]) -> S:
        """Return the shared instance of this class, creating it if needed."""
        with Singleton._lock:
            instance = Singleton._instances.get(cls)
            if instance is None:
                instance = cls()
                Singleton._instances[cls] = instance
            return instance  # type: ignore[return-value]

    @classmethod
    def reset(cls) -> None:
        """Drop the shared instance; the next :meth:`get` creates a fresh one."""
        with Singleton._lock:
            Singleton._instances.pop(cls, None)

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} is a singleton and cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} is a singleton and cannot be copied")