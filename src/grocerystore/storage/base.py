"""Key-value storage interface.

Modeled on the browser ``localStorage`` API: string keys map to string
values, and every write replaces the previous value for its key.
"""
from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStorage(ABC):
    """Persistent string-to-string map."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the value stored under ``key``, or None if absent.

        Raises:
            StorageError: if the backend cannot be read.
        """

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, overwriting any prior value.

        Raises:
            StorageError: if the backend cannot be written.
        """

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete ``key``; missing keys are ignored."""
