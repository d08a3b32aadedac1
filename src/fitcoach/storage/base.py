"""Abstract base class for key-value storage backends.

The abstraction hides:
- Storage medium (process memory, JSON file)
- Serialization of the underlying container
"""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Minimal string key-value store used for client-side state."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""

    @property
    @abstractmethod
    def backend_type(self) -> str:
        """Get the backend type identifier."""
