"""Storage protocol for board persistence backends."""

from typing import Protocol


class StorageProtocol(Protocol):
    """Interface for key-value storage backends.

    The board is stored as one serialized string under a single fixed key,
    so a backend only needs plain get/set semantics. Implementations:
    - Filesystem (one JSON file per key)
    - Memory (dict, used for tests and throwaway sessions)
    """

    def get(self, key: str) -> str | None:
        """Read the value stored under key.

        Returns:
            The stored string, or None if nothing is stored or the backend
            cannot be read.
        """
        ...

    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value.

        Raises:
            StorageError: The value could not be written.
        """
        ...
