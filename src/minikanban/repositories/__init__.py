"""Repository layer for data access."""

from .board_repository import BoardRepository
from .protocol import StorageProtocol
from .storage import FileStorage, MemoryStorage

__all__ = [
    "BoardRepository",
    "FileStorage",
    "MemoryStorage",
    "StorageProtocol",
]
