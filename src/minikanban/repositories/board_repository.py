"""Repository for the persisted board snapshot."""

from __future__ import annotations

import logging

from ..errors import SnapshotImportError
from ..models import Board, decode_board, encode_board
from .protocol import StorageProtocol

logger = logging.getLogger(__name__)


class BoardRepository:
    """
    Loads and saves the board snapshot under a single fixed storage key.

    A missing or corrupt snapshot is reported as None rather than raised,
    leaving the caller to fall back to a default board.
    """

    DEFAULT_KEY = "kanban_mini_v1"

    def __init__(self, storage: StorageProtocol, key: str = DEFAULT_KEY) -> None:
        self.storage = storage
        self.key = key

    def load(self) -> Board | None:
        """Load the stored board, or None if there is no usable snapshot."""
        raw = self.storage.get(self.key)
        if raw is None:
            logger.debug("No stored snapshot under %s", self.key)
            return None

        try:
            board = decode_board(raw)
        except SnapshotImportError as e:
            logger.warning("Ignoring corrupt snapshot under %s: %s", self.key, e)
            return None

        logger.debug("Loaded board with %d columns from %s", len(board.columns), self.key)
        return board

    def save(self, board: Board) -> None:
        """
        Persist the board.

        Raises:
            StorageError: The storage backend could not write the snapshot.
        """
        self.storage.set(self.key, encode_board(board).decode("utf-8"))
