"""Service for exporting and importing board snapshots."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ..errors import SnapshotImportError
from ..models import Board, decode_board, encode_board

if TYPE_CHECKING:
    from .board_service import BoardService

logger = logging.getLogger(__name__)


class SnapshotService:
    """Export the board to JSON and replace it from imported JSON."""

    def __init__(self, board_service: BoardService) -> None:
        self.board_service = board_service

    def export_board(self) -> bytes:
        """Serialize the current board as pretty-printed JSON."""
        return encode_board(self.board_service.get_board())

    def import_board(self, data: bytes | str) -> Board:
        """
        Replace the board with an imported snapshot.

        The imported board replaces the current one entirely; nothing is
        merged.

        Raises:
            SnapshotImportError: The snapshot is malformed. The current
                board is left unchanged.
        """
        board = decode_board(data)
        self.board_service.set_board(board)
        logger.info(
            "Board imported: %d columns, %d cards", len(board.columns), board.card_count
        )
        return self.board_service.get_board()

    def export_to_file(self, path: Path) -> Path:
        """
        Write the current board to a file.

        Raises:
            OSError: The file could not be written.
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.export_board())
        logger.info("Board exported to %s", path)
        return path

    def import_from_file(self, path: Path) -> Board:
        """
        Replace the board from a snapshot file.

        Raises:
            SnapshotImportError: The file cannot be read or is malformed.
        """
        try:
            data = path.read_bytes()
        except OSError as e:
            raise SnapshotImportError(f"Cannot read {path}: {e.strerror or e}") from e
        return self.import_board(data)
