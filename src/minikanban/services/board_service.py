"""Service owning the canonical board state."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..errors import StorageError
from ..models import (
    CARD_ID_PREFIX,
    COLUMN_ID_PREFIX,
    Board,
    Card,
    CardPatch,
    Column,
    KanbanConfig,
    ReportedOrder,
)
from ..repositories import BoardRepository
from ..utils import new_id
from .reconcile import reconcile

if TYPE_CHECKING:
    from .config_service import ConfigService

logger = logging.getLogger(__name__)


class BoardService:
    """
    Holds the single canonical Board and applies every change to it.

    Each mutation copies the board, changes the copy and swaps it back in
    through set_board, which also persists it. Operations on IDs that do
    not exist are no-ops: nothing is raised and nothing is written.

    Not safe for overlapping calls from several threads; all calls are
    expected to come from the UI event loop.
    """

    def __init__(
        self,
        repository: BoardRepository,
        config_service: ConfigService | None = None,
    ) -> None:
        self.repository = repository
        self._config_service = config_service
        self._storage_error: str | None = None
        self._board = self._load()

    def _get_config(self) -> KanbanConfig:
        """Get config, using default if no config service."""
        if self._config_service:
            return self._config_service.get_config()
        return KanbanConfig.default()

    def _load(self) -> Board:
        """Load the stored board, seeding the default board if there is none."""
        board = self.repository.load()
        if board is None:
            logger.info("No stored board, using default board")
            return Board.default()
        return board

    @property
    def has_storage_error(self) -> bool:
        """Check if the last save failed."""
        return self._storage_error is not None

    @property
    def storage_error(self) -> str | None:
        """Get the error message of the last failed save, if any."""
        return self._storage_error

    # --- Canonical state ---

    def get_board(self) -> Board:
        """Get a copy of the current board."""
        return self._board.model_copy(deep=True)

    def set_board(self, board: Board) -> None:
        """
        Replace the board and persist it.

        A failed write is logged and recorded in storage_error; the new
        board is kept in memory either way. Any other error from saving
        propagates and leaves the current board in place.
        """
        new_board = board.model_copy(deep=True)
        try:
            self.repository.save(new_board)
        except StorageError as e:
            self._storage_error = str(e)
            logger.warning("Board not saved: %s", e)
        else:
            self._storage_error = None
        self._board = new_board

    def reload(self) -> None:
        """
        Reload board state from storage.

        With nothing usable stored, the board in memory is kept.
        """
        self._storage_error = None
        board = self.repository.load()
        if board is None:
            logger.info("No stored board to reload, keeping current board")
            return
        self._board = board

    def reset(self) -> Board:
        """Replace the board with a freshly seeded default board."""
        board = Board.default()
        self.set_board(board)
        logger.info("Board reset to default")
        return self.get_board()

    # --- Lookups ---

    def find_column(self, column_id: str) -> Column | None:
        """Get a copy of a column by ID."""
        column = self._board.get_column(column_id)
        return column.model_copy(deep=True) if column else None

    def find_card(self, card_id: str) -> Card | None:
        """Get a copy of a card by ID."""
        card = self._board.find_card(card_id)
        return card.model_copy() if card else None

    # --- Columns ---

    def add_column(self, title: str | None = None) -> Column:
        """Append a new empty column. A blank title uses the fallback title."""
        board = self.get_board()
        column = Column(
            id=new_id(COLUMN_ID_PREFIX, board.column_ids),
            title=(title or "").strip() or self._get_config().default_column_title,
        )
        board.columns.append(column)
        self.set_board(board)
        logger.info("Column added: %s (%s)", column.id, column.title)
        return column.model_copy(deep=True)

    def remove_column(self, column_id: str) -> bool:
        """Remove a column and all its cards. Returns False if not found."""
        board = self.get_board()
        if board.get_column(column_id) is None:
            logger.debug("remove_column: column not found: %s", column_id)
            return False

        board.columns = [column for column in board.columns if column.id != column_id]
        self.set_board(board)
        logger.info("Column removed: %s", column_id)
        return True

    def rename_column(self, column_id: str, new_title: str) -> bool:
        """
        Rename a column.

        A title that is blank after trimming leaves the column unchanged.

        Returns:
            True if the title was set
        """
        title = new_title.strip()
        if not title:
            logger.debug("rename_column: blank title ignored for %s", column_id)
            return False

        board = self.get_board()
        column = board.get_column(column_id)
        if column is None:
            logger.debug("rename_column: column not found: %s", column_id)
            return False

        old_title = column.title
        column.title = title
        self.set_board(board)
        logger.info("Column renamed: %s (%s -> %s)", column_id, old_title, title)
        return True

    # --- Cards ---

    def add_card(self, column_id: str, card: Card) -> Card | None:
        """
        Insert a card at the front of a column (newest first).

        A card whose ID is already on the board gets a fresh ID.

        Returns:
            The inserted card, or None if the column does not exist.
        """
        board = self.get_board()
        column = board.get_column(column_id)
        if column is None:
            logger.debug("add_card: column not found: %s", column_id)
            return None

        card = card.model_copy()
        taken = board.card_ids
        if card.id in taken:
            fresh = new_id(CARD_ID_PREFIX, taken)
            logger.warning("add_card: id %s already in use, using %s", card.id, fresh)
            card.id = fresh

        column.cards.insert(0, card)
        self.set_board(board)
        logger.info("Card added: %s to %s", card.id, column_id)
        return card.model_copy()

    def create_card(
        self,
        column_id: str,
        title: str,
        desc: str = "",
        tag: str = "",
    ) -> Card | None:
        """Create a card with a fresh ID at the front of a column."""
        if self._board.get_column(column_id) is None:
            logger.debug("create_card: column not found: %s", column_id)
            return None

        card = Card(
            id=new_id(CARD_ID_PREFIX, self._board.card_ids),
            title=title.strip() or self._get_config().default_card_title,
            desc=desc,
            tag=tag,
        )
        return self.add_card(column_id, card)

    def remove_card(self, card_id: str) -> bool:
        """Remove a card from whichever column holds it. Returns False if not found."""
        board = self.get_board()
        if board.find_card(card_id) is None:
            logger.debug("remove_card: card not found: %s", card_id)
            return False

        for column in board.columns:
            column.cards = [card for card in column.cards if card.id != card_id]
        self.set_board(board)
        logger.info("Card removed: %s", card_id)
        return True

    def update_card(self, card_id: str, patch: CardPatch | dict) -> Card | None:
        """
        Merge patch fields into a card, leaving other fields untouched.

        Returns:
            The updated card, or None if not found.
        """
        if isinstance(patch, dict):
            patch = CardPatch.model_validate(patch)

        board = self.get_board()
        card = board.find_card(card_id)
        if card is None:
            logger.debug("update_card: card not found: %s", card_id)
            return None

        changed = sorted(patch.changes())
        patch.apply_to(card)
        self.set_board(board)
        logger.info("Card updated: %s (%s)", card_id, ", ".join(changed) or "no changes")
        return card.model_copy()

    # --- Ordering ---

    def apply_order(self, order: ReportedOrder) -> Board:
        """Rebuild the board from a reported display order and commit it."""
        config = self._get_config()
        board = reconcile(
            self._board,
            order,
            default_column_title=config.default_column_title,
            default_card_title=config.default_card_title,
        )
        self.set_board(board)
        logger.debug(
            "Order applied: %d columns, %d cards", len(board.columns), board.card_count
        )
        return self.get_board()

    def move_card(self, card_id: str, to_column_id: str, position: int = -1) -> bool:
        """
        Move a card to a column at position (-1 = end).

        Goes through the same reconciliation path as an on-screen reorder.

        Returns:
            True if the card was moved
        """
        order = ReportedOrder.from_board(self._board)
        if not order.move_card(card_id, to_column_id, position):
            logger.debug("move_card: card or column not found: %s -> %s", card_id, to_column_id)
            return False

        self.apply_order(order)
        logger.info("Card moved: %s -> %s (pos %d)", card_id, to_column_id, position)
        return True

    def move_column(self, column_id: str, position: int) -> bool:
        """Move a column to position. Returns False if not found."""
        order = ReportedOrder.from_board(self._board)
        if not order.move_column(column_id, position):
            logger.debug("move_column: column not found: %s", column_id)
            return False

        self.apply_order(order)
        logger.info("Column moved: %s (pos %d)", column_id, position)
        return True
