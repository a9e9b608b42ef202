"""Main kanban board screen."""

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from ...models import Board, Card, ReportedOrder
from ..widgets.column import KanbanColumn

EMPTY_BOARD_TEXT = "No columns yet. Press [b]c[/b] to add one."


class BoardScreen(Screen):
    """Main kanban board screen with navigation.

    Columns are rebuilt from the board after every change. Reorders are
    applied to the displayed widgets first; the app then reads the full
    displayed order back with read_display_order() and commits it.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._current_column = 0
        self._current_card = 0
        # Pending focus state for deferred focus after refresh
        self._pending_card_id: str | None = None
        self._pending_column_id: str | None = None
        self._pending_column = 0
        self._pending_card = 0

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="board-container"):
            yield Horizontal(id="columns")
            yield Static(EMPTY_BOARD_TEXT, id="empty-note")
        yield Footer()

    def on_mount(self) -> None:
        """Load the board when the screen mounts."""
        self.refresh_board()

    # --- Rendering ---

    def refresh_board(
        self,
        focus_card_id: str | None = None,
        focus_column_id: str | None = None,
    ) -> None:
        """
        Rebuild the columns from the current board.

        Args:
            focus_card_id: If provided, focus this card after refresh.
            focus_column_id: If provided (and no card), focus this column.
                             If neither, preserves current position.
        """
        board = self.app.board_service.get_board()  # pyrefly: ignore[missing-attribute]

        self._pending_card_id = focus_card_id
        self._pending_column_id = focus_column_id
        self._pending_column = self._current_column
        self._pending_card = self._current_card

        self.call_after_refresh(self._rebuild_columns, board)

    async def _rebuild_columns(self, board: Board) -> None:
        """Replace the column widgets with ones for board."""
        container = self.query_one("#columns", Horizontal)
        await container.remove_children()
        if board.columns:
            await container.mount_all([KanbanColumn(column) for column in board.columns])

        self.query_one("#empty-note", Static).display = not board.columns

        # Columns mount their cards after one more refresh
        self.call_after_refresh(self._schedule_pending_focus)

    def _schedule_pending_focus(self) -> None:
        self.call_after_refresh(self._apply_pending_focus)

    def _apply_pending_focus(self) -> None:
        """Apply pending focus after refresh completes."""
        if self._pending_card_id:
            position = self._find_card_position(self._pending_card_id)
            if position:
                self._current_column, self._current_card = position
                self._update_focus()
                return

        if self._pending_column_id:
            for idx, column in enumerate(self.columns):
                if column.column_id == self._pending_column_id:
                    self._current_column = idx
                    self._current_card = 0
                    self._update_focus()
                    return

        # Fallback: restore previous position (clamped to valid range)
        self._current_column = max(0, min(self._pending_column, self.column_count - 1))
        column = self._get_column(self._current_column)
        if column and column.card_count > 0:
            self._current_card = min(self._pending_card, column.card_count - 1)
        else:
            self._current_card = 0

        self._update_focus()

    # --- Display order ---

    @property
    def columns(self) -> list[KanbanColumn]:
        """Column widgets in display order."""
        container = self.query_one("#columns", Horizontal)
        return [child for child in container.children if isinstance(child, KanbanColumn)]

    @property
    def column_count(self) -> int:
        return len(self.columns)

    def read_display_order(self) -> ReportedOrder:
        """Read the full board order as currently displayed."""
        return ReportedOrder(columns=[column.report() for column in self.columns])

    def move_card_in_view(self, column_delta: int, card_delta: int) -> str | None:
        """
        Move the focused card on screen.

        Args:
            column_delta: -1/1 to move to the previous/next column
            card_delta: -1/1 to move up/down within the column

        Returns:
            ID of the moved card, or None if nothing moved.
        """
        source = self._get_column(self._current_column)
        card = source.get_card(self._current_card) if source else None
        if source is None or card is None:
            return None

        if column_delta:
            target = self._get_column(self._current_column + column_delta)
            if target is None:
                return None
            source_cards = list(source.cards)
            source_cards.pop(self._current_card)
            target_cards = list(target.cards)
            target_cards.insert(min(self._current_card, len(target_cards)), card)
            source.set_cards(source_cards)
            target.set_cards(target_cards)
            return card.id

        new_index = self._current_card + card_delta
        if new_index < 0 or new_index >= source.card_count:
            return None
        cards = list(source.cards)
        cards[self._current_card], cards[new_index] = cards[new_index], cards[self._current_card]
        source.set_cards(cards)
        return card.id

    def move_column_in_view(self, delta: int) -> str | None:
        """
        Move the focused column on screen.

        Returns:
            ID of the moved column, or None if nothing moved.
        """
        column = self._get_column(self._current_column)
        new_index = self._current_column + delta
        if column is None or new_index < 0 or new_index >= self.column_count:
            return None

        container = self.query_one("#columns", Horizontal)
        if delta < 0:
            container.move_child(column, before=new_index)
        else:
            container.move_child(column, after=new_index)
        return column.column_id

    # --- Navigation ---

    def navigate_column(self, delta: int) -> None:
        """Navigate between columns."""
        if self.column_count == 0:
            return
        new_column = max(0, min(self._current_column + delta, self.column_count - 1))

        if new_column != self._current_column:
            self._current_column = new_column
            column = self._get_column(new_column)
            if column and column.card_count > 0:
                self._current_card = min(self._current_card, column.card_count - 1)
            else:
                self._current_card = 0
            self._update_focus()

    def navigate_card(self, delta: int) -> None:
        """Navigate between cards in current column."""
        column = self._get_column(self._current_column)
        if column is None or column.card_count == 0:
            return

        new_card = max(0, min(self._current_card + delta, column.card_count - 1))
        if new_card != self._current_card:
            self._current_card = new_card
            self._update_focus()

    def navigate_to_card(self, index: int) -> None:
        """Navigate to specific card index (-1 for last)."""
        column = self._get_column(self._current_column)
        if column is None or column.card_count == 0:
            return

        index = column.card_count - 1 if index < 0 else min(index, column.card_count - 1)
        self._current_card = index
        self._update_focus()

    def _get_column(self, index: int) -> KanbanColumn | None:
        """Get column widget by index."""
        columns = self.columns
        if 0 <= index < len(columns):
            return columns[index]
        return None

    def _find_card_position(self, card_id: str) -> tuple[int, int] | None:
        """Find (column_index, card_index) of a card on screen."""
        for col_idx, column in enumerate(self.columns):
            for card_idx, card in enumerate(column.cards):
                if card.id == card_id:
                    return (col_idx, card_idx)
        return None

    def _update_focus(self) -> None:
        """Highlight the current column and focus the current card."""
        for idx, column in enumerate(self.columns):
            column.set_class(idx == self._current_column, "-current")
        column = self._get_column(self._current_column)
        if column:
            column.focus_card(self._current_card)

    # --- Current selection ---

    def get_current_card(self) -> Card | None:
        """Get the currently focused card."""
        column = self._get_column(self._current_column)
        if column:
            return column.get_card(self._current_card)
        return None

    def get_current_column(self) -> KanbanColumn | None:
        """Get the currently focused column."""
        return self._get_column(self._current_column)
