"""minikanban TUI Application."""

import logging
from pathlib import Path

from rich.markup import escape
from textual.app import App
from textual.binding import Binding

from .config import Settings
from .errors import SnapshotImportError
from .models import CardPatch
from .services import Services, build_services
from .ui.screens.board import BoardScreen
from .ui.screens.help import HelpScreen
from .ui.widgets import CardEditModal, ConfirmModal, PromptModal

logger = logging.getLogger(__name__)


class MiniKanbanApp(App):
    """minikanban - single-board Kanban TUI."""

    TITLE = "minikanban"

    CSS_PATH = "ui/styles.tcss"

    BINDINGS = [
        # Core bindings
        Binding("q", "quit", "Quit", show=True),
        Binding("?", "help", "Help", show=True),
        Binding("r", "refresh", "Reload", show=False),
        # Navigation - vim style
        Binding("h", "nav_left", "← Column", show=False),
        Binding("j", "nav_down", "↓ Card", show=False),
        Binding("k", "nav_up", "↑ Card", show=False),
        Binding("l", "nav_right", "→ Column", show=False),
        # Navigation - arrow keys
        Binding("left", "nav_left", "← Column", show=False),
        Binding("down", "nav_down", "↓ Card", show=False),
        Binding("up", "nav_up", "↑ Card", show=False),
        Binding("right", "nav_right", "→ Column", show=False),
        # Jump navigation
        Binding("g", "nav_first", "First", show=False),
        Binding("G", "nav_last", "Last", show=False),
        Binding("home", "nav_first", "First", show=False),
        Binding("end", "nav_last", "Last", show=False),
        # Card actions
        Binding("n", "new_card", "New", show=True),
        Binding("e", "edit_card", "Edit", show=True),
        Binding("enter", "edit_card", "Edit", show=False),
        Binding("d", "delete_card", "Delete", show=False),
        Binding("H", "move_card_left", "Move ←", show=False),
        Binding("L", "move_card_right", "Move →", show=False),
        Binding("shift+left", "move_card_left", "Move ←", show=False),
        Binding("shift+right", "move_card_right", "Move →", show=False),
        Binding("K", "move_card_up", "Move ↑", show=False),
        Binding("J", "move_card_down", "Move ↓", show=False),
        Binding("shift+up", "move_card_up", "Move ↑", show=False),
        Binding("shift+down", "move_card_down", "Move ↓", show=False),
        # Column actions
        Binding("c", "new_column", "Column", show=True),
        Binding("R", "rename_column", "Rename", show=False),
        Binding("D", "delete_column", "Delete column", show=False),
        Binding("less_than_sign", "move_column_left", "Column ←", show=False),
        Binding("greater_than_sign", "move_column_right", "Column →", show=False),
        Binding("ctrl+left", "move_column_left", "Column ←", show=False),
        Binding("ctrl+right", "move_column_right", "Column →", show=False),
        # Board actions
        Binding("x", "export", "Export", show=True),
        Binding("i", "import", "Import", show=True),
        Binding("ctrl+r", "reset", "Reset", show=False),
    ]

    SCREENS = {
        "board": BoardScreen,
    }

    def __init__(self, settings: Settings | None = None, services: Services | None = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self._init_services(services)

    def _init_services(self, services: Services | None) -> None:
        """Initialize repository and services."""
        self.services = services or build_services(self.settings)
        self.config_service = self.services.config_service
        self.board_service = self.services.board_service
        self.snapshot_service = self.services.snapshot_service

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen("board")
        if self.config_service.has_config_error:
            self.notify(escape(self.config_service.config_error), severity="warning", timeout=5)

    def _board_screen(self) -> BoardScreen | None:
        """Get the board screen if it is the active screen."""
        screen = self.screen
        if isinstance(screen, BoardScreen):
            return screen
        return None

    def _changed(
        self,
        focus_card_id: str | None = None,
        focus_column_id: str | None = None,
    ) -> None:
        """Re-render after a committed change and report a failed save."""
        screen = self._board_screen()
        if screen is not None:
            screen.refresh_board(focus_card_id=focus_card_id, focus_column_id=focus_column_id)
        if self.board_service.has_storage_error:
            self.notify(
                f"Board not saved: {escape(self.board_service.storage_error)}",
                severity="warning",
                timeout=5,
            )

    def action_refresh(self) -> None:
        """Reload the board from storage."""
        self.board_service.reload()
        screen = self._board_screen()
        if screen is not None:
            screen.refresh_board()

    def action_help(self) -> None:
        """Show help screen."""
        self.push_screen(HelpScreen())

    # Navigation actions
    def action_nav_left(self) -> None:
        """Navigate to previous column."""
        screen = self._board_screen()
        if screen is not None:
            screen.navigate_column(-1)

    def action_nav_right(self) -> None:
        """Navigate to next column."""
        screen = self._board_screen()
        if screen is not None:
            screen.navigate_column(1)

    def action_nav_up(self) -> None:
        """Navigate to previous card."""
        screen = self._board_screen()
        if screen is not None:
            screen.navigate_card(-1)

    def action_nav_down(self) -> None:
        """Navigate to next card."""
        screen = self._board_screen()
        if screen is not None:
            screen.navigate_card(1)

    def action_nav_first(self) -> None:
        """Navigate to first card in column."""
        screen = self._board_screen()
        if screen is not None:
            screen.navigate_to_card(0)

    def action_nav_last(self) -> None:
        """Navigate to last card in column."""
        screen = self._board_screen()
        if screen is not None:
            screen.navigate_to_card(-1)

    # Card actions
    def action_new_card(self) -> None:
        """Ask for a title and add a card at the top of the current column."""
        screen = self._board_screen()
        if screen is None:
            return

        column = screen.get_current_column()
        if column is None:
            self.notify("Add a column first", severity="warning", timeout=2)
            return

        column_id = column.column_id

        def handle_title(title: str | None) -> None:
            if title is None or not title.strip():
                return
            card = self.board_service.create_card(column_id, title.strip())
            if card is not None:
                self._changed(focus_card_id=card.id)

        self.push_screen(
            PromptModal(f"New card in {column.title}", placeholder="Card title"),
            callback=handle_title,
        )

    def action_edit_card(self) -> None:
        """Edit the current card in a modal form."""
        screen = self._board_screen()
        if screen is None:
            return

        card = screen.get_current_card()
        if card is None:
            return

        card_id = card.id

        def handle_patch(patch: CardPatch | None) -> None:
            if patch is None:
                return
            if self.board_service.update_card(card_id, patch) is None:
                self.notify("Card not found", severity="warning", timeout=2)
                return
            self._changed(focus_card_id=card_id)

        self.push_screen(CardEditModal(card), callback=handle_patch)

    def action_delete_card(self) -> None:
        """Delete the current card (with confirmation)."""
        screen = self._board_screen()
        if screen is None:
            return

        card = screen.get_current_card()
        if card is None:
            return

        card_id = card.id

        def handle_confirm(confirmed: bool | None) -> None:
            if not confirmed:
                return
            self.board_service.remove_card(card_id)
            self._changed()
            self.notify("Card deleted", timeout=2)

        self.push_screen(ConfirmModal(f"Delete '{card.title}'?"), callback=handle_confirm)

    def _move_card(self, column_delta: int, card_delta: int) -> None:
        """Move the current card on screen, then commit the displayed order."""
        screen = self._board_screen()
        if screen is None:
            return

        card_id = screen.move_card_in_view(column_delta, card_delta)
        if card_id is None:
            return

        self.board_service.apply_order(screen.read_display_order())
        self._changed(focus_card_id=card_id)

    def action_move_card_left(self) -> None:
        """Move current card to the previous column."""
        self._move_card(-1, 0)

    def action_move_card_right(self) -> None:
        """Move current card to the next column."""
        self._move_card(1, 0)

    def action_move_card_up(self) -> None:
        """Move current card up in its column."""
        self._move_card(0, -1)

    def action_move_card_down(self) -> None:
        """Move current card down in its column."""
        self._move_card(0, 1)

    # Column actions
    def action_new_column(self) -> None:
        """Ask for a title and append a column."""
        default_title = self.config_service.get_config().default_column_title

        def handle_title(title: str | None) -> None:
            if title is None:
                return
            column = self.board_service.add_column(title)
            self._changed(focus_column_id=column.id)

        self.push_screen(PromptModal("Column title", value=default_title), callback=handle_title)

    def action_rename_column(self) -> None:
        """Rename the current column."""
        screen = self._board_screen()
        if screen is None:
            return

        column = screen.get_current_column()
        if column is None:
            return

        column_id = column.column_id

        def handle_title(title: str | None) -> None:
            if title is None:
                return
            if self.board_service.rename_column(column_id, title):
                self._changed(focus_column_id=column_id)

        self.push_screen(PromptModal("Rename column", value=column.title), callback=handle_title)

    def action_delete_column(self) -> None:
        """Delete the current column and its cards (with confirmation)."""
        screen = self._board_screen()
        if screen is None:
            return

        column = screen.get_current_column()
        if column is None:
            return

        column_id = column.column_id

        def handle_confirm(confirmed: bool | None) -> None:
            if not confirmed:
                return
            self.board_service.remove_column(column_id)
            self._changed()
            self.notify("Column deleted", timeout=2)

        self.push_screen(
            ConfirmModal(
                f"Delete column '{column.title}' and all cards?",
                detail=f"{column.card_count} card(s) will be removed",
            ),
            callback=handle_confirm,
        )

    def _move_column(self, delta: int) -> None:
        """Move the current column on screen, then commit the displayed order."""
        screen = self._board_screen()
        if screen is None:
            return

        column_id = screen.move_column_in_view(delta)
        if column_id is None:
            return

        self.board_service.apply_order(screen.read_display_order())
        self._changed(focus_column_id=column_id)

    def action_move_column_left(self) -> None:
        """Move current column one position left."""
        self._move_column(-1)

    def action_move_column_right(self) -> None:
        """Move current column one position right."""
        self._move_column(1)

    # Board actions
    def _export_path(self) -> Path:
        return self.services.default_export_path(self.settings)

    def action_export(self) -> None:
        """Write the board snapshot to the export path."""
        path = self._export_path()
        try:
            self.snapshot_service.export_to_file(path)
        except OSError as e:
            logger.warning("Export to %s failed: %s", path, e)
            self.notify(f"Export failed: {escape(str(e))}", severity="error", timeout=5)
            return
        self.notify(f"Exported to {escape(str(path))}", timeout=3)

    def action_import(self) -> None:
        """Ask for a snapshot file and replace the board with it."""
        if self._board_screen() is None:
            return
        self.push_screen(
            PromptModal("Import board from file", value=str(self._export_path())),
            callback=self._handle_import_path,
        )

    def _handle_import_path(self, value: str | None) -> None:
        """Handle import path from prompt."""
        if value is None or not value.strip():
            return

        path = Path(value.strip()).expanduser()
        try:
            self.snapshot_service.import_from_file(path)
        except SnapshotImportError as e:
            self.notify(f"Import failed: {escape(str(e))}", severity="error", timeout=5)
            return

        self._changed()
        self.notify("Imported board", timeout=2)

    def action_reset(self) -> None:
        """Reset the board to the default board (with confirmation)."""
        if self._board_screen() is None:
            return
        self.push_screen(
            ConfirmModal(
                "Reset board to default? This will erase current board.",
                confirm_label="Reset",
            ),
            callback=self._handle_reset_confirm,
        )

    def _handle_reset_confirm(self, confirmed: bool | None) -> None:
        """Handle reset confirmation result."""
        if not confirmed:
            return
        self.board_service.reset()
        self._changed()
        self.notify("Board reset", timeout=2)


def run(settings: Settings | None = None) -> None:
    """Run the minikanban application."""
    app = MiniKanbanApp(settings)
    app.run()
