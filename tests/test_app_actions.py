"""Tests for app action handlers.

These tests verify that actions call the board service with the right
arguments and give the user feedback, without mounting the TUI.
"""

from pathlib import Path
from unittest.mock import MagicMock, PropertyMock, patch

import pytest

from minikanban.errors import SnapshotImportError
from minikanban.models import Card, CardPatch, ReportedOrder


@pytest.fixture(autouse=True)
def modals():
    """Replace modal screens so actions can run outside a running app."""
    with (
        patch("minikanban.app.PromptModal") as prompt,
        patch("minikanban.app.ConfirmModal") as confirm,
        patch("minikanban.app.CardEditModal") as card_edit,
    ):
        yield {"prompt": prompt, "confirm": confirm, "card_edit": card_edit}


def make_app():
    """Create an app instance without running Textual's constructor."""
    from minikanban.app import MiniKanbanApp

    app = MiniKanbanApp.__new__(MiniKanbanApp)
    app.notify = MagicMock()
    app.push_screen = MagicMock()
    app.settings = MagicMock()
    app.services = MagicMock()
    app.config_service = MagicMock()
    app.board_service = MagicMock()
    app.board_service.has_storage_error = False
    app.snapshot_service = MagicMock()
    return app


def make_screen(card: Card | None = None, column_id: str | None = "col_a") -> MagicMock:
    """Create a board screen mock with a current card and column."""
    screen = MagicMock()
    screen.get_current_card.return_value = card
    if column_id is None:
        screen.get_current_column.return_value = None
    else:
        screen.get_current_column.return_value.column_id = column_id
        screen.get_current_column.return_value.title = "Todo"
        screen.get_current_column.return_value.card_count = 2
    return screen


def on_board(screen: MagicMock):
    """Patch the app so screen is the active board screen."""
    from minikanban.app import MiniKanbanApp

    return (
        patch.object(MiniKanbanApp, "screen", new_callable=PropertyMock, return_value=screen),
        patch("minikanban.app.isinstance", return_value=True),
    )


def pushed_callback(app) -> callable:
    """The callback passed to the last push_screen call."""
    return app.push_screen.call_args.kwargs["callback"]


class TestCardActions:
    """Tests for new, edit and delete card actions."""

    def test_new_card_creates_in_current_column(self):
        app = make_app()
        app.board_service.create_card.return_value = Card(id="c_new", title="Task")
        screen = make_screen()

        screen_patch, isinstance_patch = on_board(screen)
        with screen_patch, isinstance_patch:
            app.action_new_card()
            pushed_callback(app)("  Task  ")

        app.board_service.create_card.assert_called_once_with("col_a", "Task")
        screen.refresh_board.assert_called_once_with(focus_card_id="c_new", focus_column_id=None)

    def test_new_card_cancelled(self):
        app = make_app()
        screen = make_screen()

        screen_patch, isinstance_patch = on_board(screen)
        with screen_patch, isinstance_patch:
            app.action_new_card()
            pushed_callback(app)(None)
            pushed_callback(app)("   ")

        app.board_service.create_card.assert_not_called()

    def test_new_card_without_columns(self):
        app = make_app()
        screen = make_screen(column_id=None)

        screen_patch, isinstance_patch = on_board(screen)
        with screen_patch, isinstance_patch:
            app.action_new_card()

        app.push_screen.assert_not_called()
        app.notify.assert_called_once_with("Add a column first", severity="warning", timeout=2)

    def test_edit_card_applies_patch(self):
        app = make_app()
        screen = make_screen(Card(id="c_1", title="One"))
        patch_value = CardPatch(title="Uno")

        screen_patch, isinstance_patch = on_board(screen)
        with screen_patch, isinstance_patch:
            app.action_edit_card()
            pushed_callback(app)(patch_value)

        app.board_service.update_card.assert_called_once_with("c_1", patch_value)
        screen.refresh_board.assert_called_once()

    def test_edit_card_vanished(self):
        app = make_app()
        app.board_service.update_card.return_value = None
        screen = make_screen(Card(id="c_1", title="One"))

        screen_patch, isinstance_patch = on_board(screen)
        with screen_patch, isinstance_patch:
            app.action_edit_card()
            pushed_callback(app)(CardPatch(title="Uno"))

        app.notify.assert_called_once_with("Card not found", severity="warning", timeout=2)

    def test_edit_without_card_does_nothing(self):
        app = make_app()

        screen_patch, isinstance_patch = on_board(make_screen(None))
        with screen_patch, isinstance_patch:
            app.action_edit_card()

        app.push_screen.assert_not_called()

    def test_delete_card_confirmed(self):
        app = make_app()
        screen = make_screen(Card(id="c_1", title="One"))

        screen_patch, isinstance_patch = on_board(screen)
        with screen_patch, isinstance_patch:
            app.action_delete_card()
            pushed_callback(app)(True)

        app.board_service.remove_card.assert_called_once_with("c_1")
        app.notify.assert_called_once_with("Card deleted", timeout=2)

    def test_delete_card_declined(self):
        app = make_app()
        screen = make_screen(Card(id="c_1", title="One"))

        screen_patch, isinstance_patch = on_board(screen)
        with screen_patch, isinstance_patch:
            app.action_delete_card()
            pushed_callback(app)(False)

        app.board_service.remove_card.assert_not_called()


class TestMoveActions:
    """Tests for keyboard reordering."""

    def test_move_card_commits_display_order(self):
        app = make_app()
        screen = make_screen()
        order = ReportedOrder()
        screen.move_card_in_view.return_value = "c_1"
        screen.read_display_order.return_value = order

        screen_patch, isinstance_patch = on_board(screen)
        with screen_patch, isinstance_patch:
            app.action_move_card_right()

        screen.move_card_in_view.assert_called_once_with(1, 0)
        app.board_service.apply_order.assert_called_once_with(order)
        screen.refresh_board.assert_called_once_with(focus_card_id="c_1", focus_column_id=None)

    def test_move_card_at_edge_commits_nothing(self):
        app = make_app()
        screen = make_screen()
        screen.move_card_in_view.return_value = None

        screen_patch, isinstance_patch = on_board(screen)
        with screen_patch, isinstance_patch:
            app.action_move_card_up()

        screen.move_card_in_view.assert_called_once_with(0, -1)
        app.board_service.apply_order.assert_not_called()

    def test_move_column_commits_display_order(self):
        app = make_app()
        screen = make_screen()
        screen.move_column_in_view.return_value = "col_a"

        screen_patch, isinstance_patch = on_board(screen)
        with screen_patch, isinstance_patch:
            app.action_move_column_left()

        screen.move_column_in_view.assert_called_once_with(-1)
        app.board_service.apply_order.assert_called_once_with(screen.read_display_order())
        screen.refresh_board.assert_called_once_with(focus_card_id=None, focus_column_id="col_a")

    def test_failed_save_is_reported(self):
        app = make_app()
        app.board_service.has_storage_error = True
        app.board_service.storage_error = "Cannot write board: disk full"
        screen = make_screen()
        screen.move_card_in_view.return_value = "c_1"

        screen_patch, isinstance_patch = on_board(screen)
        with screen_patch, isinstance_patch:
            app.action_move_card_down()

        app.notify.assert_called_once_with(
            "Board not saved: Cannot write board: disk full", severity="warning", timeout=5
        )


class TestColumnActions:
    """Tests for column actions."""

    def test_new_column(self):
        app = make_app()
        app.config_service.get_config.return_value.default_column_title = "New Column"
        app.board_service.add_column.return_value.id = "col_new"
        screen = make_screen()

        screen_patch, isinstance_patch = on_board(screen)
        with screen_patch, isinstance_patch:
            app.action_new_column()
            pushed_callback(app)("Review")

        app.board_service.add_column.assert_called_once_with("Review")
        screen.refresh_board.assert_called_once_with(focus_card_id=None, focus_column_id="col_new")

    def test_rename_column(self):
        app = make_app()
        app.board_service.rename_column.return_value = True
        screen = make_screen()

        screen_patch, isinstance_patch = on_board(screen)
        with screen_patch, isinstance_patch:
            app.action_rename_column()
            pushed_callback(app)("Backlog")

        app.board_service.rename_column.assert_called_once_with("col_a", "Backlog")
        screen.refresh_board.assert_called_once()

    def test_rename_column_blank_no_refresh(self):
        app = make_app()
        app.board_service.rename_column.return_value = False
        screen = make_screen()

        screen_patch, isinstance_patch = on_board(screen)
        with screen_patch, isinstance_patch:
            app.action_rename_column()
            pushed_callback(app)("   ")

        screen.refresh_board.assert_not_called()

    def test_delete_column_confirmed(self):
        app = make_app()
        screen = make_screen()

        screen_patch, isinstance_patch = on_board(screen)
        with screen_patch, isinstance_patch:
            app.action_delete_column()
            pushed_callback(app)(True)

        app.board_service.remove_column.assert_called_once_with("col_a")
        app.notify.assert_called_once_with("Column deleted", timeout=2)

    def test_delete_column_asks_about_cards(self, modals: dict):
        app = make_app()

        screen_patch, isinstance_patch = on_board(make_screen())
        with screen_patch, isinstance_patch:
            app.action_delete_column()

        modals["confirm"].assert_called_once_with(
            "Delete column 'Todo' and all cards?", detail="2 card(s) will be removed"
        )


class TestBoardActions:
    """Tests for export, import and reset."""

    def test_export_notifies_path(self):
        app = make_app()
        app.services.default_export_path.return_value = Path("/tmp/kanban_board.json")

        app.action_export()

        app.snapshot_service.export_to_file.assert_called_once_with(
            Path("/tmp/kanban_board.json")
        )
        app.notify.assert_called_once_with("Exported to /tmp/kanban_board.json", timeout=3)

    def test_export_failure(self):
        app = make_app()
        app.services.default_export_path.return_value = Path("/ro/kanban_board.json")
        app.snapshot_service.export_to_file.side_effect = PermissionError("read-only")

        app.action_export()

        app.notify.assert_called_once_with(
            "Export failed: read-only", severity="error", timeout=5
        )

    def test_import_success(self):
        app = make_app()
        screen = make_screen()

        screen_patch, isinstance_patch = on_board(screen)
        with screen_patch, isinstance_patch:
            app._handle_import_path(" board.json ")

        app.snapshot_service.import_from_file.assert_called_once_with(Path("board.json"))
        screen.refresh_board.assert_called_once()
        app.notify.assert_called_once_with("Imported board", timeout=2)

    def test_import_failure_keeps_board(self):
        app = make_app()
        app.snapshot_service.import_from_file.side_effect = SnapshotImportError("Invalid format")
        screen = make_screen()

        screen_patch, isinstance_patch = on_board(screen)
        with screen_patch, isinstance_patch:
            app._handle_import_path("board.json")

        screen.refresh_board.assert_not_called()
        app.notify.assert_called_once_with(
            "Import failed: Invalid format", severity="error", timeout=5
        )

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_import_cancelled(self, value):
        app = make_app()

        app._handle_import_path(value)

        app.snapshot_service.import_from_file.assert_not_called()

    def test_reset_confirmed(self):
        app = make_app()
        screen = make_screen()

        screen_patch, isinstance_patch = on_board(screen)
        with screen_patch, isinstance_patch:
            app._handle_reset_confirm(True)

        app.board_service.reset.assert_called_once()
        app.notify.assert_called_once_with("Board reset", timeout=2)

    def test_reset_declined(self):
        app = make_app()

        app._handle_reset_confirm(False)

        app.board_service.reset.assert_not_called()
