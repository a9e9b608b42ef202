"""Tests for the board screen running inside the Textual app."""

import json
from pathlib import Path

import pytest
from textual.pilot import Pilot
from textual.widgets import Input

from minikanban.app import MiniKanbanApp
from minikanban.config import Settings
from minikanban.repositories import BoardRepository, MemoryStorage
from minikanban.services import build_services
from minikanban.ui.widgets import PromptModal


def make_app(tmp_path: Path, snapshot: dict) -> MiniKanbanApp:
    """App over in-memory storage preloaded with snapshot."""
    settings = Settings(data_dir=tmp_path)
    storage = MemoryStorage({BoardRepository.DEFAULT_KEY: json.dumps(snapshot)})
    return MiniKanbanApp(settings, build_services(settings, storage=storage))


async def settle(pilot: Pilot) -> None:
    """Let column rebuilds and deferred focus run."""
    for _ in range(5):
        await pilot.pause(0.02)


def column_ids(app: MiniKanbanApp) -> list[str]:
    return app.board_service.get_board().column_ids


@pytest.fixture
def app(tmp_path: Path) -> MiniKanbanApp:
    return make_app(
        tmp_path,
        {
            "columns": [
                {"id": "a", "title": "A", "cards": [{"id": "x", "title": "X", "desc": "d"}]},
                {"id": "b", "title": "B", "cards": []},
                {"id": "c", "title": "C", "cards": []},
            ]
        },
    )


@pytest.mark.asyncio
async def test_keyboard_moves_commit_displayed_order(app: MiniKanbanApp):
    """Column and card moves on screen end up in the board store."""
    async with app.run_test() as pilot:
        await settle(pilot)

        await pilot.press(">")
        await settle(pilot)
        assert column_ids(app) == ["b", "a", "c"]

        await pilot.press("L")
        await settle(pilot)
        board = app.board_service.get_board()
        assert board.get_column("a").cards == []
        assert [card.id for card in board.get_column("c").cards] == ["x"]
        assert board.find_card("x").desc == "d"

        await pilot.press("<")
        await settle(pilot)
        assert column_ids(app) == ["b", "c", "a"]


@pytest.mark.asyncio
async def test_screen_order_matches_board_after_moves(app: MiniKanbanApp):
    async with app.run_test() as pilot:
        await settle(pilot)

        await pilot.press(">")
        await settle(pilot)

        order = app.screen.read_display_order()
        assert [column.id for column in order.columns] == column_ids(app)


@pytest.mark.asyncio
async def test_new_card_prompt_with_markup_in_column_title(tmp_path: Path):
    """Column titles are shown literally in the new card prompt."""
    app = make_app(tmp_path, {"columns": [{"id": "s", "title": "Sprint [/]", "cards": []}]})

    async with app.run_test() as pilot:
        await settle(pilot)

        await pilot.press("n")
        await settle(pilot)
        assert isinstance(app.screen, PromptModal)
        assert app.screen.message == "New card in Sprint [/]"

        app.screen.query_one("#prompt-input", Input).value = "Plan"
        await pilot.press("enter")
        await settle(pilot)

        cards = app.board_service.get_board().get_column("s").cards
        assert [card.title for card in cards] == ["Plan"]
