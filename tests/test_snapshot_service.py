"""Tests for SnapshotService export and import."""

import json
from pathlib import Path

import pytest

from minikanban.errors import SnapshotImportError
from minikanban.models import Board
from minikanban.repositories import BoardRepository, MemoryStorage
from minikanban.services import BoardService, SnapshotService


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def board_service(storage: MemoryStorage) -> BoardService:
    service = BoardService(BoardRepository(storage))
    service.create_card(service.get_board().columns[1].id, "In flight", tag="wip")
    return service


@pytest.fixture
def snapshot_service(board_service: BoardService) -> SnapshotService:
    return SnapshotService(board_service)


class TestExport:
    """Tests for exporting the board."""

    def test_export_matches_board(
        self, snapshot_service: SnapshotService, board_service: BoardService
    ):
        data = json.loads(snapshot_service.export_board())
        assert data == board_service.get_board().to_snapshot()

    def test_export_to_file_creates_parents(
        self, snapshot_service: SnapshotService, tmp_path: Path
    ):
        path = tmp_path / "out" / "kanban_board.json"

        assert snapshot_service.export_to_file(path) == path
        assert path.read_bytes() == snapshot_service.export_board()

    def test_export_does_not_change_board(
        self, snapshot_service: SnapshotService, board_service: BoardService
    ):
        before = board_service.get_board()
        snapshot_service.export_board()
        assert board_service.get_board() == before


class TestImport:
    """Tests for importing a board."""

    def test_export_import_round_trip(
        self, snapshot_service: SnapshotService, board_service: BoardService
    ):
        """Importing an export reproduces the board exactly."""
        before = board_service.get_board()
        data = snapshot_service.export_board()
        board_service.reset()

        snapshot_service.import_board(data)

        assert board_service.get_board() == before

    def test_import_replaces_and_persists(
        self, snapshot_service: SnapshotService, storage: MemoryStorage
    ):
        data = '{"columns": [{"id": "col_x", "title": "Only", "cards": []}]}'

        board = snapshot_service.import_board(data)

        assert board.column_ids == ["col_x"]
        assert json.loads(storage.get(BoardRepository.DEFAULT_KEY)) == board.to_snapshot()

    def test_invalid_format_leaves_board(
        self,
        snapshot_service: SnapshotService,
        board_service: BoardService,
        storage: MemoryStorage,
    ):
        """A rejected import changes neither memory nor storage."""
        before = board_service.get_board()
        stored = storage.get(BoardRepository.DEFAULT_KEY)

        with pytest.raises(SnapshotImportError, match="Invalid format"):
            snapshot_service.import_board('{"foo": 1}')

        assert board_service.get_board() == before
        assert storage.get(BoardRepository.DEFAULT_KEY) == stored

    def test_lone_surrogate_leaves_board(
        self,
        snapshot_service: SnapshotService,
        board_service: BoardService,
        storage: MemoryStorage,
    ):
        before = board_service.get_board()
        stored = storage.get(BoardRepository.DEFAULT_KEY)

        with pytest.raises(SnapshotImportError):
            snapshot_service.import_board('{"columns": [{"id": "a", "title": "\\ud800"}]}')

        assert board_service.get_board() == before
        assert storage.get(BoardRepository.DEFAULT_KEY) == stored
        assert board_service.add_column("Still works").title == "Still works"

    def test_invalid_json_leaves_board(
        self, snapshot_service: SnapshotService, board_service: BoardService
    ):
        before = board_service.get_board()

        with pytest.raises(SnapshotImportError):
            snapshot_service.import_board("not json at all")

        assert board_service.get_board() == before

    def test_import_empty_board(self, snapshot_service: SnapshotService):
        assert snapshot_service.import_board('{"columns": []}') == Board()

    def test_import_from_file(
        self, snapshot_service: SnapshotService, board_service: BoardService, tmp_path: Path
    ):
        path = tmp_path / "board.json"
        path.write_text('{"columns": [{"id": "col_f", "title": "From file"}]}')

        snapshot_service.import_from_file(path)

        assert board_service.get_board().columns[0].title == "From file"

    def test_import_missing_file(self, snapshot_service: SnapshotService, tmp_path: Path):
        with pytest.raises(SnapshotImportError, match="Cannot read"):
            snapshot_service.import_from_file(tmp_path / "missing.json")
