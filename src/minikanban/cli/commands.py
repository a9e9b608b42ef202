"""Export, import and reset commands run without the TUI."""

from pathlib import Path

from ..errors import SnapshotImportError
from ..services import Services
from .output import error, info, success


def run_export(services: Services, path: Path) -> int:
    """Write the board snapshot to path. Returns exit code."""
    try:
        services.snapshot_service.export_to_file(path)
    except OSError as e:
        error(f"Export failed: {e}")
        return 1

    board = services.board_service.get_board()
    success(f"Exported {len(board.columns)} columns, {board.card_count} cards to {path}")
    return 0


def run_import(services: Services, path: Path) -> int:
    """Replace the board from a snapshot file. Returns exit code."""
    try:
        board = services.snapshot_service.import_from_file(path)
    except SnapshotImportError as e:
        error(f"Import failed: {e}")
        return 1

    if services.board_service.has_storage_error:
        error(f"Imported board not saved: {services.board_service.storage_error}")
        return 1

    success(f"Imported board ({len(board.columns)} columns, {board.card_count} cards)")
    return 0


def run_reset(services: Services) -> int:
    """Replace the board with the default board. Returns exit code."""
    services.board_service.reset()
    if services.board_service.has_storage_error:
        error(f"Reset board not saved: {services.board_service.storage_error}")
        return 1

    success("Board reset to default")
    info(f"Stored in {services.config_service.data_dir}")
    return 0
