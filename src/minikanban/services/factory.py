"""Wiring of repositories and services from settings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ..repositories import BoardRepository, FileStorage, StorageProtocol
from .board_service import BoardService
from .config_service import ConfigService
from .snapshot_service import SnapshotService

if TYPE_CHECKING:
    from ..config import Settings


@dataclass
class Services:
    """The services one session works with."""

    config_service: ConfigService
    repository: BoardRepository
    board_service: BoardService
    snapshot_service: SnapshotService

    def default_export_path(self, settings: Settings) -> Path:
        """Export path from settings, or the configured file name in the cwd."""
        if settings.export_path is not None:
            return settings.export_path
        return Path.cwd() / self.config_service.get_config().export_filename


def build_services(settings: Settings, storage: StorageProtocol | None = None) -> Services:
    """
    Build the service graph for the given settings.

    Args:
        settings: Application settings
        storage: Storage backend; defaults to files in settings.data_dir
    """
    config_service = ConfigService(settings.data_dir)
    config = config_service.get_config()

    if storage is None:
        storage = FileStorage(settings.data_dir)

    repository = BoardRepository(storage, config.storage_key)
    board_service = BoardService(repository, config_service)
    snapshot_service = SnapshotService(board_service)
    return Services(
        config_service=config_service,
        repository=repository,
        board_service=board_service,
        snapshot_service=snapshot_service,
    )
