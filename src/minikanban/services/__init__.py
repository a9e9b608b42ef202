"""Service layer for business logic."""

from .board_service import BoardService
from .config_service import ConfigService
from .factory import Services, build_services
from .reconcile import reconcile
from .snapshot_service import SnapshotService

__all__ = [
    "BoardService",
    "ConfigService",
    "Services",
    "SnapshotService",
    "build_services",
    "reconcile",
]
