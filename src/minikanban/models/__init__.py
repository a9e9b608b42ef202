"""Data models."""

from .board import (
    CARD_ID_PREFIX,
    COLUMN_ID_PREFIX,
    DEFAULT_CARD_TITLE,
    DEFAULT_COLUMN_TITLE,
    Board,
    Card,
    CardPatch,
    Column,
)
from .kanban_config import KanbanConfig
from .order import ReportedCard, ReportedColumn, ReportedOrder
from .snapshot import board_from_snapshot, decode_board, encode_board

__all__ = [
    "CARD_ID_PREFIX",
    "COLUMN_ID_PREFIX",
    "DEFAULT_CARD_TITLE",
    "DEFAULT_COLUMN_TITLE",
    "Board",
    "Card",
    "CardPatch",
    "Column",
    "KanbanConfig",
    "ReportedCard",
    "ReportedColumn",
    "ReportedOrder",
    "board_from_snapshot",
    "decode_board",
    "encode_board",
]
