"""UI components."""

from .screens.board import BoardScreen
from .widgets.card import CardWidget
from .widgets.column import KanbanColumn

__all__ = [
    "BoardScreen",
    "CardWidget",
    "KanbanColumn",
]
