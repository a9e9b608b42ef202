"""Widget components."""

from .card import CardWidget
from .card_edit_modal import CardEditModal
from .column import EmptyColumnMessage, KanbanColumn
from .confirm_modal import ConfirmModal
from .prompt_modal import PromptModal

__all__ = [
    "CardEditModal",
    "CardWidget",
    "ConfirmModal",
    "EmptyColumnMessage",
    "KanbanColumn",
    "PromptModal",
]
