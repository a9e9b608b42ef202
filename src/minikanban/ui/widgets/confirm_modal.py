"""Yes/no confirmation dialog for destructive board actions."""

from rich.markup import escape
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Center, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Label, Static


class ConfirmModal(ModalScreen[bool]):
    """
    Ask before deleting cards, columns or the whole board.

    Dismisses with True when confirmed, False otherwise.
    """

    DEFAULT_CSS = """
    ConfirmModal {
        align: center middle;
    }

    ConfirmModal > Vertical {
        width: 56;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: thick $error;
    }

    ConfirmModal #confirm-message {
        width: 100%;
        text-align: center;
    }

    ConfirmModal #confirm-detail {
        width: 100%;
        text-align: center;
        color: $text-muted;
    }

    ConfirmModal .buttons {
        width: 100%;
        height: auto;
        margin-top: 1;
    }

    ConfirmModal Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        Binding("y", "confirm", "Yes"),
        Binding("n", "cancel", "No"),
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, message: str, detail: str = "", confirm_label: str = "Delete") -> None:
        super().__init__()
        self.message = message
        self.detail = detail
        self.confirm_label = confirm_label

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label(escape(self.message), id="confirm-message")
            if self.detail:
                yield Static(escape(self.detail), id="confirm-detail")
            with Center(classes="buttons"):
                yield Button(f"{self.confirm_label} (y)", id="confirm", variant="error")
                yield Button("Keep (n)", id="cancel", variant="primary")

    def on_mount(self) -> None:
        # Start on the safe choice
        self.query_one("#cancel", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(event.button.id == "confirm")

    def action_confirm(self) -> None:
        self.dismiss(True)

    def action_cancel(self) -> None:
        self.dismiss(False)
