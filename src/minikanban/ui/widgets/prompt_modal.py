"""Single-line text prompt modal."""

from rich.markup import escape
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, Label, Static


class PromptModal(ModalScreen[str | None]):
    """Modal asking for one line of text.

    Returns the entered text (untrimmed), or None if cancelled.
    """

    DEFAULT_CSS = """
    PromptModal {
        align: center middle;
    }

    PromptModal > Vertical {
        width: 60;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: solid $primary;
    }

    PromptModal Label {
        width: 100%;
        margin-bottom: 1;
    }

    PromptModal .prompt-hint {
        color: $text-muted;
        text-align: center;
        margin-top: 1;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, message: str, value: str = "", placeholder: str = "") -> None:
        super().__init__()
        self.message = message
        self.value = value
        self.placeholder = placeholder

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label(escape(self.message), id="prompt-message")
            yield Input(value=self.value, placeholder=self.placeholder, id="prompt-input")
            yield Static("[Enter] OK  [Esc] Cancel", classes="prompt-hint", markup=False)

    def on_mount(self) -> None:
        self.query_one("#prompt-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.dismiss(event.value)

    def action_cancel(self) -> None:
        self.dismiss(None)
