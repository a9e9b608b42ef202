"""Modal for editing a card's title, description and tag."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Center, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, TextArea

from ...models import Card, CardPatch


class CardEditModal(ModalScreen[CardPatch | None]):
    """Modal form for a card.

    Returns a CardPatch with the trimmed field values, or None if cancelled.
    A blank title in the patch leaves the card title unchanged.
    """

    DEFAULT_CSS = """
    CardEditModal {
        align: center middle;
    }

    CardEditModal > Vertical {
        width: 70;
        height: auto;
        max-height: 90%;
        padding: 1 2;
        background: $surface;
        border: solid $primary;
    }

    CardEditModal Label {
        margin-top: 1;
        color: $text-muted;
    }

    CardEditModal TextArea {
        height: 8;
    }

    CardEditModal .buttons {
        width: 100%;
        height: auto;
        margin-top: 1;
        align: center middle;
    }

    CardEditModal Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+s", "save", "Save"),
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, card: Card) -> None:
        super().__init__()
        self._card = card

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label("Title")
            yield Input(value=self._card.title, id="card-title")
            yield Label("Description")
            yield TextArea(self._card.desc, id="card-desc")
            yield Label("Tag")
            yield Input(value=self._card.tag, placeholder="e.g. bug", id="card-tag")
            with Center(classes="buttons"):
                yield Button("Save", id="save", variant="primary")
                yield Button("Cancel", id="cancel")

    def on_mount(self) -> None:
        self.query_one("#card-title", Input).focus()

    def build_patch(self) -> CardPatch:
        """Collect the form fields into a patch."""
        return CardPatch(
            title=self.query_one("#card-title", Input).value.strip(),
            desc=self.query_one("#card-desc", TextArea).text.strip(),
            tag=self.query_one("#card-tag", Input).value.strip(),
        )

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.action_save()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "save":
            self.action_save()
        else:
            self.action_cancel()

    def action_save(self) -> None:
        self.dismiss(self.build_patch())

    def action_cancel(self) -> None:
        self.dismiss(None)
