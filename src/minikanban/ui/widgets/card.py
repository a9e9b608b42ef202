"""Card widget."""

from __future__ import annotations

from rich.markup import escape
from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Static

from ...models import Card


class CardWidget(Widget, can_focus=True):
    """A card displayed in a column."""

    TITLE_WIDTH = 40
    PREVIEW_WIDTH = 50

    def __init__(self, card: Card, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._card = card

    @property
    def card(self) -> Card:
        """Get the card shown by this widget."""
        return self._card

    def compose(self) -> ComposeResult:
        """Create card layout."""
        title = self._truncate(self._card.title, self.TITLE_WIDTH)
        yield Static(escape(title), classes="card-title")

        if self._card.tag:
            yield Static(f"[dim]#{escape(self._card.tag)}[/]", classes="card-tag")

        preview = self._get_desc_preview()
        if preview:
            yield Static(escape(preview), classes="card-preview")

    def _truncate(self, text: str, max_len: int) -> str:
        """Truncate text with ellipsis."""
        if len(text) <= max_len:
            return text
        return text[: max_len - 1] + "…"

    def _get_desc_preview(self) -> str:
        """Get first non-empty line of the description."""
        for line in self._card.desc.split("\n"):
            line = line.strip()
            if line:
                return self._truncate(line, self.PREVIEW_WIDTH)
        return ""
