"""Kanban column widget."""

from rich.markup import escape
from textual.actions import SkipAction
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widget import Widget
from textual.widgets import Static

from ...models import Card, Column, ReportedCard, ReportedColumn
from .card import CardWidget


class CardListScroll(VerticalScroll):
    """Scroll container for card lists.

    Raises SkipAction for navigation keys so they bubble up to the App
    for card navigation instead of being handled as scroll actions.
    """

    def action_scroll_up(self) -> None:
        raise SkipAction()

    def action_scroll_down(self) -> None:
        raise SkipAction()

    def action_scroll_home(self) -> None:
        raise SkipAction()

    def action_scroll_end(self) -> None:
        raise SkipAction()

    def action_page_up(self) -> None:
        raise SkipAction()

    def action_page_down(self) -> None:
        raise SkipAction()


class EmptyColumnMessage(Static):
    """Displayed when a column has no cards."""

    pass


class KanbanColumn(Widget):
    """A single column of the board.

    Holds its cards in displayed order. After a reorder the screen reads
    that order back through report().
    """

    def __init__(self, column: Column, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.column_id = column.id
        self.title = column.title
        self._cards: list[Card] = list(column.cards)

    def compose(self) -> ComposeResult:
        """Create column layout."""
        yield Static(self._header_text, classes="column-header")
        yield CardListScroll(classes="column-content")

    def on_mount(self) -> None:
        """Mount card widgets once the column is in the DOM."""
        self.call_after_refresh(self._refresh_cards)

    @property
    def _header_text(self) -> str:
        """Header text with styled card count."""
        return f"{escape(self.title)} [dim]({len(self._cards)})[/]"

    def set_cards(self, cards: list[Card]) -> None:
        """Set the cards shown in this column, in display order."""
        self._cards = list(cards)
        self.call_after_refresh(self._refresh_cards)

    async def _refresh_cards(self) -> None:
        """Rebuild the card widgets in this column."""
        try:
            content = self.query_one(CardListScroll)
        except Exception as e:
            self.log.error(f"Cannot find card list for {self.column_id}: {e}")
            return

        await content.remove_children()

        if not self._cards:
            await content.mount(EmptyColumnMessage("No cards"))
        else:
            await content.mount_all([CardWidget(card) for card in self._cards])

        try:
            self.query_one(".column-header", Static).update(self._header_text)
        except Exception:
            pass

    @property
    def cards(self) -> list[Card]:
        """Get the cards in this column, in display order."""
        return self._cards

    @property
    def card_count(self) -> int:
        """Get the number of cards in this column."""
        return len(self._cards)

    def get_card(self, index: int) -> Card | None:
        """Get card at index."""
        if 0 <= index < len(self._cards):
            return self._cards[index]
        return None

    def focus_card(self, index: int) -> bool:
        """
        Focus the card at the given index.

        Returns:
            True if a card was focused, False otherwise
        """
        if index < 0 or index >= len(self._cards):
            return False

        card_id = self._cards[index].id
        for widget in self.query(CardWidget):
            if widget.card.id == card_id:
                widget.focus()
                widget.scroll_visible()
                return True
        return False

    def report(self) -> ReportedColumn:
        """Describe this column and its cards as displayed."""
        return ReportedColumn(
            id=self.column_id,
            title=self.title,
            cards=[ReportedCard(id=card.id, title=card.title) for card in self._cards],
        )
