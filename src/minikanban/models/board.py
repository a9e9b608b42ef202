"""Board domain models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from ..utils import new_id

COLUMN_ID_PREFIX = "col"
CARD_ID_PREFIX = "c"

DEFAULT_COLUMN_TITLE = "New Column"
DEFAULT_CARD_TITLE = "Untitled"


class Card(BaseModel):
    """A single work item."""

    id: str
    title: str
    desc: str = ""
    tag: str = ""  # Single label, not a list

    def to_snapshot(self) -> dict:
        """Convert to dict in the interchange format."""
        return {
            "id": self.id,
            "title": self.title,
            "desc": self.desc,
            "tag": self.tag,
        }


class CardPatch(BaseModel):
    """Partial update for a card. Only fields that are set are applied."""

    title: str | None = None
    desc: str | None = None
    tag: str | None = None

    def changes(self) -> dict[str, str]:
        """Fields this patch would change.

        A title that is blank after trimming is dropped, so a patch can never
        leave a card without a title.
        """
        update = self.model_dump(exclude_unset=True, exclude_none=True)
        if "title" in update:
            title = update["title"].strip()
            if title:
                update["title"] = title
            else:
                del update["title"]
        return update

    def apply_to(self, card: Card) -> None:
        """Merge the patch into card in place."""
        for field, value in self.changes().items():
            setattr(card, field, value)


class Column(BaseModel):
    """An ordered bucket of cards. Earlier cards have higher priority."""

    id: str
    title: str
    cards: list[Card] = Field(default_factory=list)

    def get_card(self, card_id: str) -> Card | None:
        """Get a card in this column by ID."""
        for card in self.cards:
            if card.id == card_id:
                return card
        return None

    def to_snapshot(self) -> dict:
        """Convert to dict in the interchange format."""
        return {
            "id": self.id,
            "title": self.title,
            "cards": [card.to_snapshot() for card in self.cards],
        }


class Board(BaseModel):
    """The single board: an ordered list of columns.

    Columns and cards hold no reference to their parent, so locating the
    column of a card is a linear scan.
    """

    columns: list[Column] = Field(default_factory=list)

    @classmethod
    def default(cls) -> Board:
        """Create the seeded board shown on first run."""
        return cls(
            columns=[
                Column(
                    id=new_id(COLUMN_ID_PREFIX),
                    title="Todo",
                    cards=[
                        Card(
                            id=new_id(CARD_ID_PREFIX),
                            title="Welcome to Kanban",
                            desc="Drag me to other columns",
                            tag="demo",
                        )
                    ],
                ),
                Column(id=new_id(COLUMN_ID_PREFIX), title="Doing"),
                Column(id=new_id(COLUMN_ID_PREFIX), title="Done"),
            ]
        )

    @property
    def column_ids(self) -> list[str]:
        """IDs of all columns in display order."""
        return [column.id for column in self.columns]

    @property
    def card_ids(self) -> set[str]:
        """IDs of all cards on the board."""
        return {card.id for column in self.columns for card in column.cards}

    @property
    def card_count(self) -> int:
        """Total number of cards on the board."""
        return sum(len(column.cards) for column in self.columns)

    def get_column(self, column_id: str) -> Column | None:
        """Get a column by ID."""
        for column in self.columns:
            if column.id == column_id:
                return column
        return None

    def column_of(self, card_id: str) -> Column | None:
        """Get the first column containing the card."""
        for column in self.columns:
            if column.get_card(card_id) is not None:
                return column
        return None

    def find_card(self, card_id: str) -> Card | None:
        """Get a card by ID from any column (first match)."""
        for column in self.columns:
            card = column.get_card(card_id)
            if card is not None:
                return card
        return None

    def to_snapshot(self) -> dict:
        """Convert to dict in the interchange format."""
        return {"columns": [column.to_snapshot() for column in self.columns]}
