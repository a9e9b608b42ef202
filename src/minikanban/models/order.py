"""Display order reported by the UI after a reorder gesture."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from .board import Board


class ReportedCard(BaseModel):
    """A card as it appears on screen: its ID and displayed title."""

    id: str
    title: str = ""


class ReportedColumn(BaseModel):
    """A column as it appears on screen, with cards in displayed order."""

    id: str
    title: str = ""
    cards: list[ReportedCard] = Field(default_factory=list)

    @property
    def card_ids(self) -> list[str]:
        """Card IDs in displayed order."""
        return [card.id for card in self.cards]


class ReportedOrder(BaseModel):
    """
    Full left-to-right, top-to-bottom order of the board as displayed.

    Carries identifiers and displayed titles only. Card descriptions and
    tags are looked up from the board when the order is reconciled.
    """

    columns: list[ReportedColumn] = Field(default_factory=list)

    @classmethod
    def from_board(cls, board: Board) -> ReportedOrder:
        """Report the order of a board exactly as it stands."""
        return cls(
            columns=[
                ReportedColumn(
                    id=column.id,
                    title=column.title,
                    cards=[ReportedCard(id=card.id, title=card.title) for card in column.cards],
                )
                for column in board.columns
            ]
        )

    def get_column(self, column_id: str) -> ReportedColumn | None:
        """Get a reported column by ID."""
        for column in self.columns:
            if column.id == column_id:
                return column
        return None

    def get_position(self, card_id: str) -> tuple[int, int] | None:
        """Get (column_index, card_index) of a card, or None if not found."""
        for col_idx, column in enumerate(self.columns):
            for card_idx, card in enumerate(column.cards):
                if card.id == card_id:
                    return (col_idx, card_idx)
        return None

    def move_card(self, card_id: str, to_column_id: str, position: int = -1) -> bool:
        """
        Move a card to a column at position (-1 = end).

        Returns:
            False if the card or the target column is not in the order.
        """
        found = self.get_position(card_id)
        target = self.get_column(to_column_id)
        if found is None or target is None:
            return False

        col_idx, card_idx = found
        card = self.columns[col_idx].cards.pop(card_idx)
        if position < 0:
            target.cards.append(card)
        else:
            target.cards.insert(position, card)
        return True

    def move_column(self, column_id: str, position: int) -> bool:
        """
        Move a column to position (clamped to the valid range).

        Returns:
            False if the column is not in the order.
        """
        for idx, column in enumerate(self.columns):
            if column.id == column_id:
                break
        else:
            return False

        self.columns.pop(idx)
        position = max(0, min(position, len(self.columns)))
        self.columns.insert(position, column)
        return True
