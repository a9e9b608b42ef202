"""Rebuild the board from the order shown on screen after a reorder."""

import logging

from ..models import DEFAULT_CARD_TITLE, DEFAULT_COLUMN_TITLE, Board, Card, Column, ReportedOrder

logger = logging.getLogger(__name__)


def reconcile(
    previous: Board,
    order: ReportedOrder,
    default_column_title: str = DEFAULT_COLUMN_TITLE,
    default_card_title: str = DEFAULT_CARD_TITLE,
) -> Board:
    """
    Build a new board from a reported display order.

    The result has exactly the reported columns, in the reported order.
    Each reported card is resolved by ID against the previous board so its
    description and tag survive moves between columns. The previous board
    is not modified.

    Args:
        previous: Board as it was before the reorder
        order: Full display order after the reorder
        default_column_title: Title for a reported column with a blank title
            that is not on the previous board
        default_card_title: Title for an unknown card with a blank title

    Returns:
        The rebuilt board.
    """
    cards_by_id: dict[str, Card] = {}
    for column in previous.columns:
        for card in column.cards:
            cards_by_id.setdefault(card.id, card)
    titles_by_column = {column.id: column.title for column in previous.columns}

    seen_columns: set[str] = set()
    seen_cards: set[str] = set()
    columns: list[Column] = []

    for reported in order.columns:
        if reported.id in seen_columns:
            logger.warning("Column %s reported twice, keeping first position", reported.id)
            continue
        seen_columns.add(reported.id)

        cards: list[Card] = []
        for reported_card in reported.cards:
            if reported_card.id in seen_cards:
                logger.warning("Card %s reported twice, keeping first position", reported_card.id)
                continue
            seen_cards.add(reported_card.id)

            existing = cards_by_id.get(reported_card.id)
            if existing is not None:
                cards.append(existing.model_copy())
                continue

            # Displayed but not on the board: keep it with its displayed title
            logger.warning(
                "Card %s not found on previous board, rebuilding from display", reported_card.id
            )
            cards.append(
                Card(
                    id=reported_card.id,
                    title=reported_card.title.strip() or default_card_title,
                )
            )

        if reported.title.strip():
            title = reported.title
        else:
            title = titles_by_column.get(reported.id, default_column_title)
        columns.append(Column(id=reported.id, title=title, cards=cards))

    dropped = set(titles_by_column) - seen_columns
    if dropped:
        logger.debug("Columns not in reported order dropped: %s", sorted(dropped))

    return Board(columns=columns)
