"""JSON interchange format for board snapshots.

The import check is shallow: the document must be an object
with a "columns" list. Everything below that is coerced field by field
into a valid Board instead of being rejected.
"""

import json
import logging
from typing import Any

from ..errors import SnapshotImportError
from ..utils import new_id
from .board import (
    CARD_ID_PREFIX,
    COLUMN_ID_PREFIX,
    DEFAULT_CARD_TITLE,
    DEFAULT_COLUMN_TITLE,
    Board,
    Card,
    Column,
)

logger = logging.getLogger(__name__)

INDENT = 2


def encode_board(board: Board) -> bytes:
    """Serialize a board to pretty-printed UTF-8 JSON."""
    text = json.dumps(board.to_snapshot(), indent=INDENT, ensure_ascii=False)
    return text.encode("utf-8")


def decode_board(data: bytes | str) -> Board:
    """
    Parse a snapshot into a Board.

    Raises:
        SnapshotImportError: The text is not JSON, has no "columns" list, or
            holds text that cannot be stored as UTF-8.
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise SnapshotImportError(f"Not UTF-8 text: {e.reason}") from e

    try:
        parsed = json.loads(data)
    except json.JSONDecodeError as e:
        raise SnapshotImportError(f"Invalid JSON: {e.msg} (line {e.lineno})") from e

    if not isinstance(parsed, dict) or not isinstance(parsed.get("columns"), list):
        raise SnapshotImportError("Invalid format")

    board = board_from_snapshot(parsed)

    # JSON escapes can produce lone surrogates, which cannot be stored as UTF-8
    try:
        encode_board(board)
    except UnicodeEncodeError as e:
        raise SnapshotImportError(f"Invalid text: {e.reason}") from e

    return board


def board_from_snapshot(data: dict) -> Board:
    """
    Build a Board from a parsed snapshot whose shape was already checked.

    Coercion rules:
    - entries that are not objects are skipped
    - missing desc/tag become ""
    - blank or missing titles fall back to the default titles
    - missing or duplicate IDs are replaced with fresh ones
    """
    column_ids: set[str] = set()
    card_ids: set[str] = set()
    columns: list[Column] = []

    for raw_column in data["columns"]:
        if not isinstance(raw_column, dict):
            logger.warning("Skipping column entry that is not an object: %r", raw_column)
            continue

        raw_cards = raw_column.get("cards")
        if not isinstance(raw_cards, list):
            if raw_cards is not None:
                logger.warning("Column cards is not a list, treating as empty: %r", raw_cards)
            raw_cards = []

        cards: list[Card] = []
        for raw_card in raw_cards:
            if not isinstance(raw_card, dict):
                logger.warning("Skipping card entry that is not an object: %r", raw_card)
                continue
            cards.append(
                Card(
                    id=_unique_id(raw_card.get("id"), CARD_ID_PREFIX, card_ids),
                    title=_title(raw_card.get("title"), DEFAULT_CARD_TITLE),
                    desc=_text(raw_card.get("desc")),
                    tag=_text(raw_card.get("tag")),
                )
            )

        columns.append(
            Column(
                id=_unique_id(raw_column.get("id"), COLUMN_ID_PREFIX, column_ids),
                title=_title(raw_column.get("title"), DEFAULT_COLUMN_TITLE),
                cards=cards,
            )
        )

    return Board(columns=columns)


def _text(value: Any) -> str:
    """Coerce a JSON value to a string field."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return str(value)
    return ""


def _title(value: Any, fallback: str) -> str:
    """Coerce a JSON value to a title that is never blank."""
    text = _text(value)
    return text if text.strip() else fallback


def _unique_id(value: Any, prefix: str, seen: set[str]) -> str:
    """Coerce a JSON value to an ID not yet in seen, and record it."""
    candidate = _text(value)
    if not candidate or candidate in seen:
        replacement = new_id(prefix, seen)
        logger.warning("Replacing missing or duplicate id %r with %s", candidate, replacement)
        candidate = replacement
    seen.add(candidate)
    return candidate
