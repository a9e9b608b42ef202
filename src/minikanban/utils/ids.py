"""Opaque identifier generation for columns and cards."""

import secrets
import string
from collections.abc import Container

ID_ALPHABET = string.ascii_lowercase + string.digits
ID_LENGTH = 7


def new_id(prefix: str = "id", taken: Container[str] = ()) -> str:
    """
    Generate a random identifier such as "col_k3x9q0a".

    Args:
        prefix: Leading part of the identifier ("col" for columns, "c" for cards)
        taken: Identifiers already in use; the result never collides with these
    """
    while True:
        suffix = "".join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))
        candidate = f"{prefix}_{suffix}"
        if candidate not in taken:
            return candidate
