"""Exceptions raised by minikanban."""


class KanbanError(Exception):
    """Base error for minikanban."""


class SnapshotImportError(KanbanError):
    """Raised when an imported snapshot does not have the expected shape."""


class StorageError(KanbanError):
    """Raised when the board cannot be written to storage."""
