"""Configuration model for minikanban.yml."""

from pydantic import BaseModel, Field, field_validator

from .board import DEFAULT_CARD_TITLE, DEFAULT_COLUMN_TITLE


class KanbanConfig(BaseModel):
    """Root configuration model for minikanban.yml."""

    version: int = 1
    storage_key: str = Field(
        default="kanban_mini_v1",
        min_length=1,
        description="Key the board snapshot is stored under",
    )
    default_column_title: str = Field(
        default=DEFAULT_COLUMN_TITLE,
        description="Title used when a new column is given a blank title",
    )
    default_card_title: str = Field(
        default=DEFAULT_CARD_TITLE,
        description="Title used when a new card is given a blank title",
    )
    export_filename: str = Field(
        default="kanban_board.json",
        min_length=1,
        description="File name used by export when no path is given",
    )

    @field_validator("storage_key")
    @classmethod
    def validate_storage_key(cls, v: str) -> str:
        """Storage key doubles as a file name, so keep it to a safe charset."""
        if not all(c.isalnum() or c in "_-." for c in v):
            raise ValueError("storage_key must be alphanumeric with '_', '-' or '.' only")
        return v

    @field_validator("default_column_title", "default_card_title")
    @classmethod
    def validate_fallback_title(cls, v: str) -> str:
        """Fallback titles must not be blank."""
        v = v.strip()
        if not v:
            raise ValueError("Fallback titles cannot be blank")
        return v

    @classmethod
    def default(cls) -> "KanbanConfig":
        """Create default configuration."""
        return cls()
