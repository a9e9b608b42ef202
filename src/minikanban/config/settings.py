"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


def _default_data_dir() -> Path:
    return Path.home() / ".local" / "share" / "minikanban"


class Settings(BaseSettings):
    """Application settings."""

    data_dir: Path = Field(
        default_factory=_default_data_dir,
        description="Directory holding the stored board and minikanban.yml",
    )

    export_path: Path | None = Field(
        default=None,
        description="File written by export (default: <export_filename> in the cwd)",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = {
        "env_prefix": "MINIKANBAN_",
    }
