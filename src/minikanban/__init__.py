"""minikanban - single-board kanban tracker for the terminal."""

__version__ = "0.1.0"
