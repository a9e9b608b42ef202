"""Non-interactive commands."""
