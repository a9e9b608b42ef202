"""Console output for the non-interactive commands."""

from rich.console import Console
from rich.markup import escape

# Styles are dropped automatically when the stream is not a terminal
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def success(message: str) -> None:
    """Report a completed command."""
    console.print(f"[green]✓[/] {escape(message)}", soft_wrap=True)


def info(message: str) -> None:
    console.print(f"[yellow]•[/] {escape(message)}", soft_wrap=True)


def error(message: str) -> None:
    """Report a failed command on stderr."""
    err_console.print(f"[red]✗[/] {escape(message)}", soft_wrap=True)
