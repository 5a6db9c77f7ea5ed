"""
Output formatting utilities for the CLI.

Provides consistent output formatting across all CLI commands.
"""

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

# Global console instance
console = Console()


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]i[/blue] {message}")


def print_command(command: str) -> None:
    """Print a generated shell command.

    Plain ``print`` so the output can be piped or redirected without
    markup or wrapping.
    """
    print(command)


def print_yaml(content: str, title: str | None = None) -> None:
    """Print YAML with syntax highlighting."""
    syntax = Syntax(content, "yaml", theme="monokai")
    if title:
        console.print(Panel(syntax, title=f"[cyan]{title}[/cyan]"))
    else:
        console.print(syntax)
