"""
installgen - UI Components
Standardized headers and summary lines
"""

from typing import Iterable, Optional

from rich.console import Console
from rich.markup import escape

from installgen.constants import SENSITIVE_KEYWORDS

BRAND = "[bold color(214)]installgen[/bold color(214)] [dim]›[/dim]"


def is_sensitive(key: str) -> bool:
    """Check if a key likely holds a secret value."""
    return any(keyword in key.upper() for keyword in SENSITIVE_KEYWORDS)


def display_value(key: str, value: object) -> str:
    """Value safe for console and log output."""
    if value is None or value == "":
        return "-"
    if is_sensitive(key):
        return "***"
    return str(value)


def show_header(
    title: str,
    subtitle: Optional[str] = None,
    details: Optional[dict] = None,
    console: Optional[Console] = None,
):
    """
    Display a standardized installgen command header.

    Args:
        title: Main title (e.g., "Generate Install Script")
        subtitle: Optional subtitle line
        details: Additional key-value pairs to display; values of
            secret-looking keys are masked
        console: Rich Console instance (creates new if None)

    Example:
        show_header(
            title="Generate Install Script",
            details={"Director": "https://10.0.0.6:25555", "Output": "out"}
        )
    """
    if console is None:
        console = Console()

    console.print(f" {BRAND} [bold white]{escape(title)}[/bold white]")

    if subtitle:
        console.print(f" {BRAND} [dim]{escape(subtitle)}[/dim]")

    if details:
        for key, value in details.items():
            console.print(
                f" {BRAND} {escape(key)}: [cyan]{escape(display_value(key, value))}[/cyan]"
            )

    console.print()


def show_written_files(paths: Iterable, console: Optional[Console] = None):
    """List files produced by a run."""
    if console is None:
        console = Console()

    for path in paths:
        console.print(f"  [dim]•[/dim] [cyan]{escape(str(path))}[/cyan]")
