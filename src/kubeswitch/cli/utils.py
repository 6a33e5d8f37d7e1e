import re
from typing import List

from rich.console import Console
from rich.markup import escape

_DIGITS = re.compile(r"(\d+)")


def natural_sort_key(value: str) -> List[object]:
    """Sort key that orders "ctx-2" before "ctx-10"."""
    return [int(part) if part.isdigit() else part for part in _DIGITS.split(value)]


def natural_sorted(values) -> List[str]:
    return sorted(values, key=natural_sort_key)


def quoted(value: str) -> str:
    """Renders a user-supplied name in double quotes, safe for rich markup."""
    return f'"[bold]{escape(value)}[/bold]"'


def print_success(console: Console, message: str) -> None:
    console.print(f"[green]✔[/green] {message}")


def print_warning(console: Console, message: str) -> None:
    console.print(f"[yellow]warning:[/yellow] {message}")


def print_error(console: Console, message: str) -> None:
    console.print(f"[red]error:[/red] {escape(message)}")
