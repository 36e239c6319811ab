"""
Rendering helpers shared by the CLI commands.
"""

from __future__ import annotations

from typing import Any, Optional

from rich.console import Console
from rich.table import Table

from plotthemes.models.element_tree import ELEMENT_TREE
from plotthemes.models.elements import Element, ElementBlank
from plotthemes.models.theme import Theme, calc_element

console = Console()


def format_value(value: Any) -> str:
    """
    Short, rich-markup description of an element value.

    Examples
    --------
    >>> format_value(None)
    '[dim]inherit[/dim]'
    >>> format_value("right")
    "'right'"
    """
    if value is None:
        return "[dim]inherit[/dim]"
    if isinstance(value, ElementBlank):
        return "[magenta]blank[/magenta]"
    if isinstance(value, Element):
        fields = ", ".join(f"{k}={v!r}" for k, v in value.set_fields().items())
        return f"[cyan]{value.kind}[/cyan]({fields})"
    return repr(value)


def theme_table(theme: Theme, title: str, resolved: bool = False, keys: Optional[list[str]] = None) -> Table:
    """
    Build a table of element keys and values.

    With ``resolved=True`` each value is passed through the inheritance tree
    first, so the table shows what a renderer would actually use.
    """
    table = Table(title=title, show_lines=False)
    table.add_column("Element", style="bold")
    table.add_column("Kind", style="dim")
    table.add_column("Value")

    for key in keys or list(theme):
        value = calc_element(key, theme) if resolved else theme.get(key)
        table.add_row(key, ELEMENT_TREE[key].kind, format_value(value))
    return table


def print_error(message: str, hint: Optional[str] = None) -> None:
    console.print(f"[red]Error:[/red] {message}")
    if hint:
        console.print(f"[yellow]Hint:[/yellow] {hint}")
