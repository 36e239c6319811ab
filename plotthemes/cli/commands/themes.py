"""Theme inspection commands: list, show, diff, rc, build."""

from pathlib import Path

import typer
import yaml
from pydantic import ValidationError
from rich.panel import Panel
from rich.table import Table

from plotthemes.cli.helpers import console, format_value, print_error, theme_table
from plotthemes.config import build_theme, load_theme_config
from plotthemes.errors import ThemeError
from plotthemes.plotting.styles import theme_to_rc
from plotthemes.themes import get_theme, list_themes


def _build_or_exit(name: str, base_size: float, base_family: str):
    try:
        return get_theme(name, base_size=base_size, base_family=base_family)
    except ThemeError as e:
        print_error(str(e), hint="Run [cyan]list[/cyan] to see available themes.")
        raise typer.Exit(1)


def list_command():
    """
    List the preset themes.

    Example:
        plotthemes list
    """
    table = Table(title="Preset Themes")
    table.add_column("Name", style="bold cyan")
    table.add_column("Based on", style="yellow")
    table.add_column("Description")

    for name, preset in list_themes().items():
        table.add_row(name, preset.parent or "-", preset.description)

    console.print(table)


def show_command(
    name: str = typer.Argument(
        ...,
        help="Preset theme name (grey, bw, linedraw, light, minimal, classic)"
    ),
    base_size: float = typer.Option(
        12.0,
        "--base-size",
        "-s",
        min=0.1,
        help="Base font size in points"
    ),
    base_family: str = typer.Option(
        "",
        "--family",
        "-f",
        help="Base font family (empty = system default)"
    ),
    resolved: bool = typer.Option(
        False,
        "--resolved",
        "-r",
        help="Show values after inheritance and relative sizes are applied"
    ),
):
    """
    Display every element of a preset theme.

    Example:
        plotthemes show bw
        plotthemes show minimal --base-size 14 --resolved
    """
    theme = _build_or_exit(name, base_size, base_family)
    title = f"theme_{name}(base_size={base_size:g}, base_family={base_family!r})"
    console.print(theme_table(theme, title=title, resolved=resolved))


def diff_command(
    first: str = typer.Argument(..., help="First preset theme"),
    second: str = typer.Argument(..., help="Second preset theme"),
    base_size: float = typer.Option(12.0, "--base-size", "-s", min=0.1, help="Base font size in points"),
):
    """
    Show the elements that differ between two preset themes.

    Example:
        plotthemes diff bw minimal
    """
    a = _build_or_exit(first, base_size, "")
    b = _build_or_exit(second, base_size, "")
    changed = a.diff(b)

    if not changed:
        console.print(f"[green]No differences between '{first}' and '{second}'[/green]")
        return

    table = Table(title=f"{first} vs {second}")
    table.add_column("Element", style="bold")
    table.add_column(first)
    table.add_column(second)
    for key, (left, right) in changed.items():
        table.add_row(key, format_value(left), format_value(right))

    console.print(table)
    console.print(f"\n[yellow]{len(changed)}[/yellow] element(s) differ")


def rc_command(
    name: str = typer.Argument(..., help="Preset theme name"),
    base_size: float = typer.Option(12.0, "--base-size", "-s", min=0.1, help="Base font size in points"),
    base_family: str = typer.Option("", "--family", "-f", help="Base font family"),
):
    """
    Print the matplotlib rcParams a preset theme translates to.

    Example:
        plotthemes rc classic --base-size 10
    """
    theme = _build_or_exit(name, base_size, base_family)
    rc = theme_to_rc(theme)

    table = Table(title=f"matplotlib rcParams: {name}")
    table.add_column("rcParam", style="cyan")
    table.add_column("Value", style="yellow")
    for key in sorted(rc):
        table.add_row(key, repr(rc[key]))
    console.print(table)


def build_command(
    config_file: Path = typer.Argument(..., help="YAML theme config file"),
    resolved: bool = typer.Option(False, "--resolved", "-r", help="Show resolved element values"),
    as_yaml: bool = typer.Option(False, "--yaml", help="Print the theme as YAML instead of a table"),
):
    """
    Build a theme from a YAML config (preset + overrides) and display it.

    Example:
        plotthemes build my_theme.yml
        plotthemes build my_theme.yml --yaml > full_theme.yml
    """
    if not config_file.exists():
        print_error(f"Config file not found: {config_file}")
        raise typer.Exit(1)

    try:
        config = load_theme_config(config_file)
        theme = build_theme(config)
    except (ValidationError, ThemeError, yaml.YAMLError) as e:
        print_error(f"Invalid theme config {config_file}:\n{e}")
        raise typer.Exit(1)

    if as_yaml:
        typer.echo(yaml.safe_dump(theme.to_dict(), sort_keys=False))
        return

    console.print(Panel.fit(
        f"[bold cyan]{config_file.name}[/bold cyan]\n"
        f"Preset: [yellow]{config.theme}[/yellow]   Mode: [yellow]{config.mode}[/yellow]   "
        f"Overrides: [yellow]{len(config.overrides)}[/yellow]",
        border_style="cyan"
    ))
    console.print(theme_table(theme, title="Elements", resolved=resolved))
