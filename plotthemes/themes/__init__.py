"""
Preset Theme Registry

Named access to the preset themes:
- grey / gray: grey background, white grid lines (default)
- bw: classic dark-on-light
- linedraw: black lines only
- light: light grey lines and axes
- minimal: no background annotations
- classic: axis lines, no grid lines
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from plotthemes.errors import ThemeError
from plotthemes.models.theme import Theme

from .defaults import (
    theme_bw,
    theme_classic,
    theme_gray,
    theme_grey,
    theme_light,
    theme_linedraw,
    theme_minimal,
)


@dataclass(frozen=True)
class ThemePreset:
    """Registry entry for a preset theme.

    Attributes
    ----------
    name : str
        Registry key
    description : str
        User-friendly description
    parent : str, optional
        Name of the preset this one overrides (None for the base theme)
    build : callable
        Constructor taking ``base_size`` and ``base_family``
    """

    name: str
    description: str
    parent: Optional[str]
    build: Callable[..., Theme]


PRESETS: dict[str, ThemePreset] = {
    "grey": ThemePreset(
        name="grey",
        description="Grey background and white grid lines; puts the data forward",
        parent=None,
        build=theme_grey,
    ),
    "bw": ThemePreset(
        name="bw",
        description="Classic dark-on-light; may work better on projectors",
        parent="grey",
        build=theme_bw,
    ),
    "linedraw": ThemePreset(
        name="linedraw",
        description="Only black lines of various widths on white backgrounds",
        parent="grey",
        build=theme_linedraw,
    ),
    "light": ThemePreset(
        name="light",
        description="Light grey lines and axes to direct attention to the data",
        parent="grey",
        build=theme_light,
    ),
    "minimal": ThemePreset(
        name="minimal",
        description="Minimalistic theme with no background annotations",
        parent="bw",
        build=theme_minimal,
    ),
    "classic": ThemePreset(
        name="classic",
        description="Classic look with x and y axis lines and no grid lines",
        parent="bw",
        build=theme_classic,
    ),
}

# Alternate spellings
ALIASES = {"gray": "grey"}

DEFAULT_THEME = "grey"


def _canonical(name: str) -> str:
    name = ALIASES.get(name, name)
    if name not in PRESETS:
        available = sorted(PRESETS) + sorted(ALIASES)
        raise ThemeError(f"Theme '{name}' not found. Available: {available}")
    return name


def get_preset(name: str) -> ThemePreset:
    """
    Get a preset registry entry by name.

    Raises
    ------
    ThemeError
        If no preset with that name (or alias) exists
    """
    return PRESETS[_canonical(name)]


def get_theme(name: str = DEFAULT_THEME, base_size: float = 12, base_family: str = "") -> Theme:
    """
    Build a preset theme by name.

    Example
    -------
    >>> get_theme("bw", base_size=11)["panel.background"].fill
    'white'
    """
    return get_preset(name).build(base_size=base_size, base_family=base_family)


def list_themes() -> dict[str, ThemePreset]:
    """Copy of the preset registry (aliases excluded)."""
    return PRESETS.copy()


def preset_summary(name: str) -> str:
    """Multi-line, human-readable summary of a preset and what it overrides."""
    preset = get_preset(name)
    lines = [f"Theme: {preset.name}", f"  {preset.description}"]

    if preset.parent is None:
        lines.append("  • Base theme (declares every element)")
        return "\n".join(lines)

    child = preset.build()
    parent = get_theme(preset.parent)
    changed = child.diff(parent)
    lines.append(f"  • Based on: {preset.parent}")
    lines.append(f"  • Overrides {len(changed)} element(s):")
    for key in changed:
        lines.append(f"      - {key}")
    return "\n".join(lines)


__all__ = [
    "ThemePreset",
    "PRESETS",
    "ALIASES",
    "DEFAULT_THEME",
    "get_preset",
    "get_theme",
    "list_themes",
    "preset_summary",
    "theme_grey",
    "theme_gray",
    "theme_bw",
    "theme_linedraw",
    "theme_light",
    "theme_minimal",
    "theme_classic",
]
