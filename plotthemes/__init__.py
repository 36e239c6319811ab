"""
Preset visual themes for declarative plots.

Six presets are provided (grey/gray, bw, linedraw, light, minimal, classic),
each built from a base font size and font family. Themes are immutable
element-key -> style mappings that can be layered with ``%`` (replace
elements) or ``+`` (merge element fields), resolved through the element
inheritance tree, and applied to matplotlib.
"""

from plotthemes.errors import ThemeError
from plotthemes.models import (
    NA,
    ElementBlank,
    ElementLine,
    ElementRect,
    ElementText,
    Theme,
    add_theme,
    calc_element,
    rel,
    replace_theme,
    theme,
    unit,
)
from plotthemes.themes import (
    get_theme,
    list_themes,
    theme_bw,
    theme_classic,
    theme_gray,
    theme_grey,
    theme_light,
    theme_linedraw,
    theme_minimal,
)

__version__ = "0.1.0"

__all__ = [
    "ThemeError",
    "NA",
    "ElementBlank",
    "ElementLine",
    "ElementRect",
    "ElementText",
    "Theme",
    "theme",
    "rel",
    "unit",
    "replace_theme",
    "add_theme",
    "calc_element",
    "get_theme",
    "list_themes",
    "theme_grey",
    "theme_gray",
    "theme_bw",
    "theme_linedraw",
    "theme_light",
    "theme_minimal",
    "theme_classic",
]
