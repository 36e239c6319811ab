"""
Table of recognised theme element keys.

Each key declares the kind of value it holds and the key(s) it inherits
unset fields from. Resolution walks parents in order, so for example
``axis.text.x`` picks up ``axis.text`` which in turn picks up ``text``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from plotthemes.models.elements import ElementLine, ElementRect, ElementText, Unit

ValueKind = Literal["line", "rect", "text", "unit", "character", "numeric", "position"]


@dataclass(frozen=True)
class ElementDef:
    """Declared kind and inheritance parents of one element key."""

    kind: ValueKind
    inherit: tuple[str, ...] = ()
    description: str = ""


def _line(*inherit: str, description: str = "") -> ElementDef:
    return ElementDef("line", inherit, description)


def _rect(*inherit: str, description: str = "") -> ElementDef:
    return ElementDef("rect", inherit, description)


def _text(*inherit: str, description: str = "") -> ElementDef:
    return ElementDef("text", inherit, description)


def _unit(*inherit: str, description: str = "") -> ElementDef:
    return ElementDef("unit", inherit, description)


ELEMENT_TREE: dict[str, ElementDef] = {
    # Roots
    "line": _line(description="all line elements"),
    "rect": _rect(description="all rectangular elements"),
    "text": _text(description="all text elements"),

    # Axes
    "axis.line": _line("line", description="lines along axes"),
    "axis.line.x": _line("axis.line"),
    "axis.line.y": _line("axis.line"),
    "axis.text": _text("text", description="tick labels"),
    "axis.text.x": _text("axis.text"),
    "axis.text.y": _text("axis.text"),
    "axis.ticks": _line("line", description="tick marks"),
    "axis.ticks.x": _line("axis.ticks"),
    "axis.ticks.y": _line("axis.ticks"),
    "axis.ticks.length": _unit(description="length of tick marks"),
    "axis.ticks.margin": _unit(description="space between tick mark and label"),
    "axis.title": _text("text", description="axis labels"),
    "axis.title.x": _text("axis.title"),
    "axis.title.y": _text("axis.title"),

    # Legend
    "legend.background": _rect("rect", description="background of legend"),
    "legend.margin": _unit(description="extra space around legend"),
    "legend.key": _rect("panel.background", description="background under legend keys"),
    "legend.key.size": _unit(description="size of legend keys"),
    "legend.key.height": _unit("legend.key.size"),
    "legend.key.width": _unit("legend.key.size"),
    "legend.text": _text("text", description="legend item labels"),
    "legend.text.align": ElementDef("numeric", description="legend label alignment (0 = left, 1 = right)"),
    "legend.title": _text("text", description="title of legend"),
    "legend.title.align": ElementDef("numeric", description="legend title alignment (0 = left, 1 = right)"),
    "legend.position": ElementDef("position", description='"none", "left", "right", "bottom", "top" or (x, y)'),
    "legend.direction": ElementDef("character", description='"horizontal" or "vertical"'),
    "legend.justification": ElementDef("position", description='anchor point: "center" or (x, y)'),
    "legend.box": ElementDef("character", description='arrangement of multiple legends'),

    # Panel
    "panel.background": _rect("rect", description="background of plotting area"),
    "panel.border": _rect("rect", description="border around plotting area"),
    "panel.margin": _unit(description="space between facet panels"),
    "panel.margin.x": _unit("panel.margin"),
    "panel.margin.y": _unit("panel.margin"),
    "panel.grid": _line("line", description="grid lines"),
    "panel.grid.major": _line("panel.grid"),
    "panel.grid.minor": _line("panel.grid"),
    "panel.grid.major.x": _line("panel.grid.major"),
    "panel.grid.major.y": _line("panel.grid.major"),
    "panel.grid.minor.x": _line("panel.grid.minor"),
    "panel.grid.minor.y": _line("panel.grid.minor"),

    # Facet strips
    "strip.background": _rect("rect", description="background of facet labels"),
    "strip.text": _text("text", description="facet labels"),
    "strip.text.x": _text("strip.text"),
    "strip.text.y": _text("strip.text"),

    # Whole plot
    "plot.background": _rect("rect", description="background of the entire plot"),
    "plot.title": _text("text", description="plot title"),
    "plot.margin": _unit(description="margin around entire plot (top, right, bottom, left)"),
    "aspect.ratio": ElementDef("numeric", description="aspect ratio of the panel"),
}

_KIND_TYPES = {
    "line": ElementLine,
    "rect": ElementRect,
    "text": ElementText,
    "unit": Unit,
}


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def value_matches(kind: ValueKind, value) -> bool:
    """Check that a (non-blank, non-None) value fits the declared kind."""
    if kind in _KIND_TYPES:
        return isinstance(value, _KIND_TYPES[kind])
    if kind == "character":
        return isinstance(value, str)
    if kind == "numeric":
        return _is_number(value)
    # position: keyword or (x, y) pair
    if isinstance(value, str):
        return True
    return isinstance(value, tuple) and len(value) == 2 and all(_is_number(v) for v in value)
