"""
Preset themes.

- theme_grey: grey panel background with white grid lines (the default)
- theme_bw: dark-on-light, works well on projectors
- theme_linedraw: black lines of varying widths on white
- theme_light: like linedraw but with light grey lines and axes
- theme_minimal: bw with no background annotations
- theme_classic: bw with x and y axis lines and no grid lines

Every constructor takes ``base_size`` (points) and ``base_family`` (font
family, "" for the system default) and returns a complete Theme. Only
theme_grey declares absolute values; the others replace a subset of its
elements.
"""

from __future__ import annotations

import logging

from plotthemes.models.elements import (
    NA,
    ElementBlank,
    ElementLine,
    ElementRect,
    ElementText,
    rel,
    unit,
)
from plotthemes.models.theme import Theme, replace_theme, theme

log = logging.getLogger(__name__)


def theme_grey(base_size: float = 12, base_family: str = "") -> Theme:
    log.debug("Building theme_grey(base_size=%s, base_family=%r)", base_size, base_family)
    return theme({
        # Roots: not drawn directly, inherited by everything below
        "line": ElementLine(colour="black", size=0.5, linetype=1, lineend="butt"),
        "rect": ElementRect(fill="white", colour="black", size=0.5, linetype=1),
        "text": ElementText(
            family=base_family, face="plain", colour="black", size=base_size,
            hjust=0.5, vjust=0.5, angle=0, lineheight=0.9,
        ),
        "axis.text": ElementText(size=rel(0.8), colour="grey50"),
        "strip.text": ElementText(size=rel(0.8)),

        "axis.line": ElementBlank(),
        "axis.text.x": ElementText(vjust=1),
        "axis.text.y": ElementText(hjust=1),
        "axis.ticks": ElementLine(colour="grey50"),
        "axis.title.x": ElementText(),
        "axis.title.y": ElementText(angle=90),
        "axis.ticks.length": unit(0.15, "cm"),
        "axis.ticks.margin": unit(0.1, "cm"),

        "legend.background": ElementRect(colour=NA),
        "legend.margin": unit(0.2, "cm"),
        "legend.key": ElementRect(fill="grey95", colour="white"),
        "legend.key.size": unit(1.2, "lines"),
        "legend.key.height": None,
        "legend.key.width": None,
        "legend.text": ElementText(size=rel(0.8)),
        "legend.text.align": None,
        "legend.title": ElementText(size=rel(0.8), face="bold", hjust=0),
        "legend.title.align": None,
        "legend.position": "right",
        "legend.direction": None,
        "legend.justification": "center",
        "legend.box": None,

        "panel.background": ElementRect(fill="grey92", colour=NA),
        "panel.border": ElementBlank(),
        "panel.grid.major": ElementLine(colour="white"),
        "panel.grid.minor": ElementLine(colour="grey95", size=0.25),
        "panel.margin": unit(0.25, "lines"),
        "panel.margin.x": None,
        "panel.margin.y": None,

        "strip.background": ElementRect(fill="grey80", colour=NA),
        "strip.text.x": ElementText(),
        "strip.text.y": ElementText(angle=-90),

        "plot.background": ElementRect(colour="white"),
        "plot.title": ElementText(size=rel(1.2)),
        "plot.margin": unit((1, 1, 0.5, 0.5), "lines"),
    }, complete=True)


theme_gray = theme_grey


def theme_bw(base_size: float = 12, base_family: str = "") -> Theme:
    return replace_theme(
        theme_grey(base_size=base_size, base_family=base_family),
        theme({
            "axis.text": ElementText(size=rel(0.8)),
            "axis.ticks": ElementLine(colour="black"),
            "legend.key": ElementRect(colour="grey80"),
            "panel.background": ElementRect(fill="white", colour=NA),
            "panel.border": ElementRect(fill=NA, colour="grey50"),
            "panel.grid.major": ElementLine(colour="grey90", size=0.2),
            "panel.grid.minor": ElementLine(colour="grey98", size=0.5),
            "strip.background": ElementRect(fill="grey80", colour="grey50", size=0.2),
        }),
    )


def theme_linedraw(base_size: float = 12, base_family: str = "") -> Theme:
    """
    Only black lines of various widths on white backgrounds.

    Some lines are very thin (well under 1 pt), which some journals refuse.
    """
    return replace_theme(
        theme_grey(base_size=base_size, base_family=base_family),
        theme({
            "axis.text": ElementText(colour="black", size=rel(0.8)),
            "axis.ticks": ElementLine(colour="black", size=0.25),
            "legend.key": ElementRect(colour="black", size=0.25),
            "panel.background": ElementRect(fill="white", colour=NA),
            "panel.border": ElementRect(fill=NA, colour="black", size=0.5),
            "panel.grid.major": ElementLine(colour="black", size=0.05),
            "panel.grid.minor": ElementLine(colour="black", size=0.01),
            "strip.background": ElementRect(fill="black", colour=NA),
            "strip.text.x": ElementText(colour="white"),
            "strip.text.y": ElementText(colour="white", angle=-90),
        }),
    )


def theme_light(base_size: float = 12, base_family: str = "") -> Theme:
    return replace_theme(
        theme_grey(base_size=base_size, base_family=base_family),
        theme({
            "axis.ticks": ElementLine(colour="grey70", size=0.25),
            "legend.key": ElementRect(fill="white", colour="grey50", size=0.25),
            "panel.background": ElementRect(fill="white", colour=NA),
            "panel.border": ElementRect(fill=NA, colour="grey70", size=0.5),
            "panel.grid.major": ElementLine(colour="grey85", size=0.25),
            "panel.grid.minor": ElementLine(colour="grey93", size=0.125),
            "strip.background": ElementRect(fill="grey70", colour=NA),
            "strip.text.x": ElementText(colour="white"),
            "strip.text.y": ElementText(colour="white", angle=-90),
        }),
    )


def theme_minimal(base_size: float = 12, base_family: str = "") -> Theme:
    # theme_bw with every background removed
    return replace_theme(
        theme_bw(base_size=base_size, base_family=base_family),
        theme({
            "legend.background": ElementBlank(),
            "legend.key": ElementBlank(),
            "panel.background": ElementBlank(),
            "panel.border": ElementBlank(),
            "strip.background": ElementBlank(),
            "plot.background": ElementBlank(),
        }),
    )


def theme_classic(base_size: float = 12, base_family: str = "") -> Theme:
    return replace_theme(
        theme_bw(base_size=base_size, base_family=base_family),
        theme({
            "panel.border": ElementBlank(),
            "axis.line": ElementLine(colour="black"),
            "panel.grid.major": ElementBlank(),
            "panel.grid.minor": ElementBlank(),
            "strip.background": ElementRect(colour="black", size=0.5),
            "legend.key": ElementBlank(),
        }),
    )
