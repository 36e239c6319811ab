import logging
import re

import matplotlib.pyplot as plt

from plotthemes.errors import ThemeError
from plotthemes.models.elements import NA, PT, Element, ElementBlank, Rel, Unit
from plotthemes.models.theme import Theme, calc_element
from plotthemes.themes import DEFAULT_THEME, get_theme

log = logging.getLogger(__name__)

# ============================================================================
# Value conversion
# ============================================================================
_GREY_RE = re.compile(r"^gr[ae]y(\d{1,3})$")

# R/X11 line type codes -> matplotlib linestyles
LINETYPES = {
    0: "None",
    1: "-",
    2: "--",
    3: ":",
    4: "-.",
    "blank": "None",
    "solid": "-",
    "dashed": "--",
    "dotted": ":",
    "dotdash": "-.",
}


def to_mpl_colour(colour):
    """Convert a theme colour name to something matplotlib understands.

    ``grey0``..``grey100`` (and ``gray*``) become hex strings using the X11
    table levels; ``NA`` stays ``"none"``; anything else is passed through.

    Example
    -------
    >>> to_mpl_colour("grey92")
    '#ebebeb'
    """
    if colour is None or colour == NA:
        return colour
    match = _GREY_RE.match(colour)
    if match:
        level = int(match.group(1))
        if level > 100:
            raise ValueError(f"Grey level out of range (0-100): {colour}")
        v = int(level * 2.55 + 0.5)
        return f"#{v:02x}{v:02x}{v:02x}"
    return colour


def _linewidth(element):
    if element.size is None or isinstance(element.size, Rel):
        return None
    return element.size * PT


def _linestyle(element):
    return LINETYPES.get(element.linetype, "-")


def _is_blank(element):
    return element is None or isinstance(element, ElementBlank)


def _first_points(value, fontsize, lineheight):
    if isinstance(value, Unit):
        return value.to_points(fontsize, lineheight)[0]
    return None


def _text_size(element, fontsize):
    # relative sizes left over when the root text has no absolute size
    if isinstance(element.size, Rel):
        return element.size * fontsize
    return element.size


# ============================================================================
# Theme -> rcParams
# ============================================================================
def theme_to_rc(theme: Theme) -> dict:
    """Translate a theme into matplotlib rcParams.

    Every element is resolved through the inheritance tree first, so the
    result reflects relative sizes and inherited colours.

    Parameters
    ----------
    theme : Theme
        Complete theme (a preset or a preset with overrides)

    Returns
    -------
    dict
        rcParams suitable for ``plt.rcParams.update`` or ``plt.rc_context``.
        Fields a theme leaves unset are omitted.

    Raises
    ------
    ThemeError
        If the root ``text`` element is missing or blank
    """
    text = calc_element("text", theme)
    if _is_blank(text):
        raise ThemeError("Element 'text' must be a text element to build rcParams, got "
                         f"{text!r}")
    base_size = text.size
    if base_size is None or isinstance(base_size, Rel):
        base_size = None
        fontsize = plt.rcParams["font.size"]
    else:
        fontsize = base_size
    lineheight = text.lineheight or 1.0

    rc = {
        "font.size": base_size,
        "text.color": to_mpl_colour(text.colour),
        "axes.axisbelow": True,
    }
    if text.family:
        rc["font.family"] = text.family

    # Panel and plot backgrounds
    panel_bg = calc_element("panel.background", theme)
    rc["axes.facecolor"] = NA if _is_blank(panel_bg) else to_mpl_colour(panel_bg.fill)

    plot_bg = calc_element("plot.background", theme)
    if _is_blank(plot_bg):
        rc["figure.facecolor"] = NA
        rc["figure.edgecolor"] = NA
    else:
        rc["figure.facecolor"] = to_mpl_colour(plot_bg.fill)
        rc["figure.edgecolor"] = to_mpl_colour(plot_bg.colour)

    # Frame: panel border draws all four spines, axis lines only bottom/left
    border = calc_element("panel.border", theme)
    axis_line = calc_element("axis.line", theme)
    if not _is_blank(border):
        rc["axes.edgecolor"] = to_mpl_colour(border.colour)
        rc["axes.linewidth"] = _linewidth(border)
    elif not _is_blank(axis_line):
        rc["axes.edgecolor"] = to_mpl_colour(axis_line.colour)
        rc["axes.linewidth"] = _linewidth(axis_line)
        rc["axes.spines.top"] = False
        rc["axes.spines.right"] = False
    else:
        rc["axes.edgecolor"] = NA
        rc["axes.linewidth"] = 0.0

    # Grid
    grid = calc_element("panel.grid.major", theme)
    rc["axes.grid"] = not _is_blank(grid)
    if not _is_blank(grid):
        rc["grid.color"] = to_mpl_colour(grid.colour)
        rc["grid.linewidth"] = _linewidth(grid)
        rc["grid.linestyle"] = _linestyle(grid)

    # Ticks and tick labels, per axis
    tick_length = _first_points(calc_element("axis.ticks.length", theme), fontsize, lineheight)
    tick_margin = _first_points(calc_element("axis.ticks.margin", theme), fontsize, lineheight)
    for axis in ("x", "y"):
        ticks = calc_element(f"axis.ticks.{axis}", theme)
        if _is_blank(ticks):
            rc[f"{axis}tick.major.size"] = 0.0
            rc[f"{axis}tick.minor.size"] = 0.0
        else:
            rc[f"{axis}tick.color"] = to_mpl_colour(ticks.colour)
            rc[f"{axis}tick.major.width"] = _linewidth(ticks)
            if tick_length is not None:
                rc[f"{axis}tick.major.size"] = tick_length
        if tick_margin is not None:
            rc[f"{axis}tick.major.pad"] = tick_margin

        labels = calc_element(f"axis.text.{axis}", theme)
        if _is_blank(labels):
            rc[f"{axis}tick.labelcolor"] = NA
        else:
            rc[f"{axis}tick.labelcolor"] = to_mpl_colour(labels.colour)
            rc[f"{axis}tick.labelsize"] = _text_size(labels, fontsize)

    # Titles
    title_x = calc_element("axis.title.x", theme)
    if not _is_blank(title_x):
        rc["axes.labelsize"] = _text_size(title_x, fontsize)
        rc["axes.labelcolor"] = to_mpl_colour(title_x.colour)
        rc["axes.labelweight"] = "bold" if title_x.face in ("bold", "bold.italic") else "normal"

    plot_title = calc_element("plot.title", theme)
    if not _is_blank(plot_title):
        rc["axes.titlesize"] = _text_size(plot_title, fontsize)
        rc["axes.titleweight"] = "bold" if plot_title.face in ("bold", "bold.italic") else "normal"

    # Legend
    legend_bg = calc_element("legend.background", theme)
    if _is_blank(legend_bg):
        rc["legend.frameon"] = False
    else:
        rc["legend.frameon"] = True
        rc["legend.facecolor"] = to_mpl_colour(legend_bg.fill)
        rc["legend.edgecolor"] = to_mpl_colour(legend_bg.colour)

    legend_text = calc_element("legend.text", theme)
    if isinstance(legend_text, Element) and not _is_blank(legend_text):
        rc["legend.fontsize"] = _text_size(legend_text, fontsize)
    legend_title = calc_element("legend.title", theme)
    if isinstance(legend_title, Element) and not _is_blank(legend_title):
        rc["legend.title_fontsize"] = _text_size(legend_title, fontsize)

    # unset fields keep matplotlib's current defaults
    return {key: value for key, value in rc.items() if value is not None}


# ============================================================================
# Helper function to apply theme
# ============================================================================
def set_plot_style(theme_name=DEFAULT_THEME, base_size=12, base_family=""):
    """Apply a preset theme to matplotlib's global rcParams.

    Parameters
    ----------
    theme_name : str or Theme, default="grey"
        Name of a preset theme, or an already-built Theme
    base_size : float, default=12
        Base font size in points (ignored when a Theme is passed)
    base_family : str, default=""
        Base font family; "" keeps matplotlib's default (ignored when a Theme is passed)

    Returns
    -------
    dict
        The rcParams that were applied

    Example
    -------
    >>> set_plot_style("bw", base_size=14)
    >>> plt.plot([1, 2, 3], [1, 4, 9])
    >>> plt.show()
    """
    if isinstance(theme_name, Theme):
        theme = theme_name
        label = "custom"
    else:
        theme = get_theme(theme_name, base_size=base_size, base_family=base_family)
        label = theme_name

    rc = theme_to_rc(theme)
    plt.rcParams.update(rc)
    log.info("Applied '%s' theme (%d rcParams)", label, len(rc))
    return rc
