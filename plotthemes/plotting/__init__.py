"""
Matplotlib integration.

- styles.py: translate themes into rcParams and apply them
"""

from plotthemes.plotting.styles import (
    LINETYPES,
    set_plot_style,
    theme_to_rc,
    to_mpl_colour,
)

__all__ = [
    "LINETYPES",
    "set_plot_style",
    "theme_to_rc",
    "to_mpl_colour",
]
