"""
Tests for the matplotlib rcParams translation.
"""

import matplotlib.pyplot as plt
import pytest

from plotthemes.errors import ThemeError
from plotthemes.config import ThemeConfig, build_theme
from plotthemes.models import PT, ElementBlank, ElementLine, ElementRect, ElementText, theme
from plotthemes.plotting import set_plot_style, theme_to_rc, to_mpl_colour
from plotthemes.themes import PRESETS, get_theme, theme_bw, theme_classic, theme_grey, theme_minimal


# ═══════════════════════════════════════════════════════════════════
# Colours
# ═══════════════════════════════════════════════════════════════════

@pytest.mark.parametrize("name, expected", [
    ("grey92", "#ebebeb"),
    ("gray0", "#000000"),
    ("grey100", "#ffffff"),
    ("white", "white"),
    ("#123456", "#123456"),
    ("none", "none"),
    (None, None),
])
def test_to_mpl_colour(name, expected):
    assert to_mpl_colour(name) == expected


def test_to_mpl_colour_out_of_range():
    with pytest.raises(ValueError):
        to_mpl_colour("grey101")


# ═══════════════════════════════════════════════════════════════════
# theme_to_rc
# ═══════════════════════════════════════════════════════════════════

def test_grey_rc():
    rc = theme_to_rc(theme_grey())
    assert rc["font.size"] == 12
    assert "font.family" not in rc
    assert rc["axes.facecolor"] == "#ebebeb"
    assert rc["axes.grid"] is True
    assert rc["grid.color"] == "white"
    assert rc["grid.linewidth"] == pytest.approx(0.5 * PT)
    assert rc["axes.edgecolor"] == "none"
    assert rc["xtick.color"] == to_mpl_colour("grey50")
    assert rc["xtick.labelsize"] == pytest.approx(9.6)
    assert rc["ytick.labelsize"] == pytest.approx(9.6)
    assert rc["axes.titlesize"] == pytest.approx(14.4)
    assert rc["legend.title_fontsize"] == pytest.approx(9.6)
    assert rc["xtick.major.size"] == pytest.approx(0.15 * 72.27 / 2.54)


def test_family_sets_font_family():
    rc = theme_to_rc(theme_grey(base_family="serif"))
    assert rc["font.family"] == "serif"


def test_bw_rc_draws_border():
    rc = theme_to_rc(theme_bw())
    assert rc["axes.facecolor"] == "white"
    assert rc["axes.edgecolor"] == to_mpl_colour("grey50")
    assert rc["axes.linewidth"] == pytest.approx(0.5 * PT)
    assert rc["xtick.labelcolor"] == "black"


def test_classic_rc_uses_axis_lines():
    rc = theme_to_rc(theme_classic())
    assert rc["axes.grid"] is False
    assert rc["axes.edgecolor"] == "black"
    assert rc["axes.spines.top"] is False
    assert rc["axes.spines.right"] is False


def test_minimal_rc_has_no_backgrounds():
    rc = theme_to_rc(theme_minimal())
    assert rc["axes.facecolor"] == "none"
    assert rc["figure.facecolor"] == "none"
    assert rc["legend.frameon"] is False


def test_axis_text_overrides_reach_tick_labels():
    t = theme_grey() % theme(axis_text_x=ElementText(colour="red"), axis_text_y=ElementBlank())
    rc = theme_to_rc(t)
    assert rc["xtick.labelcolor"] == "red"
    assert rc["xtick.labelsize"] == pytest.approx(9.6)
    assert rc["ytick.labelcolor"] == "none"
    assert "ytick.labelsize" not in rc


@pytest.mark.parametrize("name", sorted(PRESETS))
def test_rc_is_accepted_by_matplotlib(name):
    rc = theme_to_rc(get_theme(name))
    with plt.rc_context(rc):
        fig, ax = plt.subplots()
        ax.plot([1, 2, 3], [1, 4, 9], label="y")
        ax.set_title("title")
        ax.legend()
        fig.canvas.draw()
        plt.close(fig)


# ═══════════════════════════════════════════════════════════════════
# set_plot_style
# ═══════════════════════════════════════════════════════════════════

def test_set_plot_style_updates_rcparams():
    with plt.rc_context():
        applied = set_plot_style("bw", base_size=14)
        assert plt.rcParams["axes.facecolor"] == "white"
        assert plt.rcParams["font.size"] == 14
        assert applied["font.size"] == 14


def test_set_plot_style_accepts_theme():
    with plt.rc_context():
        set_plot_style(theme_minimal(base_size=8))
        assert plt.rcParams["font.size"] == 8


def test_set_plot_style_unknown_theme():
    with pytest.raises(ThemeError):
        set_plot_style("solarized")


# ═══════════════════════════════════════════════════════════════════
# Partial themes
# ═══════════════════════════════════════════════════════════════════

def test_child_of_blank_parent_leaves_width_unset():
    t = theme_grey() % theme(axis_ticks=ElementBlank(), axis_ticks_x=ElementLine(colour="red"))
    rc = theme_to_rc(t)
    assert rc["xtick.color"] == "red"
    assert "xtick.major.width" not in rc
    assert None not in rc.values()
    with plt.rc_context():
        set_plot_style(t)
        assert plt.rcParams["xtick.color"] == "red"


def test_partial_root_text_from_config():
    cfg = ThemeConfig(overrides={"text": {"type": "text", "size": 14}})
    rc = theme_to_rc(build_theme(cfg))
    assert rc["font.size"] == 14
    assert "text.color" not in rc
    assert rc["xtick.labelsize"] == pytest.approx(11.2)
    with plt.rc_context():
        set_plot_style(build_theme(cfg))
        assert plt.rcParams["font.size"] == 14


def test_root_text_without_size_uses_current_font_size():
    t = theme_grey() % theme(text=ElementText(colour="navy"))
    with plt.rc_context({"font.size": 10}):
        rc = theme_to_rc(t)
    assert "font.size" not in rc
    assert rc["text.color"] == "navy"
    assert rc["xtick.labelsize"] == pytest.approx(8.0)


@pytest.mark.parametrize("text", [ElementBlank(), None])
def test_missing_root_text_is_an_error(text):
    t = theme_grey() % theme(text=text)
    with pytest.raises(ThemeError, match="'text'"):
        theme_to_rc(t)


def test_theme_without_text_key_is_an_error():
    with pytest.raises(ThemeError, match="'text'"):
        theme_to_rc(theme(panel_background=ElementRect(fill="white")))
