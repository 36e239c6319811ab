"""
Tests for YAML theme configs.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from plotthemes.config import ThemeConfig, build_theme, load_theme, load_theme_config
from plotthemes.errors import ThemeError
from plotthemes.models import ElementBlank, ElementText, rel, unit
from plotthemes.themes import theme_bw, theme_grey

CONFIG_YAML = """\
theme: bw
base_size: 11
base_family: serif
overrides:
  panel.grid.minor: {type: blank}
  axis.text: {type: text, colour: grey30, size: {rel: 0.9}}
  plot.margin: {unit: [0.5, 0.5, 0.5, 0.5], units: lines}
  legend.position: bottom
"""


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "theme.yml"
    path.write_text(content, encoding="utf-8")
    return path


def test_defaults():
    cfg = ThemeConfig()
    assert cfg.theme == "grey"
    assert cfg.base_size == 12
    assert cfg.base_family == ""
    assert cfg.mode == "replace"
    assert build_theme(cfg) == theme_grey()


def test_load_and_build(tmp_path):
    cfg = load_theme_config(_write(tmp_path, CONFIG_YAML))
    assert cfg.theme == "bw"
    assert cfg.overrides["panel.grid.minor"] == ElementBlank()

    t = build_theme(cfg)
    assert t["panel.grid.minor"] == ElementBlank()
    assert t["axis.text"] == ElementText(colour="grey30", size=rel(0.9))
    assert t["plot.margin"] == unit((0.5, 0.5, 0.5, 0.5), "lines")
    assert t["legend.position"] == "bottom"
    assert t["text"].family == "serif"
    # untouched keys come from bw
    assert t["panel.border"] == theme_bw(11, "serif")["panel.border"]
    assert t.complete


def test_load_theme_shorthand(tmp_path):
    path = _write(tmp_path, CONFIG_YAML)
    assert load_theme(path) == build_theme(load_theme_config(path))


def test_add_mode_merges_fields():
    cfg = ThemeConfig(mode="add", overrides={"axis.text": {"type": "text", "colour": "red"}})
    t = build_theme(cfg)
    assert t["axis.text"] == ElementText(size=rel(0.8), colour="red")


def test_alias_theme_name():
    assert build_theme(ThemeConfig(theme="gray")) == theme_grey()


@pytest.mark.parametrize("data", [
    {"theme": "solarized"},
    {"base_size": 0},
    {"mode": "merge"},
    {"colour": "red"},
    {"overrides": {"axis.txet": {"type": "text"}}},
    {"overrides": {"axis.text": {"type": "line"}}},
    {"overrides": {"axis.text": {"type": "text", "weight": "bold"}}},
    {"overrides": {"panel.border": {"type": "hexagon"}}},
    {"overrides": {"plot.margin": {"unit": [1], "units": "cm", "type": "line"}}},
])
def test_invalid_configs(data):
    with pytest.raises(ValidationError):
        ThemeConfig(**data)


def test_empty_file_gives_defaults(tmp_path):
    assert load_theme_config(_write(tmp_path, "")) == ThemeConfig()


def test_non_mapping_file(tmp_path):
    with pytest.raises(ThemeError):
        load_theme_config(_write(tmp_path, "- bw\n- grey\n"))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_theme_config(tmp_path / "nope.yml")


def test_shipped_example_config():
    path = Path(__file__).resolve().parent.parent / "config" / "example_theme.yml"
    t = load_theme(path)
    assert t["panel.grid.minor"] == ElementBlank()
    assert t["axis.text"] == ElementText(colour="grey30", size=rel(0.9))
    assert t["legend.position"] == "bottom"
    assert t["plot.margin"] == unit((0.5, 0.5, 0.5, 0.5), "lines")
    assert t["text"].size == 11
    assert t.is_complete_for(theme_grey())
