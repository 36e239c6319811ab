"""
Pydantic models for YAML theme configuration files.

A config names a preset, the base font settings, and a set of element
overrides layered on top::

    theme: bw
    base_size: 11
    base_family: serif
    mode: replace          # or "add" to merge fields into existing elements
    overrides:
      panel.grid.minor: {type: blank}
      axis.text: {type: text, colour: grey30, size: {rel: 0.9}}
      plot.margin: {unit: [0.5, 0.5, 0.5, 0.5], units: lines}
      legend.position: bottom
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from plotthemes.errors import ThemeError
from plotthemes.models.elements import element_from_spec
from plotthemes.models.theme import Theme, add_theme, replace_theme
from plotthemes.themes import ALIASES, DEFAULT_THEME, PRESETS, get_theme

log = logging.getLogger(__name__)


class ThemeConfig(BaseModel):
    """
    Theme built from a preset plus element overrides.

    Fields
    ------
    - theme: preset name (grey, gray, bw, linedraw, light, minimal, classic)
    - base_size: base font size in points (> 0, default 12)
    - base_family: base font family ("" = system default)
    - mode: "replace" swaps whole elements, "add" merges their fields
    - overrides: element key -> element spec (validated into a Theme)

    Example
    -------
    >>> cfg = ThemeConfig(theme="minimal", overrides={"legend.position": "bottom"})
    >>> build_theme(cfg)["legend.position"]
    'bottom'
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid"  # Reject unknown settings
    )

    theme: str = Field(
        default=DEFAULT_THEME,
        description="Name of the preset theme to start from"
    )

    base_size: float = Field(
        default=12,
        gt=0,
        description="Base font size in points"
    )

    base_family: str = Field(
        default="",
        description="Base font family; empty string uses the system default"
    )

    mode: Literal["replace", "add"] = Field(
        default="replace",
        description="How overrides combine with the preset"
    )

    overrides: dict[str, Any] = Field(
        default_factory=dict,
        description="Element overrides keyed by dotted element name"
    )

    @field_validator("theme")
    @classmethod
    def _theme_must_exist(cls, v: str) -> str:
        if v not in PRESETS and v not in ALIASES:
            raise ValueError(f"Unknown theme '{v}'. Available: {sorted(PRESETS) + sorted(ALIASES)}")
        return v

    @field_validator("overrides")
    @classmethod
    def _overrides_must_be_valid(cls, v: dict[str, Any]) -> dict[str, Any]:
        """Parse element specs and check keys/kinds against the element tree."""
        parsed = {key: element_from_spec(spec) for key, spec in v.items()}
        Theme(parsed)
        return parsed

    def override_theme(self) -> Theme:
        return Theme(self.overrides)


def build_theme(config: ThemeConfig) -> Theme:
    """Build the preset named in ``config`` and layer its overrides on top."""
    base = get_theme(config.theme, base_size=config.base_size, base_family=config.base_family)
    overrides = config.override_theme()
    if config.mode == "add":
        return add_theme(base, overrides)
    return replace_theme(base, overrides)


def load_theme_config(path: str | Path) -> ThemeConfig:
    """
    Read and validate a YAML theme config.

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    pydantic.ValidationError
        If the content does not describe a valid theme
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ThemeError(f"Theme config must be a mapping, got {type(data).__name__}: {path}")
    log.debug("Loaded theme config from %s", path)
    return ThemeConfig(**data)


def load_theme(path: str | Path) -> Theme:
    """Shorthand for ``build_theme(load_theme_config(path))``."""
    return build_theme(load_theme_config(path))
