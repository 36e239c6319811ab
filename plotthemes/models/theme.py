"""
Theme mapping and the operations that combine themes.

A Theme is an immutable mapping from element key to value. Two ways of
layering one theme onto another are provided:

- ``replace_theme(base, overrides)`` / ``base % overrides``: each key in
  ``overrides`` replaces the base value wholesale.
- ``add_theme(base, overrides)`` / ``base + overrides``: each key in
  ``overrides`` is merged field by field into the base element.

Keys absent from ``overrides`` keep the base value in both cases.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Iterator, Optional

from plotthemes.errors import ThemeError
from plotthemes.models.element_tree import ELEMENT_TREE, value_matches
from plotthemes.models.elements import ElementBlank, combine_elements, element_to_spec, merge_element

log = logging.getLogger(__name__)


class Theme(Mapping):
    """
    Immutable element-key -> value mapping.

    Parameters
    ----------
    elements : Mapping[str, Any]
        Element values keyed by dotted element name (``"axis.text.x"``).
        ``None`` is allowed and means "inherit from parent".
    complete : bool
        True when the theme declares every element on its own (preset
        themes). Adding a complete theme onto another replaces it entirely.

    Raises
    ------
    ThemeError
        If a key is not a recognised element or a value has the wrong kind.
    """

    __slots__ = ("_elements", "_complete")

    def __init__(self, elements: Optional[Mapping[str, Any]] = None, complete: bool = False):
        elements = dict(elements or {})
        for key, value in elements.items():
            _validate_element(key, value)
        self._elements = MappingProxyType(elements)
        self._complete = bool(complete)

    @property
    def complete(self) -> bool:
        return self._complete

    def __getitem__(self, key: str) -> Any:
        return self._elements[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Theme):
            return NotImplemented
        return self._complete == other._complete and dict(self._elements) == dict(other._elements)

    def __hash__(self) -> int:
        return hash((self._complete, frozenset(self._elements.items())))

    def __repr__(self) -> str:
        flag = ", complete=True" if self._complete else ""
        return f"Theme({len(self)} elements{flag})"

    def __add__(self, other: Theme) -> Theme:
        if not isinstance(other, Theme):
            return NotImplemented
        return add_theme(self, other)

    def __mod__(self, other: Theme) -> Theme:
        if not isinstance(other, Theme):
            return NotImplemented
        return replace_theme(self, other)

    def missing_keys(self, reference: Mapping[str, Any]) -> list[str]:
        """Keys of ``reference`` that this theme does not declare."""
        return [key for key in reference if key not in self._elements]

    def is_complete_for(self, reference: Mapping[str, Any]) -> bool:
        return not self.missing_keys(reference)

    def diff(self, other: Mapping[str, Any]) -> dict[str, tuple[Any, Any]]:
        """Return ``{key: (self_value, other_value)}`` for every differing key."""
        keys = list(self._elements) + [k for k in other if k not in self._elements]
        return {
            key: (self._elements.get(key), other.get(key))
            for key in keys
            if self._elements.get(key) != other.get(key)
        }

    def to_dict(self) -> dict[str, Any]:
        """Plain nested data suitable for YAML/JSON dumping."""
        return {key: element_to_spec(value) for key, value in self._elements.items()}


def _validate_element(key: str, value: Any) -> None:
    if key not in ELEMENT_TREE:
        raise ThemeError(f"'{key}' is not a valid theme element name")
    if value is None or isinstance(value, ElementBlank):
        return
    kind = ELEMENT_TREE[key].kind
    if not value_matches(kind, value):
        raise ThemeError(f"Element '{key}' must be of kind '{kind}', got {value!r}")


def theme(elements: Optional[Mapping[str, Any]] = None, complete: bool = False, **kwargs: Any) -> Theme:
    """
    Build a theme from a dict of dotted keys and/or keyword arguments.

    Keyword names use underscores in place of dots, so ``axis_text_x=...``
    sets ``axis.text.x``.

    Example
    -------
    >>> theme(panel_background=ElementRect(fill="white"))
    Theme(1 elements)
    """
    merged = dict(elements or {})
    for name, value in kwargs.items():
        merged[name.replace("_", ".")] = value
    return Theme(merged, complete=complete)


def replace_theme(base: Theme, overrides: Mapping[str, Any]) -> Theme:
    """
    Overlay ``overrides`` onto ``base``, replacing whole elements.

    For every key the result holds the override's value if present, else the
    base's value. The completeness flag of ``base`` is kept.
    """
    elements = dict(base)
    elements.update(overrides)
    log.debug("Replaced %d element(s): %s", len(overrides), ", ".join(overrides))
    return Theme(elements, complete=base.complete)


def add_theme(base: Theme, overrides: Theme) -> Theme:
    """
    Overlay ``overrides`` onto ``base``, merging element fields.

    Fields an override leaves unset keep their base value. Adding a complete
    theme returns that theme unchanged.

    Raises
    ------
    ThemeError
        If an override element has a different kind than the base element.
    """
    if getattr(overrides, "complete", False):
        return overrides
    elements = dict(base)
    for key, value in overrides.items():
        elements[key] = merge_element(value, elements.get(key))
    return Theme(elements, complete=base.complete)


def calc_element(key: str, theme: Mapping[str, Any]) -> Any:
    """
    Resolve an element through the inheritance tree.

    Unset fields are filled from the parent chain and relative sizes are
    multiplied out. A blank element resolves to itself.

    Example
    -------
    >>> calc_element("axis.text.x", theme_grey(base_size=10)).size
    8.0
    """
    if key not in ELEMENT_TREE:
        raise ThemeError(f"'{key}' is not a valid theme element name")

    value = theme.get(key)
    if isinstance(value, ElementBlank):
        return value

    for parent in ELEMENT_TREE[key].inherit:
        value = combine_elements(value, calc_element(parent, theme))
    return value
