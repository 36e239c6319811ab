"""
Data models for plot themes.

Element values
--------------
- ElementLine, ElementRect, ElementText, ElementBlank: graphical element styles
- Rel / rel(): size relative to the parent element
- Unit / unit(): length values (tick length, margins, key size)
- NA: explicit "no colour"

Themes
------
- Theme: immutable element-key -> value mapping
- theme(): build a (partial) theme
- replace_theme(), add_theme(): layer one theme onto another
- calc_element(): resolve an element through the inheritance tree
- ELEMENT_TREE: recognised element keys, their kinds and parents
"""

from .elements import (
    NA,
    PT,
    Element,
    ElementBlank,
    ElementLine,
    ElementRect,
    ElementText,
    Rel,
    Unit,
    combine_elements,
    element_from_spec,
    element_to_spec,
    merge_element,
    rel,
    unit,
)
from .element_tree import ELEMENT_TREE, ElementDef
from .theme import Theme, add_theme, calc_element, replace_theme, theme

__all__ = [
    # Element values
    "NA",
    "PT",
    "Element",
    "ElementBlank",
    "ElementLine",
    "ElementRect",
    "ElementText",
    "Rel",
    "Unit",
    "rel",
    "unit",
    "merge_element",
    "combine_elements",
    "element_from_spec",
    "element_to_spec",
    # Element tree
    "ELEMENT_TREE",
    "ElementDef",
    # Themes
    "Theme",
    "theme",
    "replace_theme",
    "add_theme",
    "calc_element",
]
