"""
Pydantic models for theme element values.

A theme maps element keys to one of these values:
- ElementLine: line style (colour, size, linetype, lineend)
- ElementRect: rectangle style (fill, border colour, size, linetype)
- ElementText: text style (family, face, colour, size, alignment, angle, lineheight)
- ElementBlank: explicit "draw nothing" marker
- Unit: spacing/length value with a unit name
- plain strings and numbers for the few non-graphical settings (legend.position, ...)

Every element field is optional. ``None`` means "not set here, inherit from
the parent element", while ``NA`` means "explicitly no colour/fill".
"""

from __future__ import annotations

from typing import Any, ClassVar, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from plotthemes.errors import ThemeError

# Transparent colour/fill. Matches matplotlib's own spelling so resolved
# values can be handed straight to rcParams.
NA = "none"

# Millimetres to points (1 in = 72.27 pt = 25.4 mm)
PT = 72.27 / 25.4

_POINTS_PER_UNIT = {
    "pt": 1.0,
    "mm": PT,
    "cm": PT * 10,
    "in": 72.27,
}


class Rel(BaseModel):
    """Size expressed as a multiple of the parent element's size."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    factor: float = Field(..., gt=0, description="Multiplier applied to the parent size")

    def __mul__(self, other):
        if isinstance(other, Rel):
            return Rel(factor=self.factor * other.factor)
        if isinstance(other, (int, float)):
            return other * self.factor
        return NotImplemented

    __rmul__ = __mul__

    def __repr__(self) -> str:
        return f"rel({self.factor:g})"


class Unit(BaseModel):
    """
    Length value, e.g. tick length or plot margin.

    ``values`` holds one or more numbers sharing the same unit. Plot margins
    use four values in (top, right, bottom, left) order.

    Example
    -------
    >>> unit(0.15, "cm").to_points()
    (4.268...,)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    values: tuple[float, ...] = Field(..., min_length=1)
    units: Literal["pt", "mm", "cm", "in", "lines"] = "pt"

    @model_validator(mode="before")
    @classmethod
    def _scalar_to_tuple(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("values"), (int, float)):
            data = {**data, "values": (data["values"],)}
        return data

    def to_points(self, fontsize: float = 12.0, lineheight: float = 1.0) -> tuple[float, ...]:
        """Convert to typographic points. ``lines`` are fontsize * lineheight."""
        if self.units == "lines":
            factor = fontsize * lineheight
        else:
            factor = _POINTS_PER_UNIT[self.units]
        return tuple(v * factor for v in self.values)

    def __repr__(self) -> str:
        vals = ", ".join(f"{v:g}" for v in self.values)
        return f"unit({vals}, {self.units!r})"


Size = Optional[Union[float, Rel]]


class Element(BaseModel):
    """Common base for graphical elements."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: ClassVar[str] = ""

    def set_fields(self) -> dict[str, Any]:
        """Fields that carry a value (everything not ``None``)."""
        return {k: v for k, v in self.__dict__.items() if v is not None}

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.set_fields().items())
        return f"element_{self.kind}({args})"


class ElementBlank(Element):
    """Draw nothing for this element."""

    kind: ClassVar[str] = "blank"


class ElementLine(Element):
    kind: ClassVar[str] = "line"

    colour: Optional[str] = None
    size: Size = None
    linetype: Optional[Union[int, str]] = None
    lineend: Optional[Literal["butt", "round", "square"]] = None


class ElementRect(Element):
    kind: ClassVar[str] = "rect"

    fill: Optional[str] = None
    colour: Optional[str] = None
    size: Size = None
    linetype: Optional[Union[int, str]] = None


class ElementText(Element):
    kind: ClassVar[str] = "text"

    family: Optional[str] = None
    face: Optional[Literal["plain", "bold", "italic", "bold.italic"]] = None
    colour: Optional[str] = None
    size: Size = None
    hjust: Optional[float] = None
    vjust: Optional[float] = None
    angle: Optional[float] = None
    lineheight: Optional[float] = None


ELEMENT_CLASSES: dict[str, type[Element]] = {
    cls.kind: cls for cls in (ElementBlank, ElementLine, ElementRect, ElementText)
}


def rel(factor: float) -> Rel:
    """Shorthand for ``Rel(factor=...)``."""
    return Rel(factor=factor)


def unit(values, units: str = "pt") -> Unit:
    """Shorthand for ``Unit``; accepts a scalar or a sequence of numbers."""
    if isinstance(values, (int, float)):
        values = (values,)
    return Unit(values=tuple(values), units=units)


# ═══════════════════════════════════════════════════════════════════
# Merging
# ═══════════════════════════════════════════════════════════════════

def merge_element(new, old):
    """
    Merge ``new`` onto ``old`` attribute by attribute.

    Fields set on ``new`` win; fields it leaves unset are taken from ``old``.
    A missing or blank ``old`` yields ``new`` unchanged, and so does any
    non-element ``new`` (units, strings, numbers, ``None``, blank).

    Raises
    ------
    ThemeError
        If both values are elements of different kinds.
    """
    if old is None or isinstance(old, ElementBlank):
        return new
    if not isinstance(new, Element) or isinstance(new, ElementBlank):
        return new
    if not isinstance(old, Element):
        raise ThemeError(f"Cannot merge element_{new.kind} onto non-element value {old!r}")
    if type(new) is not type(old):
        raise ThemeError(f"Cannot merge element_{new.kind} onto element_{old.kind}")
    return old.model_copy(update=new.set_fields())


def combine_elements(child, parent):
    """
    Fill the unset fields of ``child`` from its resolved ``parent``.

    Used when resolving the inheritance tree. A ``Rel`` size on the child is
    multiplied by the parent's size.
    """
    if parent is None or isinstance(child, ElementBlank):
        return child
    if child is None:
        return parent
    if not isinstance(child, Element) or not isinstance(parent, Element):
        return child
    if isinstance(parent, ElementBlank):
        return child

    update = {
        name: value
        for name, value in parent.__dict__.items()
        if name in type(child).model_fields and getattr(child, name) is None
    }
    if isinstance(child.size, Rel) and getattr(parent, "size", None) is not None:
        update["size"] = child.size * parent.size
    return child.model_copy(update=update)


# ═══════════════════════════════════════════════════════════════════
# Plain-data conversion (YAML / JSON)
# ═══════════════════════════════════════════════════════════════════

def _size_to_spec(value):
    return {"rel": value.factor} if isinstance(value, Rel) else value


def element_to_spec(value):
    """Convert an element value to plain nested data."""
    if isinstance(value, Element):
        spec = {"type": value.kind}
        for name, field_value in value.set_fields().items():
            spec[name] = _size_to_spec(field_value)
        return spec
    if isinstance(value, Unit):
        return {"unit": list(value.values), "units": value.units}
    if isinstance(value, tuple):
        return list(value)
    return value


def element_from_spec(spec):
    """
    Build an element value from plain nested data.

    Accepted forms::

        {"type": "line", "colour": "black", "size": 0.5}
        {"type": "text", "size": {"rel": 0.8}}
        {"type": "blank"}
        {"unit": [1, 1, 0.5, 0.5], "units": "lines"}
        "right", 0.5, None
    """
    if not isinstance(spec, dict):
        if isinstance(spec, list):
            return tuple(spec)
        return spec

    if "unit" in spec:
        extra = set(spec) - {"unit", "units"}
        if extra:
            raise ThemeError(f"Unexpected keys in unit spec: {sorted(extra)}")
        return unit(spec["unit"], spec.get("units", "pt"))

    fields = dict(spec)
    kind = fields.pop("type", None)
    if kind not in ELEMENT_CLASSES:
        raise ThemeError(
            f"Unknown element type {kind!r}. Expected one of: {sorted(ELEMENT_CLASSES)}"
        )
    size = fields.get("size")
    if isinstance(size, dict):
        if set(size) != {"rel"}:
            raise ThemeError(f"Relative size spec must be {{rel: <factor>}}, got {size!r}")
        fields["size"] = rel(size["rel"])
    return ELEMENT_CLASSES[kind](**fields)
