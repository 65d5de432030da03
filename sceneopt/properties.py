"""Property primitives: style values bound to the forms of a context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from .utils import PrimitiveArray, as_finite, as_length, broadcast


class PropertyPrimitive:
    """Base class for style records; ``kind`` names the attribute they set."""

    __slots__ = ()

    kind: ClassVar[str] = ""


def _as_color(value: object) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"color must be a non-empty string or None, got {value!r}")
    return value.strip().lower()


def _as_opacity(value: object) -> float:
    number = as_finite(value, "opacity")
    if not 0.0 <= number <= 1.0:
        raise ValueError(f"opacity must be within [0, 1], got {value!r}")
    return number


@dataclass(frozen=True)
class FillPrimitive(PropertyPrimitive):
    color: Optional[str]

    kind: ClassVar[str] = "fill"

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", _as_color(self.color))


@dataclass(frozen=True)
class StrokePrimitive(PropertyPrimitive):
    color: Optional[str]

    kind: ClassVar[str] = "stroke"

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", _as_color(self.color))


@dataclass(frozen=True)
class LineWidthPrimitive(PropertyPrimitive):
    value: float

    kind: ClassVar[str] = "linewidth"

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", as_length(self.value, "line width"))


@dataclass(frozen=True)
class FillOpacityPrimitive(PropertyPrimitive):
    value: float

    kind: ClassVar[str] = "fill-opacity"

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _as_opacity(self.value))


@dataclass(frozen=True)
class StrokeOpacityPrimitive(PropertyPrimitive):
    value: float

    kind: ClassVar[str] = "stroke-opacity"

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _as_opacity(self.value))


@dataclass
class Property(PrimitiveArray[PropertyPrimitive]):
    """A scalar or vector of same-kind style values attached to a context."""

    @property
    def kind(self) -> str:
        return self.primitives[0].kind


def fill(colors: object) -> Property:
    """``fill("red")`` or ``fill(["red", "blue", ...])``; ``None`` disables filling."""

    return Property([FillPrimitive(c) for (c,) in broadcast(colors)])


def stroke(colors: object) -> Property:
    return Property([StrokePrimitive(c) for (c,) in broadcast(colors)])


def linewidth(widths: object) -> Property:
    return Property([LineWidthPrimitive(w) for (w,) in broadcast(widths)])


def fill_opacity(values: object) -> Property:
    return Property([FillOpacityPrimitive(v) for (v,) in broadcast(values)])


def stroke_opacity(values: object) -> Property:
    return Property([StrokeOpacityPrimitive(v) for (v,) in broadcast(values)])


__all__ = [
    "PropertyPrimitive",
    "FillPrimitive",
    "StrokePrimitive",
    "LineWidthPrimitive",
    "FillOpacityPrimitive",
    "StrokeOpacityPrimitive",
    "Property",
    "fill",
    "stroke",
    "linewidth",
    "fill_opacity",
    "stroke_opacity",
]
