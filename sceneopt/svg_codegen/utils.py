from __future__ import annotations

import math
from typing import Dict, Mapping

from ..properties import (
    FillOpacityPrimitive,
    FillPrimitive,
    LineWidthPrimitive,
    PropertyPrimitive,
    StrokeOpacityPrimitive,
    StrokePrimitive,
)

_XML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
}


def format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for SVG output")
    formatted = f"{value:.4f}"
    formatted = formatted.rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted


def escape_attr(value: str) -> str:
    return "".join(_XML_ESCAPES.get(ch, ch) for ch in value)


def style_attributes(style: Mapping[str, PropertyPrimitive]) -> Dict[str, str]:
    """Translate a resolved style into SVG presentation attributes."""

    attrs: Dict[str, str] = {}
    for prim in style.values():
        if isinstance(prim, FillPrimitive):
            attrs["fill"] = prim.color or "none"
        elif isinstance(prim, StrokePrimitive):
            attrs["stroke"] = prim.color or "none"
        elif isinstance(prim, LineWidthPrimitive):
            attrs["stroke-width"] = format_float(prim.value)
        elif isinstance(prim, FillOpacityPrimitive):
            attrs["fill-opacity"] = format_float(prim.value)
        elif isinstance(prim, StrokeOpacityPrimitive):
            attrs["stroke-opacity"] = format_float(prim.value)
    return attrs


def render_attributes(attrs: Mapping[str, str]) -> str:
    return "".join(f' {key}="{escape_attr(value)}"' for key, value in sorted(attrs.items()))
