"""Form primitives (the shapes a context draws) and their combinators.

Every primitive is an immutable record with structural equality, so two
circles with the same center and radius compare and hash equal no matter
where they were built.  Coordinates and lengths are absolute millimetres.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from .utils import Point2D, PrimitiveArray, as_length, as_point, broadcast, is_sequence


class FormPrimitive:
    """Marker base class for shape records."""

    __slots__ = ()


@dataclass(frozen=True)
class CirclePrimitive(FormPrimitive):
    center: Point2D
    radius: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", as_point(self.center))
        object.__setattr__(self, "radius", as_length(self.radius, "circle radius"))


@dataclass(frozen=True)
class RectanglePrimitive(FormPrimitive):
    corner: Point2D
    width: float
    height: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "corner", as_point(self.corner))
        object.__setattr__(self, "width", as_length(self.width, "rectangle width"))
        object.__setattr__(self, "height", as_length(self.height, "rectangle height"))


@dataclass(frozen=True)
class PolygonPrimitive(FormPrimitive):
    points: Tuple[Point2D, ...]

    def __post_init__(self) -> None:
        points = tuple(as_point(pt) for pt in self.points)
        if len(points) < 3:
            raise ValueError("polygon needs at least 3 vertices")
        object.__setattr__(self, "points", points)


@dataclass
class Form(PrimitiveArray[FormPrimitive]):
    """A scalar or vector of same-kind shapes attached to a context."""


def circle(x: object = 0.0, y: object = 0.0, r: object = 1.0) -> Form:
    """Build one circle, or a vector of circles when any argument is a sequence."""

    return Form([CirclePrimitive((cx, cy), cr) for cx, cy, cr in broadcast(x, y, r)])


def rectangle(x0: object = 0.0, y0: object = 0.0, width: object = 1.0, height: object = 1.0) -> Form:
    return Form(
        [RectanglePrimitive((rx, ry), rw, rh) for rx, ry, rw, rh in broadcast(x0, y0, width, height)]
    )


def polygon(points: Sequence[object]) -> Form:
    """Build a polygon from ``[(x, y), ...]`` or a vector from a list of such lists."""

    if not is_sequence(points) or len(points) == 0:
        raise ValueError("polygon requires a non-empty list of points")
    first = points[0]
    if is_sequence(first) and len(first) > 0 and is_sequence(first[0]):
        return Form([PolygonPrimitive(tuple(pts)) for pts in points])  # type: ignore[arg-type]
    return Form([PolygonPrimitive(tuple(points))])  # type: ignore[arg-type]


__all__ = [
    "FormPrimitive",
    "CirclePrimitive",
    "RectanglePrimitive",
    "PolygonPrimitive",
    "Form",
    "circle",
    "rectangle",
    "polygon",
]
