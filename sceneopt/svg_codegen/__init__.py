"""Scene graph → SVG code generation helpers."""

from .generator import (
    generate_svg_code,
    generate_svg_document,
)
from .utils import format_float

__all__ = [
    "generate_svg_code",
    "generate_svg_document",
    "format_float",
]
