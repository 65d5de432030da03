"""SVG renderer over the display list.

Batches are emitted as a single template under ``<defs>`` and one ``<use>``
element per offset, grouped under a ``<g>`` carrying the batch style.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .utils import format_float, render_attributes, style_attributes
from ..config import BatchingConfig
from ..context import Context
from ..forms import CirclePrimitive, FormPrimitive, PolygonPrimitive, RectanglePrimitive
from ..render import BatchDrawOp, DrawOp, build_display_list

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"


def _shape_element(prim: FormPrimitive, attrs: Dict[str, str]) -> str:
    if isinstance(prim, CirclePrimitive):
        attrs = dict(attrs)
        attrs.update(
            cx=format_float(prim.center[0]),
            cy=format_float(prim.center[1]),
            r=format_float(prim.radius),
        )
        return f"<circle{render_attributes(attrs)}/>"
    if isinstance(prim, RectanglePrimitive):
        attrs = dict(attrs)
        attrs.update(
            x=format_float(prim.corner[0]),
            y=format_float(prim.corner[1]),
            width=format_float(prim.width),
            height=format_float(prim.height),
        )
        return f"<rect{render_attributes(attrs)}/>"
    if isinstance(prim, PolygonPrimitive):
        attrs = dict(attrs)
        attrs["points"] = " ".join(f"{format_float(x)},{format_float(y)}" for x, y in prim.points)
        return f"<polygon{render_attributes(attrs)}/>"
    raise ValueError(f"unsupported primitive {type(prim).__name__}")


def generate_svg_code(ops: List[DrawOp], *, indent: str = "  ") -> str:
    """Return the body (``<defs>`` plus drawing elements) for ``ops``."""

    defs: List[str] = []
    body: List[str] = []
    for op in ops:
        if isinstance(op, BatchDrawOp):
            batch_id = f"batch{len(defs)}"
            template = _shape_element(op.batch.primitive, {"id": batch_id})
            defs.append(f"{indent}{indent}{template}")
            body.append(f"{indent}<g{render_attributes(style_attributes(op.style))}>")
            for x, y in op.batch.offsets:
                use_attrs = {"xlink:href": f"#{batch_id}", "x": format_float(x), "y": format_float(y)}
                body.append(f"{indent}{indent}<use{render_attributes(use_attrs)}/>")
            body.append(f"{indent}</g>")
        else:
            body.append(f"{indent}{_shape_element(op.primitive, style_attributes(op.style))}")

    lines: List[str] = []
    if defs:
        lines.append(f"{indent}<defs>")
        lines.extend(defs)
        lines.append(f"{indent}</defs>")
    lines.extend(body)
    return "\n".join(lines)


def generate_svg_document(
    ctx: Context,
    width: float,
    height: float,
    *,
    optimize: bool = True,
    batch: bool = True,
    config: Optional[BatchingConfig] = None,
) -> str:
    """Render ``ctx`` to a standalone SVG document sized ``width`` x ``height`` mm."""

    ops = build_display_list(ctx, optimize=optimize, batch=batch, config=config)
    logger.info("Rendering %d draw operations to SVG", len(ops))
    w = format_float(width)
    h = format_float(height)
    header = (
        f'<svg xmlns="{SVG_NS}" xmlns:xlink="{XLINK_NS}" version="1.1"'
        f' width="{w}mm" height="{h}mm" viewBox="0 0 {w} {h}">'
    )
    code = generate_svg_code(ops)
    parts = [header]
    if code:
        parts.append(code)
    parts.append("</svg>")
    return "\n".join(parts) + "\n"
