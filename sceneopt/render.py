"""Backend-neutral draw routine producing an ordered display list."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .batch import FormBatch, filter_redundant_offsets, try_batch
from .config import BatchingConfig, resolve_config
from .context import Context, Style, element_style, resolve_properties
from .forms import FormPrimitive
from .optimize import optimize_batching

logger = logging.getLogger(__name__)


@dataclass
class ShapeDrawOp:
    primitive: FormPrimitive
    style: Style = field(default_factory=dict)


@dataclass
class BatchDrawOp:
    batch: FormBatch
    style: Style = field(default_factory=dict)


DrawOp = Union[ShapeDrawOp, BatchDrawOp]


@dataclass
class _DrawState:
    optimize: bool
    batch: bool
    config: BatchingConfig
    ops: List[DrawOp] = field(default_factory=list)
    contexts_visited: int = 0
    contexts_split: int = 0


def _draw_context(ctx: Context, inherited: Style, state: _DrawState) -> None:
    state.contexts_visited += 1
    if state.optimize:
        optimized = optimize_batching(ctx, state.config)
        if optimized is not ctx:
            state.contexts_split += 1
        ctx = optimized

    style, vector_properties = resolve_properties(ctx, inherited)
    for form in ctx.form_children:
        # per-element styles rule out drawing a single template
        if state.batch and form.is_vector and not vector_properties:
            result = try_batch(form.primitives)
            if result is not None:
                if state.config.filter_offsets:
                    offsets = filter_redundant_offsets(result.offsets, config=state.config)
                    result = FormBatch(result.primitive, tuple(offsets))
                state.ops.append(BatchDrawOp(result, dict(style)))
                continue
        for i, prim in enumerate(form):
            state.ops.append(ShapeDrawOp(prim, element_style(style, vector_properties, i)))

    for child in ctx.container_children:
        _draw_context(child, style, state)


def build_display_list(
    ctx: Context,
    *,
    optimize: bool = True,
    batch: bool = True,
    config: Optional[BatchingConfig] = None,
) -> List[DrawOp]:
    """Walk ``ctx`` in paint order and return the draw operations it produces.

    With ``optimize`` each context is passed through :func:`optimize_batching`
    before its children are visited; with ``batch`` every vector form drawn
    under scalar styles only is offered to :func:`try_batch`.
    """

    state = _DrawState(optimize=optimize, batch=batch, config=resolve_config(config))
    _draw_context(ctx, {}, state)
    logger.debug(
        "Display list: %d ops from %d contexts (%d split)",
        len(state.ops),
        state.contexts_visited,
        state.contexts_split,
    )
    return state.ops


def count_drawn_primitives(ops: List[DrawOp]) -> int:
    return sum(len(op.batch) if isinstance(op, BatchDrawOp) else 1 for op in ops)


__all__ = [
    "ShapeDrawOp",
    "BatchDrawOp",
    "DrawOp",
    "build_display_list",
    "count_drawn_primitives",
]
