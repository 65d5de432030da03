"""Form batching: one template primitive drawn at many offsets.

A form batch is a vector form of ``n`` primitives rewritten as one primitive
repositioned ``n`` times.  Some backends draw that far more cheaply: SVG can
emit a single ``<defs>`` entry referenced by ``<use>`` tags, and raster
backends can render the template once and blit it into place.

Batching happens at draw time only.  A :class:`FormBatch` is never a child
of a context.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Type

import numpy as np

from .config import resolve_config, BatchingConfig
from .forms import CirclePrimitive, FormPrimitive
from .logging_utils import apply_debug_logging
from .utils import Point2D

logger = logging.getLogger(__name__)

Batcher = Callable[[Sequence[FormPrimitive]], Optional["FormBatch"]]

_BATCHERS: Dict[Type[FormPrimitive], Batcher] = {}


@dataclass(frozen=True)
class FormBatch:
    primitive: FormPrimitive
    offsets: Tuple[Point2D, ...]

    def __len__(self) -> int:
        return len(self.offsets)


def register_batcher(kind: Type[FormPrimitive]) -> Callable[[Batcher], Batcher]:
    """Register the batch matcher used for arrays of ``kind`` primitives."""

    def decorator(func: Batcher) -> Batcher:
        _BATCHERS[kind] = func
        return func

    return decorator


def try_batch(primitives: Sequence[FormPrimitive]) -> Optional[FormBatch]:
    """Return a batch equivalent to ``primitives``, or ``None`` if they do not reduce.

    A single primitive always batches trivially into itself at the origin.
    Arrays mixing kinds, and kinds without a registered matcher, never batch.
    """

    prims = list(primitives)
    if not prims:
        return None
    if len(prims) == 1:
        return FormBatch(prims[0], ((0.0, 0.0),))

    kind = type(prims[0])
    if any(type(prim) is not kind for prim in prims[1:]):
        return None
    batcher = _BATCHERS.get(kind)
    if batcher is None:
        return None
    return batcher(prims)


@register_batcher(CirclePrimitive)
def _batch_circles(circles: Sequence[CirclePrimitive]) -> Optional[FormBatch]:
    # circles can be batched if they all have the same radius.
    r = circles[0].radius
    for circ in circles[1:]:
        if circ.radius != r:
            return None

    return FormBatch(CirclePrimitive((0.0, 0.0), r), tuple(circ.center for circ in circles))


# TODO: rectangle and polygon matchers (same size / same shape up to translation).


def filter_redundant_offsets(
    offsets: Sequence[Point2D],
    threshold: Optional[float] = None,
    *,
    config: Optional[BatchingConfig] = None,
) -> List[Point2D]:
    """Return ``offsets`` sorted lexicographically with near duplicates removed.

    A point is dropped when its L1 distance to the last *retained* point is at
    most ``threshold`` (mm).  Comparing against the last retained point rather
    than the previous one bounds the drift along a chain of close points.
    """

    if len(offsets) == 0:
        return []
    if threshold is None:
        threshold = resolve_config(config).offset_redundancy_threshold

    pts = np.asarray(offsets, dtype=float).reshape(-1, 2)
    pts = pts[np.lexsort((pts[:, 1], pts[:, 0]))]

    kept: List[Point2D] = [(float(pts[0, 0]), float(pts[0, 1]))]
    last_x, last_y = kept[0]
    for x, y in pts[1:].tolist():
        # l1 distance for speed
        if abs(x - last_x) + abs(y - last_y) > threshold:
            kept.append((x, y))
            last_x, last_y = x, y

    logger.debug("Filtered offsets from %d to %d", len(pts), len(kept))
    return kept


apply_debug_logging(globals(), logger=logger, skip={"register_batcher"})
