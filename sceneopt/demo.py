from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from .context import Context, context
from .forms import circle
from .properties import fill, linewidth, stroke

PALETTE = ("#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd", "#8c564b", "#e377c2", "#7f7f7f")


def scatter_scene(
    count: int = 1000,
    *,
    colors: int = 3,
    radii: Sequence[float] = (0.8,),
    width: float = 200.0,
    height: float = 150.0,
    seed: Optional[int] = 123,
) -> Context:
    """Build a scatter plot: one long circle vector colored by a few categories."""

    if count < 1:
        raise ValueError("scatter scene needs at least one point")
    if not 1 <= colors <= len(PALETTE):
        raise ValueError(f"colors must be between 1 and {len(PALETTE)}")

    rng = np.random.default_rng(seed)
    xs = rng.uniform(0.0, width, count)
    ys = rng.uniform(0.0, height, count)
    categories = rng.integers(0, colors, count)
    rs = np.asarray(radii, dtype=float)[categories % len(radii)]

    points = context(
        circle(xs, ys, rs),
        fill([PALETTE[c] for c in categories]),
        tag="points",
    )
    return context(stroke(None), linewidth(0.1), points, tag="scatter")
