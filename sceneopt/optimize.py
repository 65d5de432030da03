"""Tree splitting that turns long, few-valued vector children into batchable groups.

The pattern targeted here is a long vector form accompanied by vector
properties with a small number of distinct values, e.g. ten thousand points
colored by one of three categories.  With ``k`` distinct property tuples the
context is split into ``k`` sub-contexts, each holding a shorter vector form
and only scalar properties, which the batch matcher can then reduce.
"""

from __future__ import annotations

import logging
from typing import Dict, Hashable, List, Optional, Tuple

from .config import BatchingConfig, resolve_config
from .context import Context
from .forms import Form
from .logging_utils import apply_debug_logging
from .properties import Property

logger = logging.getLogger(__name__)


def count_unique_primitives(prop: Property, max_count: Optional[int] = None) -> int:
    """Count distinct values in ``prop``, stopping once ``max_count`` is exceeded.

    The result is exact when it is ``<= max_count``; otherwise it is
    ``max_count + 1``.  ``max_count=None`` always counts exactly.
    """

    if not prop.is_vector:
        return 1
    unique = set()
    for prim in prop:
        unique.add(prim)
        if max_count is not None and len(unique) > max_count:
            break
    return len(unique)


def excise_vector_children(ctx: Context) -> Tuple[List[Form], List[Property]]:
    """Remove and return the vector forms and vector properties of ``ctx``.

    Scalar children stay in place; relative order is kept on both sides.
    """

    kept_forms: List[Form] = []
    forms: List[Form] = []
    for form in ctx.form_children:
        (forms if form.is_vector else kept_forms).append(form)

    kept_properties: List[Property] = []
    properties: List[Property] = []
    for prop in ctx.property_children:
        (properties if prop.is_vector else kept_properties).append(prop)

    ctx.form_children = kept_forms
    ctx.property_children = kept_properties
    return forms, properties


def _group_key(properties: List[Property], i: int, by_hash: bool) -> Hashable:
    if not by_hash:
        return tuple(prop[i] for prop in properties)
    h = 0
    for prop in properties:
        h = hash((hash(prop[i]), h))
    return h


def _split_profitable(ctx: Context, threshold: int, exact: bool) -> bool:
    # condition 1: one or more long vector forms
    max_form_length = max((len(form) for form in ctx.form_children if form.is_vector), default=0)
    if max_form_length < threshold:
        return False

    # condition 2: one or more vector properties with few distinct values
    max_count = None if exact else max_form_length // threshold + 1
    max_unique_primitives = 0
    for prop in ctx.property_children:
        if prop.is_vector:
            max_unique_primitives = max(max_unique_primitives, count_unique_primitives(prop, max_count))

    # not many forms per distinct property value
    if max_unique_primitives == 0 or max_form_length // max_unique_primitives + 1 < threshold:
        return False

    logger.debug(
        "Splitting context %r: longest form %d, at most %d distinct property values",
        ctx.tag,
        max_form_length,
        max_unique_primitives,
    )
    return True


def optimize_batching(ctx: Context, config: Optional[BatchingConfig] = None) -> Context:
    """Return ``ctx`` or an equivalent copy whose vector children are regrouped.

    ``ctx`` itself is returned, uncopied, whenever splitting is not worth it.
    Otherwise a shallow copy keeps the scalar children and gains one child
    context per distinct tuple of vector property values, in order of first
    appearance, placed ahead of the existing child contexts.  The argument is
    never modified.
    """

    cfg = resolve_config(config)
    if not _split_profitable(ctx, cfg.batch_length_threshold, cfg.exact_unique_count):
        return ctx

    # draw must not modify the tree it was given
    ctx = ctx.copy()

    # step 1: remove vector forms and vector properties
    forms, properties = excise_vector_children(ctx)

    # step 2: group element indices on the tuple of property values
    n = len(forms[0])
    groups: Dict[Hashable, List[int]] = {}
    for i in range(n):
        groups.setdefault(_group_key(properties, i, cfg.group_by_hash), []).append(i)

    # step 3: put each group in its own context under the copy, ahead of the
    # existing children so they keep painting over the split elements
    subctxs = [
        Context(
            form_children=[form.select(indices) for form in forms],
            property_children=[Property([prop[indices[0]]], tag=prop.tag) for prop in properties],
        )
        for indices in groups.values()
    ]
    ctx.container_children[:0] = subctxs

    logger.debug("Split %d elements into %d groups", n, len(groups))
    return ctx


apply_debug_logging(globals(), logger=logger)
