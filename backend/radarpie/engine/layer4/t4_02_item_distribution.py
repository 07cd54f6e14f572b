"""T4.02 — Item Distribution.

One item sits on the arc centroid; more are spread over a stratified grid
strictly inside the segment's item boundary. Deterministic: the i-th point
goes to the i-th item in snapshot order.
"""

from __future__ import annotations

import numpy as np

from radarpie.engine.context import LayoutContext
from radarpie.engine.registry import Layer, transform
from radarpie.errors import LayoutError
from radarpie.utils.geometry import distribute_points_within_boundary


@transform(
    id="T4.02",
    layer=Layer.ITEMS,
    dependencies=["T4.01"],
    description="Distribute item points inside segment boundaries",
)
def item_distribution(ctx: LayoutContext) -> None:
    for seg in ctx.iter_segments():
        n = len(seg.items)
        if n == 0:
            continue
        if n == 1:
            ctx.item_positions[seg.key] = np.array([ctx.segment_shapes[seg.key].centroid])
            continue

        try:
            points = distribute_points_within_boundary(ctx.item_boundaries[seg.key], n)
        except ValueError as e:
            raise LayoutError(f"Cannot place {n} items in segment {'/'.join(seg.key)}: {e}") from e
        ctx.item_positions[seg.key] = points
