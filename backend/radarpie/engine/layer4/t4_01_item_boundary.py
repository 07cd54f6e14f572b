"""T4.01 — Item Boundary Polygons.

Shrink each segment arc by the marker's bounding radius (inner edge out,
outer edge in) and by an extra pad angle, render it and flatten the outline
into an ordered polygon. Markers centred inside it stay clear of the arc
edges. A padded arc with no area falls back to the raw arc outline.
"""

from __future__ import annotations

import logging
import math

import numpy as np
from numpy.typing import NDArray

from radarpie.engine.context import LayoutContext
from radarpie.engine.registry import Layer, transform
from radarpie.utils.geometry import ArcParams, arc_path, boundary_polygon, flatten_path

logger = logging.getLogger(__name__)

# Below this area (px²) a polygon cannot hold a marker centre reliably.
_MIN_BOUNDARY_AREA = 1e-6


def item_boundary(arc: ArcParams, padding_angle: float, pad_inner: float, pad_outer: float) -> NDArray[np.float64]:
    """Outline of the arc padded by the given angle (rad) and radial offsets (px)."""
    padded = arc.padded(padding_angle, pad_inner, pad_outer)
    if padded.inner_radius >= padded.outer_radius:
        return np.empty((0, 2))
    return flatten_path(arc_path(padded))


@transform(
    id="T4.01",
    layer=Layer.ITEMS,
    dependencies=["T2.01"],
    description="Derive padded item boundary polygons per segment",
)
def item_boundaries(ctx: LayoutContext) -> None:
    marker = ctx.config.item_marker
    padding_angle = math.radians(marker.padding_angle)

    for seg in ctx.iter_segments():
        if len(seg.items) < 2 and not ctx.config.debug:
            continue
        arc = ctx.segment_arcs[seg.key]
        points = item_boundary(arc, padding_angle, marker.symbol_bound_radius, -marker.symbol_bound_radius)

        if boundary_polygon(points).area <= _MIN_BOUNDARY_AREA:
            logger.warning(
                "Segment %s/%s/%s too small for marker padding; using raw arc outline",
                *seg.key,
            )
            points = flatten_path(ctx.segment_shapes[seg.key].path)

        ctx.item_boundaries[seg.key] = points
