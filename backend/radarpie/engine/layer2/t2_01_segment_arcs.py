"""T2.01 — Segment Arc Deriver.

A segment reuses its sub-slice's angles and its ring's radial band; no new
angle computation. Also records the SVG path of the arc and its centroid.
"""

from __future__ import annotations

from radarpie.engine.context import LayoutContext, SegmentShape
from radarpie.engine.registry import Layer, transform
from radarpie.utils.geometry import arc_centroid, arc_path


@transform(
    id="T2.01",
    layer=Layer.ARCS,
    dependencies=["T1.01", "T1.02"],
    description="Derive segment arcs from sub-slice angles and ring radii",
)
def segment_arcs(ctx: LayoutContext) -> None:
    for ss in ctx.iter_sub_slices():
        sub_arc = ctx.sub_slice_arcs[ss.key]
        for seg in ss.segments:
            ring = ctx.ring_geometry[seg.ring_id]
            arc = sub_arc.with_radii(ring.inner_radius, ring.outer_radius)
            ctx.segment_arcs[seg.key] = arc
            ctx.segment_shapes[seg.key] = SegmentShape(path=arc_path(arc), centroid=arc_centroid(arc))
