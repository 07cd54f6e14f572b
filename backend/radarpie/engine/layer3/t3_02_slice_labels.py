"""T3.02 — Slice Labels and Divider Lines.

Slice label sits at first_sub_slice.outer_radius + slice_label_distance on
the mid angle between the first sub-slice's start and the last one's end.
The divider is a radial line at the slice's start angle, from the inner
radius out to outer_radius + slice_divider_out_flow_length.
"""

from __future__ import annotations

from radarpie.engine.context import LayoutContext, SliceLabelData
from radarpie.engine.registry import Layer, transform
from radarpie.utils.anchors import classify_anchor
from radarpie.utils.geometry import polar_to_cartesian


@transform(
    id="T3.02",
    layer=Layer.LABELS,
    dependencies=["T1.02"],
    description="Place slice labels and divider lines",
)
def slice_labels(ctx: LayoutContext) -> None:
    cfg = ctx.config
    for sl in ctx.slices:
        first = ctx.sub_slice_arcs[sl.sub_slices[0].key]
        last = ctx.sub_slice_arcs[sl.sub_slices[-1].key]
        mid_angle = first.start_angle + (last.end_angle - first.start_angle) / 2

        x, y = polar_to_cartesian(first.outer_radius + cfg.slice_label_distance, mid_angle)
        x1, y1 = polar_to_cartesian(first.inner_radius, first.start_angle)
        x2, y2 = polar_to_cartesian(first.outer_radius + cfg.slice_divider_out_flow_length, first.start_angle)

        ctx.slice_labels[sl.id] = SliceLabelData(
            x=x,
            y=y,
            b_box_padding=cfg.slice_label_padding,
            placement=classify_anchor(mid_angle),
            mid_angle=mid_angle,
            divider_line=(x1, y1, x2, y2),
        )
