"""T3.01 — Sub-slice Label Positions.

Anchor point at outer_radius + sub_slice_label_distance on the mid angle.
Dummy sub-slices get no label. The final pixel offset is left to the
renderer's post-render decollision.
"""

from __future__ import annotations

from radarpie.engine.context import LabelData, LayoutContext
from radarpie.engine.registry import Layer, transform
from radarpie.utils.anchors import classify_anchor
from radarpie.utils.geometry import polar_to_cartesian


@transform(
    id="T3.01",
    layer=Layer.LABELS,
    dependencies=["T1.02"],
    description="Place sub-slice labels outside the outer ring",
)
def sub_slice_labels(ctx: LayoutContext) -> None:
    cfg = ctx.config
    for ss in ctx.iter_sub_slices():
        if ss.is_dummy:
            continue
        arc = ctx.sub_slice_arcs[ss.key]
        x, y = polar_to_cartesian(arc.outer_radius + cfg.sub_slice_label_distance, arc.mid_angle)
        ctx.sub_slice_labels[ss.key] = LabelData(
            x=x,
            y=y,
            b_box_padding=cfg.sub_slice_label_padding,
            placement=classify_anchor(arc.start_angle, arc.end_angle),
        )
