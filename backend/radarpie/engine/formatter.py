"""LayoutContext → RadarLayout model for the renderer."""

from __future__ import annotations

from radarpie.engine.context import LabelData, LayoutContext, SegmentNode, SliceLabelData, SubSliceNode
from radarpie.models.layout import (
    ArcParamsOut,
    DividerLine,
    ItemLayout,
    LabelDataOut,
    LegendEntry,
    LegendLayout,
    RadarLayout,
    RingLayout,
    RingLegendEntry,
    RingLegendLayout,
    SegmentLayout,
    SliceLabelDataOut,
    SliceLayout,
    SubSliceLayout,
    TextPlacementOut,
)
from radarpie.utils.geometry import ArcParams


def _arc_out(arc: ArcParams) -> ArcParamsOut:
    return ArcParamsOut(
        start_angle=arc.start_angle,
        end_angle=arc.end_angle,
        pad_angle=arc.pad_angle,
        inner_radius=arc.inner_radius,
        outer_radius=arc.outer_radius,
    )


def _placement_out(label: LabelData) -> TextPlacementOut:
    return TextPlacementOut(h_anchor=label.placement.h_anchor, v_anchor=label.placement.v_anchor)


def _label_out(label: LabelData | None) -> LabelDataOut | None:
    if label is None:
        return None
    return LabelDataOut(
        x=label.x,
        y=label.y,
        b_box_padding=label.b_box_padding,
        label_placement=_placement_out(label),
    )


def _slice_label_out(label: SliceLabelData) -> SliceLabelDataOut:
    x1, y1, x2, y2 = label.divider_line
    return SliceLabelDataOut(
        x=label.x,
        y=label.y,
        b_box_padding=label.b_box_padding,
        label_placement=_placement_out(label),
        mid_angle=label.mid_angle,
        divider_line=DividerLine(x1=x1, y1=y1, x2=x2, y2=y2),
    )


def _segment_out(ctx: LayoutContext, seg: SegmentNode) -> SegmentLayout:
    shape = ctx.segment_shapes[seg.key]
    positions = ctx.item_positions.get(seg.key)
    items = tuple(
        ItemLayout(id=item.id, label=item.label, group_id=item.group_id, x=float(p[0]), y=float(p[1]))
        for item, p in zip(seg.items, positions if positions is not None else [])
    )

    boundary = None
    if ctx.config.debug and seg.key in ctx.item_boundaries:
        boundary = tuple((float(x), float(y)) for x, y in ctx.item_boundaries[seg.key])

    return SegmentLayout(
        ring_id=seg.ring_id,
        ring_level=seg.ring_level,
        arc_params=_arc_out(ctx.segment_arcs[seg.key]),
        opacity=ctx.ring_geometry[seg.ring_id].opacity,
        path=shape.path,
        centroid=shape.centroid,
        items=items,
        boundary=boundary,
    )


def _sub_slice_out(ctx: LayoutContext, ss: SubSliceNode) -> SubSliceLayout:
    return SubSliceLayout(
        id=ss.id,
        slice_id=ss.slice_id,
        label=ss.label,
        is_dummy=ss.is_dummy,
        item_count=ss.item_count,
        arc_params=_arc_out(ctx.sub_slice_arcs[ss.key]),
        label_data=_label_out(ctx.sub_slice_labels.get(ss.key)),
        segments=tuple(_segment_out(ctx, seg) for seg in ss.segments),
    )


def context_to_layout(ctx: LayoutContext) -> RadarLayout:
    """Assemble the annotated content tree from the per-id layout records."""
    rings = tuple(
        RingLayout(
            id=ring.id,
            label=ring.label,
            level=ring.level,
            item_count=ring.item_count,
            inner_radius=ctx.ring_geometry[ring.id].inner_radius,
            radius=ctx.ring_geometry[ring.id].radius,
            opacity=ctx.ring_geometry[ring.id].opacity,
        )
        for ring in ctx.rings
    )

    slices = tuple(
        SliceLayout(
            id=sl.id,
            label=sl.label,
            label_data=_slice_label_out(ctx.slice_labels[sl.id]),
            sub_slices=tuple(_sub_slice_out(ctx, ss) for ss in sl.sub_slices),
        )
        for sl in ctx.slices
    )

    legend_cfg = ctx.config.legend
    legend = LegendLayout(
        x=ctx.legend_position[0],
        y=ctx.legend_position[1],
        b_box_padding=legend_cfg.b_box_padding,
        entries=tuple(
            LegendEntry(
                group_id=e.group_id,
                label=e.label,
                marker_x=e.marker[0],
                marker_y=e.marker[1],
                text_x=e.text[0],
                text_y=e.text[1],
            )
            for e in ctx.legend_entries
        ),
    )

    ring_legend_cfg = ctx.config.ring_legend
    ring_legend = RingLegendLayout(
        x=ctx.ring_legend_position[0],
        y=ctx.ring_legend_position[1],
        b_box_padding=ring_legend_cfg.b_box_padding,
        entries=tuple(
            RingLegendEntry(
                ring_id=e.ring_id,
                label=e.label,
                opacity=e.opacity,
                marker_x=e.marker[0],
                marker_y=e.marker[1],
                text_x=e.text[0],
                text_y=e.text[1],
            )
            for e in ctx.ring_legend_entries
        ),
    )

    return RadarLayout(
        rings=rings,
        slices=slices,
        legend=legend,
        ring_legend=ring_legend,
        config=ctx.config.to_dict(),
    )
