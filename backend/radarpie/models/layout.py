"""Layout output — the snapshot tree annotated with geometry for the renderer."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from radarpie.models.content import SnapshotModel


class ArcParamsOut(SnapshotModel):
    """Angles in radians (0 = 12 o'clock, clockwise), radii in px."""

    start_angle: float
    end_angle: float
    pad_angle: float
    inner_radius: float
    outer_radius: float


class TextPlacementOut(SnapshotModel):
    h_anchor: str
    v_anchor: str


class DividerLine(SnapshotModel):
    x1: float
    y1: float
    x2: float
    y2: float


class LabelDataOut(SnapshotModel):
    x: float
    y: float
    b_box_padding: float
    label_placement: TextPlacementOut


class SliceLabelDataOut(LabelDataOut):
    mid_angle: float
    divider_line: DividerLine


class RingLayout(SnapshotModel):
    id: str
    label: str = ""
    level: int
    item_count: int
    inner_radius: float
    radius: float
    opacity: float


class ItemLayout(SnapshotModel):
    id: str | None = None
    label: str = ""
    group_id: str
    x: float
    y: float


class SegmentLayout(SnapshotModel):
    ring_id: str
    ring_level: int
    arc_params: ArcParamsOut
    opacity: float
    path: str
    centroid: tuple[float, float]
    items: tuple[ItemLayout, ...] = ()
    # Padded item boundary; only filled in debug mode
    boundary: tuple[tuple[float, float], ...] | None = None


class SubSliceLayout(SnapshotModel):
    id: str
    slice_id: str
    label: str = ""
    is_dummy: bool = False
    item_count: int
    arc_params: ArcParamsOut
    label_data: LabelDataOut | None = None
    segments: tuple[SegmentLayout, ...] = ()


class SliceLayout(SnapshotModel):
    id: str
    label: str = ""
    label_data: SliceLabelDataOut
    sub_slices: tuple[SubSliceLayout, ...] = ()


class LegendEntry(SnapshotModel):
    group_id: str
    label: str = ""
    marker_x: float
    marker_y: float
    text_x: float
    text_y: float


class LegendLayout(SnapshotModel):
    x: float
    y: float
    b_box_padding: float
    entries: tuple[LegendEntry, ...] = ()


class RingLegendEntry(SnapshotModel):
    ring_id: str
    label: str = ""
    opacity: float
    marker_x: float
    marker_y: float
    text_x: float
    text_y: float


class RingLegendLayout(SnapshotModel):
    x: float
    y: float
    b_box_padding: float
    entries: tuple[RingLegendEntry, ...] = ()


class RadarLayout(SnapshotModel):
    """Complete layout for one radar build."""

    rings: tuple[RingLayout, ...] = ()
    slices: tuple[SliceLayout, ...] = ()
    legend: LegendLayout
    ring_legend: RingLegendLayout
    # Resolved layout configuration, camelCase keys
    config: dict[str, Any] = Field(default_factory=dict)
