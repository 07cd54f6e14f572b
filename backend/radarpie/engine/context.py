"""LayoutContext — the state flowing through all layout transforms.

The snapshot is read-only. T0.01 turns it into a normalised tree of frozen
nodes plus id lookup maps; every later transform writes frozen records into
its own dict, keyed by entity id, and never touches earlier results.

Keys: rings and slices by id, sub-slices by (slice_id, sub_slice_id),
segments by (slice_id, sub_slice_id, ring_id).
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from radarpie.engine.config import RadarPieConfig
from radarpie.models.content import CatInfo, ItemInfo, RadarContent, RingInfo
from radarpie.utils.anchors import TextPlacement
from radarpie.utils.geometry import ArcParams

SubSliceKey = tuple[str, str]
SegmentKey = tuple[str, str, str]


# --- Normalised content (T0.01) ---


@dataclass(frozen=True)
class SegmentNode:
    slice_id: str
    sub_slice_id: str
    ring_id: str
    ring_level: int
    items: tuple[ItemInfo, ...] = ()

    @property
    def key(self) -> SegmentKey:
        return (self.slice_id, self.sub_slice_id, self.ring_id)


@dataclass(frozen=True)
class SubSliceNode:
    id: str
    slice_id: str
    label: str
    item_count: int
    is_dummy: bool
    # One per ring, in ring order
    segments: tuple[SegmentNode, ...] = ()

    @property
    def key(self) -> SubSliceKey:
        return (self.slice_id, self.id)


@dataclass(frozen=True)
class SliceNode:
    id: str
    label: str
    sub_slices: tuple[SubSliceNode, ...] = ()


@dataclass(frozen=True)
class RingNode:
    id: str
    label: str
    level: int
    item_count: int


# --- Computed records ---


@dataclass(frozen=True)
class RingGeometry:
    id: str
    level: int
    item_count: int
    inner_radius: float
    radius: float
    opacity: float

    @property
    def outer_radius(self) -> float:
        return self.inner_radius + self.radius


@dataclass(frozen=True)
class LabelData:
    x: float
    y: float
    b_box_padding: float
    placement: TextPlacement


@dataclass(frozen=True)
class SliceLabelData(LabelData):
    mid_angle: float = 0.0
    # (x1, y1, x2, y2)
    divider_line: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class SegmentShape:
    path: str
    centroid: tuple[float, float]


@dataclass(frozen=True)
class LegendEntryData:
    group_id: str
    label: str
    marker: tuple[float, float]
    text: tuple[float, float]


@dataclass(frozen=True)
class RingLegendEntryData:
    ring_id: str
    label: str
    opacity: float
    marker: tuple[float, float]
    text: tuple[float, float]


@dataclass
class LayoutContext:
    """Shared state for one layout build."""

    content: RadarContent
    config: RadarPieConfig = field(default_factory=RadarPieConfig)

    # --- Normalised content + lookup maps (Layer 0) ---
    rings: list[RingNode] = field(default_factory=list)
    slices: list[SliceNode] = field(default_factory=list)
    groups: list[CatInfo] = field(default_factory=list)
    ring_by_id: dict[str, RingInfo] = field(default_factory=dict)
    slice_by_id: dict[str, SliceNode] = field(default_factory=dict)

    # --- Scaling (Layer 1) ---
    ring_geometry: dict[str, RingGeometry] = field(default_factory=dict)
    sub_slice_arcs: dict[SubSliceKey, ArcParams] = field(default_factory=dict)

    # --- Segment arcs (Layer 2) ---
    segment_arcs: dict[SegmentKey, ArcParams] = field(default_factory=dict)
    segment_shapes: dict[SegmentKey, SegmentShape] = field(default_factory=dict)

    # --- Labels + legend (Layer 3) ---
    sub_slice_labels: dict[SubSliceKey, LabelData] = field(default_factory=dict)
    slice_labels: dict[str, SliceLabelData] = field(default_factory=dict)
    legend_position: tuple[float, float] = (0.0, 0.0)
    legend_entries: list[LegendEntryData] = field(default_factory=list)
    ring_legend_position: tuple[float, float] = (0.0, 0.0)
    ring_legend_entries: list[RingLegendEntryData] = field(default_factory=list)

    # --- Items (Layer 4) ---
    item_boundaries: dict[SegmentKey, NDArray[np.float64]] = field(default_factory=dict)
    item_positions: dict[SegmentKey, NDArray[np.float64]] = field(default_factory=dict)

    # --- Pipeline metadata ---
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ring_count(self) -> int:
        return len(self.rings)

    def iter_sub_slices(self):
        """All sub-slices in content order (slice order, then sub-slice order)."""
        for sl in self.slices:
            yield from sl.sub_slices

    def iter_segments(self):
        for ss in self.iter_sub_slices():
            yield from ss.segments
