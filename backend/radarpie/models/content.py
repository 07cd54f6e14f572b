"""Content snapshot — the radar tree handed over by the data-loading layer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SnapshotModel(BaseModel):
    """Immutable, camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class CatInfo(SnapshotModel):
    id: str
    label: str = ""
    description: str = ""


class ItemInfo(SnapshotModel):
    id: str | None = None
    label: str = ""
    group_id: str


class SegmentInfo(SnapshotModel):
    ring_id: str
    items: tuple[ItemInfo, ...] = ()


class RingInfo(CatInfo):
    # None = count the items on this ring
    item_count: int | None = Field(default=None, ge=0)


class SubSliceInfo(CatInfo):
    # Optional explicit parent; must match the enclosing slice when given
    slice_id: str | None = None
    item_count: int | None = Field(default=None, ge=0)
    is_dummy: bool = False
    segments: tuple[SegmentInfo, ...] = ()


class SliceInfo(CatInfo):
    sub_slices: tuple[SubSliceInfo, ...] = ()


class RadarContent(SnapshotModel):
    """Groups (marker colours), rings (inner to outer) and slices (clockwise from 12 o'clock)."""

    groups: tuple[CatInfo, ...] = ()
    rings: tuple[RingInfo, ...] = ()
    slices: tuple[SliceInfo, ...] = ()
