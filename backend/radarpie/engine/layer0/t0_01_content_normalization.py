"""T0.01 — Content Normalisation.

Build id lookup maps and a normalised tree from the snapshot:
- every segment's ring id and every item's group id must exist
- a slice without sub-slices gets one dummy sub-slice (geometry, no label)
- every sub-slice gets exactly one segment per ring, in ring order;
  missing ones are synthesised empty, repeated ones are merged
- missing item counts are derived from the items carried in segments
"""

from __future__ import annotations

import logging
from collections import Counter

from radarpie.engine.context import LayoutContext, RingNode, SegmentNode, SliceNode, SubSliceNode
from radarpie.engine.registry import Layer, transform
from radarpie.errors import LayoutError, MissingReferenceError
from radarpie.models.content import ItemInfo, SliceInfo, SubSliceInfo

logger = logging.getLogger(__name__)


@transform(
    id="T0.01",
    layer=Layer.CONTENT,
    description="Validate references, synthesise dummies and segments",
)
def content_normalization(ctx: LayoutContext) -> None:
    content = ctx.content

    ctx.groups = list(content.groups)
    group_ids = {g.id for g in content.groups}

    for ring in content.rings:
        if ring.id in ctx.ring_by_id:
            raise LayoutError(f"Duplicate ring id {ring.id!r}")
        ctx.ring_by_id[ring.id] = ring
    ring_level = {ring.id: level for level, ring in enumerate(content.rings)}

    slice_ids = {sl.id for sl in content.slices}
    ring_items: Counter[str] = Counter()

    for sl in content.slices:
        if sl.id in ctx.slice_by_id:
            raise LayoutError(f"Duplicate slice id {sl.id!r}")

        sub_infos = sl.sub_slices or (_dummy_sub_slice(sl),)
        seen: set[str] = set()
        nodes: list[SubSliceNode] = []

        for ss in sub_infos:
            if ss.id in seen:
                raise LayoutError(f"Duplicate sub-slice id {ss.id!r} in slice {sl.id!r}")
            seen.add(ss.id)
            referrer = f"sub-slice {sl.id}/{ss.id}"

            if ss.slice_id is not None and ss.slice_id != sl.id:
                if ss.slice_id not in slice_ids:
                    raise MissingReferenceError("slice", ss.slice_id, referrer)
                raise LayoutError(f"{referrer} declares slice {ss.slice_id!r} but is nested under {sl.id!r}")

            items_by_ring: dict[str, list[ItemInfo]] = {r.id: [] for r in content.rings}
            for seg in ss.segments:
                if seg.ring_id not in ring_level:
                    raise MissingReferenceError("ring", seg.ring_id, f"segment of {referrer}")
                for item in seg.items:
                    if group_ids and item.group_id not in group_ids:
                        raise MissingReferenceError("group", item.group_id, f"item {item.id or item.label!r} of {referrer}")
                items_by_ring[seg.ring_id].extend(seg.items)

            segments = tuple(
                SegmentNode(
                    slice_id=sl.id,
                    sub_slice_id=ss.id,
                    ring_id=ring_id,
                    ring_level=ring_level[ring_id],
                    items=tuple(items),
                )
                for ring_id, items in items_by_ring.items()
            )
            for seg in segments:
                ring_items[seg.ring_id] += len(seg.items)

            carried = sum(len(seg.items) for seg in segments)
            item_count = ss.item_count if ss.item_count is not None else carried
            nodes.append(
                SubSliceNode(
                    id=ss.id,
                    slice_id=sl.id,
                    label=ss.label,
                    item_count=item_count,
                    is_dummy=ss.is_dummy,
                    segments=segments,
                )
            )

        node = SliceNode(id=sl.id, label=sl.label, sub_slices=tuple(nodes))
        ctx.slices.append(node)
        ctx.slice_by_id[sl.id] = node

    ctx.rings = [
        RingNode(
            id=ring.id,
            label=ring.label,
            level=level,
            item_count=ring.item_count if ring.item_count is not None else ring_items[ring.id],
        )
        for level, ring in enumerate(content.rings)
    ]

    logger.debug(
        "Normalised content: %d rings, %d slices, %d sub-slices",
        len(ctx.rings),
        len(ctx.slices),
        sum(len(sl.sub_slices) for sl in ctx.slices),
    )


def _dummy_sub_slice(sl: SliceInfo) -> SubSliceInfo:
    return SubSliceInfo(id=sl.id, slice_id=sl.id, label=sl.label, is_dummy=True)
