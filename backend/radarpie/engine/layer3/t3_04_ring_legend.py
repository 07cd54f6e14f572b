"""T3.04 — Ring Legend Layout.

One row per ring, innermost first, with a swatch at the ring's opacity.
Anchored 50px right of the item legend's default x and at y = 0 unless the
ring legend config says otherwise.
"""

from __future__ import annotations

from radarpie.engine.context import LayoutContext, RingLegendEntryData
from radarpie.engine.layer3.t3_03_item_legend import legend_x
from radarpie.engine.registry import Layer, transform

_RING_LEGEND_OFFSET_X = 50.0


@transform(
    id="T3.04",
    layer=Layer.LABELS,
    dependencies=["T1.01"],
    description="Lay out the ring legend",
)
def ring_legend(ctx: LayoutContext) -> None:
    cfg = ctx.config.ring_legend
    x = cfg.x if cfg.x is not None else legend_x(ctx.config.legend.container_width) + _RING_LEGEND_OFFSET_X
    y = cfg.y if cfg.y is not None else 0.0
    ctx.ring_legend_position = (x, y)

    spacing = cfg.item_spacing
    for i, ring in enumerate(ctx.rings):
        row_y = i * spacing + spacing / 2
        ctx.ring_legend_entries.append(
            RingLegendEntryData(
                ring_id=ring.id,
                label=ring.label or ring.id,
                opacity=ctx.ring_geometry[ring.id].opacity,
                marker=(0.0, row_y),
                text=(spacing, row_y),
            )
        )
