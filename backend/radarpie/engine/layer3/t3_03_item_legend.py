"""T3.03 — Item Legend Layout.

One row per group: marker at (0, i·spacing + spacing/2), text one spacing
to the right. Coordinates are relative to the legend origin.
"""

from __future__ import annotations

from radarpie.engine.context import LayoutContext, LegendEntryData
from radarpie.engine.registry import Layer, transform

DEFAULT_LEGEND_Y = 30.0


def legend_x(container_width: float) -> float:
    return container_width / 8 * 5


@transform(
    id="T3.03",
    layer=Layer.LABELS,
    dependencies=["T0.01"],
    description="Lay out the group legend",
)
def item_legend(ctx: LayoutContext) -> None:
    legend = ctx.config.legend
    x = legend.x if legend.x is not None else legend_x(legend.container_width)
    y = legend.y if legend.y is not None else DEFAULT_LEGEND_Y
    ctx.legend_position = (x, y)

    spacing = legend.item_spacing
    for i, group in enumerate(ctx.groups):
        row_y = i * spacing + spacing / 2
        ctx.legend_entries.append(
            LegendEntryData(
                group_id=group.id,
                label=group.label or group.id,
                marker=(0.0, row_y),
                text=(spacing, row_y),
            )
        )
