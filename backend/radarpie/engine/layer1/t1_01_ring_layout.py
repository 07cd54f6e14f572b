"""T1.01 — Ring Layout.

Ring thickness from item counts, weighted by (ringCount - level)² · π so that
inner rings (short circumference) get more radius per item than outer ones
and item density looks even across the radar. Rings stack outward from
config.inner_radius; opacity fades linearly from max (level 0) to min.
"""

from __future__ import annotations

import logging
import math

from radarpie.engine.context import LayoutContext, RingGeometry
from radarpie.engine.registry import Layer, transform
from radarpie.utils.scaling import scale_proportional

logger = logging.getLogger(__name__)


def ring_weights(item_counts: list[int]) -> list[float]:
    n = len(item_counts)
    return [count * (n - level) ** 2 * math.pi for level, count in enumerate(item_counts)]


def ring_opacity(level: int, ring_count: int, min_opacity: float, max_opacity: float) -> float:
    if ring_count <= 1:
        return max_opacity
    return (max_opacity - min_opacity) * (ring_count - level - 1) / (ring_count - 1) + min_opacity


@transform(
    id="T1.01",
    layer=Layer.SCALING,
    dependencies=["T0.01"],
    description="Compute ring radius, inner radius and opacity",
)
def ring_layout(ctx: LayoutContext) -> None:
    cfg = ctx.config
    n = ctx.ring_count
    if n == 0:
        return

    available = cfg.outer_radius - cfg.inner_radius - cfg.ring_padding * (n - 1)
    if available < 0:
        logger.warning("Ring budget is negative (%.2f px); rings floored to %.2f", available, cfg.min_ring_radius)
        available = 0.0

    radii = scale_proportional(
        ring_weights([r.item_count for r in ctx.rings]),
        available,
        cfg.min_ring_radius,
    )

    inner = cfg.inner_radius
    for ring, radius in zip(ctx.rings, radii):
        ctx.ring_geometry[ring.id] = RingGeometry(
            id=ring.id,
            level=ring.level,
            item_count=ring.item_count,
            inner_radius=inner,
            radius=radius,
            opacity=ring_opacity(ring.level, n, cfg.ring_min_opacity, cfg.ring_max_opacity),
        )
        inner += radius + cfg.ring_padding
