"""T1.02 — Sub-slice Angular Layout.

Pie partition of the full circle in content order (never sorted by size).
Shares come from item counts with a minimum angle; each arc's logical span
includes its pad angle, so arcs are contiguous and sum to 2π while the drawn
span is span - pad_angle.
"""

from __future__ import annotations

import math

from radarpie.engine.context import LayoutContext
from radarpie.engine.registry import Layer, transform
from radarpie.utils.geometry import ArcParams
from radarpie.utils.scaling import scale_proportional

_TAU = 2 * math.pi


def pie_angles(values: list[float], pad_angle: float) -> list[tuple[float, float, float]]:
    """(start, end, pad) per value in radians; pad is capped at 2π / n."""
    n = len(values)
    if n == 0:
        return []
    pad = min(_TAU / n, pad_angle)
    total = sum(v for v in values if v > 0)
    k = (_TAU - n * pad) / total if total else 0.0

    arcs: list[tuple[float, float, float]] = []
    a0 = 0.0
    for v in values:
        a1 = a0 + (v * k if v > 0 else 0.0) + pad
        arcs.append((a0, a1, pad))
        a0 = a1
    # Close the circle exactly
    start, _, pad = arcs[-1]
    arcs[-1] = (start, _TAU, pad)
    return arcs


@transform(
    id="T1.02",
    layer=Layer.SCALING,
    dependencies=["T0.01"],
    description="Partition 360° among sub-slices",
)
def sub_slice_angles(ctx: LayoutContext) -> None:
    cfg = ctx.config
    sub_slices = list(ctx.iter_sub_slices())
    if not sub_slices:
        return

    shares = scale_proportional(
        [ss.item_count for ss in sub_slices],
        360.0,
        cfg.min_sub_slice_angle,
    )
    arcs = pie_angles(shares, math.radians(cfg.sub_slice_pad_angle))

    for ss, (start, end, pad) in zip(sub_slices, arcs):
        ctx.sub_slice_arcs[ss.key] = ArcParams(
            start_angle=start,
            end_angle=end,
            pad_angle=pad,
            inner_radius=cfg.inner_radius,
            outer_radius=cfg.outer_radius,
        )
