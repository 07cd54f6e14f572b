"""Label anchor classification by angular position. No engine imports.

Angles are radians, 0 at 12 o'clock, increasing clockwise.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal

from radarpie.errors import InvalidAngleError

HAnchor = Literal["middle", "start", "end"]
VAnchor = Literal["baseline", "middle", "hanging"]

# Labels within 10° of the vertical axis are centred horizontally.
H_CUT_OFF_DEGREE = 10.0
# Labels within 45° of the vertical axis sit above (top) or below (bottom) the anchor.
V_CUT_OFF_DEGREE = 45.0


@dataclass(frozen=True)
class TextPlacement:
    h_anchor: HAnchor
    v_anchor: VAnchor


def _bands(cut_deg: float) -> tuple[float, float, float, float]:
    """(top-right, bottom-right, bottom-left, top-left) band edges in radians."""
    return (
        math.radians(cut_deg),
        math.radians(180 - cut_deg),
        math.radians(180 + cut_deg),
        math.radians(360 - cut_deg),
    )


_H_BANDS = _bands(H_CUT_OFF_DEGREE)
_V_BANDS = _bands(V_CUT_OFF_DEGREE)


def _horizontal(rads: float) -> HAnchor:
    top_right, bottom_right, bottom_left, top_left = _H_BANDS
    if rads < top_right or rads > top_left:
        return "middle"
    if bottom_right < rads < bottom_left:
        return "middle"
    if rads <= bottom_right:
        return "start"
    return "end"


def _vertical(rads: float) -> VAnchor:
    top_right, bottom_right, bottom_left, top_left = _V_BANDS
    if rads < top_right or rads > top_left:
        return "baseline"
    if bottom_right < rads < bottom_left:
        return "hanging"
    return "middle"


def classify_anchor(start_or_mid: float, end: float | None = None) -> TextPlacement:
    """Text anchors for a label placed outward at the given angle.

    With ``end`` the mid-angle of ``[start_or_mid, end]`` is classified.
    Callers must normalise to ``[0, 2*pi]`` first.
    """
    rads = start_or_mid if end is None else start_or_mid + (end - start_or_mid) / 2
    if math.isnan(rads) or rads < 0 or rads > 2 * math.pi:
        raise InvalidAngleError(f"Angle {rads!r} rad is outside [0, 2*pi]")

    return TextPlacement(h_anchor=_horizontal(rads), v_anchor=_vertical(rads))
