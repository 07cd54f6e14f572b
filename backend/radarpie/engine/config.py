"""Layout configuration — geometry knobs for one radar build."""

from __future__ import annotations

import dataclasses
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic.alias_generators import to_camel

from radarpie.errors import ConfigurationError

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")

# Legend positions may be null (derived) and these offsets may go negative.
_NULLABLE = frozenset({"x", "y"})
_SIGNED = frozenset(
    {
        "x",
        "y",
        "slice_divider_out_flow_length",
        "slice_label_distance",
        "sub_slice_label_distance",
    }
)


@dataclass
class ItemMarkerConfig:
    """Marker geometry that determines how far items stay from segment edges."""

    # Visual bounding radius of one marker symbol (px)
    symbol_bound_radius: float = 6.0
    # Extra angular padding added on top of the sub-slice pad angle (degrees)
    padding_angle: float = 2.0


@dataclass
class LegendConfig:
    """Item legend position and spacing.

    A null x derives from the container width; a null y falls back to 30.
    """

    x: float | None = None
    y: float | None = 30.0
    item_spacing: float = 18.0
    b_box_padding: float = 10.0
    container_width: float = 900.0


@dataclass
class RingLegendConfig:
    """Ring legend, to the right of the item legend by default (x = width/8*5 + 50, y = 0)."""

    x: float | None = None
    y: float | None = 0.0
    item_spacing: float = 18.0
    b_box_padding: float = 10.0


@dataclass
class RadarPieConfig:
    """Controls radii, angles, label offsets and marker padding.

    Distances are px, angles are degrees.
    """

    outer_radius: float = 250.0
    inner_radius: float = 0.0

    # Sub-slice angles
    min_sub_slice_angle: float = 12.0
    sub_slice_pad_angle: float = 0.2

    # Slice dividers and labels
    slice_divider_out_flow_length: float = 0.0  # negative shortens the line
    slice_label_distance: float = 60.0
    sub_slice_label_distance: float = 10.0
    slice_label_padding: float = 4.0
    sub_slice_label_padding: float = 2.0

    # Rings
    min_ring_radius: float = 30.0
    ring_padding: float = 0.0
    ring_min_opacity: float = 0.2
    ring_max_opacity: float = 1.0

    item_marker: ItemMarkerConfig = field(default_factory=ItemMarkerConfig)
    legend: LegendConfig = field(default_factory=LegendConfig)
    ring_legend: RingLegendConfig = field(default_factory=RingLegendConfig)

    # Keep boundary polygons in the output for overlay rendering
    debug: bool = False

    @classmethod
    def from_overrides(cls, overrides: Mapping[str, Any] | None = None) -> RadarPieConfig:
        """Deep-merge a (possibly partial, camelCase or snake_case) mapping over the defaults."""
        return _merge(cls(), overrides or {}, "")

    def to_dict(self) -> dict[str, Any]:
        """camelCase nested dict, accepted back by ``from_overrides``."""
        return _camel_keys(dataclasses.asdict(self))


def _snake(key: str) -> str:
    return _CAMEL_RE.sub("_", key).lower()


def _camel_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {to_camel(k): _camel_keys(v) for k, v in value.items()}
    return value


def _merge(target: Any, overrides: Mapping[str, Any], prefix: str) -> Any:
    known = {f.name: f for f in dataclasses.fields(target)}
    changes: dict[str, Any] = {}

    for raw_key, value in overrides.items():
        key = _snake(raw_key)
        path = f"{prefix}{key}"
        if key not in known:
            raise ConfigurationError(f"Unknown layout configuration key: {path}")

        current = getattr(target, key)
        if dataclasses.is_dataclass(current):
            if isinstance(value, type(current)):
                changes[key] = value
            elif isinstance(value, Mapping):
                changes[key] = _merge(current, value, f"{path}.")
            else:
                raise ConfigurationError(f"{path} expects a mapping, got {type(value).__name__}")
        elif isinstance(current, bool):
            if not isinstance(value, bool):
                raise ConfigurationError(f"{path} expects a bool, got {value!r}")
            changes[key] = value
        elif value is None:
            if key not in _NULLABLE:
                raise ConfigurationError(f"{path} may not be null")
            changes[key] = None
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            if not math.isfinite(value):
                raise ConfigurationError(f"{path} must be finite, got {value!r}")
            if value < 0 and key not in _SIGNED:
                raise ConfigurationError(f"{path} must be non-negative, got {value!r}")
            changes[key] = float(value)
        else:
            raise ConfigurationError(f"{path} expects a number, got {value!r}")

    return dataclasses.replace(target, **changes)
