"""Leaf-node arc geometry helpers. No engine imports.

Angles are radians, 0 at 12 o'clock, increasing clockwise. Points are SVG
screen coordinates around the radar centre: x = r·sin(a), y = -r·cos(a).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

import numpy as np
import shapely
from numpy.typing import NDArray
from shapely.geometry import Polygon
from svgpathtools import Arc, parse_path

_EPSILON = 1e-12
_TAU = 2 * math.pi
_HALF_PI = math.pi / 2

# Samples per arc edge when flattening a path into a polygon.
_ARC_SAMPLES = 24

# Grid refinement: shrink the cell by 15% per round until enough cells land
# inside the boundary. 0.85^60 ≈ 6e-5 of the starting cell.
_REFINE_FACTOR = 0.85
_MAX_REFINEMENTS = 60


@dataclass(frozen=True)
class ArcParams:
    """Annular sector: logical angular span plus the pie pad angle to shrink it by."""

    start_angle: float
    end_angle: float
    pad_angle: float
    inner_radius: float
    outer_radius: float

    @property
    def span(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def drawn_span(self) -> float:
        return self.span - self.pad_angle

    @property
    def mid_angle(self) -> float:
        return self.start_angle + self.span / 2

    def with_radii(self, inner_radius: float, outer_radius: float) -> ArcParams:
        return replace(self, inner_radius=inner_radius, outer_radius=outer_radius)

    def padded(self, pad_angle: float, pad_inner: float, pad_outer: float) -> ArcParams:
        """Grow the pad angle and move the inner/outer edges by the given offsets."""
        return replace(
            self,
            pad_angle=self.pad_angle + pad_angle,
            inner_radius=self.inner_radius + pad_inner,
            outer_radius=self.outer_radius + pad_outer,
        )


def polar_to_cartesian(radius: float, angle: float) -> tuple[float, float]:
    return (radius * math.sin(angle), -radius * math.cos(angle))


def arc_centroid(arc: ArcParams) -> tuple[float, float]:
    """Midpoint of the radial and angular extents (not the area centroid)."""
    r = (arc.inner_radius + arc.outer_radius) / 2
    return polar_to_cartesian(r, arc.mid_angle)


def _fmt(v: float) -> str:
    s = f"{v:.6f}".rstrip("0").rstrip(".")
    return "0" if s in ("-0", "") else s


class _PathBuilder:
    """Minimal canvas-style path recorder emitting SVG path data."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._x: float | None = None
        self._y: float | None = None

    def move_to(self, x: float, y: float) -> None:
        self._parts.append(f"M{_fmt(x)},{_fmt(y)}")
        self._x, self._y = x, y

    def line_to(self, x: float, y: float) -> None:
        self._parts.append(f"L{_fmt(x)},{_fmt(y)}")
        self._x, self._y = x, y

    def arc(self, r: float, a0: float, a1: float, ccw: bool) -> None:
        """Circular arc around the origin from screen angle a0 to a1."""
        x0, y0 = r * math.cos(a0), r * math.sin(a0)
        if self._x is None:
            self.move_to(x0, y0)
        elif abs(self._x - x0) > 1e-6 or abs(self._y - y0) > 1e-6:
            self.line_to(x0, y0)

        if not r:
            return

        sweep = 0 if ccw else 1
        da = a0 - a1 if ccw else a1 - a0
        if da < 0:
            da = da % _TAU + _TAU

        if da > _TAU - _EPSILON:
            # Full circle: two half arcs
            self._parts.append(f"A{_fmt(r)},{_fmt(r)},0,1,{sweep},{_fmt(-x0)},{_fmt(-y0)}")
            self._parts.append(f"A{_fmt(r)},{_fmt(r)},0,1,{sweep},{_fmt(x0)},{_fmt(y0)}")
            self._x, self._y = x0, y0
        elif da > _EPSILON:
            x1, y1 = r * math.cos(a1), r * math.sin(a1)
            large = 1 if da >= math.pi else 0
            self._parts.append(f"A{_fmt(r)},{_fmt(r)},0,{large},{sweep},{_fmt(x1)},{_fmt(y1)}")
            self._x, self._y = x1, y1

    def close(self) -> None:
        self._parts.append("Z")

    def __str__(self) -> str:
        return "".join(self._parts)


def _edge_inset(pad_radius: float, r: float, half_pad: float) -> float | None:
    """Angular inset that keeps a constant linear gap at radius r, or None if it cannot."""
    if r <= _EPSILON:
        return None
    ratio = pad_radius / r * math.sin(half_pad)
    if ratio > 1:
        return None
    return math.asin(ratio)


def arc_path(arc: ArcParams) -> str:
    """SVG path data for an annular sector with pie-padding semantics.

    The pad is a constant linear gap along both radial edges, measured at the
    pad radius sqrt(inner² + outer²). An edge whose inset would consume its
    whole span collapses to the mid angle.
    """
    r0, r1 = arc.inner_radius, arc.outer_radius
    if r1 < r0:
        r0, r1 = r1, r0
    a0 = arc.start_angle - _HALF_PI
    a1 = arc.end_angle - _HALF_PI
    da = abs(a1 - a0)
    cw = a1 > a0
    path = _PathBuilder()

    if not r1 > _EPSILON:
        path.move_to(0, 0)
    elif da > _TAU - _EPSILON:
        path.move_to(r1 * math.cos(a0), r1 * math.sin(a0))
        path.arc(r1, a0, a1, not cw)
        if r0 > _EPSILON:
            path.move_to(r0 * math.cos(a1), r0 * math.sin(a1))
            path.arc(r0, a1, a0, cw)
    else:
        a00, a10, da0 = a0, a1, da
        a01, a11, da1 = a0, a1, da
        ap = arc.pad_angle / 2
        rp = math.sqrt(r0 * r0 + r1 * r1) if ap > _EPSILON else 0.0
        sign = 1 if cw else -1

        if rp > _EPSILON:
            p0 = _edge_inset(rp, r0, ap)
            p1 = _edge_inset(rp, r1, ap)
            if p0 is not None and da0 - 2 * p0 > _EPSILON:
                da0 -= 2 * p0
                a00 += sign * p0
                a10 -= sign * p0
            else:
                da0 = 0.0
                a00 = a10 = (a0 + a1) / 2
            if p1 is not None and da1 - 2 * p1 > _EPSILON:
                da1 -= 2 * p1
                a01 += sign * p1
                a11 -= sign * p1
            else:
                da1 = 0.0
                a01 = a11 = (a0 + a1) / 2

        path.move_to(r1 * math.cos(a01), r1 * math.sin(a01))
        if da1 > _EPSILON:
            path.arc(r1, a01, a11, not cw)

        if not (r0 > _EPSILON) or not (da0 > _EPSILON):
            path.line_to(r0 * math.cos(a10), r0 * math.sin(a10))
        else:
            path.arc(r0, a10, a00, cw)

    path.close()
    return str(path)


def flatten_path(d: str, arc_samples: int = _ARC_SAMPLES) -> NDArray[np.float64]:
    """Flatten SVG path data into an ordered Nx2 polygon (closing point not repeated).

    A path with several sub-paths (full annulus) is chained with each sub-path
    explicitly closed, giving a keyhole outline whose cut edges coincide.
    """
    path = parse_path(d)
    subpaths: list[list[tuple[float, float]]] = []
    prev_end: complex | None = None

    for seg in path:
        if prev_end is None or abs(seg.start - prev_end) > 1e-6:
            subpaths.append([])
        prev_end = seg.end
        if abs(seg.end - seg.start) < 1e-10:
            continue
        if isinstance(seg, Arc):
            ts = np.linspace(0, 1, arc_samples, endpoint=False)
        else:
            ts = np.array([0.0])
        for t in ts:
            pt = seg.point(t)
            subpaths[-1].append((pt.real, pt.imag))

    subpaths = [sp for sp in subpaths if sp]
    if not subpaths:
        return np.empty((0, 2))
    if len(subpaths) == 1:
        return np.array(subpaths[0], dtype=np.float64)

    points: list[tuple[float, float]] = []
    for sp in subpaths:
        points.extend(sp)
        points.append(sp[0])
    return np.array(points, dtype=np.float64)


def boundary_polygon(points: NDArray[np.float64]) -> Polygon:
    """Shapely polygon from an ordered outline; self-intersections repaired."""
    if len(points) < 3:
        return Polygon()
    poly = Polygon(points)
    if not poly.is_valid:
        poly = poly.buffer(0)
    return poly


def distribute_points_within_boundary(
    polygon_points: NDArray[np.float64],
    n: int,
) -> NDArray[np.float64]:
    """Spread n distinct points strictly inside a polygon, deterministically.

    Stratified grid: start from cells of area ≈ area/n centred on the bounding
    box, refine until at least n cell centres are strictly inside, then take
    one cell from each of n equal runs of the row-major ordering.
    """
    if n <= 0:
        return np.empty((0, 2))

    poly = boundary_polygon(polygon_points)
    if poly.is_empty or poly.area <= _EPSILON:
        raise ValueError("degenerate boundary polygon")
    shapely.prepare(poly)

    xmin, ymin, xmax, ymax = poly.bounds
    cx, cy = (xmin + xmax) / 2, (ymin + ymax) / 2
    spacing = math.sqrt(poly.area / n)

    for _ in range(_MAX_REFINEMENTS):
        nx = int(math.ceil((xmax - xmin) / (2 * spacing)))
        ny = int(math.ceil((ymax - ymin) / (2 * spacing)))
        xs = cx + np.arange(-nx, nx + 1) * spacing
        ys = cy + np.arange(-ny, ny + 1) * spacing
        gx, gy = np.meshgrid(xs, ys)
        gx, gy = gx.ravel(), gy.ravel()
        inside = shapely.contains_xy(poly, gx, gy)
        if int(np.sum(inside)) >= n:
            candidates = np.column_stack([gx[inside], gy[inside]])
            break
        spacing *= _REFINE_FACTOR
    else:
        raise ValueError(f"could not fit {n} points inside boundary of area {poly.area:.3g}")

    m = len(candidates)
    idx = ((2 * np.arange(n) + 1) * m) // (2 * n)
    return candidates[idx]
