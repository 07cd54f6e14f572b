"""Tests for Layer 4 — item boundaries and item distribution."""

from __future__ import annotations

import math

import numpy as np
import pytest
from shapely.geometry import Point

from radarpie.engine.layer4.t4_01_item_boundary import item_boundary
from radarpie.engine.pipeline import create_context, create_pipeline
from radarpie.engine.registry import Layer, get_registry
from radarpie.utils.geometry import ArcParams, boundary_polygon
from tests.conftest import RING_SCENARIO_CONTENT, SIMPLE_CONTENT


def _run(content, config=None):
    return create_pipeline().run(create_context(content, config))


def test_layer4_registers_two_transforms(simple_ctx):
    assert [s.id for s in get_registry().get_layer(Layer.ITEMS)] == ["T4.01", "T4.02"]


def test_item_boundary_is_inset_from_arc():
    arc = ArcParams(start_angle=0.5, end_angle=1.5, pad_angle=0.0, inner_radius=50.0, outer_radius=120.0)
    points = item_boundary(arc, math.radians(2), 6.0, -6.0)
    radii = np.hypot(points[:, 0], points[:, 1])
    assert radii.min() >= 56.0 - 1e-6
    assert radii.max() <= 114.0 + 1e-6
    angles = np.arctan2(points[:, 0], -points[:, 1])
    assert angles.min() > 0.5
    assert angles.max() < 1.5


def test_item_boundary_collapsed_band_is_empty():
    arc = ArcParams(start_angle=0.0, end_angle=1.0, pad_angle=0.0, inner_radius=50.0, outer_radius=60.0)
    assert item_boundary(arc, 0.0, 6.0, -6.0).shape == (0, 2)


def test_single_item_on_centroid(simple_ctx):
    key = ("tools", "build", "trial")
    positions = simple_ctx.item_positions[key]
    assert positions.shape == (1, 2)
    assert tuple(positions[0]) == pytest.approx(simple_ctx.segment_shapes[key].centroid)


def test_empty_segments_get_no_points(simple_ctx):
    assert ("tools", "ops", "adopt") not in simple_ctx.item_positions
    assert ("platforms", "platforms", "adopt") not in simple_ctx.item_positions


def test_multiple_items_strictly_inside_boundary(simple_ctx):
    for key in [("tools", "build", "adopt"), ("tools", "ops", "assess")]:
        positions = simple_ctx.item_positions[key]
        poly = boundary_polygon(simple_ctx.item_boundaries[key])
        assert all(poly.contains(Point(p)) for p in positions)


def test_five_items_well_separated(simple_ctx):
    positions = simple_ctx.item_positions[("tools", "build", "adopt")]
    assert len(positions) == 5
    diffs = positions[:, None, :] - positions[None, :, :]
    d = np.sqrt((diffs**2).sum(axis=2))
    d[np.diag_indices(5)] = np.inf
    assert d.min() > 12.0


def test_full_circle_segments_hold_items():
    ctx = _run(RING_SCENARIO_CONTENT)
    for ring_id, n in [("r0", 10), ("r1", 5), ("r2", 2)]:
        key = ("only", "all", ring_id)
        positions = ctx.item_positions[key]
        assert len(positions) == n
        poly = boundary_polygon(ctx.item_boundaries[key])
        assert all(poly.contains(Point(p)) for p in positions)


def test_tiny_segment_falls_back_to_raw_outline():
    # Ring band thinner than two marker radii: padded arc has no area
    ctx = _run(SIMPLE_CONTENT, {"minRingRadius": 8, "outerRadius": 20, "itemMarker": {"symbolBoundRadius": 6}})
    key = ("tools", "ops", "assess")
    ring = ctx.ring_geometry["assess"]
    assert ring.radius < 12
    positions = ctx.item_positions[key]
    assert len(positions) == 2
    poly = boundary_polygon(ctx.item_boundaries[key])
    assert all(poly.contains(Point(p)) for p in positions)


def test_debug_keeps_boundaries_for_every_segment():
    ctx = _run(SIMPLE_CONTENT, {"debug": True})
    assert set(ctx.item_boundaries) == set(ctx.segment_arcs)
