"""Tests for Layer 2 — segment arcs."""

from __future__ import annotations

import pytest

from radarpie.engine.registry import Layer, get_registry


def test_layer2_registers_segment_arcs(simple_ctx):
    assert [s.id for s in get_registry().get_layer(Layer.ARCS)] == ["T2.01"]
    assert "T2.01" in simple_ctx.completed_transforms


def test_every_sub_slice_ring_pair_has_an_arc(simple_ctx):
    n_sub_slices = len(list(simple_ctx.iter_sub_slices()))
    assert len(simple_ctx.segment_arcs) == n_sub_slices * simple_ctx.ring_count


def test_segment_copies_angles_and_substitutes_radii(simple_ctx):
    for ss in simple_ctx.iter_sub_slices():
        sub_arc = simple_ctx.sub_slice_arcs[ss.key]
        for seg in ss.segments:
            arc = simple_ctx.segment_arcs[seg.key]
            ring = simple_ctx.ring_geometry[seg.ring_id]
            assert arc.start_angle == sub_arc.start_angle
            assert arc.end_angle == sub_arc.end_angle
            assert arc.pad_angle == sub_arc.pad_angle
            assert arc.inner_radius == ring.inner_radius
            assert arc.outer_radius == pytest.approx(ring.inner_radius + ring.radius)
            assert arc.inner_radius <= arc.outer_radius


def test_segment_shape_recorded(simple_ctx):
    for key, shape in simple_ctx.segment_shapes.items():
        assert shape.path.startswith("M")
        assert shape.path.endswith("Z")
        arc = simple_ctx.segment_arcs[key]
        cx, cy = shape.centroid
        r = (cx**2 + cy**2) ** 0.5
        assert arc.inner_radius - 1e-9 <= r <= arc.outer_radius + 1e-9
