"""Tests for label anchor classification."""

from __future__ import annotations

import math

import pytest

from radarpie.errors import InvalidAngleError
from radarpie.utils.anchors import TextPlacement, classify_anchor


@pytest.mark.parametrize(
    "deg,h,v",
    [
        (0, "middle", "baseline"),
        (90, "start", "middle"),
        (180, "middle", "hanging"),
        (270, "end", "middle"),
        (5, "middle", "baseline"),
        (30, "start", "baseline"),
        (150, "start", "hanging"),
        (200, "end", "hanging"),
        (330, "end", "baseline"),
        (355, "middle", "baseline"),
    ],
)
def test_classify_cardinal_and_bands(deg, h, v):
    assert classify_anchor(math.radians(deg)) == TextPlacement(h_anchor=h, v_anchor=v)


def test_horizontal_cut_off_boundaries_are_inclusive_for_sides():
    assert classify_anchor(math.radians(10)).h_anchor == "start"
    assert classify_anchor(math.radians(170)).h_anchor == "start"
    assert classify_anchor(math.radians(190)).h_anchor == "end"
    assert classify_anchor(math.radians(350)).h_anchor == "end"


def test_vertical_cut_off_boundaries():
    assert classify_anchor(math.radians(45)).v_anchor == "middle"
    assert classify_anchor(math.radians(135)).v_anchor == "middle"
    assert classify_anchor(math.radians(44.9)).v_anchor == "baseline"
    assert classify_anchor(math.radians(135.1)).v_anchor == "hanging"


def test_start_end_uses_mid_angle():
    assert classify_anchor(math.radians(80), math.radians(100)) == classify_anchor(math.radians(90))
    assert classify_anchor(0.0, 2 * math.pi).v_anchor == "hanging"


@pytest.mark.parametrize("angle", [-0.01, 2 * math.pi + 0.01, 10.0, float("nan")])
def test_out_of_range_raises(angle):
    with pytest.raises(InvalidAngleError):
        classify_anchor(angle)


def test_invalid_angle_is_value_error():
    with pytest.raises(ValueError):
        classify_anchor(-1.0)


def test_full_turn_is_top():
    assert classify_anchor(2 * math.pi) == TextPlacement(h_anchor="middle", v_anchor="baseline")
