"""Tests for the proportional scaler."""

from __future__ import annotations

import pytest

from radarpie.utils.scaling import scale_proportional


def test_proportional_when_floor_not_binding():
    out = scale_proportional([1, 1, 2], 100.0, 10.0)
    assert out == pytest.approx([25.0, 25.0, 50.0])


def test_small_share_is_floored_and_rest_redistributed():
    out = scale_proportional([90, 20, 2], 250.0, 30.0)
    assert out[2] == 30.0
    assert out[0] == pytest.approx(180.0)
    assert out[1] == pytest.approx(40.0)
    assert sum(out) == pytest.approx(250.0)


def test_flooring_cascades():
    # First round floors only the last item; the shrunken budget then pushes
    # the middle one under the floor too.
    out = scale_proportional([100, 12, 1], 100.0, 10.0)
    assert out[1] == 10.0
    assert out[2] == 10.0
    assert out[0] == pytest.approx(80.0)


def test_zero_weight_items_get_minimum():
    out = scale_proportional([0, 5, 0], 360.0, 12.0)
    assert out[0] == 12.0
    assert out[2] == 12.0
    assert out[1] == pytest.approx(336.0)


def test_all_zero_weights_share_equally():
    out = scale_proportional([0, 0, 0, 0], 360.0, 12.0)
    assert out == pytest.approx([90.0] * 4)


def test_overflow_floors_everything():
    out = scale_proportional([5, 1, 1], 50.0, 30.0)
    assert out == [30.0, 30.0, 30.0]
    assert sum(out) > 50.0


def test_empty_input():
    assert scale_proportional([], 100.0, 10.0) == []


def test_negative_weight_rejected():
    with pytest.raises(ValueError):
        scale_proportional([1, -1], 100.0, 10.0)


@pytest.mark.parametrize(
    "weights,total,minimum",
    [
        ([1] * 30, 360.0, 12.0),  # exactly at the floor
        ([1000] + [1] * 28, 360.0, 12.0),  # one heavy item, many tiny ones
        ([2**i for i in range(20)], 360.0, 5.0),  # geometric: floors cascade one by one
        ([0.001 * i for i in range(1, 50)], 250.0, 5.0),
    ],
)
def test_converges_on_adversarial_weights(weights, total, minimum):
    out = scale_proportional(weights, total, minimum)
    assert len(out) == len(weights)
    assert min(out) >= minimum - 1e-9
    assert sum(out) == pytest.approx(total)


def test_deterministic():
    w = [3, 14, 15, 92, 65, 35, 89, 79]
    assert scale_proportional(w, 360.0, 12.0) == scale_proportional(w, 360.0, 12.0)
