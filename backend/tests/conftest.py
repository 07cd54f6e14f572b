"""Shared test fixtures."""

from __future__ import annotations

import pytest

from radarpie.engine.pipeline import create_context, create_pipeline
from radarpie.models.content import RadarContent


def _items(group_id: str, n: int, prefix: str) -> list[dict]:
    return [{"id": f"{prefix}-{i}", "label": f"{prefix} {i}", "groupId": group_id} for i in range(n)]


# Three rings, two slices; the second slice has no sub-slices (gets a dummy).
SIMPLE_CONTENT = {
    "groups": [{"id": "new"}, {"id": "moved"}],
    "rings": [{"id": "adopt"}, {"id": "trial"}, {"id": "assess"}],
    "slices": [
        {
            "id": "tools",
            "label": "Tools",
            "subSlices": [
                {
                    "id": "build",
                    "label": "Build",
                    "segments": [
                        {"ringId": "adopt", "items": _items("new", 5, "build-adopt")},
                        {"ringId": "trial", "items": _items("moved", 1, "build-trial")},
                    ],
                },
                {
                    "id": "ops",
                    "label": "Ops",
                    "segments": [
                        {"ringId": "assess", "items": _items("new", 2, "ops-assess")},
                    ],
                },
            ],
        },
        {"id": "platforms", "label": "Platforms", "subSlices": []},
    ],
}

# Four equal sub-slices in two slices, one item each on the innermost ring.
EQUAL_CONTENT = {
    "groups": [{"id": "g"}],
    "rings": [{"id": "r0"}, {"id": "r1"}],
    "slices": [
        {
            "id": f"s{s}",
            "subSlices": [
                {"id": f"s{s}-{j}", "segments": [{"ringId": "r0", "items": [{"groupId": "g"}]}]}
                for j in range(2)
            ],
        }
        for s in range(2)
    ],
}

# Ring scenario: counts [10, 5, 2] on three rings, one sub-slice.
RING_SCENARIO_CONTENT = {
    "groups": [{"id": "g"}],
    "rings": [{"id": "r0"}, {"id": "r1"}, {"id": "r2"}],
    "slices": [
        {
            "id": "only",
            "subSlices": [
                {
                    "id": "all",
                    "segments": [
                        {"ringId": "r0", "items": _items("g", 10, "r0")},
                        {"ringId": "r1", "items": _items("g", 5, "r1")},
                        {"ringId": "r2", "items": _items("g", 2, "r2")},
                    ],
                }
            ],
        }
    ],
}


@pytest.fixture
def simple_content() -> RadarContent:
    return RadarContent.model_validate(SIMPLE_CONTENT)


@pytest.fixture
def equal_content() -> RadarContent:
    return RadarContent.model_validate(EQUAL_CONTENT)


@pytest.fixture
def ring_scenario_content() -> RadarContent:
    return RadarContent.model_validate(RING_SCENARIO_CONTENT)


@pytest.fixture
def simple_ctx(simple_content):
    """Fully laid-out context for SIMPLE_CONTENT with default config."""
    ctx = create_context(simple_content)
    return create_pipeline().run(ctx)
