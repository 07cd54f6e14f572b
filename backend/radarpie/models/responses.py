"""API response models."""

from __future__ import annotations

from radarpie.models.content import SnapshotModel
from radarpie.models.layout import RadarLayout


class HealthResponse(SnapshotModel):
    status: str = "ok"
    version: str = "0.1.0"
    transforms_registered: int = 0


class LayoutResponse(SnapshotModel):
    layout: RadarLayout
    processing_time_ms: float = 0.0
    transforms_completed: int = 0
