"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from radarpie.models.content import RadarContent


class LayoutRequest(BaseModel):
    content: RadarContent = Field(..., description="Content snapshot to lay out")
    config: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial layout configuration, deep-merged over the defaults",
    )
