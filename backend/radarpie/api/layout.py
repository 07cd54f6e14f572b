"""POST /api/layout — full layout for one content snapshot."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, HTTPException

from radarpie.config import settings
from radarpie.engine.config import RadarPieConfig
from radarpie.engine.formatter import context_to_layout
from radarpie.engine.pipeline import create_context, create_pipeline
from radarpie.errors import LayoutError
from radarpie.models.requests import LayoutRequest
from radarpie.models.responses import LayoutResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/layout", response_model=LayoutResponse)
def layout(req: LayoutRequest) -> LayoutResponse:
    start = time.perf_counter()

    overrides = dict(req.config)
    if "debug" not in overrides:
        overrides["debug"] = settings.radarpie_debug

    try:
        config = RadarPieConfig.from_overrides(overrides)
        ctx = create_context(req.content, config)
        create_pipeline().run(ctx)
    except LayoutError as e:
        logger.info("Layout rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    elapsed = (time.perf_counter() - start) * 1000
    return LayoutResponse(
        layout=context_to_layout(ctx),
        processing_time_ms=round(elapsed, 3),
        transforms_completed=len(ctx.completed_transforms),
    )
