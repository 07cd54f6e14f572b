"""RadarPie layout engine."""

from radarpie.engine.config import RadarPieConfig
from radarpie.engine.context import LayoutContext
from radarpie.engine.pipeline import Pipeline, build_layout, create_pipeline
from radarpie.engine.registry import Layer, get_registry, transform

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "LayoutContext",
    "RadarPieConfig",
    "Pipeline",
    "build_layout",
    "create_pipeline",
]
