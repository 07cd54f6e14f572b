"""Pipeline orchestrator — runs layout transforms in dependency order."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time
from collections.abc import Mapping
from typing import Any

from radarpie.engine.config import RadarPieConfig
from radarpie.engine.context import LayoutContext
from radarpie.engine.registry import Layer, TransformRegistry, get_registry
from radarpie.models.content import RadarContent
from radarpie.models.layout import RadarLayout

logger = logging.getLogger(__name__)

_LAYER_PACKAGES = ["layer0", "layer1", "layer2", "layer3", "layer4"]


def load_transforms() -> None:
    """Import all transform modules so @transform decorators fire."""
    for layer_name in _LAYER_PACKAGES:
        package = importlib.import_module(f"radarpie.engine.{layer_name}")
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package.__name__}.{module_name}")


class Pipeline:
    """Orchestrates the layout pipeline.

    Layout is all-or-nothing: a failing transform is recorded in
    ``ctx.errors`` and its exception propagates to the caller.
    """

    def __init__(self, registry: TransformRegistry | None = None) -> None:
        self.registry = registry or get_registry()

    def run(self, ctx: LayoutContext) -> LayoutContext:
        """Run every registered transform on the given context."""
        start = time.perf_counter()
        ordered = self.registry.resolve_order()

        logger.info("Pipeline: %d transforms queued", len(ordered))

        for spec in ordered:
            self._run_one(spec, ctx)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d transforms in %.0fms",
            len(ctx.completed_transforms),
            len(ordered),
            total,
        )
        return ctx

    def run_layer(self, ctx: LayoutContext, layer: Layer) -> LayoutContext:
        """Run only transforms in a specific layer (earlier layers must already be done)."""
        for spec in self.registry.get_layer(layer):
            self._run_one(spec, ctx)
        return ctx

    def _run_one(self, spec, ctx: LayoutContext) -> None:
        t0 = time.perf_counter()
        try:
            spec.fn(ctx)
        except Exception as e:
            ctx.errors[spec.id] = str(e)
            logger.warning("  %s FAILED: %s", spec.id, e)
            raise
        ctx.completed_transforms.add(spec.id)
        elapsed = (time.perf_counter() - t0) * 1000
        logger.debug("  %s completed in %.1fms", spec.id, elapsed)


def create_pipeline() -> Pipeline:
    """Factory function for creating a pipeline over all registered transforms."""
    load_transforms()
    return Pipeline()


def create_context(
    content: RadarContent | Mapping[str, Any],
    config: RadarPieConfig | Mapping[str, Any] | None = None,
) -> LayoutContext:
    if not isinstance(content, RadarContent):
        content = RadarContent.model_validate(content)
    if not isinstance(config, RadarPieConfig):
        config = RadarPieConfig.from_overrides(config)
    return LayoutContext(content=content, config=config)


def build_layout(
    content: RadarContent | Mapping[str, Any],
    config: RadarPieConfig | Mapping[str, Any] | None = None,
) -> RadarLayout:
    """Compute the complete radar layout for one content snapshot."""
    from radarpie.engine.formatter import context_to_layout

    ctx = create_context(content, config)
    create_pipeline().run(ctx)
    return context_to_layout(ctx)
