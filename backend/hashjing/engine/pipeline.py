"""Pipeline orchestrator — runs transforms in dependency order with gating."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time
from collections.abc import Generator
from typing import Any

from hashjing.engine.config import PipelineConfig
from hashjing.engine.context import MandalaContext
from hashjing.engine.registry import Layer, TransformRegistry, TransformSpec, get_registry
from hashjing.svg.fragments import FragmentConfigurationError, default_fragments

logger = logging.getLogger(__name__)

_LAYER_PACKAGES = ("layer0", "layer1", "layer2")


def register_transforms() -> None:
    """Import all transform modules so @transform decorators fire."""
    for layer_name in _LAYER_PACKAGES:
        package = importlib.import_module(f"hashjing.engine.{layer_name}")
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package.__name__}.{module_name}")


class Pipeline:
    """Orchestrates the transform pipeline."""

    def __init__(
        self,
        registry: TransformRegistry | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or PipelineConfig()

    def _ordered(self) -> list[TransformSpec]:
        skip_ids = self._gate()
        requested = {s.id for s in self.registry.all()} - skip_ids
        return self.registry.resolve_order(requested)

    def run(self, ctx: MandalaContext) -> MandalaContext:
        """Run every enabled transform on the given context."""
        start = time.perf_counter()
        ordered = self._ordered()
        logger.debug("Pipeline: %d transforms queued", len(ordered))

        for spec in ordered:
            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
            except FragmentConfigurationError:
                raise
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)
                continue
            ctx.completed_transforms.add(spec.id)
            logger.debug("  %s completed in %.2fms", spec.id, (time.perf_counter() - t0) * 1000)

        logger.info(
            "Pipeline complete: %d/%d transforms in %.1fms",
            len(ctx.completed_transforms),
            len(ordered),
            (time.perf_counter() - start) * 1000,
        )
        return ctx

    def run_streaming(self, ctx: MandalaContext) -> Generator[dict[str, Any], None, None]:
        """Run the pipeline, yielding a progress dict before and after each transform.

        ``ctx`` is mutated in place; once the generator is exhausted it holds
        the same results ``run()`` would have produced.
        """
        ordered = self._ordered()
        total = len(ordered)

        for i, spec in enumerate(ordered):
            event = {
                "transform_id": spec.id,
                "description": spec.description,
                "layer": spec.layer.name,
                "index": i,
                "total": total,
            }
            yield {**event, "elapsed_ms": 0.0, "status": "running", "error": ""}

            t0 = time.perf_counter()
            status = "ok"
            error = ""
            try:
                spec.fn(ctx)
                ctx.completed_transforms.add(spec.id)
            except FragmentConfigurationError:
                raise
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                status = "error"
                error = str(e)

            elapsed_ms = round((time.perf_counter() - t0) * 1000, 2)
            yield {**event, "elapsed_ms": elapsed_ms, "status": status, "error": error}

    def run_layer(self, ctx: MandalaContext, layer: Layer) -> MandalaContext:
        """Run only transforms in a specific layer."""
        for spec in self.registry.get_layer(layer):
            try:
                spec.fn(ctx)
            except FragmentConfigurationError:
                raise
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)
                continue
            ctx.completed_transforms.add(spec.id)
        return ctx

    def _gate(self) -> set[str]:
        """Transforms to skip for this query."""
        skip: set[str] = set()
        if not self.config.render_document:
            skip.update(s.id for s in self.registry.get_layer(Layer.RENDER))
        return skip


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    register_transforms()
    return Pipeline(config=config)


def render_seed(
    seed: bytes,
    fragments: dict[str, bytes] | None = None,
    config: PipelineConfig | None = None,
) -> MandalaContext:
    """Decode, score and (unless gated off) render one seed."""
    ctx = MandalaContext(seed=bytes(seed), fragments=fragments)
    if ctx.fragments is None and (config is None or config.render_document):
        ctx.fragments = default_fragments()
    return create_pipeline(config).run(ctx)
