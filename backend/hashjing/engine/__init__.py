"""HashJing seed analysis and mandala assembly engine."""

from hashjing.engine.registry import transform, Layer, get_registry
from hashjing.engine.context import MandalaContext
from hashjing.engine.pipeline import Pipeline, create_pipeline, register_transforms, render_seed

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "MandalaContext",
    "Pipeline",
    "create_pipeline",
    "register_transforms",
    "render_seed",
]
