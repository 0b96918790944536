"""Transform registry — each pipeline stage is a plain function registered via decorator.

Usage:
    @transform(id="T1.02", layer=Layer.TRAITS, dependencies=["T0.01"])
    def passages(ctx: MandalaContext) -> None:
        ctx.passages = count_passages(ctx.grid)

A new stage is one module with the decorator; the pipeline picks it up on import.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from hashjing.engine.context import MandalaContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    DECODE = 0
    TRAITS = 1
    RENDER = 2


@dataclass
class TransformSpec:
    id: str
    layer: Layer
    fn: Callable[["MandalaContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class TransformRegistry:
    """Registry of pipeline stages keyed by transform ID."""

    def __init__(self) -> None:
        self._transforms: dict[str, TransformSpec] = {}

    def register(self, spec: TransformSpec) -> None:
        if spec.id in self._transforms:
            raise ValueError(f"Duplicate transform ID: {spec.id}")
        self._transforms[spec.id] = spec
        logger.debug("Registered transform %s (%s)", spec.id, spec.layer.name)

    def get(self, transform_id: str) -> TransformSpec:
        return self._transforms[transform_id]

    def get_layer(self, layer: Layer) -> list[TransformSpec]:
        return sorted(
            (s for s in self._transforms.values() if s.layer == layer),
            key=lambda s: s.id,
        )

    def all(self) -> list[TransformSpec]:
        return sorted(self._transforms.values(), key=lambda s: (s.layer, s.id))

    def resolve_order(self, requested_ids: set[str] | None = None) -> list[TransformSpec]:
        """Requested stages plus everything they depend on, dependencies first.

        Stages are visited in (layer, id) order, depth-first through their
        dependencies.
        """
        pool = self._transforms
        wanted = set(pool) if requested_ids is None else set(requested_ids)
        done: set[str] = set()
        visiting: set[str] = set()
        ordered: list[TransformSpec] = []

        def visit(tid: str) -> None:
            if tid in done:
                return
            if tid in visiting:
                raise ValueError(f"Circular dependency detected at: {tid}")
            visiting.add(tid)
            for dep in pool[tid].dependencies:
                if dep in pool:
                    visit(dep)
            visiting.discard(tid)
            done.add(tid)
            ordered.append(pool[tid])

        for spec in self.all():
            if spec.id in wanted:
                visit(spec.id)
        return ordered

    @property
    def count(self) -> int:
        return len(self._transforms)


# Module-level singleton
_registry = TransformRegistry()


def get_registry() -> TransformRegistry:
    return _registry


def transform(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator that registers a pipeline stage with the global registry."""

    def decorator(fn: Callable[["MandalaContext"], None]):
        _registry.register(
            TransformSpec(
                id=id,
                layer=layer,
                fn=fn,
                dependencies=list(dependencies or []),
                description=description,
            )
        )
        return fn

    return decorator
