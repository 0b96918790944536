"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from hashjing import __version__
from hashjing.engine.context import MandalaContext


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = __version__
    transforms_registered: int = 0


class Attribute(BaseModel):
    trait_type: str
    value: str | int


class TraitsResponse(BaseModel):
    seed: str
    evenness_score: int = 0
    evenness: str = ""
    passages: int = 0
    crown_rank: int = 0
    crown_qty: int = 0
    crown: str = "none"
    attributes: list[Attribute] = Field(default_factory=list)
    processing_time_ms: float = 0.0
    errors: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_context(cls, ctx: MandalaContext, elapsed_ms: float = 0.0, **extra) -> TraitsResponse:
        return cls(
            seed=ctx.seed_hex,
            evenness_score=ctx.evenness_score,
            evenness=ctx.evenness_label,
            passages=ctx.passages,
            crown_rank=ctx.crown_rank,
            crown_qty=ctx.crown_qty,
            crown=ctx.crown,
            attributes=[Attribute(**a) for a in ctx.attributes()],
            processing_time_ms=round(elapsed_ms, 2),
            errors=ctx.errors,
            **extra,
        )


class RenderResponse(TraitsResponse):
    svg: str = ""
    svg_bytes: int = 0
