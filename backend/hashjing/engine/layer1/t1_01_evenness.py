"""T1.01 — Evenness. ★

How close the seed is to an exact half split of one-bits, on a 0..10 scale.
Independent of the grid; reads the seed directly.
"""

from __future__ import annotations

import numpy as np

from hashjing.engine.context import MandalaContext
from hashjing.engine.grid_constants import EVENNESS_SCALE, HALF_BITS, SEED_BYTES
from hashjing.engine.registry import Layer, transform


def popcount(seed: bytes) -> int:
    return int(np.unpackbits(np.frombuffer(seed, dtype=np.uint8)).sum())


def evenness(seed: bytes) -> tuple[int, str]:
    """Return (score, label). 128 ones → (10, "1.0"); 0 or 256 ones → (0, "0.0")."""
    if len(seed) != SEED_BYTES:
        raise ValueError(f"Seed must be {SEED_BYTES} bytes, got {len(seed)}")
    diff = abs(popcount(seed) - HALF_BITS)
    score = (HALF_BITS - diff) * EVENNESS_SCALE // HALF_BITS
    return score, evenness_label(score)


def evenness_label(score: int) -> str:
    if score == EVENNESS_SCALE:
        return "1.0"
    return f"0.{score}"


@transform(
    id="T1.01",
    layer=Layer.TRAITS,
    description="Score how evenly the seed splits into ones and zeros",
)
def evenness_trait(ctx: MandalaContext) -> None:
    ctx.evenness_score, ctx.evenness_label = evenness(ctx.seed)
