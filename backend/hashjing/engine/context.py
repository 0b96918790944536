"""MandalaContext — the single mutable state object flowing through all transforms.

Decode results → MandalaContext.grid
Trait results → evenness_* / passages / crown_*
Render results → MandalaContext.document
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass
class MandalaContext:
    """Shared state for one seed flowing through the pipeline."""

    # 32-byte seed, supplied by the caller
    seed: bytes = b""
    # Complete fragment set for document assembly (name → bytes)
    fragments: dict[str, bytes] | None = None

    # --- Layer 0 ---
    # 4×64 bit grid: grid[ring][sector], 0 = open, 1 = wall
    grid: NDArray[np.uint8] | None = None

    # --- Layer 1 traits ---
    evenness_score: int = 0
    evenness_label: str = ""
    passages: int = 0
    crown_rank: int = 0
    crown_qty: int = 0

    # --- Layer 2 ---
    document: bytes = b""

    # --- Pipeline metadata ---
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def crown(self) -> str:
        from hashjing.engine.layer1.t1_03_crown import crown_label

        return crown_label(self.crown_rank, self.crown_qty)

    @property
    def svg(self) -> str:
        return self.document.decode("utf-8")

    @property
    def seed_hex(self) -> str:
        return "0x" + self.seed.hex()

    def attributes(self) -> list[dict[str, Any]]:
        """Trait list in the shape token metadata envelopes expect."""
        return [
            {"trait_type": "Evenness", "value": self.evenness_label},
            {"trait_type": "Passages", "value": self.passages},
            {"trait_type": "Crown", "value": self.crown},
        ]
