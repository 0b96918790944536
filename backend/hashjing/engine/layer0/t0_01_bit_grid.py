"""T0.01 — Bit-Grid Decoder. ★★★ ALWAYS FIRST

Unfold the 256-bit seed into a 4×64 ring/sector grid.

Byte i fills sectors 2i (high nibble) and 2i+1 (low nibble). Within a nibble
the most significant bit lands on ring 0 (innermost), the least significant
on ring 3. Unpacking the bytes MSB-first therefore yields the grid in
sector-major order: bits[4*s + r] == grid[r, s].
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from hashjing.engine.context import MandalaContext
from hashjing.engine.grid_constants import RINGS, SECTORS, SEED_BYTES
from hashjing.engine.registry import Layer, transform


def decode_seed(seed: bytes) -> NDArray[np.uint8]:
    """Seed bytes → grid[ring, sector] of 0/1 cells."""
    if len(seed) != SEED_BYTES:
        raise ValueError(f"Seed must be {SEED_BYTES} bytes, got {len(seed)}")
    bits = np.unpackbits(np.frombuffer(seed, dtype=np.uint8))
    return np.ascontiguousarray(bits.reshape(SECTORS, RINGS).T)


def encode_grid(grid: NDArray[np.uint8]) -> bytes:
    """Inverse of decode_seed: grid[ring, sector] → seed bytes."""
    grid = np.asarray(grid, dtype=np.uint8)
    if grid.shape != (RINGS, SECTORS):
        raise ValueError(f"Grid must have shape {(RINGS, SECTORS)}, got {grid.shape}")
    return np.packbits(grid.T.reshape(-1)).tobytes()


@transform(
    id="T0.01",
    layer=Layer.DECODE,
    description="Decode seed into the 4x64 ring/sector grid",
)
def bit_grid(ctx: MandalaContext) -> None:
    ctx.grid = decode_seed(ctx.seed)
