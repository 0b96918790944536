"""T1.03 — Crown (radial symmetry). ★★★

Find the longest circular palindrome shared by all four rings, and how many
instances of that length exist.

A window of length L starting at sector s is a palindrome when, on every
ring, sector (s + k) mod 64 matches sector (s + L - 1 - k) mod 64. Lengths are
tried from 64 down to 2 over all starts 0..63; the first length with any hit
is the rank. A length-64 window covers the whole ring from any start, so the
full ring contributes at most one instance.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from hashjing.engine.context import MandalaContext
from hashjing.engine.grid_constants import MIN_CROWN_LENGTH, SECTORS
from hashjing.engine.registry import Layer, transform

logger = logging.getLogger(__name__)

CROWN_NONE = "none"


def crown(grid: NDArray[np.uint8], skip_shorter: bool = True) -> tuple[int, int]:
    """Return (rank, qty). (0, 0) when no window of length >= 2 is palindromic."""
    # Two laps side by side so every circular window is a plain slice.
    laps = np.concatenate([grid, grid], axis=1)
    rank = 0
    qty = 0

    for length in range(SECTORS, MIN_CROWN_LENGTH - 1, -1):
        hits = sum(1 for start in range(SECTORS) if _is_palindrome(laps, start, length))
        if length == SECTORS:
            # Every start covers the same full ring.
            hits = min(hits, 1)
        if hits and not rank:
            rank, qty = length, hits
            if skip_shorter:
                break

    return rank, qty


def _is_palindrome(laps: NDArray[np.uint8], start: int, length: int) -> bool:
    window = laps[:, start : start + length]
    return bool(np.array_equal(window, window[:, ::-1]))


def crown_label(rank: int, qty: int) -> str:
    if rank == 0 or qty == 0:
        return CROWN_NONE
    return f"{rank}:{qty}"


@transform(
    id="T1.03",
    layer=Layer.TRAITS,
    dependencies=["T0.01"],
    description="Find the longest circular palindrome shared by all rings",
)
def crown_trait(ctx: MandalaContext) -> None:
    if ctx.grid is None:
        raise ValueError("grid not decoded")
    ctx.crown_rank, ctx.crown_qty = crown(ctx.grid)
    logger.debug("Crown %s for %s", ctx.crown, ctx.seed_hex)
