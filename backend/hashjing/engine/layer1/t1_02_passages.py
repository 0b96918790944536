"""T1.02 — Passage Counter. ★★★

Count open corridors that connect the innermost ring to the outermost ring.

Open (0) cells are nodes. Each node links to its radial neighbours (ring ± 1,
same sector; ring 0 and ring 3 are hard boundaries) and to its circumferential
neighbours (sector ± 1, wrapping mod 64).

Entry sectors on ring 0 are scanned in order 0..63. A search from an
unclaimed open entry that reaches ring 3 counts one passage and claims every
cell it visited. A search that never reaches ring 3 leaves its cells
unclaimed. Open pockets with no ring-0 entry are never searched.
"""

from __future__ import annotations

from collections import deque

import numpy as np
from numpy.typing import NDArray

from hashjing.engine.context import MandalaContext
from hashjing.engine.grid_constants import RINGS, SECTORS
from hashjing.engine.registry import Layer, transform

_INNER_RING = 0
_OUTER_RING = RINGS - 1

Cell = tuple[int, int]


def count_passages(grid: NDArray[np.uint8]) -> int:
    """Number of open regions touching both ring 0 and ring 3."""
    claimed: set[Cell] = set()
    passages = 0

    for sector in range(SECTORS):
        entry = (_INNER_RING, sector)
        if grid[entry] != 0 or entry in claimed:
            continue
        visited, reached_outer = _explore(grid, entry, claimed)
        if reached_outer:
            passages += 1
            claimed |= visited

    return passages


def _explore(
    grid: NDArray[np.uint8],
    entry: Cell,
    claimed: set[Cell],
) -> tuple[set[Cell], bool]:
    """BFS over open, unclaimed cells from entry.

    Returns the cells visited this round and whether ring 3 was reached.
    """
    visited: set[Cell] = {entry}
    queue: deque[Cell] = deque([entry])
    reached_outer = False

    while queue:
        ring, sector = queue.popleft()
        if ring == _OUTER_RING:
            reached_outer = True
        for nxt in _neighbours(ring, sector):
            if nxt in visited or nxt in claimed or grid[nxt] != 0:
                continue
            visited.add(nxt)
            queue.append(nxt)

    return visited, reached_outer


def _neighbours(ring: int, sector: int) -> list[Cell]:
    cells = [
        (ring, (sector - 1) % SECTORS),
        (ring, (sector + 1) % SECTORS),
    ]
    if ring > _INNER_RING:
        cells.append((ring - 1, sector))
    if ring < _OUTER_RING:
        cells.append((ring + 1, sector))
    return cells


@transform(
    id="T1.02",
    layer=Layer.TRAITS,
    dependencies=["T0.01"],
    description="Count open passages from the inner ring to the outer ring",
)
def passages_trait(ctx: MandalaContext) -> None:
    if ctx.grid is None:
        raise ValueError("grid not decoded")
    ctx.passages = count_passages(ctx.grid)
