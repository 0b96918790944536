"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from hashjing.engine.grid_constants import RINGS, SECTORS
from hashjing.engine.layer0.t0_01_bit_grid import encode_grid
from hashjing.svg.fragments import default_fragments


ZERO_SEED = bytes(32)
ONES_SEED = b"\xff" * 32
# 128 one-bits: first half of the ring all walls, second half all open
HALF_SEED = b"\xff" * 16 + b"\x00" * 16
COUNTING_SEED = bytes(range(32))

ZERO_HEX = "0x" + "00" * 32
COUNTING_HEX = "0x" + COUNTING_SEED.hex()


def random_seeds(n: int, seed: int = 2024) -> list[bytes]:
    rng = np.random.default_rng(seed)
    return [rng.bytes(32) for _ in range(n)]


def blank_grid(fill: int = 0) -> np.ndarray:
    return np.full((RINGS, SECTORS), fill, dtype=np.uint8)


def column_grid(values: list[int] | np.ndarray) -> np.ndarray:
    """Grid whose sector s holds the 4-bit value values[s] (bit 3 → ring 0)."""
    grid = blank_grid()
    for sector, value in enumerate(values):
        for ring in range(RINGS):
            grid[ring, sector] = (int(value) >> (RINGS - 1 - ring)) & 1
    return grid


# Columns 0000, 0001, 0010, 0011 repeating: no two sectors one or two apart match
NO_CROWN_GRID = column_grid(np.arange(SECTORS) % 4)
NO_CROWN_SEED = encode_grid(NO_CROWN_GRID)


@pytest.fixture
def fragments() -> dict[str, bytes]:
    return default_fragments()


@pytest.fixture
def empty_fragments() -> dict[str, bytes]:
    return {name: b"" for name in default_fragments()}
