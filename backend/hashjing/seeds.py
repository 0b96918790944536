"""Seed parsing and the seed-source interface.

Seeds are minted elsewhere; this module only reads them.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Protocol

from hashjing.engine.grid_constants import SEED_BYTES

_SEED_HEX_RE = re.compile(r"^(?:0x)?([0-9a-f]{%d})$" % (SEED_BYTES * 2), re.IGNORECASE)


class SeedSource(Protocol):
    def get_seed(self, token_id: int) -> bytes: ...


class MemorySeedSource:
    """Token ID → seed lookup backed by a mapping."""

    def __init__(self, seeds: Mapping[int, bytes]) -> None:
        self._seeds = dict(seeds)

    def get_seed(self, token_id: int) -> bytes:
        return self._seeds[token_id]

    def token_ids(self) -> list[int]:
        return sorted(self._seeds)


def parse_seed(text: str) -> bytes:
    """64 hex digits, optional 0x prefix, any case → 32 bytes."""
    match = _SEED_HEX_RE.match(text.strip())
    if not match:
        raise ValueError(f"Seed must be {SEED_BYTES * 2} hex digits, optionally 0x-prefixed")
    return bytes.fromhex(match.group(1))
