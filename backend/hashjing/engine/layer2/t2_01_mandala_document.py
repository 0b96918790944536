"""T2.01 — Mandala Document. ★★★

Splice the grid and seed into an SVG byte string, in a fixed order:

    head
    64 × <g transform="rotate(ANGLE)"> 4 × (ring<r> COLOUR "/>) </g>
    4 × line<j> HEX16 </text>
    tail

Angles are exact multiples of 5.625° formatted from integer millidegrees;
no float ever touches the output. The output size is known before a single
byte is written.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

import numpy as np
from numpy.typing import NDArray

from hashjing.engine.context import MandalaContext
from hashjing.engine.grid_constants import (
    HEX_LINE_BYTES,
    HEX_LINES,
    MILLIDEGREES_PER_SECTOR,
    RINGS,
    SECTORS,
    SEED_BYTES,
)
from hashjing.engine.registry import Layer, transform
from hashjing.svg.fragments import (
    HEAD,
    LINE_FRAGMENTS,
    REQUIRED_FRAGMENTS,
    RING_FRAGMENTS,
    TAIL,
    FragmentConfigurationError,
)
from hashjing.utils.math_helpers import format_millis, hex_nibbles

logger = logging.getLogger(__name__)

ROTATE_OPEN = b'<g transform="rotate('
ROTATE_CLOSE = b')">'
GROUP_CLOSE = b"</g>"
# Open cells render black, walls white. Both tokens are 4 bytes.
BLACK = b"#000"
WHITE = b"#fff"
SHAPE_CLOSE = b'"/>'
TEXT_CLOSE = b"</text>"

_COLOURS = (BLACK, WHITE)


def sector_angle(sector: int) -> bytes:
    """Rotation for a sector in degrees: 0 → b"0", 1 → b"5.625", 32 → b"180"."""
    return format_millis(sector * MILLIDEGREES_PER_SECTOR).encode("ascii")


def require_fragments(fragments: Mapping[str, bytes]) -> None:
    missing = [name for name in REQUIRED_FRAGMENTS if name not in fragments]
    if missing:
        raise FragmentConfigurationError(missing)


def document_length(fragments: Mapping[str, bytes]) -> int:
    """Exact byte length of any document assembled from these fragments."""
    require_fragments(fragments)
    rings = sum(len(fragments[name]) for name in RING_FRAGMENTS)
    per_sector = (
        len(ROTATE_OPEN)
        + len(ROTATE_CLOSE)
        + len(GROUP_CLOSE)
        + rings
        + RINGS * (len(BLACK) + len(SHAPE_CLOSE))
    )
    angles = sum(len(sector_angle(s)) for s in range(SECTORS))
    lines = sum(len(fragments[name]) for name in LINE_FRAGMENTS) + HEX_LINES * (
        2 * HEX_LINE_BYTES + len(TEXT_CLOSE)
    )
    return len(fragments[HEAD]) + SECTORS * per_sector + angles + lines + len(fragments[TAIL])


def assemble_document(
    seed: bytes,
    grid: NDArray[np.uint8],
    fragments: Mapping[str, bytes],
) -> bytes:
    if len(seed) != SEED_BYTES:
        raise ValueError(f"Seed must be {SEED_BYTES} bytes, got {len(seed)}")
    if grid.shape != (RINGS, SECTORS):
        raise ValueError(f"Grid must have shape {(RINGS, SECTORS)}, got {grid.shape}")
    expected = document_length(fragments)

    rings = [fragments[name] for name in RING_FRAGMENTS]
    parts: list[bytes] = [fragments[HEAD]]

    for sector in range(SECTORS):
        parts += (ROTATE_OPEN, sector_angle(sector), ROTATE_CLOSE)
        for ring in range(RINGS):
            parts += (rings[ring], _COLOURS[int(grid[ring, sector])], SHAPE_CLOSE)
        parts.append(GROUP_CLOSE)

    for line, name in enumerate(LINE_FRAGMENTS):
        chunk = seed[line * HEX_LINE_BYTES : (line + 1) * HEX_LINE_BYTES]
        parts += (fragments[name], hex_nibbles(chunk).encode("ascii"), TEXT_CLOSE)

    parts.append(fragments[TAIL])
    document = b"".join(parts)

    if len(document) != expected:
        raise RuntimeError(f"Assembled {len(document)} bytes, expected {expected}")
    return document


@transform(
    id="T2.01",
    layer=Layer.RENDER,
    dependencies=["T0.01"],
    description="Assemble the mandala SVG document",
)
def mandala_document(ctx: MandalaContext) -> None:
    if ctx.fragments is None:
        raise FragmentConfigurationError(list(REQUIRED_FRAGMENTS))
    if ctx.grid is None:
        raise ValueError("grid not decoded")
    ctx.document = assemble_document(ctx.seed, ctx.grid, ctx.fragments)
    logger.debug("Assembled %d-byte document for %s", len(ctx.document), ctx.seed_hex)
