"""Exact integer formatting helpers. No engine imports, no floats."""

from __future__ import annotations

_MILLI = 1000


def format_millis(value: int) -> str:
    """Render an integer count of thousandths as a trimmed decimal.

    5625 → "5.625", 11250 → "11.25", 180000 → "180", 0 → "0".
    """
    sign = "-" if value < 0 else ""
    whole, frac = divmod(abs(value), _MILLI)
    if frac == 0:
        return f"{sign}{whole}"
    return f"{sign}{whole}.{frac:03d}".rstrip("0")


def hex_nibbles(data: bytes) -> str:
    """Lowercase hex, most significant nibble first, two digits per byte."""
    return data.hex()
