"""HashJing — deterministic traits and SVG mandalas from 256-bit seeds."""

__version__ = "0.1.0"
