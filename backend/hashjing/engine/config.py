"""Pipeline configuration — controls which stages run."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PipelineConfig:
    """Controls which transforms run for a query."""

    # Traits-only queries skip document assembly (T2.01)
    render_document: bool = True
