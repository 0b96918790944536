"""Collection census — trait distributions over many seeds.

Evenness buckets are ordered by score, Passages ascending, Crown by
(rank, qty) with "none" first.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Hashable, Iterable

from hashjing.engine.config import PipelineConfig
from hashjing.engine.context import MandalaContext
from hashjing.engine.layer1.t1_01_evenness import evenness_label
from hashjing.engine.layer1.t1_03_crown import crown_label
from hashjing.engine.pipeline import create_pipeline
from hashjing.models.census import Bucket, Census

logger = logging.getLogger(__name__)


def collection_census(seeds: Iterable[bytes]) -> Census:
    pipeline = create_pipeline(PipelineConfig(render_document=False))
    evenness: Counter[int] = Counter()
    passages: Counter[int] = Counter()
    crowns: Counter[tuple[int, int]] = Counter()
    total = 0

    for seed in seeds:
        ctx = pipeline.run(MandalaContext(seed=seed))
        if ctx.errors:
            raise ValueError(f"Seed {seed.hex()} failed: {ctx.errors}")
        evenness[ctx.evenness_score] += 1
        passages[ctx.passages] += 1
        crowns[(ctx.crown_rank, ctx.crown_qty)] += 1
        total += 1

    logger.info("Census over %d seeds", total)
    return Census(
        total=total,
        evenness=_buckets(evenness, total, evenness_label),
        passages=_buckets(passages, total, str),
        crown=_buckets(crowns, total, lambda key: crown_label(*key)),
    )


def _buckets(counts: Counter, total: int, label) -> list[Bucket]:
    keys: list[Hashable] = sorted(counts)
    return [
        Bucket(
            value=label(key),
            count=counts[key],
            percent=round(counts[key] * 100 / total, 2) if total else 0.0,
        )
        for key in keys
    ]


def format_census(census: Census) -> str:
    lines = [f"Seeds analysed : {census.total}", "", "Evenness distribution:"]
    lines += [f"  {b.value:<4} : {b.count} ({b.percent:.2f} %)" for b in census.evenness]
    lines += ["", "Passages distribution:"]
    lines += [f"  {b.value:0>2} : {b.count} ({b.percent:.2f} %)" for b in census.passages]
    lines += ["", "Crown distribution (rank:qty):"]
    lines += [f"  {b.value:>5} : {b.count} ({b.percent:.2f} %)" for b in census.crown]
    return "\n".join(lines)
