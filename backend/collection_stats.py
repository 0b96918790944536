"""Print Evenness / Passages / Crown distributions over a set of seeds.

Seeds come from a file (one hex seed per line, blank lines and # comments
ignored) or, with --count, from sha256 of token IDs 1..N as stand-ins for
minted seeds.

    python collection_stats.py --count 8192
    python collection_stats.py seeds.txt
"""

from __future__ import annotations

import argparse
import hashlib
import logging
import sys
import time
from collections.abc import Iterator
from pathlib import Path

from hashjing.engine.census import collection_census, format_census
from hashjing.seeds import parse_seed

logger = logging.getLogger("collection_stats")


def stand_in_seeds(count: int) -> Iterator[bytes]:
    for token_id in range(1, count + 1):
        yield hashlib.sha256(token_id.to_bytes(32, "big")).digest()


def file_seeds(path: Path) -> Iterator[bytes]:
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.split("#", 1)[0].strip()
        if line:
            yield parse_seed(line)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("seed_file", nargs="?", type=Path, help="file with one hex seed per line")
    parser.add_argument("--count", type=int, default=0, help="use N stand-in seeds instead of a file")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.seed_file is not None:
        seeds = file_seeds(args.seed_file)
    elif args.count > 0:
        seeds = stand_in_seeds(args.count)
    else:
        parser.error("give a seed file or --count N")

    t0 = time.perf_counter()
    census = collection_census(seeds)
    logger.info("Census took %.1fs", time.perf_counter() - t0)
    print(format_census(census))
    return 0


if __name__ == "__main__":
    sys.exit(main())
