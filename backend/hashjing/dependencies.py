"""FastAPI dependency injection."""

from __future__ import annotations

from hashjing.config import settings
from hashjing.svg.fragments import DirectoryFragmentStore, default_fragments, load_fragments


def get_fragments() -> dict[str, bytes]:
    """Fragment set for document assembly: configured directory or built-ins."""
    if settings.hashjing_fragment_dir:
        return load_fragments(DirectoryFragmentStore(settings.hashjing_fragment_dir))
    return default_fragments()
