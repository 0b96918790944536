"""Static SVG fragments spliced into every mandala document.

The assembler treats fragments as opaque bytes. A store only has to answer
``get_fragment(name)``; the stock geometry below is used when no fragment
directory is configured.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

HEAD = "head"
TAIL = "tail"
RING_FRAGMENTS = ("ring0", "ring1", "ring2", "ring3")
LINE_FRAGMENTS = ("line0", "line1", "line2", "line3")
REQUIRED_FRAGMENTS = (HEAD, *RING_FRAGMENTS, *LINE_FRAGMENTS, TAIL)

FRAGMENT_SUFFIX = ".frag"


class FragmentConfigurationError(RuntimeError):
    """The fragment set handed to the assembler is incomplete or unreadable."""

    def __init__(self, missing: list[str], invalid: list[str] | None = None) -> None:
        self.missing = sorted(missing)
        self.invalid = sorted(invalid or [])
        problems = []
        if self.missing:
            problems.append(f"Missing SVG fragments: {', '.join(self.missing)}")
        if self.invalid:
            problems.append(f"SVG fragments are not valid UTF-8: {', '.join(self.invalid)}")
        super().__init__("; ".join(problems))


class FragmentStore(Protocol):
    def get_fragment(self, name: str) -> bytes: ...


class MemoryFragmentStore:
    """Fragments held in a plain mapping."""

    def __init__(self, fragments: Mapping[str, bytes]) -> None:
        self._fragments = dict(fragments)

    def get_fragment(self, name: str) -> bytes:
        return self._fragments[name]


class DirectoryFragmentStore:
    """One ``<name>.frag`` file per fragment, read verbatim."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def get_fragment(self, name: str) -> bytes:
        path = self.root / f"{name}{FRAGMENT_SUFFIX}"
        try:
            return path.read_bytes()
        except FileNotFoundError:
            raise KeyError(name) from None


def load_fragments(store: FragmentStore) -> dict[str, bytes]:
    """Fetch every required fragment, failing on an incomplete or non-UTF-8 set."""
    fragments: dict[str, bytes] = {}
    missing: list[str] = []
    invalid: list[str] = []
    for name in REQUIRED_FRAGMENTS:
        try:
            data = store.get_fragment(name)
        except KeyError:
            missing.append(name)
            continue
        try:
            data.decode("utf-8")
        except UnicodeDecodeError:
            invalid.append(name)
        fragments[name] = data
    if missing or invalid:
        raise FragmentConfigurationError(missing, invalid)
    logger.debug("Loaded %d fragments (%d bytes)", len(fragments), sum(map(len, fragments.values())))
    return fragments


# ── Stock geometry ──
# Canvas is centred on the origin. Ring r spans radius 160 + 80r to 240 + 80r.
# Each wedge covers 0°..5.625° clockwise from straight up; the assembler
# rotates it into place per sector. The hex text sits in the 160px hole.

_HEAD = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="-512 -512 1024 1024"'
    ' width="1024" height="1024">'
    "<style>text{font:600 20px monospace;fill:#999;text-anchor:middle}</style>"
    '<rect x="-512" y="-512" width="1024" height="1024" fill="#777"/>'
    '<circle r="160" fill="#000"/>'
)

_RINGS = (
    '<path d="M0 -160L0 -240A240 240 0 0 1 23.52 -238.84L15.68 -159.23A160 160 0 0 0 0 -160Z" fill="',
    '<path d="M0 -240L0 -320A320 320 0 0 1 31.37 -318.46L23.52 -238.84A240 240 0 0 0 0 -240Z" fill="',
    '<path d="M0 -320L0 -400A400 400 0 0 1 39.21 -398.07L31.37 -318.46A320 320 0 0 0 0 -320Z" fill="',
    '<path d="M0 -400L0 -480A480 480 0 0 1 47.05 -477.69L39.21 -398.07A400 400 0 0 0 0 -400Z" fill="',
)

_LINES = (
    '<text x="0" y="-26">',
    '<text x="0" y="-4">',
    '<text x="0" y="18">',
    '<text x="0" y="40">',
)

_TAIL = "</svg>"


def default_fragments() -> dict[str, bytes]:
    fragments = {HEAD: _HEAD.encode(), TAIL: _TAIL.encode()}
    fragments.update((name, d.encode()) for name, d in zip(RING_FRAGMENTS, _RINGS))
    fragments.update((name, t.encode()) for name, t in zip(LINE_FRAGMENTS, _LINES))
    return fragments
