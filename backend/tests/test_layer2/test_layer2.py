"""Tests for mandala document assembly."""

import xml.etree.ElementTree as ET

import pytest

from hashjing.engine.layer0.t0_01_bit_grid import decode_seed
from hashjing.engine.layer1.t1_01_evenness import popcount
from hashjing.engine.layer2.t2_01_mandala_document import (
    BLACK,
    WHITE,
    assemble_document,
    document_length,
    sector_angle,
)
from hashjing.svg.fragments import RING_FRAGMENTS, FragmentConfigurationError
from tests.conftest import COUNTING_SEED, ZERO_SEED, random_seeds

_SVG = "{http://www.w3.org/2000/svg}"


def _assemble(seed, fragments):
    return assemble_document(seed, decode_seed(seed), fragments)


@pytest.mark.parametrize(
    "sector, angle",
    [(0, b"0"), (1, b"5.625"), (2, b"11.25"), (4, b"22.5"), (8, b"45"), (32, b"180"), (63, b"354.375")],
)
def test_sector_angle(sector, angle):
    assert sector_angle(sector) == angle


def test_length_with_empty_fragments(empty_fragments):
    # 64 × 56 bytes of wrapper/colour/close tokens, 364 bytes of angle text,
    # 4 × 23 bytes of hex text and closing tags.
    assert document_length(empty_fragments) == 4040
    assert len(_assemble(ZERO_SEED, empty_fragments)) == 4040


def test_length_known_in_advance(fragments):
    expected = document_length(fragments)
    for seed in [ZERO_SEED, COUNTING_SEED, *random_seeds(5)]:
        assert len(_assemble(seed, fragments)) == expected


def test_zero_seed_document(fragments):
    doc = _assemble(ZERO_SEED, fragments)
    assert doc.startswith(fragments["head"])
    assert doc.endswith(fragments["tail"])
    assert doc.count(b'<g transform="rotate(') == 64
    assert doc.count(BLACK) == 256 + 1  # plus the hub circle in the head
    assert WHITE not in doc
    assert doc.count(b">0000000000000000</text>") == 4


def test_first_sector_layout(empty_fragments):
    seed = b"\x80" + bytes(31)
    doc = _assemble(seed, empty_fragments)
    assert doc.startswith(b'<g transform="rotate(0)">#fff"/>#000"/>#000"/>#000"/></g>')
    assert b'<g transform="rotate(5.625)">#000"/>' in doc


def test_ring_fragments_in_ring_order(empty_fragments):
    frags = dict(empty_fragments)
    for ring, name in enumerate(RING_FRAGMENTS):
        frags[name] = f"<r{ring} ".encode()
    doc = _assemble(ZERO_SEED, frags)
    assert doc.startswith(b'<g transform="rotate(0)"><r0 #000"/><r1 #000"/><r2 #000"/><r3 #000"/></g>')


def test_white_count_matches_popcount(empty_fragments):
    for seed in random_seeds(5):
        doc = _assemble(seed, empty_fragments)
        assert doc.count(WHITE) == popcount(seed)
        assert doc.count(BLACK) == 256 - popcount(seed)


def test_hex_lines(empty_fragments):
    frags = dict(empty_fragments, line0=b"<a>", line1=b"<b>", line2=b"<c>", line3=b"<d>")
    doc = _assemble(COUNTING_SEED, frags)
    assert doc.endswith(
        b"<a>0001020304050607</text>"
        b"<b>08090a0b0c0d0e0f</text>"
        b"<c>1011121314151617</text>"
        b"<d>18191a1b1c1d1e1f</text>"
    )


def test_document_is_well_formed_svg(fragments):
    root = ET.fromstring(_assemble(COUNTING_SEED, fragments))
    assert root.tag == f"{_SVG}svg"
    groups = root.findall(f"{_SVG}g")
    assert len(groups) == 64
    assert groups[1].get("transform") == "rotate(5.625)"
    assert len(root.findall(f"{_SVG}g/{_SVG}path")) == 256
    texts = [t.text for t in root.findall(f"{_SVG}text")]
    assert texts == [COUNTING_SEED[i : i + 8].hex() for i in range(0, 32, 8)]


def test_deterministic(fragments):
    for seed in random_seeds(3):
        assert _assemble(seed, fragments) == _assemble(seed, fragments)


def test_missing_fragment_fails_loudly(fragments):
    del fragments["ring2"]
    with pytest.raises(FragmentConfigurationError) as exc:
        _assemble(ZERO_SEED, fragments)
    assert exc.value.missing == ["ring2"]
    with pytest.raises(FragmentConfigurationError):
        document_length(fragments)


def test_missing_head_and_tail_listed(fragments):
    del fragments["head"]
    del fragments["tail"]
    with pytest.raises(FragmentConfigurationError, match="head, tail"):
        _assemble(ZERO_SEED, fragments)
