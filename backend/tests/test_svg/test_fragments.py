"""Tests for fragment stores."""

import pytest

from hashjing.svg.fragments import (
    REQUIRED_FRAGMENTS,
    RING_FRAGMENTS,
    DirectoryFragmentStore,
    FragmentConfigurationError,
    MemoryFragmentStore,
    default_fragments,
    load_fragments,
)


def test_default_set_is_complete():
    frags = default_fragments()
    assert set(frags) == set(REQUIRED_FRAGMENTS)
    assert all(isinstance(v, bytes) and v for v in frags.values())


def test_ring_fragments_leave_fill_open():
    frags = default_fragments()
    for name in RING_FRAGMENTS:
        assert frags[name].startswith(b"<path ")
        assert frags[name].endswith(b'fill="')


def test_memory_store_roundtrip():
    frags = default_fragments()
    assert load_fragments(MemoryFragmentStore(frags)) == frags


def test_memory_store_missing():
    frags = default_fragments()
    del frags["line3"]
    with pytest.raises(FragmentConfigurationError) as exc:
        load_fragments(MemoryFragmentStore(frags))
    assert exc.value.missing == ["line3"]


def test_directory_store(tmp_path):
    for name, data in default_fragments().items():
        (tmp_path / f"{name}.frag").write_bytes(data)
    store = DirectoryFragmentStore(tmp_path)
    assert store.get_fragment("ring0") == default_fragments()["ring0"]
    assert load_fragments(store) == default_fragments()


def test_directory_store_missing_files(tmp_path):
    (tmp_path / "head.frag").write_bytes(b"<svg>")
    store = DirectoryFragmentStore(tmp_path)
    with pytest.raises(KeyError):
        store.get_fragment("tail")
    with pytest.raises(FragmentConfigurationError) as exc:
        load_fragments(store)
    assert "head" not in exc.value.missing
    assert len(exc.value.missing) == len(REQUIRED_FRAGMENTS) - 1


def test_non_utf8_fragment_rejected():
    frags = default_fragments()
    frags["head"] = b"<svg>\xe9"
    with pytest.raises(FragmentConfigurationError) as exc:
        load_fragments(MemoryFragmentStore(frags))
    assert exc.value.invalid == ["head"]
    assert exc.value.missing == []
    assert "UTF-8" in str(exc.value)
