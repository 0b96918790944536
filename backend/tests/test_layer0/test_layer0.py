"""Tests for the bit-grid decoder."""

import numpy as np
import pytest

from hashjing.engine.layer0.t0_01_bit_grid import decode_seed, encode_grid
from tests.conftest import COUNTING_SEED, ONES_SEED, ZERO_SEED, random_seeds


def test_zero_seed_is_all_open():
    grid = decode_seed(ZERO_SEED)
    assert grid.shape == (4, 64)
    assert grid.dtype == np.uint8
    assert not grid.any()


def test_ones_seed_is_all_walls():
    assert decode_seed(ONES_SEED).all()


def test_nibble_layout_first_byte():
    # 0xA5: high nibble 1010 → sector 0, low nibble 0101 → sector 1
    grid = decode_seed(b"\xa5" + bytes(31))
    assert grid[:, 0].tolist() == [1, 0, 1, 0]
    assert grid[:, 1].tolist() == [0, 1, 0, 1]
    assert grid[:, 2:].sum() == 0


def test_nibble_layout_last_byte():
    grid = decode_seed(bytes(31) + b"\x0f")
    assert grid[:, 62].tolist() == [0, 0, 0, 0]
    assert grid[:, 63].tolist() == [1, 1, 1, 1]
    assert grid.sum() == 4


def test_msb_of_nibble_lands_on_inner_ring():
    grid = decode_seed(bytes(5) + b"\x80" + bytes(26))
    assert grid[0, 10] == 1
    assert grid.sum() == 1


def test_decode_is_deterministic():
    for seed in random_seeds(5):
        assert np.array_equal(decode_seed(seed), decode_seed(seed))


def test_encode_inverts_decode():
    for seed in [ZERO_SEED, ONES_SEED, COUNTING_SEED, *random_seeds(20)]:
        assert encode_grid(decode_seed(seed)) == seed


def test_popcount_preserved():
    for seed in random_seeds(5, seed=9):
        ones = sum(bin(b).count("1") for b in seed)
        assert int(decode_seed(seed).sum()) == ones


def test_wrong_seed_length_rejected():
    with pytest.raises(ValueError):
        decode_seed(bytes(31))


def test_wrong_grid_shape_rejected():
    with pytest.raises(ValueError):
        encode_grid(np.zeros((64, 4), dtype=np.uint8))
