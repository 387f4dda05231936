import hashlib

import numpy as np
import pytest

from purehash import md5
from tests import vectors


@pytest.mark.parametrize("data,expected", vectors.MD5.items())
def test_md5_vectors(data, expected):
    assert md5.md5(data) == expected


def test_md5_random():
    rng = np.random.default_rng(1321)
    for size in rng.integers(0, 300, size=20):
        data = rng.integers(0, 256, size=int(size), dtype=np.uint8).tobytes()
        assert md5.md5(data) == hashlib.md5(data).hexdigest()


@pytest.mark.parametrize("size", [55, 56, 57, 63, 64, 65, 119, 120, 128])
def test_md5_padding_boundaries(size):
    data = b"a" * size
    assert md5.md5(data) == hashlib.md5(data).hexdigest()


def test_message_index_permutations():
    for stage in range(4):
        indices = [md5.message_index(16 * stage + step) for step in range(16)]
        assert sorted(indices) == list(range(16))


def test_bit_length_counts_processed_blocks():
    engine = md5.Md5(b"a" * 64)
    assert engine._bit_length == 512
    assert md5.Md5(b"a" * 64).finalize().hexdigest() == hashlib.md5(b"a" * 64).hexdigest()


def test_compress_block_changes_state():
    state = md5.compress_block(md5.IV, bytes(64))
    assert len(state) == 4
    assert all(0 <= w <= 0xFFFFFFFF for w in state)
    assert list(state) != list(md5.IV)
