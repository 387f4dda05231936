import hashlib

import numpy as np
import pytest

from purehash import sha1
from tests import vectors


@pytest.mark.parametrize("data,expected", vectors.SHA1.items())
def test_sha1_vectors(data, expected):
    assert sha1.sha1(data) == expected


def test_sha1_million_a():
    engine = sha1.Sha1()
    chunk = b"a" * 10_000
    for _ in range(100):
        engine.update(chunk)
    assert engine.finalize().hexdigest() == "34aa973cd4c4daa4f61eeb2bdbad27316534016f"


def test_sha1_random():
    rng = np.random.default_rng(1804)
    for size in rng.integers(0, 300, size=20):
        data = rng.integers(0, 256, size=int(size), dtype=np.uint8).tobytes()
        assert sha1.sha1(data) == hashlib.sha1(data).hexdigest()


@pytest.mark.parametrize("size", [55, 56, 63, 64, 65, 119, 120])
def test_sha1_padding_boundaries(size):
    data = bytes(range(size))
    assert sha1.sha1(data) == hashlib.sha1(data).hexdigest()


def test_message_schedule_array():
    w = sha1.message_schedule_array(bytes(64))
    assert len(w) == 80
    assert w == [0] * 80
