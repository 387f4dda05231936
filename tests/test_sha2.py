import hashlib

import numpy as np
import pytest
from Crypto.Hash import SHA512

from purehash import sha2
from purehash.errors import InvalidParameterError
from tests import vectors


@pytest.mark.parametrize(
    "function,table",
    [
        (sha2.sha224, vectors.SHA224),
        (sha2.sha256, vectors.SHA256),
        (sha2.sha384, vectors.SHA384),
        (sha2.sha512, vectors.SHA512),
        (sha2.sha512_224, vectors.SHA512_224),
        (sha2.sha512_256, vectors.SHA512_256),
    ],
)
def test_sha2_vectors(function, table):
    for data, expected in table.items():
        assert function(data) == expected


@pytest.mark.parametrize("name", ["sha224", "sha256", "sha384", "sha512"])
def test_sha2_random(name):
    rng = np.random.default_rng(1804 + len(name))
    function = getattr(sha2, name)
    for size in rng.integers(0, 400, size=15):
        data = rng.integers(0, 256, size=int(size), dtype=np.uint8).tobytes()
        assert function(data) == hashlib.new(name, data).hexdigest()


@pytest.mark.parametrize("size", [55, 56, 63, 64, 65, 111, 112, 127, 128, 129, 239, 240])
@pytest.mark.parametrize("name", ["sha224", "sha256", "sha384", "sha512"])
def test_sha2_padding_boundaries(name, size):
    data = b"\x5a" * size
    assert getattr(sha2, name)(data) == hashlib.new(name, data).hexdigest()


def test_sha512_896_bit_message():
    assert sha2.sha512(vectors.MSG_896) == hashlib.sha512(vectors.MSG_896).hexdigest()


@pytest.mark.parametrize("t", ["224", "256"])
def test_sha512t_against_pycryptodome(t):
    rng = np.random.default_rng(int(t))
    for size in (0, 1, 111, 112, 127, 128, 300):
        data = rng.integers(0, 256, size=size, dtype=np.uint8).tobytes()
        oracle = SHA512.new(data, truncate=t).hexdigest()
        assert sha2.sha512t(int(t), data) == oracle


def test_sha512t_is_not_truncated_sha512():
    for t in (224, 256):
        assert sha2.sha512t(t, b"abc") != sha2.sha512(b"abc")[: t // 4]


def test_derived_iv_differs_from_seed():
    iv = sha2.derive_iv(256)
    assert len(iv) == 8
    assert iv != sha2.IV_512
    assert iv != sha2.IV_512T_SEED
    assert iv[0] == 0x22312194FC2BF72C


def test_sha512_224_iv():
    assert sha2.derive_iv(224)[0] == 0x8C3D37C819544DA2


@pytest.mark.parametrize("t", [4, 8, 12, 100, 200, 255, 512, 520, 1000, 2048])
def test_sha512t_width(t):
    engine = sha2.Sha512T(t, b"abc")
    result = engine.finalize()
    width = min(t, 512)
    assert len(result.hexdigest()) == width // 4
    assert result.digest_size == (width + 7) // 8
    assert result.name == f"sha512_{t}"


@pytest.mark.parametrize("t", [0, 3, 384, 2049, -1])
def test_sha512t_rejects_bad_t(t):
    with pytest.raises(InvalidParameterError):
        sha2.Sha512T(t)


@pytest.mark.parametrize("t", [256.0, "256", True])
def test_sha512t_rejects_non_int_t(t):
    with pytest.raises(InvalidParameterError):
        sha2.sha512t(t, b"abc")


def test_invalid_t_is_value_error():
    with pytest.raises(ValueError):
        sha2.validate_t(384)


def test_sha512t_reset_uses_derived_iv():
    engine = sha2.Sha512_256(b"junk")
    engine.finalize()
    engine.reset()
    engine.update(b"abc")
    assert engine.finalize().hexdigest() == vectors.SHA512_256[vectors.ABC]


def test_sha512t_streaming():
    engine = sha2.Sha512_224()
    for byte in vectors.ABC:
        engine.update(bytes([byte]))
    assert engine.finalize() == vectors.SHA512_224[vectors.ABC]


def test_sha2_rounds_sizes():
    assert sha2.SHA256_ROUNDS.block_size == 64
    assert sha2.SHA256_ROUNDS.round_size == 64
    assert sha2.SHA512_ROUNDS.block_size == 128
    assert sha2.SHA512_ROUNDS.round_size == 80


@pytest.mark.parametrize("t", [4, 12, 100, 250])
def test_sha512t_digest_clears_bits_past_t(t):
    result = sha2.Sha512T(t, b"abc").finalize()
    spare = 8 * result.digest_size - t
    assert result.digest()[-1] & ((1 << spare) - 1) == 0
    assert result.digest().hex().startswith(result.hexdigest())
    assert result == bytes.fromhex(result.hexdigest() + "0")


def test_sha512t_whole_byte_widths_keep_last_byte():
    full = sha2.Sha512T(256, b"abc").finalize().digest()
    assert sha2.Sha512T(256, b"abc").finalize().hexdigest() == full.hex()
    assert len(full) == 32


def test_sha2_rounds_word_helpers():
    assert sha2.SHA256_ROUNDS.rotate(1, 1) == 0x80000000
    assert sha2.SHA512_ROUNDS.rotate(1, 1) == 0x8000000000000000
    assert sha2.SHA256_ROUNDS.add(0xFFFFFFFF, 2) == 1
    assert sha2.SHA512_ROUNDS.add(0xFFFFFFFF, 2) == 0x100000001
