"""SHA-3 and SHAKE (FIPS 202) on the Keccak sponge."""

import logging
import operator
from typing import Tuple

from purehash import bits, fileio
from purehash.engine import HashEngine
from purehash.errors import InvalidParameterError
from purehash.sponge import SHA3_SUFFIX, SHAKE_SUFFIX, KeccakSponge

logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)
logger.addHandler(logging.NullHandler())

# name: (rate, capacity, output bytes)
SHA3_PARAMETERS = {
    "sha3_224": (1152, 448, 28),
    "sha3_256": (1088, 512, 32),
    "sha3_384": (832, 768, 48),
    "sha3_512": (576, 1024, 64),
}

# name: (rate, capacity)
SHAKE_PARAMETERS = {
    "shake128": (1344, 256),
    "shake256": (1088, 512),
}


class KeccakHash(HashEngine):
    """Streaming engine over a Keccak sponge with a fixed output length."""

    family = "keccak"
    rate: int = 0
    capacity: int = 0
    delimited_suffix: int = SHA3_SUFFIX

    def __init__(self, data: bits.BytesLike = b""):
        self._sponge = KeccakSponge(self.rate, self.capacity, self.delimited_suffix)
        self.block_size = self.rate // 8
        if data:
            self.update(data)

    def _absorb(self, data: memoryview) -> None:
        self._sponge.absorb(data)

    def _finish(self) -> bytes:
        self._sponge.pad()
        logger.debug(
            "%s padded with suffix %#04x, squeezing %d bytes",
            self.name,
            self.delimited_suffix,
            self.digest_size,
        )
        return self._sponge.squeeze(self.digest_size)


class Sha3_224(KeccakHash):
    name = "sha3_224"
    rate, capacity, digest_size = SHA3_PARAMETERS[name]


class Sha3_256(KeccakHash):
    name = "sha3_256"
    rate, capacity, digest_size = SHA3_PARAMETERS[name]


class Sha3_384(KeccakHash):
    name = "sha3_384"
    rate, capacity, digest_size = SHA3_PARAMETERS[name]


class Sha3_512(KeccakHash):
    name = "sha3_512"
    rate, capacity, digest_size = SHA3_PARAMETERS[name]


def validate_length(length: int) -> int:
    """Check a caller-chosen SHAKE output length in bytes."""
    try:
        length = operator.index(length)
    except TypeError as exc:
        raise InvalidParameterError(
            f"output length must be an integer, got {type(length).__name__}"
        ) from exc
    if length < 0:
        raise InvalidParameterError(f"output length must be >= 0, got {length}")
    return length


class Shake(KeccakHash):
    """Extendable-output engine: the caller picks the output length in bytes."""

    delimited_suffix = SHAKE_SUFFIX

    def __init__(self, length: int, data: bits.BytesLike = b""):
        self.digest_size = validate_length(length)
        super().__init__(data)


class Shake128(Shake):
    name = "shake128"
    rate, capacity = SHAKE_PARAMETERS[name]


class Shake256(Shake):
    name = "shake256"
    rate, capacity = SHAKE_PARAMETERS[name]


def sha3_224(data: bits.BytesLike) -> str:
    return Sha3_224(data).finalize().hexdigest()


def sha3_256(data: bits.BytesLike) -> str:
    """SHA3-256 hex digest of `data`."""
    return Sha3_256(data).finalize().hexdigest()


def sha3_384(data: bits.BytesLike) -> str:
    return Sha3_384(data).finalize().hexdigest()


def sha3_512(data: bits.BytesLike) -> str:
    return Sha3_512(data).finalize().hexdigest()


def shake128(data: bits.BytesLike, length: int) -> str:
    """SHAKE128 output of `length` bytes, as hex."""
    return Shake128(length, data).finalize().hexdigest()


def shake256(data: bits.BytesLike, length: int) -> str:
    """SHAKE256 output of `length` bytes, as hex."""
    return Shake256(length, data).finalize().hexdigest()


def sha3_224_file(path: fileio.PathLike) -> str:
    return fileio.hash_file(Sha3_224(), path).hexdigest()


def sha3_256_file(path: fileio.PathLike) -> str:
    return fileio.hash_file(Sha3_256(), path).hexdigest()


def sha3_384_file(path: fileio.PathLike) -> str:
    return fileio.hash_file(Sha3_384(), path).hexdigest()


def sha3_512_file(path: fileio.PathLike) -> str:
    return fileio.hash_file(Sha3_512(), path).hexdigest()


def shake128_file(path: fileio.PathLike, length: int) -> str:
    return fileio.hash_file(Shake128(length), path).hexdigest()


def shake256_file(path: fileio.PathLike, length: int) -> str:
    return fileio.hash_file(Shake256(length), path).hexdigest()


def sponge_parameters(name: str) -> Tuple[int, int]:
    """(rate, capacity) in bits for a SHA-3 or SHAKE algorithm name."""
    if name in SHA3_PARAMETERS:
        return SHA3_PARAMETERS[name][:2]
    if name in SHAKE_PARAMETERS:
        return SHAKE_PARAMETERS[name]
    raise InvalidParameterError(f"unknown sponge algorithm {name!r}")
