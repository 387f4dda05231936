"""Streaming engine skeleton shared by every algorithm.

An engine moves through init -> update* -> finalize exactly once. Finalize
seals the engine and hands back an immutable HashResult; any further update or
finalize raises EngineStateError, as does reading the digest of an open engine.
reset() returns a Merkle-Damgard engine to its initial state.
"""

import logging
from typing import List, Optional, Sequence, Tuple, Union

from purehash import bits
from purehash.errors import EngineStateError, InvalidParameterError

logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)
logger.addHandler(logging.NullHandler())


class HashResult:
    """Immutable output of a finalized engine."""

    __slots__ = ("_name", "_digest", "_hex_length")

    def __init__(self, name: str, digest: bytes, hex_length: Optional[int] = None):
        self._name = name
        self._digest = bytes(digest)
        self._hex_length = 2 * len(self._digest) if hex_length is None else hex_length

    @property
    def name(self) -> str:
        return self._name

    @property
    def digest_size(self) -> int:
        return len(self._digest)

    def digest(self) -> bytes:
        return self._digest

    def hexdigest(self) -> str:
        return self._digest.hex()[: self._hex_length]

    def hexdigest_into(self, buffer: Union[bytearray, memoryview]) -> int:
        """Write the ASCII hex digest into `buffer`, returning the bytes written."""
        if len(buffer) < self._hex_length:
            raise InvalidParameterError(
                f"buffer holds {len(buffer)} bytes, {self._hex_length} needed"
            )
        if self._hex_length == 2 * len(self._digest):
            return bits.hexlify_into(self._digest, buffer)
        buffer[: self._hex_length] = self.hexdigest().encode("ascii")
        return self._hex_length

    def __len__(self) -> int:
        return len(self._digest)

    def __eq__(self, other) -> bool:
        if isinstance(other, HashResult):
            return self._digest == other._digest and self._hex_length == other._hex_length
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._digest == bytes(other)
        if isinstance(other, str):
            return self.hexdigest() == other.lower()
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._digest, self._hex_length))

    def __repr__(self) -> str:
        return f"HashResult({self._name!r}, {self.hexdigest()!r})"


class HashEngine:
    """Common lifecycle for all engines."""

    name: str = ""
    family: str = ""
    digest_size: int = 0
    block_size: int = 0
    hex_length: Optional[int] = None

    _result: Optional[HashResult] = None

    def _absorb(self, data: memoryview) -> None:
        raise NotImplementedError

    def _finish(self) -> bytes:
        raise NotImplementedError

    def update(self, data: bits.BytesLike) -> None:
        """Feed more input; chunking never changes the digest."""
        if self._result is not None:
            raise EngineStateError(f"{self.name}: update() after finalize()")
        self._absorb(bits.as_bytes(data))

    def finalize(self) -> HashResult:
        """Pad, run the final transform(s) and seal the engine."""
        if self._result is not None:
            raise EngineStateError(f"{self.name}: finalize() called twice")
        self._result = HashResult(self.name, self._finish(), self.hex_length)
        return self._result

    @property
    def finalized(self) -> bool:
        return self._result is not None

    def result(self) -> HashResult:
        if self._result is None:
            raise EngineStateError(f"{self.name}: digest read before finalize()")
        return self._result

    def digest(self) -> bytes:
        return self.result().digest()

    def hexdigest(self) -> str:
        return self.result().hexdigest()

    def __repr__(self) -> str:
        state = "finalized" if self.finalized else "open"
        return f"<{type(self).__name__} {self.name} {state}>"


class MerkleDamgardHash(HashEngine):
    """Streaming Merkle-Damgard engine.

    Concrete algorithms supply the chaining-state word layout through class
    attributes and the block transform through `_compress`:

        block_size    bytes per compression block (64 or 128)
        word_size     bytes per chaining-state word (4 or 8)
        byteorder     word and length-field endianness ("big" or "little")
        length_size   bytes reserved for the bit length at the end of padding
        initial_state the published initialization vector
    """

    word_size: int = 4
    byteorder: str = "big"
    length_size: int = 8
    initial_state: Tuple[int, ...] = ()

    def __init__(self, data: bits.BytesLike = b""):
        self.reset()
        if data:
            self.update(data)

    def _initial_state(self) -> Sequence[int]:
        return self.initial_state

    def _compress(self, state: List[int], block: bytes) -> List[int]:
        raise NotImplementedError

    def reset(self) -> None:
        """Return to the initial chaining state with an empty buffer."""
        self._state = list(self._initial_state())
        self._buffer = bytearray()
        self._bit_length = 0
        self._result = None

    def _transform(self, block: bytes) -> None:
        self._state = self._compress(self._state, block)
        self._bit_length = (self._bit_length + 8 * self.block_size) & bits.MASK64

    def _absorb(self, data: memoryview) -> None:
        size = self.block_size
        pos, end = 0, len(data)
        if self._buffer:
            pos = min(size - len(self._buffer), end)
            self._buffer += data[:pos]
            if len(self._buffer) < size:
                return
            self._transform(bytes(self._buffer))
            self._buffer.clear()
        while end - pos >= size:
            self._transform(data[pos : pos + size].tobytes())
            pos += size
        self._buffer += data[pos:]

    def _finish(self) -> bytes:
        size = self.block_size
        bit_length = (self._bit_length + 8 * len(self._buffer)) & bits.MASK64
        tail = self._buffer + b"\x80"
        tail += bytes((size - self.length_size - len(tail)) % size)
        tail += bit_length.to_bytes(self.length_size, self.byteorder)
        for i in range(0, len(tail), size):
            self._state = self._compress(self._state, bytes(tail[i : i + size]))
        self._buffer.clear()
        logger.debug(
            "%s finalized after %d bits with %d final transform(s)",
            self.name,
            bit_length,
            len(tail) // size,
        )
        return self.serialize(self._state)

    def serialize(self, state: Sequence[int]) -> bytes:
        """Chaining-state words as digest bytes, truncated to digest_size."""
        raw = bits.words_to_bytes(state, self.word_size, self.byteorder)
        return raw[: self.digest_size]
