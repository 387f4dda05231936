"""Keccak Sponge Construction.

`KeccakSponge` absorbs input incrementally into a Keccak-f[1600] state,
pads with a domain-separating delimited suffix and squeezes any number of
output bytes. `keccak()` is the one-shot form over a whole buffer.
"""

import logging

import numpy as np

from purehash import bits
from purehash.errors import EngineStateError, InvalidParameterError
from purehash.keccak import new_state, permute

logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)
logger.addHandler(logging.NullHandler())

WIDTH = 1600

SHA3_SUFFIX = 0x06
SHAKE_SUFFIX = 0x1F


def validate_sponge(rate: int, capacity: int, delimited_suffix: int) -> None:
    if rate + capacity != WIDTH:
        raise InvalidParameterError(
            f"rate + capacity must equal {WIDTH}, got {rate} + {capacity}"
        )
    if rate <= 0 or rate % 8:
        raise InvalidParameterError(f"rate must be a positive multiple of 8, got {rate}")
    if not 0x01 <= delimited_suffix <= 0xFF:
        raise InvalidParameterError(
            f"delimited suffix must fit in one non-zero byte, got {delimited_suffix:#x}"
        )


class KeccakSponge:
    """Keccak[rate, capacity] sponge over a 200-byte state.

    Absorbing and squeezing track the byte position inside the rate; there is
    no bit-length counter.
    """

    def __init__(self, rate: int, capacity: int, delimited_suffix: int):
        validate_sponge(rate, capacity, delimited_suffix)
        self.rate = rate
        self.capacity = capacity
        self.delimited_suffix = delimited_suffix
        self.rate_bytes = rate // 8
        self._lanes = new_state()
        self._state = self._lanes.view(np.uint8)
        self._position = 0
        self._squeezing = False

    @property
    def squeezing(self) -> bool:
        return self._squeezing

    def state_bytes(self) -> bytes:
        return self._state.tobytes()

    def _permute(self) -> None:
        permute(self._lanes)
        self._position = 0

    def absorb(self, data: bits.BytesLike) -> None:
        """XOR input into the rate, permuting after every full block."""
        if self._squeezing:
            raise EngineStateError("cannot absorb after the sponge has been padded")
        incoming = np.frombuffer(bits.as_bytes(data), dtype=np.uint8)
        pos, end = 0, len(incoming)
        while pos < end:
            take = min(end - pos, self.rate_bytes - self._position)
            self._state[self._position : self._position + take] ^= incoming[pos : pos + take]
            self._position += take
            pos += take
            if self._position == self.rate_bytes:
                self._permute()

    def pad(self) -> None:
        """Apply the delimited suffix and pad10*1, then switch to squeezing."""
        if self._squeezing:
            raise EngineStateError("sponge has already been padded")
        self._state[self._position] ^= self.delimited_suffix
        # the delimiter's last bit took the final rate byte: pad10*1 needs a new block
        if self.delimited_suffix & 0x80 and self._position == self.rate_bytes - 1:
            permute(self._lanes)
        self._state[self.rate_bytes - 1] ^= 0x80
        self._permute()
        self._squeezing = True

    def squeeze(self, length: int) -> bytes:
        """Emit the next `length` output bytes, permuting between rate blocks."""
        if length < 0:
            raise InvalidParameterError(f"output length must be >= 0, got {length}")
        if not self._squeezing:
            self.pad()
        out = bytearray()
        while len(out) < length:
            if self._position == self.rate_bytes:
                self._permute()
            take = min(length - len(out), self.rate_bytes - self._position)
            out += self._state[self._position : self._position + take].tobytes()
            self._position += take
        return bytes(out)


def keccak(
    rate: int,
    capacity: int,
    data: bits.BytesLike,
    delimited_suffix: int,
    output_length: int,
) -> bytes:
    """Keccak[rate, capacity] over a whole buffer, returning output_length bytes."""
    sponge = KeccakSponge(rate, capacity, delimited_suffix)
    sponge.absorb(data)
    sponge.pad()
    return sponge.squeeze(output_length)
