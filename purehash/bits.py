"""Bit and Byte Utilities shared by every engine."""

from typing import Iterable, List, Sequence, Union

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

BytesLike = Union[bytes, bytearray, memoryview, str]

_HEX_CHARS = b"0123456789abcdef"


def add32(*args: int) -> int:
    """Sum the args but within width 32."""
    return sum(args) & MASK32


def add64(*args: int) -> int:
    """Sum the args but within width 64."""
    return sum(args) & MASK64


def rightrotate32(x: int, n: int) -> int:
    """Right rotate at width 32."""
    n %= 32
    return ((x >> n) | (x << (32 - n))) & MASK32


def leftrotate32(x: int, n: int) -> int:
    """Left rotate at width 32."""
    n %= 32
    return ((x << n) | (x >> (32 - n))) & MASK32


def rightrotate64(x: int, n: int) -> int:
    """Right rotate at width 64."""
    n %= 64
    return ((x >> n) | (x << (64 - n))) & MASK64


def bytes_to_words(block: bytes, width: int, byteorder: str) -> List[int]:
    """Split a block into unsigned words of `width` bytes."""
    if len(block) % width:
        raise ValueError(f"block of {len(block)} bytes is not a multiple of {width}")
    return [
        int.from_bytes(block[i : i + width], byteorder)
        for i in range(0, len(block), width)
    ]


def words_to_bytes(words: Iterable[int], width: int, byteorder: str) -> bytes:
    """Join unsigned words of `width` bytes into a byte string."""
    return b"".join(w.to_bytes(width, byteorder) for w in words)


def as_bytes(data: BytesLike) -> memoryview:
    """View hash input as bytes, encoding text as UTF-8."""
    if isinstance(data, str):
        return memoryview(data.encode("utf-8"))
    if isinstance(data, (bytes, bytearray, memoryview)):
        view = memoryview(data)
        return view.cast("B") if view.format != "B" or view.ndim != 1 else view
    raise TypeError(
        f"object supporting the buffer API required, not {type(data).__name__!r}"
    )


def hexlify(data: Sequence[int]) -> str:
    """Lowercase, zero-padded hex rendering of raw bytes."""
    return bytes(data).hex()


def hexlify_into(data: Sequence[int], out: Union[bytearray, memoryview]) -> int:
    """Write the lowercase hex of `data` into a caller-owned buffer.

    Returns the number of bytes written. Raises ValueError when `out` cannot
    hold two characters per input byte.
    """
    needed = 2 * len(data)
    if len(out) < needed:
        raise ValueError(f"output buffer holds {len(out)} bytes, {needed} needed")
    k = 0
    for byte in data:
        out[k] = _HEX_CHARS[byte >> 4]
        out[k + 1] = _HEX_CHARS[byte & 0x0F]
        k += 2
    return needed
