"""MD5 Hash Algorithm (RFC 1321)."""

import logging
from typing import List, Sequence

from purehash import bits, fileio
from purehash.bits import add32, leftrotate32
from purehash.engine import MerkleDamgardHash

logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)
logger.addHandler(logging.NullHandler())

BLOCK_SIZE = 64
DIGEST_SIZE = 16

IV = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

# floor(abs(sin(i + 1)) * 2**32)
ROUND_CONSTANTS = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
    0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
    0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
    0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
    0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
    0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

SHIFTS = (
    (7, 12, 17, 22),
    (5, 9, 14, 20),
    (4, 11, 16, 23),
    (6, 10, 15, 21),
)


def f(x: int, y: int, z: int) -> int:
    return (x & y) | (~x & z)


def g(x: int, y: int, z: int) -> int:
    return (x & z) | (y & ~z)


def h(x: int, y: int, z: int) -> int:
    return x ^ y ^ z


def i(x: int, y: int, z: int) -> int:
    return (y ^ (x | ~z)) & bits.MASK32


ROUND_FUNCTIONS = (f, g, h, i)


def message_index(round_number: int) -> int:
    """Which of the 16 block words feeds the given round."""
    stage, step = divmod(round_number, 16)
    if stage == 0:
        return step
    if stage == 1:
        return (5 * step + 1) % 16
    if stage == 2:
        return (3 * step + 5) % 16
    return (7 * step) % 16


def compress_block(input_state_words: Sequence[int], block: bytes) -> List[int]:
    """Compress a 64-byte block into the four-word chaining state."""
    x = bits.bytes_to_words(block, 4, "little")
    a, b, c, d = input_state_words
    for round_number in range(64):
        stage = round_number // 16
        mixed = ROUND_FUNCTIONS[stage](b, c, d)
        rotated = leftrotate32(
            add32(a, mixed, x[message_index(round_number)], ROUND_CONSTANTS[round_number]),
            SHIFTS[stage][round_number % 4],
        )
        a, b, c, d = d, add32(b, rotated), b, c
    return [add32(s, v) for s, v in zip(input_state_words, (a, b, c, d))]


class Md5(MerkleDamgardHash):
    """Streaming MD5: little-endian words and little-endian length field."""

    name = "md5"
    family = "md5"
    block_size = BLOCK_SIZE
    digest_size = DIGEST_SIZE
    word_size = 4
    byteorder = "little"
    length_size = 8
    initial_state = IV

    def _compress(self, state: List[int], block: bytes) -> List[int]:
        return compress_block(state, block)


def md5(data: bits.BytesLike) -> str:
    """MD5 hex digest of `data`."""
    return Md5(data).finalize().hexdigest()


def md5_file(path: fileio.PathLike) -> str:
    """MD5 hex digest of the file at `path`."""
    return fileio.hash_file(Md5(), path).hexdigest()
