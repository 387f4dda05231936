"""SHA-1 Hash Algorithm (FIPS 180-4)."""

from typing import List, Sequence

from purehash import bits, fileio
from purehash.bits import add32, leftrotate32
from purehash.engine import MerkleDamgardHash

BLOCK_SIZE = 64
DIGEST_SIZE = 20
ROUND_SIZE = 80

IV = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

ROUND_CONSTANTS = (0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6)


def choice(x: int, y: int, z: int) -> int:
    """Choice between y and z with x."""
    return (x & y) | (~x & z)


def parity(x: int, y: int, z: int) -> int:
    return x ^ y ^ z


def majority(x: int, y: int, z: int) -> int:
    """Majority among x, y and z."""
    return (x & y) | (x & z) | (y & z)


ROUND_FUNCTIONS = (choice, parity, majority, parity)


def message_schedule_array(block: bytes) -> List[int]:
    """Expand a block into the 80-word schedule by XOR and rotate."""
    w = bits.bytes_to_words(block, 4, "big")
    for i in range(16, ROUND_SIZE):
        w.append(leftrotate32(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1))
    return w


def compress_block(input_state_words: Sequence[int], block: bytes) -> List[int]:
    """Compress an input block."""
    w = message_schedule_array(block)
    a, b, c, d, e = input_state_words
    for round_number in range(ROUND_SIZE):
        stage = round_number // 20
        temp = add32(
            leftrotate32(a, 5),
            ROUND_FUNCTIONS[stage](b, c, d),
            e,
            ROUND_CONSTANTS[stage],
            w[round_number],
        )
        a, b, c, d, e = temp, a, leftrotate32(b, 30), c, d
    return [add32(s, v) for s, v in zip(input_state_words, (a, b, c, d, e))]


class Sha1(MerkleDamgardHash):
    name = "sha1"
    family = "sha1"
    block_size = BLOCK_SIZE
    digest_size = DIGEST_SIZE
    word_size = 4
    byteorder = "big"
    length_size = 8
    initial_state = IV

    def _compress(self, state: List[int], block: bytes) -> List[int]:
        return compress_block(state, block)


def sha1(data: bits.BytesLike) -> str:
    """SHA-1 hex digest of `data`."""
    return Sha1(data).finalize().hexdigest()


def sha1_file(path: fileio.PathLike) -> str:
    return fileio.hash_file(Sha1(), path).hexdigest()
