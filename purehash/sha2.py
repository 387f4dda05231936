"""SHA-2 Hash Algorithms (FIPS 180-4).

One compression function serves the whole family. It is parameterized by a
`Sha2Rounds` description: word width, round constants and the rotation and
shift amounts of the four sigma functions. SHA-224/256 run 64 rounds over
32-bit words, SHA-384/512 and SHA-512/t run 80 rounds over 64-bit words. The
truncated variants differ from their base only in the initialization vector
and in how much of the final chaining state is emitted.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from purehash import bits, fileio
from purehash.engine import MerkleDamgardHash
from purehash.errors import InvalidParameterError

logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)
logger.addHandler(logging.NullHandler())

ROUND_CONSTANTS_256 = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3, 0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13, 0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208, 0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

ROUND_CONSTANTS_512 = (
    0x428A2F98D728AE22, 0x7137449123EF65CD, 0xB5C0FBCFEC4D3B2F, 0xE9B5DBA58189DBBC,
    0x3956C25BF348B538, 0x59F111F1B605D019, 0x923F82A4AF194F9B, 0xAB1C5ED5DA6D8118,
    0xD807AA98A3030242, 0x12835B0145706FBE, 0x243185BE4EE4B28C, 0x550C7DC3D5FFB4E2,
    0x72BE5D74F27B896F, 0x80DEB1FE3B1696B1, 0x9BDC06A725C71235, 0xC19BF174CF692694,
    0xE49B69C19EF14AD2, 0xEFBE4786384F25E3, 0x0FC19DC68B8CD5B5, 0x240CA1CC77AC9C65,
    0x2DE92C6F592B0275, 0x4A7484AA6EA6E483, 0x5CB0A9DCBD41FBD4, 0x76F988DA831153B5,
    0x983E5152EE66DFAB, 0xA831C66D2DB43210, 0xB00327C898FB213F, 0xBF597FC7BEEF0EE4,
    0xC6E00BF33DA88FC2, 0xD5A79147930AA725, 0x06CA6351E003826F, 0x142929670A0E6E70,
    0x27B70A8546D22FFC, 0x2E1B21385C26C926, 0x4D2C6DFC5AC42AED, 0x53380D139D95B3DF,
    0x650A73548BAF63DE, 0x766A0ABB3C77B2A8, 0x81C2C92E47EDAEE6, 0x92722C851482353B,
    0xA2BFE8A14CF10364, 0xA81A664BBC423001, 0xC24B8B70D0F89791, 0xC76C51A30654BE30,
    0xD192E819D6EF5218, 0xD69906245565A910, 0xF40E35855771202A, 0x106AA07032BBD1B8,
    0x19A4C116B8D2D0C8, 0x1E376C085141AB53, 0x2748774CDF8EEB99, 0x34B0BCB5E19B48A8,
    0x391C0CB3C5C95A63, 0x4ED8AA4AE3418ACB, 0x5B9CCA4F7763E373, 0x682E6FF3D6B2B8A3,
    0x748F82EE5DEFB2FC, 0x78A5636F43172F60, 0x84C87814A1F0AB72, 0x8CC702081A6439EC,
    0x90BEFFFA23631E28, 0xA4506CEBDE82BDE9, 0xBEF9A3F7B2C67915, 0xC67178F2E372532B,
    0xCA273ECEEA26619C, 0xD186B8C721C0C207, 0xEADA7DD6CDE0EB1E, 0xF57D4F7FEE6ED178,
    0x06F067AA72176FBA, 0x0A637DC5A2C898A6, 0x113F9804BEF90DAE, 0x1B710B35131C471B,
    0x28DB77F523047D84, 0x32CAAB7B40C72493, 0x3C9EBE0A15C9BEBC, 0x431D67C49C100D4C,
    0x4CC5D4BECB3E42B6, 0x597F299CFC657E2A, 0x5FCB6FAB3AD6FAEC, 0x6C44198C4A475817,
)

IV_224 = (
    0xC1059ED8, 0x367CD507, 0x3070DD17, 0xF70E5939,
    0xFFC00B31, 0x68581511, 0x64F98FA7, 0xBEFA4FA4,
)

IV_256 = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

IV_384 = (
    0xCBBB9D5DC1059ED8, 0x629A292A367CD507, 0x9159015A3070DD17, 0x152FECD8F70E5939,
    0x67332667FFC00B31, 0x8EB44A8768581511, 0xDB0C2E0D64F98FA7, 0x47B5481DBEFA4FA4,
)

IV_512 = (
    0x6A09E667F3BCC908, 0xBB67AE8584CAA73B, 0x3C6EF372FE94F82B, 0xA54FF53A5F1D36F1,
    0x510E527FADE682D1, 0x9B05688C2B3E6C1F, 0x1F83D9ABFB41BD6B, 0x5BE0CD19137E2179,
)

# Seed for the SHA-512/t IV generation function: each SHA-512 IV word ^ a5a5...
IV_512T_SEED = tuple(word ^ 0xA5A5A5A5A5A5A5A5 for word in IV_512)

T_MIN = 4
T_MAX = 2048


@dataclass(frozen=True)
class Sha2Rounds:
    """Word width, constants and sigma amounts for one SHA-2 family."""

    word_bits: int
    round_constants: Tuple[int, ...]
    little_sigma0: Tuple[int, int, int]
    little_sigma1: Tuple[int, int, int]
    big_sigma0: Tuple[int, int, int]
    big_sigma1: Tuple[int, int, int]

    @property
    def add(self) -> Callable[..., int]:
        return bits.add32 if self.word_bits == 32 else bits.add64

    @property
    def rotate(self) -> Callable[[int, int], int]:
        return bits.rightrotate32 if self.word_bits == 32 else bits.rightrotate64

    @property
    def word_size(self) -> int:
        return self.word_bits // 8

    @property
    def block_size(self) -> int:
        return 16 * self.word_size

    @property
    def round_size(self) -> int:
        return len(self.round_constants)


SHA256_ROUNDS = Sha2Rounds(
    word_bits=32,
    round_constants=ROUND_CONSTANTS_256,
    little_sigma0=(7, 18, 3),
    little_sigma1=(17, 19, 10),
    big_sigma0=(2, 13, 22),
    big_sigma1=(6, 11, 25),
)

SHA512_ROUNDS = Sha2Rounds(
    word_bits=64,
    round_constants=ROUND_CONSTANTS_512,
    little_sigma0=(1, 8, 7),
    little_sigma1=(19, 61, 6),
    big_sigma0=(28, 34, 39),
    big_sigma1=(14, 18, 41),
)


def little_sigma(rounds: Sha2Rounds, amounts: Tuple[int, int, int], word: int) -> int:
    """Little sigma: two rotations and a shift."""
    r1, r2, shift = amounts
    return rounds.rotate(word, r1) ^ rounds.rotate(word, r2) ^ (word >> shift)


def big_sigma(rounds: Sha2Rounds, amounts: Tuple[int, int, int], word: int) -> int:
    """Big sigma: three rotations."""
    rotate = rounds.rotate
    return rotate(word, amounts[0]) ^ rotate(word, amounts[1]) ^ rotate(word, amounts[2])


def choice(x: int, y: int, z: int) -> int:
    """Choice between y and z with x."""
    return (x & y) ^ (~x & z)


def majority(x: int, y: int, z: int) -> int:
    """Majority among x, y and z."""
    return (x & y) ^ (x & z) ^ (y & z)


def message_schedule_array(rounds: Sha2Rounds, block: bytes) -> List[int]:
    """Compute the message schedule array."""
    if len(block) != rounds.block_size:
        raise ValueError(f"block must be {rounds.block_size} bytes, got {len(block)}")
    w = bits.bytes_to_words(block, rounds.word_size, "big")
    add = rounds.add
    for i in range(16, rounds.round_size):
        s0 = little_sigma(rounds, rounds.little_sigma0, w[i - 15])
        s1 = little_sigma(rounds, rounds.little_sigma1, w[i - 2])
        w.append(add(w[i - 16], s0, w[i - 7], s1))
    return w


def round_(
    rounds: Sha2Rounds, state: Sequence[int], round_constant: int, schedule_word: int
) -> List[int]:
    """Round state given the constant and schedule word."""
    add = rounds.add
    s1 = big_sigma(rounds, rounds.big_sigma1, state[4])
    ch = choice(state[4], state[5], state[6])
    temp1 = add(state[7], s1, ch, round_constant, schedule_word)
    s0 = big_sigma(rounds, rounds.big_sigma0, state[0])
    maj = majority(state[0], state[1], state[2])
    temp2 = add(s0, maj)
    return [
        add(temp1, temp2),
        state[0],
        state[1],
        state[2],
        add(state[3], temp1),
        state[4],
        state[5],
        state[6],
    ]


def compress_block(
    rounds: Sha2Rounds, input_state_words: Sequence[int], block: bytes
) -> List[int]:
    """Compress an input block."""
    w = message_schedule_array(rounds, block)
    state_words = list(input_state_words)
    for round_constant, schedule_word in zip(rounds.round_constants, w):
        state_words = round_(rounds, state_words, round_constant, schedule_word)
    add = rounds.add
    return [add(x, y) for x, y in zip(input_state_words, state_words)]


class Sha2Hash(MerkleDamgardHash):
    """Streaming SHA-2 engine; subclasses pick rounds, IV and output width."""

    family = "sha2"
    byteorder = "big"
    rounds: Sha2Rounds = SHA256_ROUNDS

    def _compress(self, state: List[int], block: bytes) -> List[int]:
        return compress_block(self.rounds, state, block)


class Sha256(Sha2Hash):
    name = "sha256"
    rounds = SHA256_ROUNDS
    block_size = 64
    digest_size = 32
    word_size = 4
    length_size = 8
    initial_state = IV_256


class Sha224(Sha256):
    """SHA-256 with its own IV, emitting the first seven words."""

    name = "sha224"
    digest_size = 28
    initial_state = IV_224


class Sha512(Sha2Hash):
    name = "sha512"
    rounds = SHA512_ROUNDS
    block_size = 128
    digest_size = 64
    word_size = 8
    length_size = 16
    initial_state = IV_512


class Sha384(Sha512):
    """SHA-512 with its own IV, emitting the first six words."""

    name = "sha384"
    digest_size = 48
    initial_state = IV_384


class _Sha512TSeed(Sha512):
    name = "sha512t-seed"
    initial_state = IV_512T_SEED


def validate_t(t: int) -> int:
    """Check a SHA-512/t output width, returning it as an int."""
    if isinstance(t, bool) or not isinstance(t, int):
        raise InvalidParameterError(f"t must be an integer, got {type(t).__name__}")
    if t == 384:
        raise InvalidParameterError("t = 384 is not allowed, use Sha384 instead")
    if not T_MIN <= t <= T_MAX:
        raise InvalidParameterError(f"t must satisfy {T_MIN} <= t <= {T_MAX}, got {t}")
    return t


def derive_iv(t: int) -> Tuple[int, ...]:
    """SHA-512/t IV: the seeded SHA-512 chaining state after hashing "SHA-512/t"."""
    t = validate_t(t)
    seed = _Sha512TSeed(f"SHA-512/{t}".encode("ascii"))
    seed.finalize()
    iv = tuple(seed._state)
    logger.debug("Derived SHA-512/%d IV %s", t, " ".join(f"{w:016x}" for w in iv))
    return iv


class Sha512T(Sha512):
    """SHA-512/t: SHA-512 with a derived IV and a t-bit output.

    The emitted width is min(t, 512) bits; digest() rounds up to whole bytes
    and hexdigest() holds min(t, 512) // 4 characters.
    """

    def __init__(self, t: int, data: bits.BytesLike = b""):
        self.t = validate_t(t)
        width = min(self.t, 512)
        self.name = f"sha512_{self.t}"
        self.digest_size = (width + 7) // 8
        self.hex_length = width // 4
        self._derived_iv = derive_iv(self.t)
        super().__init__(data)

    def _initial_state(self) -> Sequence[int]:
        return self._derived_iv

    def serialize(self, state: Sequence[int]) -> bytes:
        """Digest bytes with any bits past t in the last byte cleared."""
        raw = super().serialize(state)
        spare = 8 * len(raw) - min(self.t, 512)
        if not spare:
            return raw
        return raw[:-1] + bytes([raw[-1] & (0xFF << spare) & 0xFF])


class Sha512_224(Sha512T):
    def __init__(self, data: bits.BytesLike = b""):
        super().__init__(224, data)


class Sha512_256(Sha512T):
    def __init__(self, data: bits.BytesLike = b""):
        super().__init__(256, data)


def sha224(data: bits.BytesLike) -> str:
    return Sha224(data).finalize().hexdigest()


def sha256(data: bits.BytesLike) -> str:
    """SHA-256 hex digest of `data`."""
    return Sha256(data).finalize().hexdigest()


def sha384(data: bits.BytesLike) -> str:
    return Sha384(data).finalize().hexdigest()


def sha512(data: bits.BytesLike) -> str:
    """SHA-512 hex digest of `data`."""
    return Sha512(data).finalize().hexdigest()


def sha512t(t: int, data: bits.BytesLike) -> str:
    """SHA-512/t hex digest of `data`, t/4 characters long."""
    return Sha512T(t, data).finalize().hexdigest()


def sha512_224(data: bits.BytesLike) -> str:
    return sha512t(224, data)


def sha512_256(data: bits.BytesLike) -> str:
    return sha512t(256, data)


def sha224_file(path: fileio.PathLike) -> str:
    return fileio.hash_file(Sha224(), path).hexdigest()


def sha256_file(path: fileio.PathLike) -> str:
    return fileio.hash_file(Sha256(), path).hexdigest()


def sha384_file(path: fileio.PathLike) -> str:
    return fileio.hash_file(Sha384(), path).hexdigest()


def sha512_file(path: fileio.PathLike) -> str:
    return fileio.hash_file(Sha512(), path).hexdigest()


def sha512t_file(t: int, path: fileio.PathLike) -> str:
    """SHA-512/t hex digest of the file at `path`; t is checked before reading."""
    return fileio.hash_file(Sha512T(t), path).hexdigest()


def sha512_224_file(path: fileio.PathLike) -> str:
    return sha512t_file(224, path)


def sha512_256_file(path: fileio.PathLike) -> str:
    return sha512t_file(256, path)
