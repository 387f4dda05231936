"""Keccak-f[1600] Permutation.

The state is 25 lanes of 64 bits, lane (x, y) at flat index x + 5 * y. Lanes
are held in a little-endian `numpy.uint64` array so the byte view of the state
always has the FIPS 202 byte order, whatever the host byte order. Each round
applies theta, rho and pi, chi, then iota, vectorized over the 5x5 grid.
"""

from typing import Iterator, Tuple

import numpy as np

LANE_DTYPE = np.dtype("<u8")
STATE_BYTES = 200
LANES = 25
ROUNDS = 24

_WIDTH = np.uint64(64)


def new_state() -> np.ndarray:
    """All-zero 25-lane state."""
    return np.zeros(LANES, dtype=LANE_DTYPE)


def rotl64(lanes, offsets):
    """Left rotate 64-bit lanes; offsets may be a scalar or an array."""
    offsets = np.asarray(offsets, dtype=np.uint64) % _WIDTH
    return (lanes << offsets) | (lanes >> ((_WIDTH - offsets) % _WIDTH))


def lfsr86540(lfsr: int) -> Tuple[int, int]:
    """One step of the x^8 + x^6 + x^5 + x^4 + 1 LFSR: (output bit, next state)."""
    bit = lfsr & 0x01
    if lfsr & 0x80:
        lfsr = ((lfsr << 1) ^ 0x71) & 0xFF
    else:
        lfsr = (lfsr << 1) & 0xFF
    return bit, lfsr


def round_constants(rounds: int = ROUNDS) -> Iterator[int]:
    """Generate the iota constants round by round from the LFSR."""
    lfsr = 0x01
    for _ in range(rounds):
        constant = 0
        for j in range(7):
            bit, lfsr = lfsr86540(lfsr)
            if bit:
                constant |= 1 << ((1 << j) - 1)
        yield constant


def _rho_pi_schedule() -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Lane moves of rho and pi, walking (x, y) -> (y, 2x + 3y) from (1, 0)."""
    sources, targets, offsets = [], [], []
    x, y = 1, 0
    for t in range(24):
        sources.append(x + 5 * y)
        x, y = y, (2 * x + 3 * y) % 5
        targets.append(x + 5 * y)
        offsets.append(((t + 1) * (t + 2) // 2) % 64)
    return (
        np.array(sources, dtype=np.intp),
        np.array(targets, dtype=np.intp),
        np.array(offsets, dtype=np.uint64),
    )


RHO_PI_SOURCES, RHO_PI_TARGETS, RHO_OFFSETS = _rho_pi_schedule()


def theta(grid: np.ndarray) -> np.ndarray:
    """Column parity diffusion; grid is indexed [y, x]."""
    parity = np.bitwise_xor.reduce(grid, axis=0)
    effect = np.roll(parity, 1) ^ rotl64(np.roll(parity, -1), 1)
    return grid ^ effect


def rho_pi(grid: np.ndarray) -> np.ndarray:
    """Rotate every lane and move it along the (0 1)(2 3) orbit."""
    lanes = grid.reshape(LANES)
    moved = lanes.copy()
    moved[RHO_PI_TARGETS] = rotl64(lanes[RHO_PI_SOURCES], RHO_OFFSETS)
    return moved.reshape(5, 5)


def chi(grid: np.ndarray) -> np.ndarray:
    """Nonlinear row mixing: a ^ (~b & c) along each plane."""
    return grid ^ (~np.roll(grid, -1, axis=1) & np.roll(grid, -2, axis=1))


def iota(grid: np.ndarray, constant: int) -> np.ndarray:
    grid[0, 0] ^= np.uint64(constant)
    return grid


def keccak_f1600(lanes: np.ndarray) -> np.ndarray:
    """Apply the 24-round permutation to a 25-lane state, returning a new state."""
    if lanes.shape != (LANES,):
        raise ValueError(f"state must hold {LANES} lanes, got shape {lanes.shape}")
    grid = lanes.astype(np.uint64).reshape(5, 5)
    for constant in round_constants():
        grid = iota(chi(rho_pi(theta(grid))), constant)
    return grid.reshape(LANES).astype(LANE_DTYPE)


def permute(state: np.ndarray) -> None:
    """Permute a 25-lane state in place."""
    state[:] = keccak_f1600(state)


def permute_bytes(state: bytes) -> bytes:
    """Permute a flat 200-byte state."""
    if len(state) != STATE_BYTES:
        raise ValueError(f"state must be {STATE_BYTES} bytes, got {len(state)}")
    lanes = np.frombuffer(bytes(state), dtype=LANE_DTYPE).copy()
    permute(lanes)
    return lanes.tobytes()
