"""
Keccak-f[1600] permutation (FIPS 202, section 3). Pure Python; cythonized by setup.py.

The state is a flat list of 25 64-bit lanes, lane (x, y) at index x + 5*y.
Every step mapping mutates that list in place.
"""

from __future__ import annotations

PERMUTATION_WIDTH = 25
NUM_ROUNDS = 24

_MASK64 = 0xFFFFFFFFFFFFFFFF

_ROUND_CONSTANTS = (
    0x0000000000000001,
    0x0000000000008082,
    0x800000000000808A,
    0x8000000080008000,
    0x000000000000808B,
    0x0000000080000001,
    0x8000000080008081,
    0x8000000000008009,
    0x000000000000008A,
    0x0000000000000088,
    0x0000000080008009,
    0x000000008000000A,
    0x000000008000808B,
    0x800000000000008B,
    0x8000000000008089,
    0x8000000000008003,
    0x8000000000008002,
    0x8000000000000080,
    0x000000000000800A,
    0x800000008000000A,
    0x8000000080008081,
    0x8000000000008080,
    0x0000000080000001,
    0x8000000080008008,
)

# Indexed x + 5*y
_RHO_OFFSETS = (
    0, 1, 62, 28, 27,
    36, 44, 6, 55, 20,
    3, 10, 43, 25, 39,
    41, 45, 15, 21, 8,
    18, 2, 61, 56, 14,
)  # fmt: skip

# A'[x, y] = A[(x + 3y) mod 5, x]
_PI_SOURCE = tuple(((x + 3 * y) % 5) + 5 * x for y in range(5) for x in range(5))


def _rol64(v: int, n: int) -> int:
    """Rotate 64-bit value v left by n bits (mod 64)."""
    n = n % 64
    return ((v << n) | (v >> (64 - n))) & _MASK64


def theta(lanes: list[int]) -> None:
    """XOR into every lane the parity of two neighbouring columns."""
    c = [
        lanes[x] ^ lanes[x + 5] ^ lanes[x + 10] ^ lanes[x + 15] ^ lanes[x + 20]
        for x in range(5)
    ]
    for x in range(5):
        d = c[(x + 4) % 5] ^ _rol64(c[(x + 1) % 5], 1)
        for y in range(0, 25, 5):
            lanes[x + y] ^= d


def rho(lanes: list[int]) -> None:
    """Rotate each lane by its fixed offset."""
    for i in range(PERMUTATION_WIDTH):
        lanes[i] = _rol64(lanes[i], _RHO_OFFSETS[i])


def pi(lanes: list[int]) -> None:
    """Relocate lanes; no bits change."""
    lanes[:] = [lanes[src] for src in _PI_SOURCE]


def chi(lanes: list[int]) -> None:
    """Row-wise non-linear step: a[x] ^= ~a[x+1] & a[x+2]."""
    for y in range(0, 25, 5):
        row = lanes[y : y + 5]
        for x in range(5):
            # ~a & b stays within 64 bits because b does
            lanes[y + x] = row[x] ^ (~row[(x + 1) % 5] & row[(x + 2) % 5])


def iota(lanes: list[int], round_index: int) -> None:
    """XOR the round constant into lane (0, 0)."""
    lanes[0] ^= _ROUND_CONSTANTS[round_index]


def keccak_round(lanes: list[int], round_index: int) -> None:
    """One round: theta, rho, pi, chi, iota."""
    theta(lanes)
    rho(lanes)
    pi(lanes)
    chi(lanes)
    iota(lanes, round_index)


def keccak_f(lanes: list[int]) -> None:
    """Keccak-f[1600] permutation; updates lanes in place (24 rounds)."""
    for round_index in range(NUM_ROUNDS):
        keccak_round(lanes, round_index)


__all__: tuple[str, ...] = (
    "NUM_ROUNDS",
    "PERMUTATION_WIDTH",
    "chi",
    "iota",
    "keccak_f",
    "keccak_round",
    "pi",
    "rho",
    "theta",
)
