"""
hashlib-style SHA-3 objects and one-shot helpers on top of the sponge in sha3.py.
"""

from __future__ import annotations

from .sha3 import (
    SHA3_224,
    SHA3_256,
    SHA3_384,
    SHA3_512,
    Sha3State,
    digest_size,
    sha3_final,
    sha3_init,
    sha3_update,
)


class Sha3Hash:
    """
    Incremental SHA-3 hash with the hashlib interface.

    ``digest()`` finalizes a copy of the running state, so ``update`` may
    continue afterwards.
    """

    __slots__ = ("_bitsize", "_state")

    def __init__(self, bitsize: int, data: bytes = b"") -> None:
        self._state = Sha3State()
        if not sha3_init(self._state, bitsize):
            raise ValueError(f"unsupported SHA-3 variant {bitsize!r}")
        self._bitsize = bitsize
        if data:
            self.update(data)

    @property
    def name(self) -> str:
        return f"sha3_{self._bitsize}"

    @property
    def digest_size(self) -> int:
        return self._state.digest_size

    @property
    def block_size(self) -> int:
        return self._state.rate_bytes

    def update(self, data: bytes) -> None:
        if data is None or not sha3_update(self._state, data):
            raise TypeError("object supporting the buffer API required")

    def digest(self) -> bytes:
        out = bytearray(self.digest_size)
        sha3_final(out, self._state.copy())
        return bytes(out)

    def hexdigest(self) -> str:
        return self.digest().hex()

    def copy(self) -> Sha3Hash:
        other = Sha3Hash.__new__(Sha3Hash)
        other._bitsize = self._bitsize
        other._state = self._state.copy()
        return other


def _oneshot(bitsize: int, data: bytes) -> bytes:
    state = Sha3State()
    sha3_init(state, bitsize)
    if data is None or not sha3_update(state, data):
        raise TypeError("object supporting the buffer API required")
    out = bytearray(digest_size(bitsize))
    sha3_final(out, state)
    return bytes(out)


def sha3_224(data: bytes) -> bytes:
    """SHA3-224 of data (28-byte digest)."""
    return _oneshot(SHA3_224, data)


def sha3_256(data: bytes) -> bytes:
    """
    SHA3-256 hash (FIPS 202).

    Args:
        data: Input bytes (any length).

    Returns:
        32-byte digest.
    """
    return _oneshot(SHA3_256, data)


def sha3_384(data: bytes) -> bytes:
    """SHA3-384 of data (48-byte digest)."""
    return _oneshot(SHA3_384, data)


def sha3_512(data: bytes) -> bytes:
    """SHA3-512 of data (64-byte digest)."""
    return _oneshot(SHA3_512, data)


__all__: tuple[str, ...] = (
    "Sha3Hash",
    "sha3_224",
    "sha3_256",
    "sha3_384",
    "sha3_512",
)
