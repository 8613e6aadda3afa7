"""
SHA-3 sponge (FIPS 202): incremental init / update / final over Keccak-f[1600].

Usage:
    1) ``sha3_init(state, bitsize)`` picks the variant (224, 256, 384 or 512)
       and zeroes the state.
    2) ``sha3_update(state, data)`` absorbs the next segment; call it as many
       times as needed, the split of the input does not change the digest.
    3) ``sha3_final(digest, state)`` pads, squeezes ``bitsize // 8`` bytes into
       the caller's buffer and wipes the state. Re-init before reusing it.

All three return ``True`` on success and ``False`` on an invalid argument
(``None`` state or buffer, unsupported variant, uninitialized state). A
rejected call leaves both the state and the output buffer untouched.
"""

from __future__ import annotations

import logging

from .keccak import PERMUTATION_WIDTH, keccak_f

logger = logging.getLogger(__name__)

SHA3_224 = 224
SHA3_256 = 256
SHA3_384 = 384
SHA3_512 = 512
SHA3_VARIANTS = (SHA3_224, SHA3_256, SHA3_384, SHA3_512)

# Rate of SHA3-224; no variant absorbs more per block
MAX_RATE_BYTES = 144

_LANE_BYTES = 8
_SUFFIX = 0x06  # 01 domain bits || first 1 of pad10*1
_PAD_END = 0x80  # last 1 of pad10*1


class Sha3State:
    """
    Hash state of one SHA-3 computation.

    ``lanes`` is the 1600-bit permutation state (25 lanes, lane (x, y) at
    x + 5*y). ``block_buffer`` holds the ``buffer_offset`` bytes not yet
    absorbed. Both are allocated once here and only ever overwritten in place.
    A fresh instance is all zero and must go through ``sha3_init``.
    """

    __slots__ = ("rate_bytes", "lanes", "block_buffer", "buffer_offset")

    def __init__(self) -> None:
        self.rate_bytes = 0
        self.lanes = [0] * PERMUTATION_WIDTH
        self.block_buffer = bytearray(MAX_RATE_BYTES)
        self.buffer_offset = 0

    @property
    def digest_size(self) -> int:
        """Digest length in bytes for the initialized variant (0 if none)."""
        if self.rate_bytes == 0:
            return 0
        return 100 - self.rate_bytes // 2

    def copy(self) -> Sha3State:
        """Independent clone; lets a computation fork after a common prefix."""
        other = Sha3State()
        other.rate_bytes = self.rate_bytes
        other.lanes[:] = self.lanes
        other.block_buffer[:] = self.block_buffer
        other.buffer_offset = self.buffer_offset
        return other

    def __bytes__(self) -> bytes:
        """Whole state as fixed-size little-endian bytes (rate, lanes, buffer, offset)."""
        out = bytearray(self.rate_bytes.to_bytes(_LANE_BYTES, "little"))
        for lane in self.lanes:
            out += lane.to_bytes(_LANE_BYTES, "little")
        out += self.block_buffer
        out += self.buffer_offset.to_bytes(_LANE_BYTES, "little")
        return bytes(out)

    def __repr__(self) -> str:
        return (
            f"Sha3State(rate_bytes={self.rate_bytes}, "
            f"buffer_offset={self.buffer_offset})"
        )


def digest_size(bitsize: int) -> int:
    """Digest length in bytes for a SHA-3 variant."""
    if not isinstance(bitsize, int) or bitsize not in SHA3_VARIANTS:
        raise ValueError(f"unsupported SHA-3 variant {bitsize!r}")
    return bitsize // 8


def _wipe(state: Sha3State) -> None:
    state.rate_bytes = 0
    for i in range(PERMUTATION_WIDTH):
        state.lanes[i] = 0
    state.block_buffer[:] = bytes(MAX_RATE_BYTES)
    state.buffer_offset = 0


def _absorb(state: Sha3State) -> None:
    """XOR the full block into the rate lanes and permute."""
    lanes = state.lanes
    buf = state.block_buffer
    for i in range(state.rate_bytes // _LANE_BYTES):
        off = i * _LANE_BYTES
        lanes[i] ^= int.from_bytes(buf[off : off + _LANE_BYTES], "little")
    keccak_f(lanes)


def _pad(state: Sha3State) -> None:
    """SHA-3 suffix plus pad10*1 over the rest of the block (0x86 if one byte is left)."""
    buf = state.block_buffer
    offset = state.buffer_offset
    buf[offset:] = bytes(MAX_RATE_BYTES - offset)
    buf[offset] |= _SUFFIX
    buf[state.rate_bytes - 1] |= _PAD_END


def _squeeze(lanes: list[int], n: int) -> bytes:
    """First n bytes of the lane array, little-endian per lane."""
    out = bytearray()
    for lane in lanes:
        out += lane.to_bytes(_LANE_BYTES, "little")
        if len(out) >= n:
            break
    return bytes(out[:n])


def sha3_init(state: Sha3State | None, bitsize: int) -> bool:
    """
    Initialize state for SHA3-<bitsize>.

    Args:
        state: State to (re)initialize; zeroed in place.
        bitsize: 224, 256, 384 or 512.

    Returns:
        True on success; False if state is None or bitsize is unsupported
        (state left unchanged).
    """
    if state is None:
        logger.debug("sha3_init: no state")
        return False
    if not isinstance(bitsize, int) or bitsize not in SHA3_VARIANTS:
        logger.debug("sha3_init: unsupported variant %r", bitsize)
        return False
    _wipe(state)
    state.rate_bytes = (1600 - 2 * bitsize) // 8
    return True


def sha3_update(
    state: Sha3State | None,
    data: bytes | bytearray | memoryview | None,
    length: int | None = None,
) -> bool:
    """
    Absorb data into state.

    Args:
        state: Initialized state.
        data: Bytes-like input; may be None only when nothing is absorbed.
        length: Number of leading bytes of data to absorb (default: all).

    Returns:
        True on success (a zero-length call is a no-op); False on an invalid
        argument, in which case no byte is absorbed.
    """
    if state is None:
        logger.debug("sha3_update: no state")
        return False
    if state.rate_bytes == 0:
        logger.debug("sha3_update: state not initialized")
        return False
    if length is not None and (not isinstance(length, int) or length < 0):
        logger.debug("sha3_update: invalid length %r", length)
        return False
    if data is None:
        if length:
            logger.debug("sha3_update: no data for length %d", length)
            return False
        return True
    try:
        view = memoryview(data).cast("B")
    except TypeError:
        logger.debug("sha3_update: data is not a contiguous byte buffer")
        return False
    if length is None:
        length = len(view)
    elif length > len(view):
        logger.debug("sha3_update: length %d outside 0..%d", length, len(view))
        return False

    rate = state.rate_bytes
    buf = state.block_buffer
    offset = state.buffer_offset
    pos = 0
    while pos < length:
        take = min(rate - offset, length - pos)
        buf[offset : offset + take] = view[pos : pos + take]
        offset += take
        pos += take
        if offset == rate:
            _absorb(state)
            offset = 0
    state.buffer_offset = offset
    return True


def sha3_final(digest: bytearray | memoryview | None, state: Sha3State | None) -> bool:
    """
    Pad, run the last permutation, write the digest and wipe the state.

    Args:
        digest: Writable buffer of at least ``state.digest_size`` bytes; only
            the first ``state.digest_size`` bytes are written.
        state: Initialized state; all zero afterwards.

    Returns:
        True on success; False if either argument is missing or unusable
        (nothing written, state untouched).
    """
    if digest is None or state is None:
        logger.debug("sha3_final: missing digest buffer or state")
        return False
    if state.rate_bytes == 0:
        logger.debug("sha3_final: state not initialized")
        return False
    n = state.digest_size
    try:
        out = memoryview(digest).cast("B")
    except TypeError:
        logger.debug("sha3_final: digest is not a contiguous byte buffer")
        return False
    if out.readonly or len(out) < n:
        logger.debug("sha3_final: digest buffer not writable or shorter than %d", n)
        return False

    _pad(state)
    _absorb(state)
    out[:n] = _squeeze(state.lanes, n)
    _wipe(state)
    return True


__all__: tuple[str, ...] = (
    "MAX_RATE_BYTES",
    "SHA3_224",
    "SHA3_256",
    "SHA3_384",
    "SHA3_512",
    "SHA3_VARIANTS",
    "Sha3State",
    "digest_size",
    "sha3_final",
    "sha3_init",
    "sha3_update",
)
