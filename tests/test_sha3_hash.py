"""One-shot helpers and the hashlib-style Sha3Hash object."""

from __future__ import annotations

import hashlib

import pytest

from picosha3 import Sha3Hash, sha3_224, sha3_256, sha3_384, sha3_512

SHA3_256_ABC = bytes.fromhex(
    "3a985da74fe225b2045c172d6bd390bd855f086e3e9d525b46bfe24511431532"
)
SHA3_256_EMPTY = bytes.fromhex(
    "a7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a"
)

ONESHOT = [
    (sha3_224, hashlib.sha3_224),
    (sha3_256, hashlib.sha3_256),
    (sha3_384, hashlib.sha3_384),
    (sha3_512, hashlib.sha3_512),
]


def test_sha3_256_known_answers() -> None:
    assert sha3_256(b"abc") == SHA3_256_ABC
    assert sha3_256(b"") == SHA3_256_EMPTY


@pytest.mark.parametrize("ours,reference", ONESHOT)
def test_oneshot_matches_hashlib(ours, reference) -> None:
    for msg in (b"", b"hello", b"x" * 200, bytes(range(256)) * 3):
        assert ours(msg) == reference(msg).digest()


def test_oneshot_output_length() -> None:
    assert len(sha3_224(b"hello")) == 28
    assert len(sha3_256(b"hello")) == 32
    assert len(sha3_384(b"hello")) == 48
    assert len(sha3_512(b"hello")) == 64


def test_oneshot_rejects_non_bytes() -> None:
    with pytest.raises(TypeError):
        sha3_256("abc")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        sha3_256(None)  # type: ignore[arg-type]


@pytest.mark.parametrize("bitsize", [224, 256, 384, 512])
def test_attributes_match_hashlib(bitsize: int) -> None:
    ours = Sha3Hash(bitsize)
    reference = hashlib.new(f"sha3_{bitsize}")
    assert ours.name == reference.name
    assert ours.digest_size == reference.digest_size
    assert ours.block_size == reference.block_size


def test_incremental_digest_is_not_destructive() -> None:
    h = Sha3Hash(256)
    h.update(b"ab")
    first = h.digest()
    assert first == hashlib.sha3_256(b"ab").digest()
    assert h.digest() == first
    h.update(b"c")
    assert h.digest() == SHA3_256_ABC
    assert h.hexdigest() == SHA3_256_ABC.hex()


def test_constructor_data() -> None:
    assert Sha3Hash(256, b"abc").digest() == SHA3_256_ABC


def test_copy_is_independent() -> None:
    h = Sha3Hash(512, b"prefix")
    c = h.copy()
    h.update(b"-one")
    c.update(b"-two")
    assert h.digest() == hashlib.sha3_512(b"prefix-one").digest()
    assert c.digest() == hashlib.sha3_512(b"prefix-two").digest()


def test_rejects_unsupported_variant() -> None:
    with pytest.raises(ValueError):
        Sha3Hash(200)


def test_update_rejects_non_bytes() -> None:
    h = Sha3Hash(256)
    with pytest.raises(TypeError):
        h.update("abc")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        h.update(None)  # type: ignore[arg-type]
    assert h.digest() == SHA3_256_EMPTY
