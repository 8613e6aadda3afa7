"""
SHA-3 (FIPS 202) for small runtimes: Keccak-f[1600] sponge with an incremental
init / update / final interface. No hashlib or pysha3 dependency.
Pure Python; the permutation is cythonized when built with setup.py.
"""

from .__about__ import __version__
from .hashes import (
    MAX_RATE_BYTES,
    SHA3_224,
    SHA3_256,
    SHA3_384,
    SHA3_512,
    SHA3_VARIANTS,
    Sha3Hash,
    Sha3State,
    digest_size,
    keccak_f,
    sha3_224,
    sha3_256,
    sha3_384,
    sha3_512,
    sha3_final,
    sha3_init,
    sha3_update,
)

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Variants
    "SHA3_224",
    "SHA3_256",
    "SHA3_384",
    "SHA3_512",
    "SHA3_VARIANTS",
    "MAX_RATE_BYTES",
    # Incremental API
    "Sha3State",
    "digest_size",
    "sha3_init",
    "sha3_update",
    "sha3_final",
    # One-shot / hashlib-style
    "Sha3Hash",
    "sha3_224",
    "sha3_256",
    "sha3_384",
    "sha3_512",
    # Permutation
    "keccak_f",
)
