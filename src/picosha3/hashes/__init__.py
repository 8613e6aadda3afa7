"""Hash functions: SHA-3 (FIPS 202) and the Keccak-f[1600] permutation."""

from .keccak import NUM_ROUNDS, PERMUTATION_WIDTH, keccak_f
from .sha3 import (
    MAX_RATE_BYTES,
    SHA3_224,
    SHA3_256,
    SHA3_384,
    SHA3_512,
    SHA3_VARIANTS,
    Sha3State,
    digest_size,
    sha3_final,
    sha3_init,
    sha3_update,
)
from .sha3_hash import Sha3Hash, sha3_224, sha3_256, sha3_384, sha3_512

__all__: tuple[str, ...] = (
    # Permutation
    "NUM_ROUNDS",
    "PERMUTATION_WIDTH",
    "keccak_f",
    # Sponge
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
    # hashlib-style
    "Sha3Hash",
    "sha3_224",
    "sha3_256",
    "sha3_384",
    "sha3_512",
)
