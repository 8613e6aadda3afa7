"""
Benchmark SHA-3: picosha3 vs hashlib (OpenSSL / builtin _sha3).
Compares time per call and peak memory (tracemalloc) per run.

Run from repo root:

  PYTHONPATH=src python benchmarks/sha3.py

Or after pip install -e . (cythonized permutation):

  python benchmarks/sha3.py
"""

from __future__ import annotations

import hashlib
import os
import sys
import time
import tracemalloc

# Prefer repo src on path so we use local code
_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_src = os.path.join(_root, "src")
if _src not in sys.path:
    sys.path.insert(0, _src)

from picosha3 import sha3_256, sha3_512


def _hashlib_sha3_256(data: bytes) -> bytes:
    return hashlib.sha3_256(data).digest()


def _hashlib_sha3_512(data: bytes) -> bytes:
    return hashlib.sha3_512(data).digest()


VARIANTS = [
    ("SHA3-256", sha3_256, _hashlib_sha3_256),
    ("SHA3-512", sha3_512, _hashlib_sha3_512),
]

# Sample payloads (bytes); kept small so benchmark stays fast
SAMPLES = [
    (b"", "empty"),
    (b"hello", "short"),
    (b"x" * 136, "136 B"),
    (b"x" * 1024, "1 KiB"),
    (b"x" * 8192, "8 KiB"),
]


# Fewer iterations for larger payloads so run stays quick
def _n_time(data_len: int) -> int:
    if data_len <= 256:
        return 500
    if data_len <= 1024:
        return 100
    return 20


def _n_mem(data_len: int) -> int:
    if data_len <= 256:
        return 200
    return 20


def _time_per_call(fn, data: bytes, n: int, warmup: int = 5) -> float:
    for _ in range(warmup):
        fn(data)
    start = time.perf_counter()
    for _ in range(n):
        fn(data)
    return (time.perf_counter() - start) / n


def _peak_memory_kb(fn, data: bytes, n: int) -> float:
    """Peak traced memory (KiB) during n calls. Resets peak before run if available."""
    tracemalloc.start()
    if hasattr(tracemalloc, "reset_peak"):
        tracemalloc.reset_peak()
    for _ in range(n):
        fn(data)
    current, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return peak / 1024.0


def main() -> None:
    print("Benchmark: SHA-3  picosha3 vs hashlib")
    print()

    for name, ours, reference in VARIANTS:
        # Sanity: same digest
        msg = b"test"
        a = ours(msg)
        b = reference(msg)
        assert a == b, f"{name} digest mismatch: {a.hex()} vs {b.hex()}"
        print(f"  {name} sanity check: both give {a.hex()[:32]}...")
        print()

        print(f"  --- {name}: time per call (ms) ---")
        print(
            f"  {'size':<10} {'n':<8} {'picosha3 (ms)':<15} {'hashlib (ms)':<14} {'ratio':<10}"
        )
        print("  " + "-" * 58)
        for data, label in SAMPLES:
            n = _n_time(len(data))
            t_ours = _time_per_call(ours, data, n=n) * 1000
            t_ref = _time_per_call(reference, data, n=n) * 1000
            ratio = t_ours / t_ref if t_ref > 0 else 0
            print(f"  {label:<10} {n:<8} {t_ours:<15.4f} {t_ref:<14.4f} {ratio:.1f}x")
        print()

        print(f"  --- {name}: peak memory (KiB) during run ---")
        print(f"  {'size':<10} {'n':<8} {'picosha3 (KiB)':<15} {'hashlib (KiB)':<14}")
        print("  " + "-" * 58)
        for data, label in SAMPLES:
            n = _n_mem(len(data))
            mem_ours = _peak_memory_kb(ours, data, n=n)
            mem_ref = _peak_memory_kb(reference, data, n=n)
            print(f"  {label:<10} {n:<8} {mem_ours:<15.2f} {mem_ref:<14.2f}")
        print()


if __name__ == "__main__":
    main()
