"""
Incremental SHA3-256 with the init / update / final interface.

Run from repo root: PYTHONPATH=src python examples/sha3.py
"""

import os
import sys

if getattr(sys, "frozen", False) is False:
    _root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    _src = os.path.join(_root, "src")
    if _src not in sys.path:
        sys.path.insert(0, _src)

from picosha3 import SHA3_256, Sha3State, sha3_256, sha3_final, sha3_init, sha3_update

state = Sha3State()
if not sha3_init(state, SHA3_256):
    sys.exit("sha3_init failed")

# Feed the message in pieces; the split does not change the digest
for chunk in (b"ab", b"c"):
    if not sha3_update(state, chunk):
        sys.exit("sha3_update failed")

digest = bytearray(state.digest_size)
if not sha3_final(digest, state):
    sys.exit("sha3_final failed")
print("sha3_256(b'abc') =", digest.hex())

# One-shot helper gives the same answer
print("one-shot         =", sha3_256(b"abc").hex())
