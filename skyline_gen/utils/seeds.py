# skyline_gen/utils/seeds.py
"""
Per-pass random streams.

Every random pass (each background rank, each foreground row) draws from
its own random.Random keyed by the master seed and the pass name, so a seed
reproduces the same skyline and retuning one pass leaves the others alone.
The key is hashed with blake2s; hash() varies between interpreter runs.
"""

import random
from hashlib import blake2s


def derive_seed(master: int, name: str) -> int:
    """Unsigned 32-bit seed for pass ``name`` under ``master``."""
    data = f"{int(master)}|{name}".encode("utf-8")
    h = blake2s(data, digest_size=4).digest()
    return int.from_bytes(h, "big", signed=False)


def rng_for(master: int, name: str) -> random.Random:
    return random.Random(derive_seed(master, name))
