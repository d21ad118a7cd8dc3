"""
Seedable Scalar Randomness
==========================

Deterministic generator of uniformly distributed scalars in Z_p.

charm-crypto's ``group.random(ZR)`` draws from an internal RNG that cannot be
seeded, so runs are not reproducible. ``ScalarRng`` instead expands a 32-byte
seed with SHA-512 in counter mode:

    block_k = SHA-512(prefix || key || k)        k = 0, 1, 2, ...
    scalar  = int(block_k) mod p

where ``key = SHA-256(seed)``. A 512-bit block reduced modulo a group order of
at most 256 bits has statistical distance below 2^-256 from uniform.

Callers own the instance and pass it to ``keygen`` and ``sign`` explicitly.
"""

import hashlib
import os
import threading

from charm.toolbox.pairinggroup import PairingGroup, ZR

from .groups import scalar_order

SEED_LENGTH = 32
_PREFIX = b"BBS_PLUS_RNG"


class ScalarRng:
    """
    Seeded source of uniform Z_p elements bound to one pairing group.

    Draws are serialized by an internal lock, so a single instance can be
    shared between threads. The interleaving of draws across threads then
    depends on scheduling; use one instance per thread for reproducible runs.
    """

    def __init__(self, group: PairingGroup, seed: bytes = None):
        """
        Parameters
        ----------
        group : PairingGroup
            The pairing group whose scalar field is sampled
        seed : bytes, optional
            Exactly 32 bytes. If None, a fresh seed is read from os.urandom.
        """
        if seed is None:
            seed = os.urandom(SEED_LENGTH)
        if not isinstance(seed, (bytes, bytearray)) or len(seed) != SEED_LENGTH:
            raise ValueError(f"seed must be {SEED_LENGTH} bytes")

        self.group = group
        self._order = scalar_order(group)
        self._key = hashlib.sha256(bytes(seed)).digest()
        self._counter = 0
        self._lock = threading.Lock()

    @property
    def draws(self) -> int:
        """Number of scalars drawn so far."""
        return self._counter

    def draw(self) -> ZR:
        """Draw one uniform scalar from Z_p."""
        with self._lock:
            block = hashlib.sha512(_PREFIX + self._key + self._counter.to_bytes(8, 'big')).digest()
            self._counter += 1
        return self.group.init(ZR, int.from_bytes(block, 'big') % self._order)

    def draw_many(self, count: int) -> list:
        """Draw ``count`` scalars in order."""
        return [self.draw() for _ in range(count)]
