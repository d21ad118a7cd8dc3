"""
Key Generation
==============

This module generates BBS+ keypairs for a fixed attribute capacity l.

Keys:
-----
- Secret key:  x ∈ Z_p
- Public key:  X = g2^x ∈ G2
- Generators:  H_0, ..., H_l ∈ G1   (l + 1 points)

The generator vector H is public and shared by signer and verifier. H_0..H_{l-1}
carry the attributes, H_l carries the blinding factor s.

Generator derivation:
---------------------
- 'random': H_i = g1^{r_i} for fresh random r_i (the r_i are discarded)
- 'hash':   H_i = hash_to_G1(domain || i), so nobody, including the key
            generator, knows a discrete-log relation between generators
"""

import logging
from dataclasses import dataclass, field
from typing import Tuple

from charm.toolbox.pairinggroup import PairingGroup, ZR, G1, G2

from .config import config, GENERATOR_DERIVATIONS
from .groups import get_generators

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SecretKey:
    """The signer's secret scalar x. Never shared with verifiers."""
    x: ZR = field(repr=False)


@dataclass(frozen=True)
class PublicKey:
    """X = g2^x together with the generator vector and the group it lives in."""
    group: PairingGroup = field(repr=False, compare=False)
    g1: G1
    g2: G2
    X: G2
    generators: Tuple[G1, ...]

    @property
    def capacity(self) -> int:
        """Number of attributes l this key signs."""
        return len(self.generators) - 1


@dataclass(frozen=True)
class Keypair:
    secret_key: SecretKey
    public_key: PublicKey

    @property
    def capacity(self) -> int:
        return self.public_key.capacity


def derive_generators(group: PairingGroup, l: int, domain: bytes = None) -> Tuple[G1, ...]:
    """
    Derive l + 1 generators by hashing an index-keyed input onto G1.

    Formula:
    --------
    H_i = hash_to_G1(domain || i)    for i = 0, ..., l

    Parameters
    ----------
    group : PairingGroup
        The pairing group
    l : int
        The attribute capacity
    domain : bytes, optional
        Domain-separation prefix. Defaults to config.generator_domain.

    Returns
    -------
    Tuple[G1, ...]
        The generators (H_0, ..., H_l)
    """
    if l < 0:
        raise ValueError(f"capacity l must be >= 0, got {l}")
    if domain is None:
        domain = config.generator_domain_bytes
    return tuple(group.hash(domain + i.to_bytes(4, 'big'), G1) for i in range(l + 1))


def keygen(rng, l: int, derivation: str = None) -> Keypair:
    """
    Generate a keypair that signs attribute vectors of length l.

    Parameters
    ----------
    rng : ScalarRng
        Randomness source; its group determines the pairing group
    l : int
        The attribute capacity (l >= 0)
    derivation : str, optional
        'random' or 'hash'. Defaults to config.generator_derivation.

    Returns
    -------
    Keypair
        (SecretKey(x), PublicKey(group, g1, g2, X, H))

    Notes
    -----
    With 'random' derivation the rng advances by l + 2 draws (x, then r_0..r_l).
    With 'hash' derivation it advances by 1 draw (x only).
    """
    if l < 0:
        raise ValueError(f"capacity l must be >= 0, got {l}")
    if derivation is None:
        derivation = config.generator_derivation
    if derivation not in GENERATOR_DERIVATIONS:
        raise ValueError(f"derivation must be one of {GENERATOR_DERIVATIONS}, got {derivation!r}")

    group = rng.group
    g1, g2 = get_generators(group)

    x = rng.draw()
    X = g2 ** x

    if derivation == 'random':
        H = tuple(g1 ** r for r in rng.draw_many(l + 1))
    else:
        H = derive_generators(group, l)

    logger.debug("generated keypair: capacity=%d derivation=%s", l, derivation)

    return Keypair(SecretKey(x), PublicKey(group, g1, g2, X, H))
