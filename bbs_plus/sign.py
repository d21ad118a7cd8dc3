"""
Signing
=======

Formula:
--------
    e, s ← Z_p
    B = g1 · ∏_{i=0}^{l-1} H_i^{m_i} · H_l^{s}
    A = B^{1/(x+e)}

    σ = (A, e, s)

Signing is randomized: two signatures on the same attributes under the same
key share no component.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from charm.toolbox.pairinggroup import ZR, G1

from .config import config
from .errors import NonInvertibleExponent
from .keys import Keypair
from .utils import check_capacity, commit_attributes, require_element

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Signature:
    A: G1
    e: ZR
    s: ZR


def sign(rng, keypair: Keypair, attributes: Sequence[ZR], max_retries: int = None) -> Signature:
    """
    Sign an attribute vector.

    Parameters
    ----------
    rng : ScalarRng
        Randomness source for e and s
    keypair : Keypair
        The signer's keys
    attributes : Sequence[ZR]
        Exactly l scalars, l being the key's capacity
    max_retries : int, optional
        How many times to redraw (e, s) if x + e == 0.
        Defaults to config.sign_max_retries; 0 surfaces the condition at once.

    Returns
    -------
    Signature
        σ = (A, e, s)

    Raises
    ------
    CapacityMismatch
        If len(attributes) != l
    InvalidEncoding
        If an attribute is not a Z_p element of the key's group
    NonInvertibleExponent
        If x + e == 0 on every attempt

    Notes
    -----
    Each attempt advances rng by 2 draws.
    """
    public_key = keypair.public_key
    group = public_key.group
    check_capacity(public_key, attributes)
    for i, m in enumerate(attributes):
        require_element(group, m, f"attributes[{i}]", ZR)

    if max_retries is None:
        max_retries = config.sign_max_retries

    x = keypair.secret_key.x
    for attempt in range(max_retries + 1):
        e = rng.draw()
        s = rng.draw()

        exponent = x + e
        if exponent == 0:
            logger.warning("x + e == 0 on signing attempt %d, resampling", attempt + 1)
            continue

        B = commit_attributes(public_key, attributes, s)
        A = B ** (exponent ** -1)
        return Signature(A, e, s)

    raise NonInvertibleExponent(f"x + e == 0 on all {max_retries + 1} signing attempts")
