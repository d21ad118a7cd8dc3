"""
Group Initialization and Setup
===============================

This module handles the initialization of the pairing groups the signature
scheme runs over.

According to charm-crypto documentation (https://jhuisi.github.io/charm/tutorial.html):
- PairingGroup('MNT224') provides asymmetric Type-3 pairings with 224-bit base field
- Alternative curves: 'BN254', 'SS512' (symmetric, but can be used)
- G1, G2 are the source groups; GT is the target group
- Pairing operation: pair(g1_elem, g2_elem) -> GT element
"""

import logging

from charm.toolbox.pairinggroup import PairingGroup, ZR, G1, G2, GT, pair

from .config import config

logger = logging.getLogger(__name__)

# Domain tags for the fixed public generators g1 and g2.
G1_GENERATOR_TAG = b"BBS_PLUS_G1_GENERATOR"
G2_GENERATOR_TAG = b"BBS_PLUS_G2_GENERATOR"

FALLBACK_CURVES = ('BN254', 'SS512')


def setup(group_name: str = None) -> dict:
    """
    Initialize the pairing group for the signature scheme.

    This function sets up the bilinear pairing groups:
    - G1 (signature element A, commitment B, generators H_i)
    - G2 (public key X)
    - GT (target group of the pairing)
    - Bilinear map e: G1 × G2 → GT (implemented as pair function)

    Parameters
    ----------
    group_name : str, optional
        The pairing curve identifier. Defaults to ``config.pairing_curve``
        ('MNT224' unless BBS_PAIRING_CURVE is set).
        Supported curves:
        - 'MNT224': Asymmetric Type-3, 224-bit base field (preferred)
        - 'BN254': Asymmetric Type-3, 254-bit base field (fallback)
        - 'SS512': Symmetric, 512-bit base field (fallback)

    Returns
    -------
    dict
        A dictionary containing:
        - 'group': The PairingGroup object
        - 'group_name': The name of the curve used
        - 'g1': The fixed generator of G1
        - 'g2': The fixed generator of G2
        - 'G1', 'G2', 'GT', 'ZR': The charm-crypto type constants
        - 'pair': The pairing function

    Examples
    --------
    >>> params = setup('MNT224')
    >>> group = params['group']
    >>> e_result = pair(params['g1'], params['g2'])  # e_result is in GT
    """
    if group_name is None:
        group_name = config.pairing_curve

    candidates = (group_name,) + tuple(c for c in FALLBACK_CURVES if c != group_name)
    for i, candidate in enumerate(candidates):
        try:
            group = PairingGroup(candidate)
            # unknown names can leave the group uninitialized until first use
            group.order()
        except Exception as e:  # charm raises KeyError or its own errors per curve
            nxt = candidates[i + 1] if i + 1 < len(candidates) else None
            if nxt is None:
                raise
            logger.warning("%s not available (%s), falling back to %s", candidate, e, nxt)
            continue
        group_name = candidate
        break

    g1, g2 = get_generators(group)

    return {
        'group': group,
        'group_name': group_name,
        'g1': g1,
        'g2': g2,
        'G1': G1,
        'G2': G2,
        'GT': GT,
        'ZR': ZR,
        'pair': pair,
    }


def get_generators(group: PairingGroup) -> tuple:
    """
    Return the fixed public generators of G1 and G2.

    The generators are hashed onto the curve from constant tags, so every
    party that initializes the same curve obtains the same (g1, g2) without
    any shared state.

    Parameters
    ----------
    group : PairingGroup
        The initialized pairing group

    Returns
    -------
    tuple
        (g1, g2) with g1 ∈ G1 and g2 ∈ G2
    """
    g1 = group.hash(G1_GENERATOR_TAG, G1)
    g2 = group.hash(G2_GENERATOR_TAG, G2)
    return g1, g2


def scalar_order(group: PairingGroup) -> int:
    """Order p of the scalar field Z_p as a Python int."""
    return int(group.order())
