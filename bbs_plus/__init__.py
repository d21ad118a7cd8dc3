"""
BBS+ Multi-Message Signatures
=============================

A pairing-based signature over an ordered vector of scalar attributes, in the
style of Boneh–Boyen–Shacham (BBS+). A signer holding x issues one signature
on (m_0, ..., m_{l-1}); anyone holding the public key checks it.

This package implements key generation, signing and verification using
charm-crypto pairing groups.

Modules:
--------
- groups: Group initialization and fixed generators g1, g2
- rng: Seedable scalar randomness
- keys: Key generation (x, X = g2^x, H_0..H_l)
- sign: Signature generation σ = (A, e, s)
- verify: Verification e(A, X·g2^e) = e(B, g2)
- utils: Multi-exponentiation, commitment, input checks, element encoding
- errors: Error types
- config: Environment-driven defaults

Usage:
------
    from charm.toolbox.pairinggroup import ZR
    from bbs_plus import setup, ScalarRng, keygen, sign, verify

    params = setup('MNT224')
    group = params['group']
    rng = ScalarRng(group, seed=bytes(32))

    keypair = keygen(rng, l=3)
    m = rng.draw_many(3)
    sigma = sign(rng, keypair, m)
    assert verify(keypair.public_key, m, sigma)
"""

__version__ = "0.1.0"

from .groups import setup, get_generators
from .rng import ScalarRng
from .keys import SecretKey, PublicKey, Keypair, keygen, derive_generators
from .sign import Signature, sign
from .verify import verify, verify_or_raise
from .utils import encode_element, decode_element
from .errors import (
    BBSPlusError, CapacityMismatch, NonInvertibleExponent, SignatureInvalid, InvalidEncoding
)

__all__ = [
    'setup', 'get_generators', 'ScalarRng',
    'SecretKey', 'PublicKey', 'Keypair', 'keygen', 'derive_generators',
    'Signature', 'sign', 'verify', 'verify_or_raise',
    'encode_element', 'decode_element',
    'BBSPlusError', 'CapacityMismatch', 'NonInvertibleExponent', 'SignatureInvalid', 'InvalidEncoding',
]
