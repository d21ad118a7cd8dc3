"""
Verification
============

Verification equation:
----------------------
    e(A, X · g2^e) = e(B, g2)

with B recomputed from the attributes and s exactly as the signer computes it.
For an honest signature A = B^{1/(x+e)}, so by bilinearity

    e(A, g2^{x+e}) = e(B, g2)^{(x+e)/(x+e)} = e(B, g2)

A failed equation is an ordinary outcome: verify() returns False.
"""

from typing import Sequence

from charm.toolbox.pairinggroup import ZR, G1, pair

from .errors import SignatureInvalid
from .keys import PublicKey
from .sign import Signature
from .utils import check_capacity, commit_attributes, require_element


def verify(public_key: PublicKey, attributes: Sequence[ZR], signature: Signature) -> bool:
    """
    Verify a signature over an attribute vector.

    Parameters
    ----------
    public_key : PublicKey
        X, the generator vector and the group parameters
    attributes : Sequence[ZR]
        The l signed attributes
    signature : Signature
        σ = (A, e, s)

    Returns
    -------
    bool
        True if the equation holds, False otherwise

    Raises
    ------
    CapacityMismatch
        If len(attributes) != len(generators) - 1
    InvalidEncoding
        If an attribute or a signature component is not a valid group element
    """
    group = public_key.group
    check_capacity(public_key, attributes)
    for i, m in enumerate(attributes):
        require_element(group, m, f"attributes[{i}]", ZR)
    require_element(group, signature.A, "signature.A", G1)
    require_element(group, signature.e, "signature.e", ZR)
    require_element(group, signature.s, "signature.s", ZR)

    B = commit_attributes(public_key, attributes, signature.s)

    lhs = pair(signature.A, public_key.X * (public_key.g2 ** signature.e))
    rhs = pair(B, public_key.g2)

    return lhs == rhs


def verify_or_raise(public_key: PublicKey, attributes: Sequence[ZR], signature: Signature) -> None:
    """Like verify(), but raise SignatureInvalid instead of returning False."""
    if not verify(public_key, attributes, signature):
        raise SignatureInvalid("signature does not verify under the given key and attributes")
