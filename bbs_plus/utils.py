"""
Utility Functions
=================

This module provides the group-arithmetic helpers shared by the signer and
the verifier.

Key Operations:
- Multi-exponentiation: Compute ∏ g_i^{e_i}
- Attribute commitment: B = g1 · ∏ H_i^{m_i} · H_l^{s}
- Input checks: capacity, element type and group-membership validation
- Encoding: Convert single group elements to/from bytes

According to charm-crypto documentation:
- Group operations use * for multiplication, ** for exponentiation
- Inverse is computed as elem ** -1
- Pairing is computed as pair(g1_elem, g2_elem)
- Single elements serialize with group.serialize() and group.deserialize()
"""

from typing import List, Sequence

from charm.core.math.pairing import pc_element
from charm.toolbox.pairinggroup import PairingGroup, ZR, G1, G2, GT

from .errors import CapacityMismatch, InvalidEncoding


def multiexp_g1(bases: List[G1], exponents: List[ZR], group: PairingGroup) -> G1:
    """∏ bases[i]^{exponents[i]} in G1; the identity for empty input."""
    if len(bases) != len(exponents):
        raise ValueError(f"bases and exponents must have same length: {len(bases)} != {len(exponents)}")

    result = group.init(G1, 1)
    for base, exp in zip(bases, exponents):
        result *= base ** exp

    return result


def commit_attributes(public_key, attributes: Sequence[ZR], s: ZR) -> G1:
    """
    Compute the attribute commitment B used by both sign and verify.

    Formula:
    --------
    B = g1 · ∏_{i=0}^{l-1} H_i^{m_i} · H_l^{s}

    Parameters
    ----------
    public_key : PublicKey
        Holds g1 and the generator vector (H_0, ..., H_l)
    attributes : Sequence[ZR]
        The attribute vector (m_0, ..., m_{l-1}); length must already be checked
    s : ZR
        The blinding factor

    Returns
    -------
    G1
        The commitment B
    """
    H = public_key.generators
    l = len(H) - 1
    B = public_key.g1 * multiexp_g1(list(H[:l]), list(attributes), public_key.group)
    return B * (H[l] ** s)


def check_capacity(public_key, attributes: Sequence) -> None:
    """Raise CapacityMismatch unless len(attributes) == l for this key."""
    expected = len(public_key.generators) - 1
    if len(attributes) != expected:
        raise CapacityMismatch(expected, len(attributes))


_TYPE_NAMES = {ZR: 'ZR', G1: 'G1', G2: 'G2', GT: 'GT'}


def require_element(group: PairingGroup, obj, name: str, expected_type: int = None) -> None:
    """
    Check that ``obj`` is a valid element of ``group``.

    Parameters
    ----------
    group : PairingGroup
        The pairing group
    obj : object
        The value to check
    name : str
        Label used in the error message
    expected_type : int, optional
        One of ZR, G1, G2, GT. Compared with the element's ``type`` tag.

    Raises
    ------
    InvalidEncoding
        If obj is not a charm pairing element, belongs to another group
        than expected_type, or fails the membership test
    """
    if not isinstance(obj, pc_element):
        raise InvalidEncoding(f"{name} is not a pairing group element (got {type(obj).__name__})")
    if expected_type is not None and obj.type != expected_type:
        raise InvalidEncoding(
            f"{name} must be a {_TYPE_NAMES[expected_type]} element, "
            f"got {_TYPE_NAMES.get(obj.type, obj.type)}"
        )
    if not group.ismember(obj):
        raise InvalidEncoding(f"{name} is not a member of the pairing group")


def encode_element(elem, group: PairingGroup) -> bytes:
    """
    Serialize one group element (G1, G2, GT or ZR) to bytes.

    Uses charm-crypto's group.serialize(); the type tag is embedded in the
    output so decode_element() does not need it.
    """
    return group.serialize(elem)


def decode_element(data: bytes, group: PairingGroup):
    """
    Deserialize one group element produced by encode_element().

    Parameters
    ----------
    data : bytes
        The serialized element
    group : PairingGroup
        The pairing group the element belongs to

    Returns
    -------
    Union[G1, G2, GT, ZR]
        The decoded element

    Raises
    ------
    InvalidEncoding
        If data is not bytes, cannot be parsed, or is not a group member
    """
    if not isinstance(data, (bytes, bytearray)):
        raise InvalidEncoding(f"expected bytes, got {type(data).__name__}")

    try:
        elem = group.deserialize(bytes(data))
    except Exception as exc:  # charm reports parse failures as plain Exception
        raise InvalidEncoding(f"cannot decode group element: {exc}") from exc

    if elem is None:
        raise InvalidEncoding("cannot decode group element")
    require_element(group, elem, "decoded value")
    return elem
