"""
Error types raised by key generation, signing and verification.
"""


class BBSPlusError(Exception):
    """Base class for all errors raised by this package."""


class CapacityMismatch(BBSPlusError, ValueError):
    """The attribute vector length disagrees with the key's capacity."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Attribute vector length {actual} != key capacity l={expected}")


class NonInvertibleExponent(BBSPlusError, ArithmeticError):
    """x + e is zero in Z_p, so the signing exponent has no inverse."""


class SignatureInvalid(BBSPlusError):
    """The signature does not verify under the given key and attributes."""


class InvalidEncoding(BBSPlusError, ValueError):
    """Input is not a well-formed element of the pairing group."""
