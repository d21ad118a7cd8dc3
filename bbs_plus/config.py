"""
BBS+ configuration
Defaults for curve selection, generator derivation and signing retries
"""

import os

DEFAULT_PAIRING_CURVE = os.getenv('BBS_PAIRING_CURVE', 'MNT224')

# 'random': H_i = g1^{r_i} with fresh scalars (reference behaviour)
# 'hash':   H_i = hash_to_G1(domain || i), publicly recomputable
DEFAULT_GENERATOR_DERIVATION = os.getenv('BBS_GENERATOR_DERIVATION', 'random').lower()
DEFAULT_GENERATOR_DOMAIN = os.getenv('BBS_GENERATOR_DOMAIN', 'BBS_PLUS_H')

# Number of times sign() resamples e when x + e == 0
DEFAULT_SIGN_MAX_RETRIES = int(os.getenv('BBS_SIGN_MAX_RETRIES', 8))

GENERATOR_DERIVATIONS = ('random', 'hash')


class Config:
    """Configuration holder"""

    def __init__(self):
        self.pairing_curve = DEFAULT_PAIRING_CURVE
        self.generator_derivation = DEFAULT_GENERATOR_DERIVATION
        self.generator_domain = DEFAULT_GENERATOR_DOMAIN
        self.sign_max_retries = DEFAULT_SIGN_MAX_RETRIES

        if self.generator_derivation not in GENERATOR_DERIVATIONS:
            raise ValueError(
                f"BBS_GENERATOR_DERIVATION must be one of {GENERATOR_DERIVATIONS}, "
                f"got {self.generator_derivation!r}"
            )
        if self.sign_max_retries < 0:
            raise ValueError(f"BBS_SIGN_MAX_RETRIES must be >= 0, got {self.sign_max_retries}")

    @property
    def generator_domain_bytes(self):
        return self.generator_domain.encode('utf-8')


# Global configuration instance
config = Config()
