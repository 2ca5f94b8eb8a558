"""Pinned signing algorithm family."""

from jose.constants import ALGORITHMS

# RSASSA-PKCS1-v1_5 only; PSS, HMAC, EC and "none" are rejected.
PINNED_ALGORITHMS = (ALGORITHMS.RS256, ALGORITHMS.RS384, ALGORITHMS.RS512)

DEFAULT_SIGNING_ALGORITHM = ALGORITHMS.RS256


def is_pinned(algorithm) -> bool:
    return isinstance(algorithm, str) and algorithm in PINNED_ALGORITHMS
