"""
token-auth: verification and issuance of RSA-signed bearer tokens.

Typical use::

    from token_auth import TokenVerifier, RegisteredClaims

    class Claims(RegisteredClaims):
        name: str
        role: str

    claims = TokenVerifier().verify_as(token, {"key-1": public_pem}, Claims)
"""

from .algorithms import PINNED_ALGORITHMS
from .claims import ClaimSet, RegisteredClaims, decode_claims, encode_claims
from .errors import (
    ClaimSerializationError,
    InvalidClaims,
    InvalidSignature,
    MalformedToken,
    MissingKeyId,
    MissingTemporalClaim,
    SigningFailed,
    TokenError,
    TokenExpired,
    TokenNotYetValid,
    UnknownKeyId,
    UnsupportedAlgorithm,
)
from .issuance import TokenIssuer, issue
from .keys import JWKSetResolver, KeyResolver, TrustedKeyStore
from .validation import TokenVerifier, verify

__all__ = [
    "PINNED_ALGORITHMS",
    "ClaimSet",
    "RegisteredClaims",
    "encode_claims",
    "decode_claims",
    "TokenError",
    "MalformedToken",
    "MissingKeyId",
    "UnknownKeyId",
    "UnsupportedAlgorithm",
    "InvalidSignature",
    "InvalidClaims",
    "TokenExpired",
    "TokenNotYetValid",
    "MissingTemporalClaim",
    "ClaimSerializationError",
    "SigningFailed",
    "TokenIssuer",
    "issue",
    "KeyResolver",
    "TrustedKeyStore",
    "JWKSetResolver",
    "TokenVerifier",
    "verify",
]
