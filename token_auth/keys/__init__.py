"""
Key resolution package.

Maps the key id (`kid`) found in a token header to a trusted public key.
The verifier only needs `resolve(kid)`, so any key source (static mapping,
JWK Set document, a rotating store owned by the application) can be
plugged in without touching verification.
"""

from .resolver import JWKSetResolver, KeyResolver, PublicKey, TrustedKeyStore, as_resolver

__all__ = ["KeyResolver", "TrustedKeyStore", "JWKSetResolver", "PublicKey", "as_resolver"]
