"""
Token validation package.

Verifies compact RSA-signed tokens: key resolution by `kid`, algorithm
pinning, signature, then the `exp` / `iat` temporal policy. Returns the
claims as canonical JSON for the caller to load into its own model.
"""

from .token_verifier import DEFAULT_IAT_GRACE, TokenVerifier, verify

__all__ = ["TokenVerifier", "DEFAULT_IAT_GRACE", "verify"]
