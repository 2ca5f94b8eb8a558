"""
Token error taxonomy.

Every verification or issuance failure raises one of these. Details carry
at most the key id and algorithm name; token bytes, signatures and key
material are never attached.
"""

from typing import Any, Dict, Optional

from .shared.errors import ServiceException


class TokenError(ServiceException):
    """Base class for all token errors."""


class MalformedToken(TokenError):
    """Token cannot be parsed into header, payload and signature."""

    def __init__(self, message: str = "Malformed token", details: Optional[Dict[str, Any]] = None):
        super().__init__("MALFORMED_TOKEN", message, details)


class MissingKeyId(TokenError):
    """Token header has no key identifier."""

    def __init__(self, message: str = "Missing header 'kid'", details: Optional[Dict[str, Any]] = None):
        super().__init__("MISSING_KEY_ID", message, details)


class UnknownKeyId(TokenError):
    """Key identifier is not trusted."""

    def __init__(self, kid: str, message: str = "Unknown 'kid'"):
        self.kid = kid
        super().__init__("UNKNOWN_KEY_ID", message, {"kid": kid})


class UnsupportedAlgorithm(TokenError):
    """Algorithm outside the pinned family."""

    def __init__(self, algorithm: Any, details: Optional[Dict[str, Any]] = None):
        self.algorithm = algorithm
        super().__init__(
            "UNSUPPORTED_ALGORITHM",
            f"Unexpected signing method {algorithm!r}",
            {"alg": algorithm, **(details or {})}
        )


class InvalidSignature(TokenError):
    """Signature does not verify against the resolved key."""

    def __init__(self, message: str = "Invalid token signature", details: Optional[Dict[str, Any]] = None):
        super().__init__("INVALID_SIGNATURE", message, details)


class InvalidClaims(TokenError):
    """A temporal claim is present but not a valid NumericDate."""

    def __init__(self, claim: str, message: Optional[str] = None):
        self.claim = claim
        super().__init__(
            "INVALID_CLAIMS",
            message or f"Claim '{claim}' is not a valid numeric date",
            {"claim": claim}
        )


class TokenExpired(TokenError):
    """Token is past `exp`, or its `iat` is older than the grace window."""

    def __init__(self, message: str = "Token expired", details: Optional[Dict[str, Any]] = None):
        super().__init__("TOKEN_EXPIRED", message, details)


class TokenNotYetValid(TokenError):
    """Token `nbf` lies in the future."""

    def __init__(self, message: str = "Token not valid yet", details: Optional[Dict[str, Any]] = None):
        super().__init__("TOKEN_NOT_YET_VALID", message, details)


class MissingTemporalClaim(TokenError):
    """Token asserts neither `exp` nor `iat`."""

    def __init__(self, message: str = "Invalid token, no exp, no iat", details: Optional[Dict[str, Any]] = None):
        super().__init__("MISSING_TEMPORAL_CLAIM", message, details)


class ClaimSerializationError(TokenError):
    """Claims cannot be encoded as JSON."""

    def __init__(self, message: str = "Claims cannot be serialized", details: Optional[Dict[str, Any]] = None):
        super().__init__("CLAIM_SERIALIZATION_ERROR", message, details)


class SigningFailed(TokenError):
    """Issuer could not produce a signature with the given key."""

    def __init__(self, message: str = "Token signing failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("SIGNING_FAILED", message, details)
