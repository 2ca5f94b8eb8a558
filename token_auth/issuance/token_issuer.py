"""
Token issuance, the mirror of verification.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from jose import jws
from jose.exceptions import JOSEError

from ..algorithms import DEFAULT_SIGNING_ALGORITHM, is_pinned
from ..claims.serialization import ClaimSet, encode_claims
from ..errors import SigningFailed, UnsupportedAlgorithm
from ..shared.config import TokenSettings
from ..shared.logging import get_logger


class TokenIssuer:
    """
    Sign claim sets into compact tokens.

    Claims are embedded exactly as given. Nothing is added: callers set
    `exp` or `iat` themselves so the token passes the verifier's temporal
    policy, and put `kid` in `headers` when the verifier needs it.
    """

    def __init__(self, algorithm: str = DEFAULT_SIGNING_ALGORITHM) -> None:
        if not is_pinned(algorithm):
            raise UnsupportedAlgorithm(algorithm)
        self.algorithm = algorithm
        self.logger = get_logger("token_auth.issuer")

    @classmethod
    def from_settings(cls, settings: TokenSettings) -> "TokenIssuer":
        return cls(algorithm=settings.signing_algorithm)

    def issue(
        self,
        claims: ClaimSet,
        private_key: Any,
        headers: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Sign `claims` with `private_key` and return the token string."""
        extra_headers = dict(headers or {})
        alg = extra_headers.pop("alg", self.algorithm)
        if alg != self.algorithm:
            raise UnsupportedAlgorithm(alg)

        payload = encode_claims(claims)

        try:
            token = jws.sign(payload, private_key, headers=extra_headers, algorithm=self.algorithm)
        except (JOSEError, TypeError, ValueError) as exc:
            self.logger.error(
                "Token signing failed",
                alg=self.algorithm,
                kid=extra_headers.get("kid"),
                error=type(exc).__name__
            )
            raise SigningFailed(details={"alg": self.algorithm}) from exc

        self.logger.debug("Token issued", alg=self.algorithm, kid=extra_headers.get("kid"))
        return token


_default_issuer = TokenIssuer()


def issue(claims: ClaimSet, private_key: Any, headers: Optional[Mapping[str, Any]] = None) -> str:
    """Sign `claims` with RS256."""
    return _default_issuer.issue(claims, private_key, headers=headers)
