"""
Token verification.

The checks run in a fixed order and the first failure aborts:

1. structural parse of header and payload
2. key id extraction
3. key resolution
4. algorithm pinning
5. signature verification
6. temporal policy
7. canonical re-serialization of the claims

Claim values are only looked at after step 5. The temporal policy is
dual-path: `exp` when present, otherwise `iat` plus a short grace window
(tokens minted client side usually carry only `iat`). A token asserting
neither is rejected.
"""

from __future__ import annotations

import json
import math
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Type, Union

from jose import jws
from jose.exceptions import JOSEError

from ..algorithms import is_pinned
from ..claims.serialization import ClaimSet, ModelT, decode_claims, encode_claims
from ..errors import (
    InvalidClaims,
    InvalidSignature,
    MalformedToken,
    MissingKeyId,
    MissingTemporalClaim,
    TokenError,
    TokenExpired,
    TokenNotYetValid,
    UnknownKeyId,
    UnsupportedAlgorithm,
)
from ..keys.resolver import KeyResolver, PublicKey, as_resolver
from ..shared.config import TokenSettings
from ..shared.logging import get_logger

DEFAULT_IAT_GRACE = timedelta(seconds=30)

Keys = Union[KeyResolver, Mapping[str, PublicKey]]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _numeric_date(claims: ClaimSet, name: str) -> float:
    value = claims[name]
    # bool is an int subclass but never a NumericDate
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidClaims(name)
    try:
        value = float(value)
    except OverflowError as exc:
        raise InvalidClaims(name) from exc
    if not math.isfinite(value):
        raise InvalidClaims(name)
    return value


class TokenVerifier:
    """Verify RSA-signed bearer tokens against a set of trusted keys."""

    def __init__(
        self,
        *,
        iat_grace: timedelta = DEFAULT_IAT_GRACE,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        if iat_grace <= timedelta(0):
            raise ValueError("iat_grace must be positive")
        self.iat_grace = iat_grace
        self._clock = clock or _utc_now
        self.logger = get_logger("token_auth.verifier")

    @classmethod
    def from_settings(cls, settings: TokenSettings, **kwargs: Any) -> "TokenVerifier":
        return cls(iat_grace=timedelta(seconds=settings.iat_grace_seconds), **kwargs)

    def verify(self, token: str, keys: Keys) -> bytes:
        """Verify `token` and return its claims as canonical JSON bytes."""
        resolver = as_resolver(keys)
        try:
            header, claims = self._verify(token, resolver)
            raw = encode_claims(claims)
        except TokenError as exc:
            self.logger.warning(
                "Token verification failed",
                code=exc.code,
                error=exc.message,
                details=exc.details
            )
            raise

        self.logger.info(
            "Token verified",
            kid=header.get("kid"),
            alg=header.get("alg"),
            sub=claims.get("sub")
        )
        return raw

    def verify_claims(self, token: str, keys: Keys) -> ClaimSet:
        """Verify `token` and return the claims as an order-preserving dict."""
        return json.loads(self.verify(token, keys))

    def verify_as(self, token: str, keys: Keys, model: Type[ModelT]) -> ModelT:
        """
        Verify `token` and deserialize its claims into `model`.

        Token errors come from verification; a `pydantic.ValidationError`
        means the token was valid but its claims do not fit `model`.
        """
        return decode_claims(self.verify(token, keys), model)

    def _verify(self, token: str, resolver: KeyResolver) -> Tuple[Dict[str, Any], ClaimSet]:
        header, claims = self._parse(token)
        kid = self._key_id(header)

        key = resolver.resolve(kid)
        if key is None:
            raise UnknownKeyId(kid)

        alg = header.get("alg")
        if not is_pinned(alg):
            raise UnsupportedAlgorithm(alg, details={"kid": kid})

        try:
            jws.verify(token, key, algorithms=[alg])
        except JOSEError as exc:
            raise InvalidSignature(details={"kid": kid, "alg": alg}) from exc

        self._check_temporal(claims)
        return header, claims

    def _parse(self, token: str) -> Tuple[Dict[str, Any], ClaimSet]:
        if not isinstance(token, str):
            raise MalformedToken("Token must be a string")
        if token.count(".") != 2:
            raise MalformedToken("Token must have three segments")

        try:
            header = jws.get_unverified_header(token)
            payload = jws.get_unverified_claims(token)
        except JOSEError as exc:
            raise MalformedToken(f"Malformed token: {exc}") from exc
        except RecursionError as exc:
            raise MalformedToken("Token header is nested too deeply") from exc

        try:
            claims = json.loads(payload.decode("utf-8"))
        except (ValueError, RecursionError) as exc:
            raise MalformedToken("Token payload is not valid JSON") from exc
        if not isinstance(claims, dict):
            raise MalformedToken("Token payload must be a JSON object")

        return header, claims

    def _key_id(self, header: Dict[str, Any]) -> str:
        kid = header.get("kid")
        if kid is None or kid == "":
            raise MissingKeyId()
        if not isinstance(kid, str):
            raise MalformedToken("Header 'kid' must be a string")
        return kid

    def _check_temporal(self, claims: ClaimSet) -> None:
        now = self._clock().timestamp()

        if "exp" in claims:
            if _numeric_date(claims, "exp") <= now:
                raise TokenExpired(details={"claim": "exp"})
        elif "iat" in claims:
            if _numeric_date(claims, "iat") < now - self.iat_grace.total_seconds():
                raise TokenExpired(details={"claim": "iat"})
        else:
            raise MissingTemporalClaim()

        if "nbf" in claims and _numeric_date(claims, "nbf") > now:
            raise TokenNotYetValid(details={"claim": "nbf"})


_default_verifier = TokenVerifier()


def verify(token: str, keys: Keys) -> bytes:
    """Verify `token` with the default 30 second `iat` grace window."""
    return _default_verifier.verify(token, keys)
