"""
Trusted key resolution by key id.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional, Protocol, Union, runtime_checkable

from ..shared.logging import get_logger

# PEM str/bytes, JWK dict, or a cryptography key object
PublicKey = Any


@runtime_checkable
class KeyResolver(Protocol):
    """Resolve a key id asserted by a token to a trusted public key."""

    def resolve(self, kid: str) -> Optional[PublicKey]:
        """Return the key for `kid`, or None when it is not trusted."""
        ...


class TrustedKeyStore:
    """Read-only view over a caller-owned `kid -> public key` mapping."""

    def __init__(self, keys: Mapping[str, PublicKey]):
        self._keys = keys

    def resolve(self, kid: str) -> Optional[PublicKey]:
        return self._keys.get(kid)

    def __contains__(self, kid: object) -> bool:
        return kid in self._keys

    def __len__(self) -> int:
        return len(self._keys)


class JWKSetResolver:
    """Resolve keys from an in-memory JWK Set document (`{"keys": [...]}`)."""

    def __init__(self, keys: Iterable[Dict[str, Any]]):
        self.logger = get_logger("token_auth.keys")
        self._keys: Dict[str, Dict[str, Any]] = {}
        for key in keys:
            kid = key.get("kid")
            if not isinstance(kid, str) or not kid:
                self.logger.warning("Skipping JWK without kid", kty=key.get("kty"))
                continue
            if key.get("use", "sig") != "sig":
                continue
            self._keys[kid] = key

    @classmethod
    def from_jwks(cls, document: Mapping[str, Any]) -> "JWKSetResolver":
        keys = document.get("keys")
        if not isinstance(keys, list):
            raise ValueError("JWKS document missing 'keys' array")
        return cls(keys)

    def resolve(self, kid: str) -> Optional[PublicKey]:
        return self._keys.get(kid)


def as_resolver(keys: Union[KeyResolver, Mapping[str, PublicKey]]) -> KeyResolver:
    """Accept a resolver or a plain mapping and return a resolver."""
    if isinstance(keys, Mapping):
        return TrustedKeyStore(keys)
    if isinstance(keys, KeyResolver):
        return keys
    raise TypeError(f"Expected a KeyResolver or a mapping, got {type(keys).__name__}")
