"""
Test helper functions and factory methods for token-auth.
"""

import base64
import json
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

import jwt
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa
from jose import jws


@dataclass
class TestKeyPair:
    """PEM encoded key pair."""
    __test__ = False

    private_pem: str
    public_pem: str


def generate_rsa_key_pair(key_size: int = 2048) -> TestKeyPair:
    """Generate an RSA key pair."""
    key = rsa.generate_private_key(public_exponent=65537, key_size=key_size)
    return TestKeyPair(
        private_pem=key.private_bytes(
            serialization.Encoding.PEM,
            serialization.PrivateFormat.PKCS8,
            serialization.NoEncryption()
        ).decode("utf-8"),
        public_pem=key.public_key().public_bytes(
            serialization.Encoding.PEM,
            serialization.PublicFormat.SubjectPublicKeyInfo
        ).decode("utf-8")
    )


def generate_ec_key_pair() -> TestKeyPair:
    """Generate a P-256 key pair."""
    key = ec.generate_private_key(ec.SECP256R1())
    return TestKeyPair(
        private_pem=key.private_bytes(
            serialization.Encoding.PEM,
            serialization.PrivateFormat.PKCS8,
            serialization.NoEncryption()
        ).decode("utf-8"),
        public_pem=key.public_key().public_bytes(
            serialization.Encoding.PEM,
            serialization.PublicFormat.SubjectPublicKeyInfo
        ).decode("utf-8")
    )


def b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def forge_token(header: Any, payload: bytes, signature: bytes = b"signature") -> str:
    """Assemble a compact token from raw parts without signing."""
    header_bytes = header if isinstance(header, bytes) else json.dumps(header).encode("utf-8")
    return ".".join([b64url(header_bytes), b64url(payload), b64url(signature)])


def sign_raw_payload(payload: bytes, private_pem: str, kid: str = "foo") -> str:
    """RS256-sign an arbitrary payload, bypassing claim encoding."""
    return jws.sign(payload, private_pem, headers={"kid": kid}, algorithm="RS256")


class MockTokenGenerator:
    """Generate tokens with PyJWT, including ones the verifier must refuse."""

    def __init__(self, private_pem: str, kid: Optional[str] = "foo"):
        self.private_pem = private_pem
        self.kid = kid

    def generate(
        self,
        claims: Dict[str, Any],
        algorithm: str = "RS256",
        key: Any = None,
        kid: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Sign `claims`; `key` defaults to the RSA private key."""
        token_headers = dict(headers or {})
        kid = kid if kid is not None else self.kid
        if kid is not None:
            token_headers["kid"] = kid
        signing_key = key if key is not None else self.private_pem
        return jwt.encode(claims, signing_key, algorithm=algorithm, headers=token_headers)

    def user_claims(self, now: datetime, role: Any = "admin", expires_in: Optional[int] = 24 * 3600) -> Dict[str, Any]:
        """Claims used across the verification scenarios."""
        claims: Dict[str, Any] = {
            "sub": "1234567890",
            "name": "John Doe",
            "role": role,
        }
        if expires_in is not None:
            claims["exp"] = int((now + timedelta(seconds=expires_in)).timestamp())
        return claims
