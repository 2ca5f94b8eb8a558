"""
Shared fixtures for token-auth tests.
"""

from datetime import datetime, timezone

import pytest

from token_auth import TokenIssuer, TokenVerifier
from tests.helpers import MockTokenGenerator, generate_ec_key_pair, generate_rsa_key_pair

NOW = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="session")
def key_pair():
    """Trusted RSA key pair registered under kid 'foo'."""
    return generate_rsa_key_pair()


@pytest.fixture(scope="session")
def other_key_pair():
    """RSA key pair nobody trusts."""
    return generate_rsa_key_pair()


@pytest.fixture(scope="session")
def ec_key_pair():
    """P-256 key pair."""
    return generate_ec_key_pair()


@pytest.fixture
def trusted_keys(key_pair):
    """Trusted key store as a plain mapping."""
    return {"foo": key_pair.public_pem}


@pytest.fixture
def verifier():
    """Verifier with a frozen clock."""
    return TokenVerifier(clock=lambda: NOW)


@pytest.fixture
def issuer():
    """RS256 issuer."""
    return TokenIssuer()


@pytest.fixture
def token_generator(key_pair):
    """PyJWT token generator signing with the trusted key."""
    return MockTokenGenerator(key_pair.private_pem, kid="foo")
