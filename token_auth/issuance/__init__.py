"""
Token issuance package.
"""

from .token_issuer import TokenIssuer, issue

__all__ = ["TokenIssuer", "issue"]
