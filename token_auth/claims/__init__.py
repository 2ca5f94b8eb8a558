"""
Claim representation and re-serialization.
"""

from .models import RegisteredClaims
from .serialization import ClaimSet, ClaimValue, decode_claims, encode_claims

__all__ = ["ClaimSet", "ClaimValue", "RegisteredClaims", "encode_claims", "decode_claims"]
