"""
Typed claim models.
"""

from datetime import datetime, timezone
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict

NumericDate = Union[int, float]


class RegisteredClaims(BaseModel):
    """Registered JWT claims; subclass to add application claims."""

    model_config = ConfigDict(extra="allow")

    iss: Optional[str] = None
    sub: Optional[str] = None
    aud: Optional[Union[str, List[str]]] = None
    exp: Optional[NumericDate] = None
    nbf: Optional[NumericDate] = None
    iat: Optional[NumericDate] = None
    jti: Optional[str] = None

    @property
    def expires_at(self) -> Optional[datetime]:
        if self.exp is None:
            return None
        return datetime.fromtimestamp(self.exp, tz=timezone.utc)

    @property
    def issued_at(self) -> Optional[datetime]:
        if self.iat is None:
            return None
        return datetime.fromtimestamp(self.iat, tz=timezone.utc)
