"""
Bridge between the generic claim document and typed claim models.

Verified claims leave the verifier as canonical JSON bytes: insertion
order kept, compact separators, UTF-8, no NaN/Infinity. Turning those
bytes into an application model is the caller's step; a shape mismatch
there (e.g. `role` sent as a number but declared `str`) surfaces as a
`pydantic.ValidationError`, not as a token error.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Type, TypeVar, Union

from pydantic import BaseModel

from ..errors import ClaimSerializationError

ClaimValue = Union[str, int, float, bool, None, List[Any], Dict[str, Any]]
ClaimSet = Dict[str, ClaimValue]

ModelT = TypeVar("ModelT", bound=BaseModel)


def encode_claims(claims: ClaimSet) -> bytes:
    """Encode a claim set as canonical JSON bytes."""
    if not isinstance(claims, Mapping):
        raise ClaimSerializationError(
            "Claims must be a JSON object",
            details={"type": type(claims).__name__}
        )
    try:
        return json.dumps(
            claims,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        ).encode("utf-8")
    except (TypeError, ValueError, RecursionError) as exc:
        raise ClaimSerializationError(
            "Claims cannot be serialized",
            details={"error": type(exc).__name__}
        ) from exc


def decode_claims(raw: Union[bytes, str], model: Type[ModelT]) -> ModelT:
    """
    Deserialize canonical claim JSON into `model`.

    Raises `pydantic.ValidationError` when the claims do not fit the model.
    """
    return model.model_validate_json(raw)
