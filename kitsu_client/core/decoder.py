"""Decode response bodies into envelope-shaped payloads."""

from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .errors import DecodeError


@lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def decode(body: bytes, shape: Any) -> Any:
    """Parse `body` as JSON and validate it against `shape`.

    Optional fields missing from the payload are simply absent from the
    result; a missing required field, a type mismatch or malformed JSON
    (including an empty body) raises DecodeError.
    """
    try:
        return _adapter(shape).validate_json(body)
    except ValidationError as e:
        raise DecodeError(str(e)) from e
