"""
JSON encoding of request bodies and validated decoding of response bodies.

Bodies are serialized with pydantic-core so that models, lists of models and
plain containers share one code path. Unset (None) fields are left out of the
payload, which is how create calls keep the identifier off the wire, while
empty lists are kept as `[]`.
"""

import functools
import json
from typing import Any, Optional, Tuple, Type, TypeVar
from urllib.parse import urlencode

from pydantic import TypeAdapter, ValidationError
from pydantic_core import to_json

from ..application.exceptions import DecodeError

T = TypeVar("T")

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@functools.lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def encode_body(body: Any, form: bool = False) -> Tuple[Optional[bytes], Optional[str]]:
    """
    Encodes a request body.

    Args:
        body: A pydantic model, a container of models, a dict, raw bytes or
              a string. None means no body.
        form: Encode a mapping as a urlencoded form instead of JSON.

    Returns:
        A (payload, content type) pair; both are None when there is no body.
    """
    if body is None:
        return None, None

    content_type = FORM_CONTENT_TYPE if form else JSON_CONTENT_TYPE

    if isinstance(body, bytes):
        return body, content_type
    if isinstance(body, str):
        return body.encode("utf-8"), content_type
    if form:
        return urlencode(body).encode("utf-8"), content_type

    return to_json(body, by_alias=True, exclude_none=True), content_type


def decode_body(data: bytes, target: Type[T], url: str = "") -> T:
    """
    Validates a response payload against `target`.

    Raises:
        DecodeError: If the payload is not JSON or does not fit `target`.
    """
    try:
        return _adapter(target).validate_json(data)
    except ValidationError as e:
        raise DecodeError(f"decoding response from {url}: {e}", url=url) from e


def decode_error_message(data: bytes) -> str:
    """
    Extracts a message from a service error envelope.

    Services answer failures either with `{"message": ...}` or with a list of
    validation failures carrying `propertyName` and `errorMessage`. Anything
    else yields an empty string.
    """
    try:
        payload = json.loads(data)
    except ValueError:
        return ""

    if isinstance(payload, dict):
        message = payload.get("message")
        return str(message) if message else ""

    if isinstance(payload, list) and payload and isinstance(payload[0], dict):
        first = payload[0]
        name, message = first.get("propertyName"), first.get("errorMessage")
        if message:
            return f"{name}: {message}" if name else str(message)

    return ""
