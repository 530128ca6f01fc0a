# SPDX-License-Identifier: Apache-2.0
"""Request body variants and JSON/query-string encoding.

A call carries exactly one of three body variants, chosen by the call site:

- ``NO_BODY``: nothing is sent (DELETE, and GET without parameters).
- ``JsonBody``: the payload is sent as a JSON request body.
- ``QueryParams``: the payload is sent as a URL-encoded query string.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar, Union

from cloud_translator.client.errors import DecodeError


class Encodable(Protocol):
    """Anything with a wire-form ``to_dict``."""

    def to_dict(self) -> dict[str, Any]: ...


class Decodable(Protocol):
    """Anything constructible from a wire-form dictionary."""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Any: ...


DecodableT = TypeVar("DecodableT", bound=Decodable)


@dataclass(frozen=True)
class NoBody:
    """Send neither a body nor a query string."""


NO_BODY = NoBody()


@dataclass(frozen=True)
class JsonBody:
    """Send ``payload`` as a JSON request body."""

    payload: Union[Encodable, dict[str, Any]]


@dataclass(frozen=True)
class QueryParams:
    """Send ``params`` as a URL-encoded query string."""

    params: Encodable


RequestBody = Union[NoBody, JsonBody, QueryParams]


def _as_dict(payload: Union[Encodable, dict[str, Any]]) -> dict[str, Any]:
    if isinstance(payload, dict):
        return payload
    return payload.to_dict()


def encode_json(payload: Union[Encodable, dict[str, Any]]) -> bytes:
    """Encode a request payload as UTF-8 JSON."""
    return json.dumps(_as_dict(payload), ensure_ascii=False).encode("utf-8")


def encode_query(params: Encodable) -> dict[str, str]:
    """Encode query parameters as a flat string mapping.

    Keys keep their wire (camelCase) names and None values are already
    omitted by ``to_dict``. Booleans use the JSON spelling.
    """
    encoded: dict[str, str] = {}
    for key, value in params.to_dict().items():
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        else:
            encoded[key] = str(value)
    return encoded


def decode_response(raw: bytes, response_type: type[DecodableT], status: int) -> DecodableT:
    """Decode a success body into ``response_type``.

    Raises:
        DecodeError: If the body is not JSON or does not match the schema.
    """
    try:
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        return response_type.from_dict(data)
    except (ValueError, TypeError, KeyError, AttributeError) as e:
        raise DecodeError(
            f"Cannot decode {response_type.__name__} from response: {e}",
            status=status,
            body=raw,
            cause=e,
        ) from e


def decode_error_payload(raw: bytes, status: int) -> Any:
    """Decode a non-200 body into an untyped JSON value.

    Raises:
        DecodeError: If the body is not valid JSON.
    """
    try:
        return json.loads(raw)
    except ValueError as e:
        raise DecodeError(
            f"Cannot decode error response (status {status}): {e}",
            status=status,
            body=raw,
            cause=e,
        ) from e


def format_duration(seconds: float) -> str:
    """Format seconds as a protobuf JSON duration ("1s", "0.5s")."""
    if seconds < 0:
        raise ValueError(f"duration must not be negative: {seconds}")
    if float(seconds).is_integer():
        return f"{int(seconds)}s"
    return f"{seconds:.9f}".rstrip("0").rstrip(".") + "s"
