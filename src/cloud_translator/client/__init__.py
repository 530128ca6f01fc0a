# SPDX-License-Identifier: Apache-2.0
"""HTTP client layer: codec, call dispatcher and the API client."""

from cloud_translator.client.errors import (
    ConfigurationError,
    DecodeError,
    PollTimeoutError,
    ProtocolViolation,
    RemoteError,
    TranslateClientError,
    TransportError,
)
from cloud_translator.client.codec import NO_BODY, JsonBody, NoBody, QueryParams
from cloud_translator.client.dispatcher import CallDispatcher
from cloud_translator.client.translation_client import (
    TranslationClient,
    glossary_path,
    location_path,
)

__all__ = [
    # Exceptions
    "TranslateClientError",
    "ConfigurationError",
    "TransportError",
    "DecodeError",
    "RemoteError",
    "ProtocolViolation",
    "PollTimeoutError",
    # Request bodies
    "NO_BODY",
    "NoBody",
    "JsonBody",
    "QueryParams",
    # Clients
    "CallDispatcher",
    "TranslationClient",
    "glossary_path",
    "location_path",
]
