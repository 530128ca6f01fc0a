# SPDX-License-Identifier: Apache-2.0
"""Async client for the Cloud Translation API (v3beta1).

Usage:
    from cloud_translator import ClientConfig, TranslationClient
    from cloud_translator.core.models import DetectLanguageRequest

    async with TranslationClient(ClientConfig.from_env()) as client:
        result = await client.detect_language(DetectLanguageRequest(content="Hello"))

Long-running calls (batch translation, glossary create/delete) return an
Operation; ``TranslationClient.wait_until_done`` polls it to an
OperationSuccess or OperationFailure.
"""

from cloud_translator.client import (
    CallDispatcher,
    ConfigurationError,
    DecodeError,
    PollTimeoutError,
    ProtocolViolation,
    RemoteError,
    TranslateClientError,
    TranslationClient,
    TransportError,
    glossary_path,
    location_path,
)
from cloud_translator.config import ClientConfig
from cloud_translator.operations import (
    OperationFailure,
    OperationOutcome,
    OperationPoller,
    OperationSuccess,
    PollConfig,
)

__version__ = "0.1.0"

__all__ = [
    "CallDispatcher",
    "ClientConfig",
    "ConfigurationError",
    "DecodeError",
    "OperationFailure",
    "OperationOutcome",
    "OperationPoller",
    "OperationSuccess",
    "PollConfig",
    "PollTimeoutError",
    "ProtocolViolation",
    "RemoteError",
    "TranslateClientError",
    "TranslationClient",
    "TransportError",
    "glossary_path",
    "location_path",
]
