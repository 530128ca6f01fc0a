# SPDX-License-Identifier: Apache-2.0
"""Exception hierarchy for the translation client.

A failed *operation* is not an exception: the poller returns it as an
``OperationFailure`` outcome. The errors here describe calls that could not
complete or responses that could not be understood.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from cloud_translator.core import codes

if TYPE_CHECKING:
    from cloud_translator.core.models import Operation


class TranslateClientError(Exception):
    """Base exception for the translation client."""

    pass


class ConfigurationError(TranslateClientError):
    """Configuration error (missing project id, empty token, bad poll settings).

    This error type is NOT retryable - fix the configuration first.
    """

    pass


class TransportError(TranslateClientError):
    """The HTTP call itself failed (connection, TLS, timeout, protocol).

    The request may or may not have reached the server. Never retried by
    this library.
    """

    def __init__(
        self,
        message: str,
        method: str,
        url: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url
        self.cause = cause


class DecodeError(TranslateClientError):
    """A response body could not be parsed into the expected shape.

    Raised for both success bodies and error bodies. NOT retryable.

    Attributes:
        status: HTTP status of the response.
        body: Raw response body.
    """

    def __init__(
        self,
        message: str,
        status: int,
        body: bytes,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.body = body
        self.cause = cause


class RemoteError(TranslateClientError):
    """The server answered with a non-200 status and a JSON error body.

    Attributes:
        status_code: HTTP status code.
        payload: Decoded error body, forwarded verbatim.
    """

    def __init__(self, status_code: int, payload: Any) -> None:
        self.status_code = status_code
        self.payload = payload
        super().__init__(f"API error (status {status_code}): {self.message}")

    @property
    def _error(self) -> dict[str, Any]:
        if isinstance(self.payload, dict) and isinstance(self.payload.get("error"), dict):
            return self.payload["error"]
        return {}

    @property
    def message(self) -> str:
        """Server-provided message, or the raw payload when there is none."""
        message = self._error.get("message")
        return str(message) if message is not None else str(self.payload)

    @property
    def reason(self) -> str | None:
        """Canonical code name such as ``NOT_FOUND``, when the server sent one."""
        return self._error.get("status")

    @property
    def is_not_found(self) -> bool:
        """Whether the addressed resource does not exist."""
        return self.status_code == codes.NOT_FOUND


class ProtocolViolation(TranslateClientError):
    """An operation reported ``done`` without a response or an error.

    Always fatal to the poll.
    """

    def __init__(self, message: str, operation: Operation) -> None:
        super().__init__(message)
        self.operation = operation


class PollTimeoutError(TranslateClientError):
    """Polling gave up before the operation finished.

    The remote operation keeps running; poll again with the same name to
    resume.
    """

    def __init__(self, name: str, attempts: int, elapsed: float) -> None:
        super().__init__(
            f"Operation {name} not done after {attempts} wait calls ({elapsed:.1f}s)"
        )
        self.name = name
        self.attempts = attempts
        self.elapsed = elapsed
