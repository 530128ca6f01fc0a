# SPDX-License-Identifier: Apache-2.0
"""Single HTTP round trip with outcome classification."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional, overload

import aiohttp

from cloud_translator.client.codec import (
    NO_BODY,
    DecodableT,
    JsonBody,
    QueryParams,
    RequestBody,
    decode_error_payload,
    decode_response,
    encode_json,
    encode_query,
)
from cloud_translator.client.errors import RemoteError, TransportError
from cloud_translator.core import codes

logger = logging.getLogger(__name__)


def build_headers(access_token: str, method: str) -> dict[str, str]:
    """Build request headers.

    DELETE carries no body, so it gets no Content-Type.
    """
    headers = {"Authorization": f"Bearer {access_token.strip()}"}
    if method != "DELETE":
        headers["Content-Type"] = "application/json"
    return headers


class CallDispatcher:
    """Issues one HTTP call and classifies the result.

    Each call is attempted exactly once. A 200 response is decoded into the
    expected type, any other status becomes a RemoteError, and transport
    failures become TransportError.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        request_timeout: float | None = None,
    ) -> None:
        """Initialize CallDispatcher.

        Args:
            session: Session to use. An injected session is never closed
                by the dispatcher.
            request_timeout: Total seconds per call for a session created
                here. None keeps aiohttp's default.
        """
        self._session = session
        self._owns_session = session is None
        self._request_timeout = request_timeout

    async def __aenter__(self) -> CallDispatcher:
        """Enter async context manager."""
        await self._ensure_session()
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Exit async context manager."""
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure aiohttp session exists.

        Returns:
            Active aiohttp session.
        """
        if self._session is None:
            if self._request_timeout is not None:
                timeout = aiohttp.ClientTimeout(total=self._request_timeout)
                self._session = aiohttp.ClientSession(timeout=timeout)
            else:
                self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    @overload
    async def call(
        self,
        method: str,
        url: str,
        access_token: str,
        *,
        body: RequestBody = ...,
        response_type: type[DecodableT],
    ) -> DecodableT: ...

    @overload
    async def call(
        self,
        method: str,
        url: str,
        access_token: str,
        *,
        body: RequestBody = ...,
        response_type: None = ...,
    ) -> None: ...

    async def call(
        self,
        method: str,
        url: str,
        access_token: str,
        *,
        body: RequestBody = NO_BODY,
        response_type: Optional[type[DecodableT]] = None,
    ) -> Optional[DecodableT]:
        """Perform one request/response round trip.

        Args:
            method: HTTP method ("GET", "POST", "DELETE").
            url: Full request URL.
            access_token: Bearer token. Surrounding whitespace is trimmed.
            body: NO_BODY, JsonBody or QueryParams.
            response_type: Model class to decode a 200 body into. None means
                the call has no meaningful response body.

        Returns:
            The decoded response, or None when ``response_type`` is None.

        Raises:
            TransportError: If the HTTP call failed.
            DecodeError: If a success or error body cannot be decoded.
            RemoteError: On a non-200 status with a JSON body.
        """
        session = await self._ensure_session()

        kwargs: dict[str, Any] = {"headers": build_headers(access_token, method)}
        if isinstance(body, JsonBody):
            kwargs["data"] = encode_json(body.payload)
        elif isinstance(body, QueryParams):
            params = encode_query(body.params)
            if params:
                kwargs["params"] = params

        try:
            async with session.request(method, url, **kwargs) as response:
                status = response.status
                raw = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(
                f"{method} {url} failed: {e!r}", method=method, url=url, cause=e
            ) from e

        logger.debug("%s %s -> %d", method, url, status)

        if status == codes.OK:
            if response_type is None:
                return None
            return decode_response(raw, response_type, status)

        payload = decode_error_payload(raw, status)
        raise RemoteError(status, payload)

    async def close(self) -> None:
        """Close the HTTP session if this dispatcher created it."""
        if self._session is not None and self._owns_session:
            await self._session.close()
        self._session = None
