# SPDX-License-Identifier: Apache-2.0
"""Async client for the Translation API v3beta1."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING, Any

from cloud_translator.client.codec import NO_BODY, JsonBody, QueryParams
from cloud_translator.client.dispatcher import CallDispatcher
from cloud_translator.client.errors import RemoteError
from cloud_translator.config import ClientConfig
from cloud_translator.core.models import (
    BatchTranslateTextRequest,
    DetectLanguageRequest,
    DetectLanguageResponse,
    GetSupportedLanguagesParams,
    Glossary,
    ListGlossariesParams,
    ListGlossariesResponse,
    ListOperationsParams,
    ListOperationsResponse,
    Operation,
    SupportedLanguages,
    TranslateTextRequest,
    TranslateTextResponse,
    WaitOperationRequest,
)
from cloud_translator.operations.poller import OperationOutcome, OperationPoller, PollConfig

if TYPE_CHECKING:
    import aiohttp

    from cloud_translator.operations.progress import PollProgressCallback

logger = logging.getLogger(__name__)


def location_path(project_id: str, location_id: str) -> str:
    """Resource name of a location."""
    return f"projects/{project_id}/locations/{location_id}"


def glossary_path(project_id: str, location_id: str, glossary_id: str) -> str:
    """Resource name of a glossary."""
    return f"{location_path(project_id, location_id)}/glossaries/{glossary_id}"


def _next_page(token: str | None, seen_tokens: set[str]) -> bool:
    """Record a page token; False when there is none or it was already served."""
    if not token:
        return False
    if token in seen_tokens:
        logger.warning("Page token %r repeated, stopping pagination", token)
        return False
    seen_tokens.add(token)
    return True


class TranslationClient:
    """Translation API client bound to one project and location.

    Usage:
        config = ClientConfig.from_env()
        async with TranslationClient(config) as client:
            response = await client.translate_text(
                TranslateTextRequest(contents=["player"], target_language_code="zh")
            )

    Calls are attempted once. Long-running calls return an Operation; pass
    it to ``wait_until_done`` to get the outcome.
    """

    def __init__(
        self,
        config: ClientConfig,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """Initialize TranslationClient.

        Args:
            config: Project, location, credentials and endpoint.
            session: Optional aiohttp session to share. Not closed by
                the client.

        Raises:
            ConfigurationError: If the configuration is invalid.
        """
        config.validate()
        self._config = config
        self._dispatcher = CallDispatcher(
            session=session, request_timeout=config.request_timeout
        )

    async def __aenter__(self) -> TranslationClient:
        """Enter async context manager."""
        await self._dispatcher.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Exit async context manager."""
        await self.close()

    async def close(self) -> None:
        """Close the HTTP session."""
        await self._dispatcher.close()

    @property
    def config(self) -> ClientConfig:
        """Client configuration."""
        return self._config

    @property
    def access_token(self) -> str:
        """Bearer token sent with every call."""
        return self._config.access_token

    @access_token.setter
    def access_token(self, token: str) -> None:
        self._config.access_token = token

    def _location_url(self, suffix: str = "") -> str:
        return f"{self._config.base_url}/{self._config.location_path}{suffix}"

    def _resource_url(self, name: str, suffix: str = "") -> str:
        return f"{self._config.base_url}/{name.lstrip('/')}{suffix}"

    # ------------------------------------------------------------------
    # Translation
    # ------------------------------------------------------------------

    async def detect_language(self, request: DetectLanguageRequest) -> DetectLanguageResponse:
        """Detect the language of a text.

        Returns:
            Candidate languages, most probable first.
        """
        return await self._dispatcher.call(
            "POST",
            self._location_url(":detectLanguage"),
            self.access_token,
            body=JsonBody(request),
            response_type=DetectLanguageResponse,
        )

    async def get_supported_languages(
        self,
        params: GetSupportedLanguagesParams | None = None,
    ) -> SupportedLanguages:
        """List the languages the API supports."""
        return await self._dispatcher.call(
            "GET",
            self._location_url("/supportedLanguages"),
            self.access_token,
            body=QueryParams(params) if params is not None else NO_BODY,
            response_type=SupportedLanguages,
        )

    async def translate_text(self, request: TranslateTextRequest) -> TranslateTextResponse:
        """Translate texts synchronously."""
        return await self._dispatcher.call(
            "POST",
            self._location_url(":translateText"),
            self.access_token,
            body=JsonBody(request),
            response_type=TranslateTextResponse,
        )

    async def batch_translate_text(self, request: BatchTranslateTextRequest) -> Operation:
        """Start an asynchronous batch translation of Cloud Storage files.

        Partial output may remain in the output location if the operation
        is cancelled.

        Returns:
            The long-running operation.
        """
        operation = await self._dispatcher.call(
            "POST",
            self._location_url(":batchTranslateText"),
            self.access_token,
            body=JsonBody(request),
            response_type=Operation,
        )
        logger.info("Started batch translation %s", operation.name)
        return operation

    # ------------------------------------------------------------------
    # Glossaries
    # ------------------------------------------------------------------

    async def create_glossary(self, glossary: Glossary) -> Operation:
        """Start creating a glossary.

        Returns:
            The long-running operation. Its response is the Glossary.
        """
        operation = await self._dispatcher.call(
            "POST",
            self._location_url("/glossaries"),
            self.access_token,
            body=JsonBody(glossary),
            response_type=Operation,
        )
        logger.info("Creating glossary %s (operation %s)", glossary.name, operation.name)
        return operation

    async def get_glossary(self, name: str) -> Glossary:
        """Fetch a glossary by resource name."""
        return await self._dispatcher.call(
            "GET",
            self._resource_url(name),
            self.access_token,
            response_type=Glossary,
        )

    async def delete_glossary(self, name: str, missing_ok: bool = False) -> Operation | None:
        """Start deleting a glossary.

        Args:
            name: Glossary resource name.
            missing_ok: Return None instead of raising when the glossary
                does not exist.

        Returns:
            The long-running operation, or None if there was nothing to
            delete.

        Raises:
            RemoteError: On server errors (404 only when missing_ok is False).
        """
        try:
            return await self._dispatcher.call(
                "DELETE",
                self._resource_url(name),
                self.access_token,
                response_type=Operation,
            )
        except RemoteError as e:
            if missing_ok and e.is_not_found:
                logger.debug("Glossary %s does not exist, nothing to delete", name)
                return None
            raise

    async def list_glossaries(
        self,
        params: ListGlossariesParams | None = None,
    ) -> ListGlossariesResponse:
        """Fetch one page of glossaries."""
        return await self._dispatcher.call(
            "GET",
            self._location_url("/glossaries"),
            self.access_token,
            body=QueryParams(params) if params is not None else NO_BODY,
            response_type=ListGlossariesResponse,
        )

    async def iter_glossaries(
        self,
        params: ListGlossariesParams | None = None,
    ) -> AsyncIterator[Glossary]:
        """Iterate over all glossaries, following page tokens."""
        params = params or ListGlossariesParams()
        seen_tokens: set[str] = set()
        while True:
            page = await self.list_glossaries(params)
            for glossary in page.glossaries:
                yield glossary
            if not _next_page(page.next_page_token, seen_tokens):
                return
            params = ListGlossariesParams(
                page_size=params.page_size,
                page_token=page.next_page_token,
                filter=params.filter,
            )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def get_operation(self, name: str) -> Operation:
        """Fetch the latest state of an operation."""
        return await self._dispatcher.call(
            "GET",
            self._resource_url(name),
            self.access_token,
            response_type=Operation,
        )

    async def list_operations(
        self,
        params: ListOperationsParams | None = None,
    ) -> ListOperationsResponse:
        """Fetch one page of operations in this location."""
        return await self._dispatcher.call(
            "GET",
            self._location_url("/operations"),
            self.access_token,
            body=QueryParams(params) if params is not None else NO_BODY,
            response_type=ListOperationsResponse,
        )

    async def iter_operations(
        self,
        params: ListOperationsParams | None = None,
    ) -> AsyncIterator[Operation]:
        """Iterate over all operations, following page tokens."""
        params = params or ListOperationsParams()
        seen_tokens: set[str] = set()
        while True:
            page = await self.list_operations(params)
            for operation in page.operations:
                yield operation
            if not _next_page(page.next_page_token, seen_tokens):
                return
            params = ListOperationsParams(
                filter=params.filter,
                page_size=params.page_size,
                page_token=page.next_page_token,
            )

    async def wait_operation(
        self,
        name: str,
        request: WaitOperationRequest | None = None,
    ) -> Operation:
        """Wait server-side for an operation, up to the request's timeout.

        Returns the operation as soon as it finishes or the timeout elapses,
        whichever comes first. The result may still be running.
        """
        return await self._dispatcher.call(
            "POST",
            self._resource_url(name, ":wait"),
            self.access_token,
            body=JsonBody(request or WaitOperationRequest()),
            response_type=Operation,
        )

    async def cancel_operation(self, name: str) -> None:
        """Request cancellation. Best effort; the operation may still finish."""
        await self._dispatcher.call(
            "POST",
            self._resource_url(name, ":cancel"),
            self.access_token,
            body=JsonBody({}),
        )
        logger.info("Requested cancellation of operation %s", name)

    async def delete_operation(self, name: str) -> None:
        """Delete an operation record. Does not cancel the operation."""
        await self._dispatcher.call("DELETE", self._resource_url(name), self.access_token)

    async def wait_until_done(
        self,
        operation: Operation | str,
        config: PollConfig | None = None,
        progress_callback: PollProgressCallback | None = None,
    ) -> OperationOutcome:
        """Poll an operation until it finishes.

        Args:
            operation: The operation, or its resource name.
            config: Polling configuration (default: 1s wait hint, no limit).
            progress_callback: Called after each non-terminal wait call.

        Returns:
            OperationSuccess or OperationFailure.
        """
        poller = OperationPoller(self, config=config, progress_callback=progress_callback)
        return await poller.poll(operation)
