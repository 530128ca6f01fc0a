# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures: a scripted stand-in for aiohttp.ClientSession."""

from __future__ import annotations

import json
from typing import Any, Callable
from unittest.mock import AsyncMock, MagicMock

import pytest

from cloud_translator.config import ClientConfig


class FakeResponse:
    """Minimal aiohttp response usable as ``async with session.request(...)``."""

    def __init__(self, status: int, body: bytes) -> None:
        self.status = status
        self._body = body

    async def read(self) -> bytes:
        return self._body

    async def __aenter__(self) -> FakeResponse:
        return self

    async def __aexit__(self, *args: Any) -> None:
        return None


def json_response(status: int, payload: Any) -> FakeResponse:
    """Build a response whose body is ``payload`` as JSON."""
    return FakeResponse(status, json.dumps(payload).encode("utf-8"))


@pytest.fixture
def make_session() -> Callable[..., MagicMock]:
    """Return a factory for sessions that answer with the given responses in order.

    An exception instance in the list is raised by ``session.request`` instead.
    """

    def _make(*responses: FakeResponse | Exception) -> MagicMock:
        session = MagicMock()
        session.request = MagicMock(side_effect=list(responses))
        session.close = AsyncMock()
        return session

    return _make


@pytest.fixture
def config() -> ClientConfig:
    """Client configuration for a fake project."""
    return ClientConfig(
        project_id="my-project",
        access_token="test-token",
        location_id="us-central1",
    )
