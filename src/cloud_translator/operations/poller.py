# SPDX-License-Identifier: Apache-2.0
"""Long-running operation polling.

The poller drives an operation to a terminal state by calling the ``:wait``
endpoint in a loop. Each wait call carries a short server-side timeout hint
so the loop stays responsive to task cancellation between calls.

Outcomes:
    - ``done`` unset or false: issue another wait call.
    - ``done`` true with a response: ``OperationSuccess``.
    - ``done`` true with only an error: ``OperationFailure`` (a value, not an
      exception).
    - ``done`` true with neither: ``ProtocolViolation`` is raised.

Without a deadline or attempt limit the loop polls until the server reports
completion.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Any, Callable, Protocol, Union

from cloud_translator.client.codec import format_duration
from cloud_translator.client.errors import (
    ConfigurationError,
    PollTimeoutError,
    ProtocolViolation,
)
from cloud_translator.core.models import Operation, Status, WaitOperationRequest
from cloud_translator.operations.progress import PollProgressCallback

logger = logging.getLogger(__name__)

# Smallest wait hint sent when the deadline is nearly used up
MIN_WAIT_TIMEOUT = 0.001


@dataclass
class PollConfig:
    """Operation polling configuration.

    Attributes:
        wait_timeout: Server-side timeout hint per wait call, in seconds.
        deadline: Give up after this many seconds in total. None polls until
            the operation finishes.
        max_attempts: Give up after this many wait calls. None is unlimited.
        poll_interval: Local pause between wait calls, in seconds.
    """

    wait_timeout: float = 1.0
    deadline: float | None = None
    max_attempts: int | None = None
    poll_interval: float = 0.0

    def validate(self) -> None:
        """Check the settings.

        Raises:
            ConfigurationError: On a non-positive timeout, deadline or
                attempt limit, or a negative interval.
        """
        if self.wait_timeout <= 0:
            raise ConfigurationError(f"wait_timeout must be positive, got {self.wait_timeout}")
        if self.deadline is not None and self.deadline <= 0:
            raise ConfigurationError(f"deadline must be positive, got {self.deadline}")
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ConfigurationError(
                f"max_attempts must be at least 1, got {self.max_attempts}"
            )
        if self.poll_interval < 0:
            raise ConfigurationError(
                f"poll_interval must not be negative, got {self.poll_interval}"
            )


@dataclass(frozen=True)
class OperationSuccess:
    """Operation finished with a response payload."""

    name: str
    response: Any

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class OperationFailure:
    """Operation finished with an error status.

    This is an observed remote outcome, not a failed call.
    """

    name: str
    status: Status

    @property
    def ok(self) -> bool:
        return False


OperationOutcome = Union[OperationSuccess, OperationFailure]


class OperationsApi(Protocol):
    """The single call the poller needs."""

    async def wait_operation(
        self,
        name: str,
        request: WaitOperationRequest | None = None,
    ) -> Operation: ...


def resolve_terminal(operation: Operation) -> OperationOutcome | None:
    """Map an operation snapshot to its outcome.

    Returns:
        None while the operation is still running, otherwise the outcome.
        A response takes precedence over an error.

    Raises:
        ProtocolViolation: If the operation is done without either payload.
    """
    if not operation.done:
        return None
    if operation.response is not None:
        return OperationSuccess(name=operation.name, response=operation.response)
    if operation.error is not None:
        return OperationFailure(name=operation.name, status=operation.error)
    raise ProtocolViolation(
        f"Operation {operation.name} is done but has neither response nor error",
        operation=operation,
    )


class OperationPoller:
    """Polls a long-running operation until it reaches a terminal state."""

    def __init__(
        self,
        api: OperationsApi,
        config: PollConfig | None = None,
        progress_callback: PollProgressCallback | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize OperationPoller.

        Args:
            api: Object issuing the wait calls (usually a TranslationClient).
            config: Polling configuration.
            progress_callback: Called after each non-terminal wait call.
            sleep: Coroutine used for ``poll_interval`` pauses.
            clock: Monotonic clock in seconds, used for the deadline.

        Raises:
            ConfigurationError: If the configuration is invalid.
        """
        self._api = api
        self._config = config or PollConfig()
        self._config.validate()
        self._progress_callback = progress_callback
        self._sleep = sleep
        self._clock = clock

    async def poll(self, operation: Operation | str) -> OperationOutcome:
        """Wait until the operation finishes.

        Args:
            operation: The operation, or its resource name.

        Returns:
            OperationSuccess or OperationFailure.

        Raises:
            ProtocolViolation: If the operation finishes without a payload.
            PollTimeoutError: If the deadline or attempt limit is exceeded.
            TransportError: If a wait call fails at the HTTP level.
            RemoteError: If a wait call is rejected by the server.
            DecodeError: If a wait response cannot be decoded.
        """
        name = operation if isinstance(operation, str) else operation.name
        config = self._config
        start = self._clock()
        attempts = 0

        while True:
            elapsed = self._clock() - start
            remaining: float | None = None
            if config.deadline is not None:
                remaining = config.deadline - elapsed
                if remaining <= 0:
                    raise PollTimeoutError(name, attempts, elapsed)
            if config.max_attempts is not None and attempts >= config.max_attempts:
                raise PollTimeoutError(name, attempts, elapsed)

            attempts += 1
            current = await self._wait(name, remaining, attempts, start)
            outcome = resolve_terminal(current)
            elapsed = self._clock() - start

            if isinstance(outcome, OperationSuccess):
                logger.info("Operation %s succeeded after %d wait calls", name, attempts)
                return outcome
            if isinstance(outcome, OperationFailure):
                logger.warning(
                    "Operation %s failed after %d wait calls: [%d] %s",
                    name,
                    attempts,
                    outcome.status.code,
                    outcome.status.message,
                )
                return outcome

            logger.debug("Operation %s still running (attempt %d)", name, attempts)
            if self._progress_callback is not None:
                self._progress_callback(current, attempts, elapsed)
            if config.poll_interval > 0:
                interval = config.poll_interval
                if config.deadline is not None:
                    remaining = config.deadline - elapsed
                    if remaining <= 0:
                        raise PollTimeoutError(name, attempts, elapsed)
                    interval = min(interval, remaining)
                await self._sleep(interval)

    async def _wait(
        self,
        name: str,
        remaining: float | None,
        attempts: int,
        start: float,
    ) -> Operation:
        wait_timeout = self._config.wait_timeout
        if remaining is not None:
            wait_timeout = max(min(wait_timeout, remaining), MIN_WAIT_TIMEOUT)
        request = WaitOperationRequest(timeout=format_duration(wait_timeout))

        if remaining is None:
            return await self._api.wait_operation(name, request)
        try:
            return await asyncio.wait_for(
                self._api.wait_operation(name, request), timeout=remaining
            )
        except asyncio.TimeoutError:
            raise PollTimeoutError(name, attempts, self._clock() - start) from None
