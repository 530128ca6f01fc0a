# SPDX-License-Identifier: Apache-2.0
"""Progress callback protocol for operation polling."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cloud_translator.core.models import Operation


@runtime_checkable
class PollProgressCallback(Protocol):
    """Called after every wait call that found the operation still running."""

    def __call__(
        self,
        operation: Operation,
        attempt: int,
        elapsed: float,
    ) -> None: ...
