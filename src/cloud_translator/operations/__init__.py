# SPDX-License-Identifier: Apache-2.0
"""Long-running operation polling."""

from .poller import (
    OperationFailure,
    OperationOutcome,
    OperationPoller,
    OperationsApi,
    OperationSuccess,
    PollConfig,
    resolve_terminal,
)
from .progress import PollProgressCallback

__all__ = [
    "OperationFailure",
    "OperationOutcome",
    "OperationPoller",
    "OperationSuccess",
    "OperationsApi",
    "PollConfig",
    "PollProgressCallback",
    "resolve_terminal",
]
