# SPDX-License-Identifier: Apache-2.0
"""Canonical API error codes and the HTTP status each one maps to.

See https://cloud.google.com/apis/design/errors. Several canonical codes
share an HTTP status, so these are plain constants rather than an enum.
"""

OK = 200
CANCELLED = 499
UNKNOWN = 500
INVALID_ARGUMENT = 400
DEADLINE_EXCEEDED = 504
NOT_FOUND = 404
ALREADY_EXISTS = 409
PERMISSION_DENIED = 403
UNAUTHENTICATED = 401
RESOURCE_EXHAUSTED = 429
FAILED_PRECONDITION = 400
ABORTED = 409
OUT_OF_RANGE = 400
UNIMPLEMENTED = 501
INTERNAL = 500
UNAVAILABLE = 503
DATA_LOSS = 500
