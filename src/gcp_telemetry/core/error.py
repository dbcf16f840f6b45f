# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""Error types raised by the telemetry tools.

Provider errors (``google.api_core.exceptions.GoogleAPICallError`` and
``googleapiclient.errors.HttpError``) are never wrapped: they reach the
caller exactly as the SDK raised them. `TelemetryError` covers the two
failure kinds that originate locally: malformed tool arguments and unknown
tool names.
"""

from typing import Any, Literal

StatusName = Literal[
    'OK',
    'CANCELLED',
    'UNKNOWN',
    'INVALID_ARGUMENT',
    'DEADLINE_EXCEEDED',
    'NOT_FOUND',
    'ALREADY_EXISTS',
    'PERMISSION_DENIED',
    'UNAUTHENTICATED',
    'RESOURCE_EXHAUSTED',
    'FAILED_PRECONDITION',
    'ABORTED',
    'OUT_OF_RANGE',
    'UNIMPLEMENTED',
    'INTERNAL',
    'UNAVAILABLE',
    'DATA_LOSS',
]


class TelemetryError(Exception):
    """Base error class for locally detected failures."""

    def __init__(
        self,
        *,
        message: str,
        status: StatusName | None = None,
        cause: Exception | None = None,
        details: Any = None,
    ) -> None:
        """Initialize a TelemetryError.

        Args:
            message: The error message.
            status: The status name for this error. Defaults to the cause's
                status when the cause is a TelemetryError, else INTERNAL.
            cause: Optional underlying exception.
            details: Optional detail information.
        """
        if not status and isinstance(cause, TelemetryError):
            status = cause.status
        self.status: StatusName = status or 'INTERNAL'
        super().__init__(f'{self.status}: {message}')
        self.original_message = message
        self.cause = cause
        self.details = details or {}


class InvalidArgumentError(TelemetryError):
    """Raised when a tool argument is missing or has the wrong shape."""

    def __init__(self, message: str, argument: str | None = None) -> None:
        """Initialize an InvalidArgumentError.

        Args:
            message: The error message shown to the caller.
            argument: Name of the offending argument, if known.
        """
        super().__init__(
            status='INVALID_ARGUMENT',
            message=message,
            details={'argument': argument} if argument else None,
        )
        self.argument = argument
