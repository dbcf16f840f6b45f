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

"""Cloud Logging wire adapter.

Translates generic `LogEntry` records to and from the google-cloud-logging
client library.

Severity mapping:
    ┌──────────────┬──────────────────────┬──────────────────────────────┐
    │ Generic      │ LogSeverity          │ Notes                        │
    ├──────────────┼──────────────────────┼──────────────────────────────┤
    │ DEBUG        │ DEBUG (100)          │                              │
    │ INFO         │ INFO (200)           │ default for unknown input    │
    │ WARNING      │ WARNING (400)        │                              │
    │ ERROR        │ ERROR (500)          │                              │
    │ CRITICAL     │ CRITICAL (600)       │                              │
    │ INFO         │ DEFAULT, NOTICE,     │ read-side fallback           │
    │              │ ALERT, EMERGENCY     │                              │
    └──────────────┴──────────────────────┴──────────────────────────────┘

Writes go through a logger batch which is committed before `write_entry`
returns, so a failed write raises in the caller rather than being lost in
a background buffer.
"""

from __future__ import annotations

import itertools
from collections.abc import Mapping
from typing import Any

from google.cloud import logging as cloud_logging
from google.logging.type.log_severity_pb2 import LogSeverity

from ..constants import DEFAULT_LOG_ENTRY_LIMIT
from ..core.logging import get_logger
from .types import ListEntriesRequest, LogEntry, Severity

logger = get_logger(__name__)

_SEVERITY_TO_WIRE: dict[str, int] = {
    Severity.DEBUG: LogSeverity.DEBUG,
    Severity.INFO: LogSeverity.INFO,
    Severity.WARNING: LogSeverity.WARNING,
    Severity.ERROR: LogSeverity.ERROR,
    Severity.CRITICAL: LogSeverity.CRITICAL,
}

_WIRE_TO_SEVERITY: dict[int, Severity] = {wire: Severity(name) for name, wire in _SEVERITY_TO_WIRE.items()}


def to_wire_severity(severity: str) -> int:
    """Map a generic severity name to a `LogSeverity` value.

    Args:
        severity: Severity name such as 'ERROR'.

    Returns:
        The matching `LogSeverity`, or `LogSeverity.INFO` for anything else.
    """
    return _SEVERITY_TO_WIRE.get(severity, LogSeverity.INFO)


def from_wire_severity(severity: str | int | None) -> Severity:
    """Map a severity read from Cloud Logging back to the generic enum.

    The client library reports severities as names ('ERROR') but raw API
    payloads may carry the numeric value, so both are accepted.

    Args:
        severity: Severity name, numeric value, or None.

    Returns:
        The generic severity; INFO when there is no one-to-one match.
    """
    if severity is None:
        return Severity.INFO
    if isinstance(severity, str):
        try:
            severity = LogSeverity.Value(severity.upper())
        except ValueError:
            return Severity.INFO
    return _WIRE_TO_SEVERITY.get(int(severity), Severity.INFO)


def from_wire_entry(entry: Any) -> LogEntry:
    """Convert a google-cloud-logging entry into a generic `LogEntry`.

    A plain string payload becomes the message. A mapping payload is kept
    as the structured payload and its string 'message' key, if any, is
    surfaced as the message. Other payloads are rendered with `str()`.

    Args:
        entry: A `LogEntry` subclass instance from the client library.

    Returns:
        The generic entry.
    """
    result = LogEntry(
        severity=from_wire_severity(entry.severity).value,
        labels=dict(entry.labels) if entry.labels else None,
        timestamp=entry.timestamp,
    )

    payload = entry.payload
    if payload is None:
        return result

    if isinstance(payload, str):
        result.message = payload
    elif isinstance(payload, Mapping):
        result.payload = dict(payload)
        message = payload.get('message')
        if isinstance(message, str):
            result.message = message
    else:
        result.message = str(payload)

    return result


class CloudLoggingAdapter:
    """`LoggingBackend` implementation over google-cloud-logging."""

    def __init__(self, client: cloud_logging.Client) -> None:
        """Initialize the adapter.

        Args:
            client: An authenticated Cloud Logging client scoped to one project.
        """
        self._client = client

    @classmethod
    def for_project(cls, project_id: str) -> CloudLoggingAdapter:
        """Create an adapter with Application Default Credentials.

        Args:
            project_id: GCP project ID.

        Returns:
            The adapter.
        """
        return cls(cloud_logging.Client(project=project_id))

    def write_entry(self, log_name: str, entry: LogEntry) -> None:
        """Write one entry and flush it before returning.

        Args:
            log_name: Short log name, e.g. 'my-app'.
            entry: The entry to write.
        """
        kwargs: dict[str, Any] = {'severity': LogSeverity.Name(to_wire_severity(entry.severity))}
        if entry.labels:
            kwargs['labels'] = dict(entry.labels)
        if entry.timestamp is not None:
            kwargs['timestamp'] = entry.timestamp

        cloud_logger = self._client.logger(log_name)
        with cloud_logger.batch() as batch:
            if entry.payload is not None:
                batch.log_struct(dict(entry.payload), **kwargs)
            else:
                batch.log_text(entry.message, **kwargs)

        logger.debug('Wrote log entry', log_name=log_name, severity=kwargs['severity'])

    def list_entries(self, request: ListEntriesRequest) -> list[LogEntry]:
        """List at most `limit` entries, newest first unless ordered otherwise.

        Args:
            request: Filter, ordering, limit and cursor.

        Returns:
            The translated entries.
        """
        limit = request.limit if request.limit > 0 else DEFAULT_LOG_ENTRY_LIMIT

        iterator = self._client.list_entries(
            filter_=request.filter or None,
            order_by=request.order_by or cloud_logging.DESCENDING,
            page_size=limit,
            page_token=request.page_token or None,
        )
        entries = [from_wire_entry(entry) for entry in itertools.islice(iterator, limit)]

        logger.debug('Listed log entries', count=len(entries), limit=limit, filter=request.filter)
        return entries
