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

"""Public Cloud Logging client.

`LoggingClient` is what callers hold. It forwards every call unchanged to
an injected `LoggingBackend`; in production that is `CloudLoggingAdapter`,
in tests any object satisfying the protocol.
"""

from typing import Protocol

from .types import ListEntriesRequest, LogEntry


class LoggingBackend(Protocol):
    """Capability set of a Cloud Logging implementation."""

    def write_entry(self, log_name: str, entry: LogEntry) -> None:
        """Write a single entry to the named log."""
        ...

    def list_entries(self, request: ListEntriesRequest) -> list[LogEntry]:
        """List entries matching the request, newest first by default."""
        ...


class LoggingClient:
    """Cloud Logging operations over generic models."""

    def __init__(self, backend: LoggingBackend) -> None:
        """Initialize the client.

        Args:
            backend: Implementation every call is delegated to.
        """
        self._backend = backend

    @classmethod
    def for_project(cls, project_id: str) -> 'LoggingClient':
        """Create a client backed by the real Cloud Logging API.

        Args:
            project_id: GCP project to read from and write to.

        Returns:
            A client using Application Default Credentials.
        """
        from .adapter import CloudLoggingAdapter

        return cls(CloudLoggingAdapter.for_project(project_id))

    def write_entry(self, log_name: str, entry: LogEntry) -> None:
        """Write a log entry to Cloud Logging."""
        self._backend.write_entry(log_name, entry)

    def list_entries(self, request: ListEntriesRequest) -> list[LogEntry]:
        """Retrieve log entries from Cloud Logging."""
        return self._backend.list_entries(request)
