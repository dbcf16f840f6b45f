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

"""Public Cloud Trace client."""

from typing import Protocol

from .types import GetTraceRequest, ListTracesRequest, ListTracesResponse, PatchTraceRequest, Trace


class TraceBackend(Protocol):
    """Capability set of a Cloud Trace implementation."""

    def list_traces(self, request: ListTracesRequest) -> ListTracesResponse:
        """Read one page of traces."""
        ...

    def get_trace(self, request: GetTraceRequest) -> Trace:
        """Fetch one trace with all its spans."""
        ...

    def patch_traces(self, request: PatchTraceRequest) -> None:
        """Add or update spans of one trace."""
        ...


class TraceClient:
    """Cloud Trace operations over generic models."""

    def __init__(self, backend: TraceBackend) -> None:
        """Initialize the client.

        Args:
            backend: Implementation every call is delegated to.
        """
        self._backend = backend

    @classmethod
    def for_project(cls, project_id: str) -> 'TraceClient':
        """Create a client backed by the real Cloud Trace API."""
        from .adapter import CloudTraceAdapter

        return cls(CloudTraceAdapter.for_project(project_id))

    def list_traces(self, request: ListTracesRequest) -> ListTracesResponse:
        """List traces from Cloud Trace."""
        return self._backend.list_traces(request)

    def get_trace(self, request: GetTraceRequest) -> Trace:
        """Get a specific trace from Cloud Trace."""
        return self._backend.get_trace(request)

    def patch_traces(self, request: PatchTraceRequest) -> None:
        """Update trace spans in Cloud Trace."""
        self._backend.patch_traces(request)
