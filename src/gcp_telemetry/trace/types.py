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

"""Generic Cloud Trace models."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field


class SpanKind(StrEnum):
    """Span kinds understood by the generic model."""

    RPC_SERVER = 'RPC_SERVER'
    RPC_CLIENT = 'RPC_CLIENT'
    UNSPECIFIED = 'UNSPECIFIED'


class TraceView(StrEnum):
    """How much of each trace a listing returns."""

    MINIMAL = 'MINIMAL'
    ROOTSPAN = 'ROOTSPAN'
    COMPLETE = 'COMPLETE'


class Span(BaseModel):
    """One timed operation within a trace.

    Attributes:
        span_id: Span identifier. Ids that are not 16 hex digits are hashed
            on write, so they read back in a different form.
        name: Operation name.
        start_time: Start of the operation.
        end_time: End of the operation.
        parent_id: Parent span id, None for a root span.
        kind: One of `SpanKind`.
        labels: Free-form string labels.
    """

    span_id: str
    name: str = ''
    start_time: datetime
    end_time: datetime
    parent_id: str | None = None
    kind: str = SpanKind.UNSPECIFIED.value
    labels: dict[str, str] | None = None


class Trace(BaseModel):
    """A distributed trace and its spans."""

    trace_id: str
    project_id: str
    spans: list[Span] = Field(default_factory=list)


class ListTracesRequest(BaseModel):
    """Request to list traces in a time window."""

    start_time: datetime
    end_time: datetime
    filter: str = ''
    order_by: str = ''
    page_size: int = 0
    page_token: str = ''
    view: TraceView | None = None


class ListTracesResponse(BaseModel):
    """One page of traces."""

    traces: list[Trace] = Field(default_factory=list)
    next_page_token: str = ''


class GetTraceRequest(BaseModel):
    """Request to fetch one trace."""

    trace_id: str


class PatchTraceRequest(BaseModel):
    """Request to add or update spans of one trace."""

    trace_id: str
    spans: list[Span]
