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

"""Cloud Trace v1 wire adapter."""

from __future__ import annotations

from google.cloud import trace_v1

from ..constants import DEFAULT_TRACES_PAGE_SIZE
from ..core.logging import get_logger
from ..core.paging import take_page
from .span_id import decode_span_id, encode_span_id
from .types import (
    GetTraceRequest,
    ListTracesRequest,
    ListTracesResponse,
    PatchTraceRequest,
    Span,
    SpanKind,
    Trace,
    TraceView,
)

logger = get_logger(__name__)

_SpanKindPb = trace_v1.TraceSpan.SpanKind
_ViewTypePb = trace_v1.ListTracesRequest.ViewType

_SPAN_KIND_TO_WIRE: dict[str, _SpanKindPb] = {
    SpanKind.RPC_SERVER: _SpanKindPb.RPC_SERVER,
    SpanKind.RPC_CLIENT: _SpanKindPb.RPC_CLIENT,
}
_WIRE_TO_SPAN_KIND: dict[int, SpanKind] = {v: SpanKind(k) for k, v in _SPAN_KIND_TO_WIRE.items()}

_VIEW_TO_WIRE: dict[TraceView, _ViewTypePb] = {
    TraceView.MINIMAL: _ViewTypePb.MINIMAL,
    TraceView.ROOTSPAN: _ViewTypePb.ROOTSPAN,
    TraceView.COMPLETE: _ViewTypePb.COMPLETE,
}


def to_wire_span(span: Span) -> trace_v1.TraceSpan:
    """Convert a generic span; the parent id is only set when non-empty."""
    wire = trace_v1.TraceSpan(
        span_id=encode_span_id(span.span_id),
        name=span.name,
        start_time=span.start_time,
        end_time=span.end_time,
        kind=_SPAN_KIND_TO_WIRE.get(span.kind, _SpanKindPb.SPAN_KIND_UNSPECIFIED),
        labels=span.labels or {},
    )
    if span.parent_id:
        wire.parent_span_id = encode_span_id(span.parent_id)
    return wire


def from_wire_span(span: trace_v1.TraceSpan) -> Span:
    """Convert a wire span; a zero parent id reads back as None."""
    return Span(
        span_id=decode_span_id(span.span_id),
        name=span.name,
        start_time=span.start_time,
        end_time=span.end_time,
        parent_id=decode_span_id(span.parent_span_id) or None,
        kind=_WIRE_TO_SPAN_KIND.get(span.kind, SpanKind.UNSPECIFIED).value,
        labels=dict(span.labels) or None,
    )


def from_wire_trace(trace: trace_v1.Trace, project_id: str) -> Trace:
    """Convert a wire trace, stamping it with the adapter's project."""
    return Trace(
        trace_id=trace.trace_id,
        project_id=project_id,
        spans=[from_wire_span(span) for span in trace.spans],
    )


class CloudTraceAdapter:
    """`TraceBackend` implementation over google-cloud-trace (v1 API)."""

    def __init__(self, client: trace_v1.TraceServiceClient, project_id: str) -> None:
        """Initialize the adapter.

        Args:
            client: A trace service client.
            project_id: GCP project every call is scoped to.
        """
        self._client = client
        self._project_id = project_id

    @classmethod
    def for_project(cls, project_id: str) -> CloudTraceAdapter:
        """Create an adapter with Application Default Credentials."""
        return cls(trace_v1.TraceServiceClient(), project_id)

    def list_traces(self, request: ListTracesRequest) -> ListTracesResponse:
        """Read one page of traces in a time window.

        Args:
            request: Window, optional filter, ordering, view and paging.

        Returns:
            At most `page_size` traces (100 when unset) and the next token.
        """
        page_size = request.page_size if request.page_size > 0 else DEFAULT_TRACES_PAGE_SIZE
        wire_request = trace_v1.ListTracesRequest(
            project_id=self._project_id,
            start_time=request.start_time,
            end_time=request.end_time,
            filter=request.filter,
            order_by=request.order_by,
            page_size=page_size,
            page_token=request.page_token,
        )
        if request.view is not None:
            wire_request.view = _VIEW_TO_WIRE[request.view]

        items, next_page_token = take_page(self._client.list_traces(request=wire_request), 'traces', page_size)
        logger.debug('Listed traces', count=len(items), has_more=bool(next_page_token))
        return ListTracesResponse(
            traces=[from_wire_trace(trace, self._project_id) for trace in items],
            next_page_token=next_page_token,
        )

    def get_trace(self, request: GetTraceRequest) -> Trace:
        """Fetch one trace.

        Args:
            request: The trace id.

        Returns:
            The trace with all its spans.
        """
        trace = self._client.get_trace(project_id=self._project_id, trace_id=request.trace_id)
        return from_wire_trace(trace, self._project_id)

    def patch_traces(self, request: PatchTraceRequest) -> None:
        """Send all spans of one trace in a single patch call.

        Args:
            request: The trace id and the spans to add or update.
        """
        traces = trace_v1.Traces(
            traces=[
                trace_v1.Trace(
                    project_id=self._project_id,
                    trace_id=request.trace_id,
                    spans=[to_wire_span(span) for span in request.spans],
                )
            ]
        )
        self._client.patch_traces(project_id=self._project_id, traces=traces)
        logger.debug('Patched trace', trace_id=request.trace_id, spans=len(request.spans))
