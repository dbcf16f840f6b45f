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

"""Tests for the Cloud Trace wire adapter."""

from datetime import UTC, datetime, timedelta
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from google.cloud import trace_v1

from gcp_telemetry.trace import (
    GetTraceRequest,
    ListTracesRequest,
    PatchTraceRequest,
    Span,
    TraceView,
    encode_span_id,
)
from gcp_telemetry.trace.adapter import CloudTraceAdapter

START = datetime(2025, 6, 1, 12, 0, tzinfo=UTC)
END = START + timedelta(milliseconds=250)


def _wire_trace(trace_id: str) -> trace_v1.Trace:
    return trace_v1.Trace(
        project_id='test-project',
        trace_id=trace_id,
        spans=[
            trace_v1.TraceSpan(
                span_id=0x10,
                name='/api/orders',
                kind=trace_v1.TraceSpan.SpanKind.RPC_SERVER,
                start_time=START,
                end_time=END,
                labels={'/http/method': 'GET'},
            ),
            trace_v1.TraceSpan(
                span_id=0x11,
                parent_span_id=0x10,
                name='db.query',
                kind=trace_v1.TraceSpan.SpanKind.SPAN_KIND_UNSPECIFIED,
                start_time=START,
                end_time=END,
            ),
        ],
    )


def _pager(*pages: tuple[list[trace_v1.Trace], str]) -> SimpleNamespace:
    return SimpleNamespace(pages=[SimpleNamespace(traces=traces, next_page_token=token) for traces, token in pages])


@pytest.fixture
def client() -> MagicMock:
    """A mocked TraceServiceClient."""
    return MagicMock()


@pytest.fixture
def adapter(client: MagicMock) -> CloudTraceAdapter:
    """An adapter scoped to test-project."""
    return CloudTraceAdapter(client, 'test-project')


class TestListTraces:
    """Tests for list_traces."""

    def test_request_fields(self, adapter: CloudTraceAdapter, client: MagicMock) -> None:
        """Window, filter, ordering, view and cursor are forwarded."""
        client.list_traces.return_value = _pager(([], ''))

        adapter.list_traces(
            ListTracesRequest(
                start_time=START,
                end_time=END,
                filter='+root:/api',
                order_by='start desc',
                page_token='tok',
                view=TraceView.ROOTSPAN,
            )
        )

        request = client.list_traces.call_args.kwargs['request']
        assert request.project_id == 'test-project'
        assert request.start_time == START
        assert request.end_time == END
        assert request.filter == '+root:/api'
        assert request.order_by == 'start desc'
        assert request.page_size == 100
        assert request.page_token == 'tok'
        assert request.view == trace_v1.ListTracesRequest.ViewType.ROOTSPAN

    def test_returns_at_most_page_size(self, adapter: CloudTraceAdapter, client: MagicMock) -> None:
        """The bound is exact: page_size traces, never one more."""
        client.list_traces.return_value = _pager(([_wire_trace(f't{i}') for i in range(4)], 'next'))

        response = adapter.list_traces(ListTracesRequest(start_time=START, end_time=END, page_size=3))

        assert [t.trace_id for t in response.traces] == ['t0', 't1', 't2']
        assert response.next_page_token == 'next'

    def test_does_not_read_second_page(self, adapter: CloudTraceAdapter, client: MagicMock) -> None:
        """Traces from later pages are not fetched."""
        client.list_traces.return_value = _pager(([_wire_trace('t0')], 'next'), ([_wire_trace('t1')], ''))

        response = adapter.list_traces(ListTracesRequest(start_time=START, end_time=END))

        assert [t.trace_id for t in response.traces] == ['t0']


class TestGetTrace:
    """Tests for get_trace."""

    def test_converts_spans(self, adapter: CloudTraceAdapter, client: MagicMock) -> None:
        """Span ids are hex, kinds are named and root spans have no parent."""
        client.get_trace.return_value = _wire_trace('abc123')

        trace = adapter.get_trace(GetTraceRequest(trace_id='abc123'))

        client.get_trace.assert_called_once_with(project_id='test-project', trace_id='abc123')
        assert trace.trace_id == 'abc123'
        assert trace.project_id == 'test-project'
        root, child = trace.spans
        assert root.span_id == '0000000000000010'
        assert root.parent_id is None
        assert root.kind == 'RPC_SERVER'
        assert root.labels == {'/http/method': 'GET'}
        assert root.start_time == START
        assert child.parent_id == '0000000000000010'
        assert child.kind == 'UNSPECIFIED'
        assert child.labels is None


class TestPatchTraces:
    """Tests for patch_traces."""

    def test_single_patch_call(self, adapter: CloudTraceAdapter, client: MagicMock) -> None:
        """All spans go out in one call scoped to one trace."""
        adapter.patch_traces(
            PatchTraceRequest(
                trace_id='abc123',
                spans=[
                    Span(span_id='abc', name='root', start_time=START, end_time=END, kind='RPC_CLIENT'),
                    Span(span_id='def', name='child', start_time=START, end_time=END, parent_id='abc', kind='CONSUMER'),
                ],
            )
        )

        client.patch_traces.assert_called_once()
        kwargs = client.patch_traces.call_args.kwargs
        assert kwargs['project_id'] == 'test-project'
        (wire_trace,) = kwargs['traces'].traces
        assert wire_trace.trace_id == 'abc123'
        assert wire_trace.project_id == 'test-project'
        root, child = wire_trace.spans
        assert root.span_id == encode_span_id('abc')
        assert root.parent_span_id == 0
        assert root.kind == trace_v1.TraceSpan.SpanKind.RPC_CLIENT
        assert child.parent_span_id == encode_span_id('abc')
        assert child.kind == trace_v1.TraceSpan.SpanKind.SPAN_KIND_UNSPECIFIED
