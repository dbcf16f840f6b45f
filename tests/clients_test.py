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

"""Tests for the public clients.

The clients forward every call to their backend unchanged, so any backend
with the right shape can stand in for Google Cloud.
"""

from datetime import UTC, datetime
from unittest.mock import MagicMock, patch

import pytest
from fakes import FakeLoggingBackend, FakeMonitoringBackend, FakeProfilerBackend, FakeTraceBackend

from gcp_telemetry.cloud_logging import ListEntriesRequest, LogEntry, LoggingClient
from gcp_telemetry.monitoring import (
    CreateMetricRequest,
    ListMetricDescriptorsRequest,
    ListTimeSeriesResponse,
    MetricDescriptor,
    MonitoringClient,
)
from gcp_telemetry.profiler import CreateProfileRequest, Deployment, ListProfilesRequest, ProfilerClient
from gcp_telemetry.trace import GetTraceRequest, PatchTraceRequest, Span, TraceClient

NOW = datetime(2025, 6, 1, tzinfo=UTC)


class TestPassThrough:
    """Each client method hands its argument to the backend and returns its result."""

    def test_logging(self) -> None:
        """LoggingClient forwards writes and reads."""
        backend = MagicMock()
        backend.list_entries.return_value = [LogEntry(message='x')]
        client = LoggingClient(backend)
        entry = LogEntry(message='hello')
        request = ListEntriesRequest(limit=3)

        client.write_entry('app', entry)
        result = client.list_entries(request)

        backend.write_entry.assert_called_once_with('app', entry)
        backend.list_entries.assert_called_once_with(request)
        assert result is backend.list_entries.return_value

    def test_monitoring(self) -> None:
        """MonitoringClient forwards every operation."""
        backend = MagicMock()
        backend.list_time_series.return_value = ListTimeSeriesResponse()
        client = MonitoringClient(backend)
        request = MagicMock()

        client.create_metric_descriptor(request)
        client.write_time_series(request)
        assert client.list_time_series(request) is backend.list_time_series.return_value
        assert client.list_metric_descriptors(request) is backend.list_metric_descriptors.return_value
        client.delete_metric_descriptor('custom.googleapis.com/x')
        assert client.list_available_metrics(request) is backend.list_available_metrics.return_value

        backend.create_metric_descriptor.assert_called_once_with(request)
        backend.write_time_series.assert_called_once_with(request)
        backend.delete_metric_descriptor.assert_called_once_with('custom.googleapis.com/x')

    def test_trace(self) -> None:
        """TraceClient forwards every operation."""
        backend = MagicMock()
        client = TraceClient(backend)
        request = MagicMock()

        assert client.list_traces(request) is backend.list_traces.return_value
        assert client.get_trace(request) is backend.get_trace.return_value
        client.patch_traces(request)

        backend.patch_traces.assert_called_once_with(request)

    def test_profiler(self) -> None:
        """ProfilerClient forwards every operation."""
        backend = MagicMock()
        client = ProfilerClient(backend)
        request = MagicMock()

        assert client.create_profile(request) is backend.create_profile.return_value
        assert client.create_offline_profile(request) is backend.create_offline_profile.return_value
        assert client.update_profile(request) is backend.update_profile.return_value
        assert client.list_profiles(request) is backend.list_profiles.return_value

    def test_backend_errors_propagate(self) -> None:
        """Errors raised by the backend reach the caller unchanged."""
        backend = MagicMock()
        error = RuntimeError('permission denied')
        backend.get_trace.side_effect = error
        with pytest.raises(RuntimeError) as excinfo:
            TraceClient(backend).get_trace(GetTraceRequest(trace_id='t'))
        assert excinfo.value is error


class TestForProject:
    """Tests for the for_project constructors."""

    def test_logging_client_uses_cloud_adapter(self) -> None:
        """for_project wires the Cloud Logging adapter."""
        with patch('gcp_telemetry.cloud_logging.adapter.cloud_logging.Client') as sdk_client:
            client = LoggingClient.for_project('test-project')
            sdk_client.assert_called_once_with(project='test-project')
            client.write_entry('app', LogEntry(message='m'))
            sdk_client.return_value.logger.assert_called_once_with('app')

    def test_monitoring_client_uses_cloud_adapter(self) -> None:
        """for_project wires the Cloud Monitoring adapter."""
        with patch('gcp_telemetry.monitoring.adapter.monitoring_v3.MetricServiceClient') as sdk_client:
            client = MonitoringClient.for_project('test-project')
            client.delete_metric_descriptor('custom.googleapis.com/x')
            sdk_client.return_value.delete_metric_descriptor.assert_called_once_with(
                name='projects/test-project/metricDescriptors/custom.googleapis.com/x'
            )


class TestWithFakes:
    """End to end behavior through the public clients over in-memory backends."""

    def test_written_error_is_listed_by_severity_filter(self) -> None:
        """An ERROR entry written is returned by a severity>=ERROR listing."""
        client = LoggingClient(FakeLoggingBackend())

        client.write_entry('app', LogEntry(severity='INFO', message='fine'))
        client.write_entry('app', LogEntry(severity='ERROR', message='boom'))
        entries = client.list_entries(ListEntriesRequest(filter='severity>=ERROR'))

        assert [(e.severity, e.message) for e in entries] == [('ERROR', 'boom')]

    def test_deleted_descriptor_is_not_listed(self) -> None:
        """Deleting a descriptor removes it from later listings."""
        client = MonitoringClient(FakeMonitoringBackend())
        for metric_type in ('custom.googleapis.com/keep', 'custom.googleapis.com/drop'):
            client.create_metric_descriptor(CreateMetricRequest(metric_descriptor=MetricDescriptor(type=metric_type)))

        client.delete_metric_descriptor('custom.googleapis.com/drop')
        response = client.list_metric_descriptors(ListMetricDescriptorsRequest())

        assert [d.type for d in response.descriptors] == ['custom.googleapis.com/keep']

    def test_patched_span_id_reads_back_hashed(self) -> None:
        """A non-hex span id comes back as the hex of its hash."""
        client = TraceClient(FakeTraceBackend())

        client.patch_traces(
            PatchTraceRequest(trace_id='t1', spans=[Span(span_id='abc', name='root', start_time=NOW, end_time=NOW)])
        )
        trace = client.get_trace(GetTraceRequest(trace_id='t1'))

        assert trace.spans[0].span_id == '0000000000017862'

    def test_created_profile_is_listed(self) -> None:
        """A created profile appears in the listing."""
        client = ProfilerClient(FakeProfilerBackend())

        created = client.create_profile(
            CreateProfileRequest(deployment=Deployment(target='svc'), profile_type=['CPU'], duration='60s')
        )
        listed = client.list_profiles(ListProfilesRequest())

        assert [p.name for p in listed.profiles] == [created.name]
