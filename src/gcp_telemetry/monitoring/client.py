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

"""Public Cloud Monitoring client."""

from typing import Protocol

from .types import (
    CreateMetricRequest,
    ListAvailableMetricsRequest,
    ListAvailableMetricsResponse,
    ListMetricDescriptorsRequest,
    ListMetricDescriptorsResponse,
    ListTimeSeriesRequest,
    ListTimeSeriesResponse,
    WriteTimeSeriesRequest,
)


class MonitoringBackend(Protocol):
    """Capability set of a Cloud Monitoring implementation."""

    def create_metric_descriptor(self, request: CreateMetricRequest) -> None:
        """Create a custom metric descriptor."""
        ...

    def write_time_series(self, request: WriteTimeSeriesRequest) -> None:
        """Write points to one or more time series."""
        ...

    def list_time_series(self, request: ListTimeSeriesRequest) -> ListTimeSeriesResponse:
        """Read one page of time series."""
        ...

    def list_metric_descriptors(self, request: ListMetricDescriptorsRequest) -> ListMetricDescriptorsResponse:
        """Read one page of bare metric descriptors."""
        ...

    def delete_metric_descriptor(self, metric_type: str) -> None:
        """Delete a custom metric descriptor by type."""
        ...

    def list_available_metrics(self, request: ListAvailableMetricsRequest) -> ListAvailableMetricsResponse:
        """Read one page of metric descriptors with their label schema."""
        ...


class MonitoringClient:
    """Cloud Monitoring operations over generic models.

    Every method forwards to the injected backend without touching the
    request or the response.
    """

    def __init__(self, backend: MonitoringBackend) -> None:
        """Initialize the client.

        Args:
            backend: Implementation every call is delegated to.
        """
        self._backend = backend

    @classmethod
    def for_project(cls, project_id: str) -> 'MonitoringClient':
        """Create a client backed by the real Cloud Monitoring API."""
        from .adapter import CloudMonitoringAdapter

        return cls(CloudMonitoringAdapter.for_project(project_id))

    def create_metric_descriptor(self, request: CreateMetricRequest) -> None:
        """Create a custom metric descriptor."""
        self._backend.create_metric_descriptor(request)

    def write_time_series(self, request: WriteTimeSeriesRequest) -> None:
        """Write time series data to Cloud Monitoring."""
        self._backend.write_time_series(request)

    def list_time_series(self, request: ListTimeSeriesRequest) -> ListTimeSeriesResponse:
        """Retrieve time series data from Cloud Monitoring."""
        return self._backend.list_time_series(request)

    def list_metric_descriptors(self, request: ListMetricDescriptorsRequest) -> ListMetricDescriptorsResponse:
        """List metric descriptors with pagination support."""
        return self._backend.list_metric_descriptors(request)

    def delete_metric_descriptor(self, metric_type: str) -> None:
        """Delete a custom metric descriptor."""
        self._backend.delete_metric_descriptor(metric_type)

    def list_available_metrics(self, request: ListAvailableMetricsRequest) -> ListAvailableMetricsResponse:
        """List available metrics in Cloud Monitoring."""
        return self._backend.list_available_metrics(request)
