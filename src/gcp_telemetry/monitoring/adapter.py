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

"""Cloud Monitoring wire adapter.

Translates the generic monitoring models to and from the
google-cloud-monitoring v3 client. All listing operations return at most
one page; the provider's continuation token is handed back untouched.

Point values:
    ┌──────────────────┬─────────────────────────────────────────────┐
    │ Written as       │ DOUBLE, whatever the descriptor's type      │
    │ Read from DOUBLE │ as is                                       │
    │ Read from INT64  │ converted to float                          │
    │ Read from BOOL   │ 1.0 for true, 0.0 for false                 │
    │ Read from other  │ 0.0                                         │
    └──────────────────┴─────────────────────────────────────────────┘
"""

from __future__ import annotations

from typing import Any

from google.api import label_pb2, metric_pb2 as ga_metric, monitored_resource_pb2
from google.cloud import monitoring_v3

from ..constants import (
    DEFAULT_AVAILABLE_METRICS_PAGE_SIZE,
    DEFAULT_METRIC_DESCRIPTORS_PAGE_SIZE,
    DEFAULT_TIME_SERIES_PAGE_SIZE,
)
from ..core.logging import get_logger
from ..core.paging import take_page
from .mapping import (
    aligner_to_wire,
    alignment_period,
    launch_stage_name,
    metric_kind_from_wire,
    metric_kind_to_wire,
    reducer_to_wire,
    value_type_from_wire,
    value_type_to_wire,
)
from .types import (
    AggregationConfig,
    AvailableMetric,
    CreateMetricRequest,
    ListAvailableMetricsRequest,
    ListAvailableMetricsResponse,
    ListMetricDescriptorsRequest,
    ListMetricDescriptorsResponse,
    ListTimeSeriesRequest,
    ListTimeSeriesResponse,
    MetricDescriptor,
    MetricLabel,
    MetricValue,
    TimeSeriesData,
    ValueType,
    WriteTimeSeriesRequest,
)

logger = get_logger(__name__)

_LabelValueType = label_pb2.LabelDescriptor.ValueType


def to_wire_descriptor(request: CreateMetricRequest) -> ga_metric.MetricDescriptor:
    """Build the wire descriptor for a create request.

    Every generic label becomes a STRING label descriptor.
    """
    descriptor = request.metric_descriptor
    wire = ga_metric.MetricDescriptor(
        type=descriptor.type,
        metric_kind=metric_kind_to_wire(descriptor.metric_kind),
        value_type=value_type_to_wire(descriptor.value_type),
        description=descriptor.description,
        display_name=descriptor.display_name,
        unit=request.unit,
    )
    for key, description in (descriptor.labels or {}).items():
        wire.labels.add(key=key, value_type=_LabelValueType.STRING, description=description)
    return wire


def to_wire_series(series: TimeSeriesData) -> monitoring_v3.TimeSeries:
    """Build a wire time series, writing every point as a double."""
    points = [
        monitoring_v3.Point(
            interval=monitoring_v3.TimeInterval(end_time=value.timestamp),
            value=monitoring_v3.TypedValue(double_value=value.value),
        )
        for value in series.values
    ]
    return monitoring_v3.TimeSeries(
        metric=ga_metric.Metric(type=series.metric_type, labels=series.metric_labels or {}),
        resource=monitored_resource_pb2.MonitoredResource(
            type=series.resource_type,
            labels=series.resource_labels or {},
        ),
        points=points,
    )


def to_wire_aggregation(config: AggregationConfig) -> monitoring_v3.Aggregation:
    """Build the wire aggregation.

    The cross-series reducer and the group-by fields are only set when a
    reducer name was given.
    """
    aggregation = monitoring_v3.Aggregation(
        alignment_period=alignment_period(config.alignment_period),
        per_series_aligner=aligner_to_wire(config.per_series_aligner),
    )
    if config.cross_series_reducer:
        aggregation.cross_series_reducer = reducer_to_wire(config.cross_series_reducer)
        aggregation.group_by_fields.extend(config.group_by_fields)
    return aggregation


def point_value(value: monitoring_v3.TypedValue) -> float:
    """Read a typed point value as a float."""
    kind = monitoring_v3.TypedValue.pb(value).WhichOneof('value')
    if kind == 'double_value':
        return value.double_value
    if kind == 'int64_value':
        return float(value.int64_value)
    if kind == 'bool_value':
        return 1.0 if value.bool_value else 0.0
    return 0.0


def from_wire_series(series: monitoring_v3.TimeSeries) -> TimeSeriesData:
    """Convert a wire time series; each point is stamped with its interval end."""
    return TimeSeriesData(
        metric_type=series.metric.type,
        metric_labels=dict(series.metric.labels) or None,
        resource_type=series.resource.type,
        resource_labels=dict(series.resource.labels) or None,
        values=[MetricValue(value=point_value(point.value), timestamp=point.interval.end_time) for point in series.points],
    )


def from_wire_descriptor(descriptor: ga_metric.MetricDescriptor) -> MetricDescriptor:
    """Convert a wire descriptor to the bare generic form, without labels."""
    return MetricDescriptor(
        type=descriptor.type,
        metric_kind=metric_kind_from_wire(descriptor.metric_kind).value,
        value_type=value_type_from_wire(descriptor.value_type).value,
        description=descriptor.description,
        display_name=descriptor.display_name,
    )


def from_wire_available_metric(descriptor: ga_metric.MetricDescriptor) -> AvailableMetric:
    """Convert a wire descriptor including its label schema and launch stage."""
    return AvailableMetric(
        type=descriptor.type,
        display_name=descriptor.display_name,
        description=descriptor.description,
        metric_kind=metric_kind_from_wire(descriptor.metric_kind).value,
        value_type=value_type_from_wire(descriptor.value_type).value,
        unit=descriptor.unit,
        labels=[
            MetricLabel(
                key=label.key,
                value_type=ValueType.STRING.value,
                description=label.description,
            )
            for label in descriptor.labels
        ],
        launch_stage=launch_stage_name(descriptor.launch_stage),
    )


class CloudMonitoringAdapter:
    """`MonitoringBackend` implementation over google-cloud-monitoring."""

    def __init__(self, client: monitoring_v3.MetricServiceClient, project_id: str) -> None:
        """Initialize the adapter.

        Args:
            client: A metric service client.
            project_id: GCP project every call is scoped to.
        """
        self._client = client
        self._project_id = project_id

    @classmethod
    def for_project(cls, project_id: str) -> CloudMonitoringAdapter:
        """Create an adapter with Application Default Credentials."""
        return cls(monitoring_v3.MetricServiceClient(), project_id)

    @property
    def project_name(self) -> str:
        """Resource name of the project, 'projects/<id>'."""
        return f'projects/{self._project_id}'

    def create_metric_descriptor(self, request: CreateMetricRequest) -> None:
        """Create a custom metric descriptor.

        Args:
            request: The descriptor and its unit.
        """
        self._client.create_metric_descriptor(
            name=self.project_name,
            metric_descriptor=to_wire_descriptor(request),
        )
        logger.debug('Created metric descriptor', type=request.metric_descriptor.type)

    def write_time_series(self, request: WriteTimeSeriesRequest) -> None:
        """Write all series in a single call.

        Args:
            request: Series to write.
        """
        self._client.create_time_series(
            name=self.project_name,
            time_series=[to_wire_series(series) for series in request.time_series],
        )
        logger.debug('Wrote time series', count=len(request.time_series))

    def list_time_series(self, request: ListTimeSeriesRequest) -> ListTimeSeriesResponse:
        """Read one page of time series matching a filter and interval.

        Args:
            request: Filter, interval, optional aggregation and paging.

        Returns:
            At most `page_size` series (100 when unset) and the next token.
        """
        page_size = request.page_size if request.page_size > 0 else DEFAULT_TIME_SERIES_PAGE_SIZE
        wire_request = monitoring_v3.ListTimeSeriesRequest(
            name=self.project_name,
            filter=request.filter,
            interval=monitoring_v3.TimeInterval(
                start_time=request.interval.start_time,
                end_time=request.interval.end_time,
            ),
            view=monitoring_v3.ListTimeSeriesRequest.TimeSeriesView.FULL,
            page_size=page_size,
            page_token=request.page_token,
        )
        if request.aggregation is not None:
            wire_request.aggregation = to_wire_aggregation(request.aggregation)

        items, next_page_token = take_page(self._client.list_time_series(request=wire_request), 'time_series', page_size)
        logger.debug('Listed time series', count=len(items), has_more=bool(next_page_token))
        return ListTimeSeriesResponse(
            time_series=[from_wire_series(series) for series in items],
            next_page_token=next_page_token,
        )

    def list_metric_descriptors(self, request: ListMetricDescriptorsRequest) -> ListMetricDescriptorsResponse:
        """Read one page of bare metric descriptors.

        Args:
            request: Optional filter and paging.

        Returns:
            At most `page_size` descriptors (5 when unset) and the next token.
        """
        page_size = request.page_size if request.page_size > 0 else DEFAULT_METRIC_DESCRIPTORS_PAGE_SIZE
        items, next_page_token = self._list_descriptors(request.filter, page_size, request.page_token)
        return ListMetricDescriptorsResponse(
            descriptors=[from_wire_descriptor(descriptor) for descriptor in items],
            next_page_token=next_page_token,
        )

    def delete_metric_descriptor(self, metric_type: str) -> None:
        """Delete a custom metric descriptor.

        Args:
            metric_type: Metric type, e.g. 'custom.googleapis.com/my_metric'.
        """
        self._client.delete_metric_descriptor(name=f'{self.project_name}/metricDescriptors/{metric_type}')
        logger.debug('Deleted metric descriptor', type=metric_type)

    def list_available_metrics(self, request: ListAvailableMetricsRequest) -> ListAvailableMetricsResponse:
        """Read one page of descriptors with labels, unit and launch stage.

        Args:
            request: Optional filter and paging.

        Returns:
            At most `page_size` metrics (100 when unset) and the next token.
        """
        page_size = request.page_size if request.page_size > 0 else DEFAULT_AVAILABLE_METRICS_PAGE_SIZE
        items, next_page_token = self._list_descriptors(request.filter, page_size, request.page_token)
        return ListAvailableMetricsResponse(
            metrics=[from_wire_available_metric(descriptor) for descriptor in items],
            next_page_token=next_page_token,
        )

    def _list_descriptors(self, filter_: str, page_size: int, page_token: str) -> tuple[list[Any], str]:
        pager = self._client.list_metric_descriptors(
            request=monitoring_v3.ListMetricDescriptorsRequest(
                name=self.project_name,
                filter=filter_,
                page_size=page_size,
                page_token=page_token,
            )
        )
        items, next_page_token = take_page(pager, 'metric_descriptors', page_size)
        logger.debug('Listed metric descriptors', count=len(items), has_more=bool(next_page_token))
        return items, next_page_token
