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

"""Generic Cloud Monitoring models."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class MetricKind(StrEnum):
    """Metric kinds understood by the generic model."""

    GAUGE = 'GAUGE'
    DELTA = 'DELTA'
    CUMULATIVE = 'CUMULATIVE'


class ValueType(StrEnum):
    """Metric value types understood by the generic model."""

    BOOL = 'BOOL'
    INT64 = 'INT64'
    DOUBLE = 'DOUBLE'
    STRING = 'STRING'
    DISTRIBUTION = 'DISTRIBUTION'


class MetricValue(BaseModel):
    """One data point."""

    value: float
    timestamp: datetime


class MetricDescriptor(BaseModel):
    """Metadata describing a metric type.

    Attributes:
        type: Fully qualified metric name, e.g. 'custom.googleapis.com/my_metric'.
        metric_kind: One of `MetricKind`; GAUGE when unrecognized.
        value_type: One of `ValueType`; DOUBLE when unrecognized.
        description: Free-form description.
        display_name: Short human readable name.
        labels: Label key to label description. Sent on create as STRING labels.
    """

    model_config = ConfigDict(extra='forbid')

    type: str
    metric_kind: str = MetricKind.GAUGE.value
    value_type: str = ValueType.DOUBLE.value
    description: str = ''
    display_name: str = ''
    labels: dict[str, str] | None = None


class TimeSeriesData(BaseModel):
    """Points of one metric on one monitored resource."""

    metric_type: str
    metric_labels: dict[str, str] | None = None
    resource_type: str
    resource_labels: dict[str, str] | None = None
    values: list[MetricValue] = Field(default_factory=list)


class CreateMetricRequest(BaseModel):
    """Request to create a custom metric descriptor."""

    metric_descriptor: MetricDescriptor
    unit: str = ''


class WriteTimeSeriesRequest(BaseModel):
    """Request to write one or more time series."""

    time_series: list[TimeSeriesData]


class TimeInterval(BaseModel):
    """Closed time window of a query."""

    start_time: datetime
    end_time: datetime


class AggregationConfig(BaseModel):
    """Server-side alignment and reduction of a time series query.

    Attributes:
        alignment_period: Duration string such as '60s' or '5m'; 60s when unparsable.
        per_series_aligner: Aligner name; ALIGN_MEAN when empty or unrecognized.
        cross_series_reducer: Optional reducer name. `group_by_fields` only
            takes effect when this is set.
        group_by_fields: Label fields to keep when reducing across series.
    """

    alignment_period: str = ''
    per_series_aligner: str = ''
    cross_series_reducer: str = ''
    group_by_fields: list[str] = Field(default_factory=list)


class ListTimeSeriesRequest(BaseModel):
    """Request to read time series data."""

    filter: str
    interval: TimeInterval
    aggregation: AggregationConfig | None = None
    page_size: int = 0
    page_token: str = ''


class ListTimeSeriesResponse(BaseModel):
    """One page of time series."""

    time_series: list[TimeSeriesData] = Field(default_factory=list)
    next_page_token: str = ''


class ListMetricDescriptorsRequest(BaseModel):
    """Request to list metric descriptors."""

    filter: str = ''
    page_size: int = 0
    page_token: str = ''


class ListMetricDescriptorsResponse(BaseModel):
    """One page of bare metric descriptors."""

    descriptors: list[MetricDescriptor] = Field(default_factory=list)
    next_page_token: str = ''


class MetricLabel(BaseModel):
    """Label schema entry of an available metric."""

    key: str
    value_type: str = ValueType.STRING.value
    description: str = ''


class AvailableMetric(BaseModel):
    """A metric descriptor together with its label schema and launch stage."""

    type: str
    display_name: str = ''
    description: str = ''
    metric_kind: str = MetricKind.GAUGE.value
    value_type: str = ValueType.DOUBLE.value
    unit: str = ''
    labels: list[MetricLabel] = Field(default_factory=list)
    launch_stage: str = ''


class ListAvailableMetricsRequest(BaseModel):
    """Request to list available metrics."""

    filter: str = ''
    page_size: int = 0
    page_token: str = ''


class ListAvailableMetricsResponse(BaseModel):
    """One page of available metrics."""

    metrics: list[AvailableMetric] = Field(default_factory=list)
    next_page_token: str = ''
