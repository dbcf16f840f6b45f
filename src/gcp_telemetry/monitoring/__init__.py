# Copyright 2025 Google LLC
# SPDX-License-Identifier: Apache-2.0


"""Cloud Monitoring provider: generic models, client contract and wire adapter."""

from .client import MonitoringBackend, MonitoringClient
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
    MetricKind,
    MetricLabel,
    MetricValue,
    TimeInterval,
    TimeSeriesData,
    ValueType,
    WriteTimeSeriesRequest,
)

__all__ = [
    'AggregationConfig',
    'AvailableMetric',
    'CreateMetricRequest',
    'ListAvailableMetricsRequest',
    'ListAvailableMetricsResponse',
    'ListMetricDescriptorsRequest',
    'ListMetricDescriptorsResponse',
    'ListTimeSeriesRequest',
    'ListTimeSeriesResponse',
    'MetricDescriptor',
    'MetricKind',
    'MetricLabel',
    'MetricValue',
    'MonitoringBackend',
    'MonitoringClient',
    'TimeInterval',
    'TimeSeriesData',
    'ValueType',
    'WriteTimeSeriesRequest',
]
