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

"""Tool front end over the four telemetry clients.

`TelemetryTools` exposes one method per tool. Each method takes the loosely
typed argument mapping an MCP client sends, validates and converts it into
the generic request models, calls the matching client and renders the
result as text: a short confirmation for writes, indented JSON for reads.

Malformed arguments raise `InvalidArgumentError` before any provider call.
Provider errors propagate unchanged; turning them into tool error results
is the server's job.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic_core import to_json

from .cloud_logging import ListEntriesRequest, LogEntry, LoggingClient
from .constants import DEFAULT_LOG_ENTRY_LIMIT, DEFAULT_PROFILE_DURATION
from .core.error import InvalidArgumentError, TelemetryError
from .core.logging import get_logger
from .definitions import TOOLS_BY_NAME
from .monitoring import (
    AggregationConfig,
    CreateMetricRequest,
    ListAvailableMetricsRequest,
    ListMetricDescriptorsRequest,
    ListTimeSeriesRequest,
    MetricDescriptor,
    MetricValue,
    MonitoringClient,
    TimeInterval,
    TimeSeriesData,
    WriteTimeSeriesRequest,
)
from .profiler import (
    CreateOfflineProfileRequest,
    CreateProfileRequest,
    Deployment,
    ListProfilesRequest,
    Profile,
    ProfilerClient,
    UpdateProfileRequest,
)
from .trace import GetTraceRequest, ListTracesRequest, PatchTraceRequest, Span, TraceClient, TraceView

logger = get_logger(__name__)

_DATETIME = TypeAdapter(datetime)


@dataclass(frozen=True)
class TelemetryClients:
    """The four public clients, all scoped to one project."""

    logging: LoggingClient
    monitoring: MonitoringClient
    trace: TraceClient
    profiler: ProfilerClient


def create_clients(project_id: str) -> TelemetryClients:
    """Create authenticated clients for every provider.

    Credentials come from Application Default Credentials.

    Args:
        project_id: GCP project the clients are scoped to.

    Returns:
        The clients.
    """
    clients = TelemetryClients(
        logging=LoggingClient.for_project(project_id),
        monitoring=MonitoringClient.for_project(project_id),
        trace=TraceClient.for_project(project_id),
        profiler=ProfilerClient.for_project(project_id),
    )
    logger.debug('Created telemetry clients', project_id=project_id)
    return clients


def _render(value: Any) -> str:
    return to_json(value, indent=2, exclude_none=True).decode()


def _require_str(arguments: Mapping[str, Any], key: str) -> str:
    value = arguments.get(key)
    if not isinstance(value, str) or not value:
        raise InvalidArgumentError(f'{key} is required', argument=key)
    return value


def _optional_str(arguments: Mapping[str, Any], key: str, default: str = '') -> str:
    value = arguments.get(key)
    if isinstance(value, str) and value:
        return value
    return default


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _require_number(arguments: Mapping[str, Any], key: str) -> float:
    value = arguments.get(key)
    if not _is_number(value):
        raise InvalidArgumentError(f'{key} is required', argument=key)
    return float(value)


def _optional_int(arguments: Mapping[str, Any], key: str, default: int = 0) -> int:
    value = arguments.get(key)
    if _is_number(value):
        return int(value)
    return default


def _string_map(value: Any) -> dict[str, str] | None:
    """Keep the string-valued entries of a mapping; None for anything else."""
    if not isinstance(value, Mapping):
        return None
    return {str(k): v for k, v in value.items() if isinstance(v, str)}


def _parse_time(value: Any, key: str) -> datetime:
    """Parse an RFC 3339 timestamp argument.

    Raises:
        InvalidArgumentError: If the value is not a valid timestamp.
    """
    if not isinstance(value, str):
        raise InvalidArgumentError(f'Invalid {key} format: expected an RFC 3339 string', argument=key)
    try:
        parsed = _DATETIME.validate_python(value)
    except ValidationError as e:
        raise InvalidArgumentError(f'Invalid {key} format: {e.errors()[0]["msg"]}', argument=key) from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _require_time(arguments: Mapping[str, Any], key: str) -> datetime:
    return _parse_time(_require_str(arguments, key), key)


def _parse_aggregation(value: Any) -> AggregationConfig | None:
    if not isinstance(value, Mapping):
        return None
    group_by_fields = value.get('group_by_fields')
    return AggregationConfig(
        alignment_period=_optional_str(value, 'alignment_period'),
        per_series_aligner=_optional_str(value, 'per_series_aligner'),
        cross_series_reducer=_optional_str(value, 'cross_series_reducer'),
        group_by_fields=[f for f in group_by_fields if isinstance(f, str)] if isinstance(group_by_fields, list) else [],
    )


def _parse_span(value: Any) -> Span:
    if not isinstance(value, Mapping):
        raise InvalidArgumentError('spans must be an array of span objects', argument='spans')
    return Span(
        span_id=_optional_str(value, 'span_id'),
        name=_optional_str(value, 'name'),
        start_time=_require_time(value, 'start_time'),
        end_time=_require_time(value, 'end_time'),
        parent_id=_optional_str(value, 'parent_id') or None,
        kind=_optional_str(value, 'kind').upper() or 'UNSPECIFIED',
        labels=_string_map(value.get('labels')),
    )


class TelemetryTools:
    """The telemetry operations as tools.

    Method names match the tool names in `TOOL_DEFINITIONS`.
    """

    def __init__(self, clients: TelemetryClients) -> None:
        """Initialize the tools.

        Args:
            clients: Clients every tool call is routed to.
        """
        self._clients = clients

    def call(self, name: str, arguments: Mapping[str, Any] | None) -> str:
        """Run a tool by name.

        Args:
            name: Tool name.
            arguments: Tool arguments as sent by the client.

        Returns:
            The tool's text result.

        Raises:
            TelemetryError: NOT_FOUND for an unknown tool, INVALID_ARGUMENT
                for malformed arguments.
        """
        if name not in TOOLS_BY_NAME:
            raise TelemetryError(status='NOT_FOUND', message=f"Tried to call tool '{name}' but it could not be found.")
        return getattr(self, name)(arguments or {})

    # Cloud Logging

    def write_log_entry(self, arguments: Mapping[str, Any]) -> str:
        """Write one log entry."""
        log_name = _require_str(arguments, 'log_name')
        entry = LogEntry(
            severity=_require_str(arguments, 'severity'),
            message=_require_str(arguments, 'message'),
            labels=_string_map(arguments.get('labels')),
            payload=dict(arguments['payload']) if isinstance(arguments.get('payload'), Mapping) else None,
        )
        self._clients.logging.write_entry(log_name, entry)
        return 'Log entry written successfully'

    def list_log_entries(self, arguments: Mapping[str, Any]) -> str:
        """List recent log entries, newest first by default."""
        entries = self._clients.logging.list_entries(
            ListEntriesRequest(
                filter=_optional_str(arguments, 'filter'),
                order_by=_optional_str(arguments, 'order_by'),
                limit=_optional_int(arguments, 'limit', DEFAULT_LOG_ENTRY_LIMIT),
                page_token=_optional_str(arguments, 'page_token'),
            )
        )
        return _render(entries)

    # Cloud Monitoring

    def create_metric_descriptor(self, arguments: Mapping[str, Any]) -> str:
        """Create a custom metric descriptor."""
        descriptor = MetricDescriptor(
            type=_require_str(arguments, 'type'),
            metric_kind=_require_str(arguments, 'metric_kind'),
            value_type=_require_str(arguments, 'value_type'),
            description=_require_str(arguments, 'description'),
            display_name=_optional_str(arguments, 'display_name'),
            labels=_string_map(arguments.get('labels')),
        )
        self._clients.monitoring.create_metric_descriptor(
            CreateMetricRequest(metric_descriptor=descriptor, unit=_optional_str(arguments, 'unit'))
        )
        return 'Metric descriptor created successfully'

    def write_time_series(self, arguments: Mapping[str, Any]) -> str:
        """Write a single point, stamped now unless a timestamp is given."""
        metric_type = _require_str(arguments, 'metric_type')
        resource_type = _require_str(arguments, 'resource_type')
        value = _require_number(arguments, 'value')
        timestamp = arguments.get('timestamp')
        series = TimeSeriesData(
            metric_type=metric_type,
            metric_labels=_string_map(arguments.get('metric_labels')),
            resource_type=resource_type,
            resource_labels=_string_map(arguments.get('resource_labels')),
            values=[
                MetricValue(
                    value=value,
                    timestamp=_parse_time(timestamp, 'timestamp') if timestamp else datetime.now(UTC),
                )
            ],
        )
        self._clients.monitoring.write_time_series(WriteTimeSeriesRequest(time_series=[series]))
        return 'Time series data written successfully'

    def list_time_series(self, arguments: Mapping[str, Any]) -> str:
        """List time series in a window, optionally aggregated."""
        response = self._clients.monitoring.list_time_series(
            ListTimeSeriesRequest(
                filter=_require_str(arguments, 'filter'),
                interval=TimeInterval(
                    start_time=_require_time(arguments, 'start_time'),
                    end_time=_require_time(arguments, 'end_time'),
                ),
                aggregation=_parse_aggregation(arguments.get('aggregation')),
                page_size=_optional_int(arguments, 'page_size'),
                page_token=_optional_str(arguments, 'page_token'),
            )
        )
        return _render(response)

    def list_metric_descriptors(self, arguments: Mapping[str, Any]) -> str:
        """List bare metric descriptors."""
        response = self._clients.monitoring.list_metric_descriptors(
            ListMetricDescriptorsRequest(
                filter=_optional_str(arguments, 'filter'),
                page_size=_optional_int(arguments, 'page_size'),
                page_token=_optional_str(arguments, 'page_token'),
            )
        )
        return _render(response)

    def delete_metric_descriptor(self, arguments: Mapping[str, Any]) -> str:
        """Delete a custom metric descriptor."""
        self._clients.monitoring.delete_metric_descriptor(_require_str(arguments, 'metric_type'))
        return 'Metric descriptor deleted successfully'

    def list_available_metrics(self, arguments: Mapping[str, Any]) -> str:
        """List metrics with their labels, unit and launch stage."""
        response = self._clients.monitoring.list_available_metrics(
            ListAvailableMetricsRequest(
                filter=_optional_str(arguments, 'filter'),
                page_size=_optional_int(arguments, 'page_size'),
                page_token=_optional_str(arguments, 'page_token'),
            )
        )
        return _render(response)

    # Cloud Trace

    def list_traces(self, arguments: Mapping[str, Any]) -> str:
        """List traces in a window."""
        start_time = _require_time(arguments, 'start_time')
        end_time = _require_time(arguments, 'end_time')
        view = _optional_str(arguments, 'view').upper()
        if view and view not in TraceView.__members__:
            raise InvalidArgumentError(
                f'Invalid view: {view}, expected one of {", ".join(TraceView.__members__)}', argument='view'
            )
        response = self._clients.trace.list_traces(
            ListTracesRequest(
                start_time=start_time,
                end_time=end_time,
                filter=_optional_str(arguments, 'filter'),
                order_by=_optional_str(arguments, 'order_by'),
                page_size=_optional_int(arguments, 'page_size'),
                page_token=_optional_str(arguments, 'page_token'),
                view=TraceView(view) if view else None,
            )
        )
        return _render(response)

    def get_trace(self, arguments: Mapping[str, Any]) -> str:
        """Fetch one trace with its spans."""
        trace = self._clients.trace.get_trace(GetTraceRequest(trace_id=_require_str(arguments, 'trace_id')))
        return _render(trace)

    def patch_traces(self, arguments: Mapping[str, Any]) -> str:
        """Add or update spans of one trace."""
        trace_id = _require_str(arguments, 'trace_id')
        if 'spans' not in arguments:
            raise InvalidArgumentError('spans is required', argument='spans')
        spans = arguments['spans']
        if not isinstance(spans, list):
            raise InvalidArgumentError('spans must be an array of span objects', argument='spans')

        self._clients.trace.patch_traces(
            PatchTraceRequest(trace_id=trace_id, spans=[_parse_span(span) for span in spans])
        )
        return 'Trace spans updated successfully'

    # Cloud Profiler

    def create_profile(self, arguments: Mapping[str, Any]) -> str:
        """Create an online profile for a deployment."""
        profile = self._clients.profiler.create_profile(
            CreateProfileRequest(
                deployment=Deployment(
                    target=_require_str(arguments, 'target'),
                    labels=_string_map(arguments.get('labels')),
                ),
                profile_type=[_require_str(arguments, 'profile_type')],
                duration=_optional_str(arguments, 'duration', DEFAULT_PROFILE_DURATION),
            )
        )
        return _render(profile)

    def create_offline_profile(self, arguments: Mapping[str, Any]) -> str:
        """Upload an offline profile."""
        deployment = Deployment(target=_require_str(arguments, 'target'))
        profile = Profile(
            profile_type=_require_str(arguments, 'profile_type'),
            profile_bytes=_require_str(arguments, 'profile_data'),
            duration=_optional_str(arguments, 'duration', DEFAULT_PROFILE_DURATION),
            labels=_string_map(arguments.get('labels')),
            deployment=deployment,
        )
        created = self._clients.profiler.create_offline_profile(CreateOfflineProfileRequest(profile=profile))
        return _render(created)

    def update_profile(self, arguments: Mapping[str, Any]) -> str:
        """Update an existing profile."""
        updated = self._clients.profiler.update_profile(
            UpdateProfileRequest(
                profile=Profile(
                    name=_require_str(arguments, 'profile_name'),
                    labels=_string_map(arguments.get('labels')),
                ),
                update_mask=_optional_str(arguments, 'update_mask'),
                profile_bytes=_optional_str(arguments, 'profile_data'),
            )
        )
        return _render(updated)

    def list_profiles(self, arguments: Mapping[str, Any]) -> str:
        """List one page of profiles."""
        response = self._clients.profiler.list_profiles(
            ListProfilesRequest(
                page_size=_optional_int(arguments, 'page_size'),
                page_token=_optional_str(arguments, 'page_token'),
            )
        )
        return _render(response)
