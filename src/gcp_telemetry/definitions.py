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

"""JSON schema descriptions of the telemetry tools.

Each `ToolDefinition` pairs the MCP-facing schema with the phrase used in
failure messages, e.g. 'Failed to write log entry: ...'.
"""

from typing import Any

from pydantic import BaseModel, Field

_METRIC_DESCRIPTOR_FILTER = """Filter expression for metric descriptors.
If this field is empty, all custom and system-defined metric descriptors are returned.
Otherwise, the [filter](https://cloud.google.com/monitoring/api/v3/filters) specifies which \
metric descriptors are to be returned. For example, the following filter matches all \
[custom metrics](https://cloud.google.com/monitoring/custom-metrics):

metric.type = starts_with("custom.googleapis.com/")
"""

_TRACE_FILTER = """By default, searches use prefix matching. To specify exact match, prepend
a plus symbol (+) to the search term. Multiple terms are ANDed. Syntax:

  - root:NAME_PREFIX or NAME_PREFIX: traces where any root span starts with NAME_PREFIX.
  - +root:NAME or +NAME: traces where any root span's name is exactly NAME.
  - span:NAME_PREFIX: traces where any span starts with NAME_PREFIX.
  - +span:NAME: traces where any span's name is exactly NAME.
  - latency:DURATION: traces whose overall latency is at least DURATION
    (units ns, ms, s; default ms), e.g. latency:24ms.
  - label:LABEL_KEY: traces containing the label key, whatever its value.
  - LABEL_KEY:VALUE_PREFIX: traces whose label value starts with VALUE_PREFIX.
  - +LABEL_KEY:VALUE: traces containing exactly this key:value pair.
  - method:VALUE: equivalent to /http/method:VALUE.
  - url:VALUE: equivalent to /http/url:VALUE.
"""

_PROFILE_TYPES = 'Profile type: CPU, HEAP, THREADS, CONTENTION, or WALL'


class ToolDefinition(BaseModel):
    """Description of one tool.

    Attributes:
        name: Tool name, also the `TelemetryTools` method name.
        description: Human readable description.
        input_schema: JSON schema of the tool arguments.
        action: Lowercase phrase naming the operation in failure messages.
    """

    name: str
    description: str
    input_schema: dict[str, Any] = Field(default_factory=lambda: {'type': 'object', 'properties': {}})
    action: str


def _schema(properties: dict[str, Any], required: list[str] | None = None) -> dict[str, Any]:
    schema: dict[str, Any] = {'type': 'object', 'properties': properties}
    if required:
        schema['required'] = required
    return schema


def _string(description: str) -> dict[str, Any]:
    return {'type': 'string', 'description': description}


def _number(description: str) -> dict[str, Any]:
    return {'type': 'number', 'description': description}


def _object(description: str) -> dict[str, Any]:
    return {'type': 'object', 'description': description}


_SPAN_SCHEMA = {
    'type': 'object',
    'properties': {
        'span_id': _string('Span ID'),
        'name': _string('Span name'),
        'start_time': _string('Start time (RFC 3339 format)'),
        'end_time': _string('End time (RFC 3339 format)'),
        'parent_id': _string('Parent span ID'),
        'kind': _string('Span kind: RPC_SERVER, RPC_CLIENT, or UNSPECIFIED'),
        'labels': _object('Span labels'),
    },
    'required': ['span_id', 'start_time', 'end_time'],
}

TOOL_DEFINITIONS: list[ToolDefinition] = [
    ToolDefinition(
        name='write_log_entry',
        description='Write a log entry to Cloud Logging',
        input_schema=_schema(
            {
                'log_name': _string('Name of the log to write to'),
                'severity': _string('Log severity: DEBUG, INFO, WARNING, ERROR, CRITICAL'),
                'message': _string('Log message'),
                'labels': _object('Optional labels for the log entry'),
                'payload': _object('Optional structured payload for the log entry'),
            },
            ['log_name', 'severity', 'message'],
        ),
        action='write log entry',
    ),
    ToolDefinition(
        name='list_log_entries',
        description='List log entries from Cloud Logging',
        input_schema=_schema(
            {
                'filter': _string('Cloud Logging filter expression'),
                'order_by': _string("Sort order, 'timestamp desc' (default) or 'timestamp asc'"),
                'limit': _number('Maximum number of entries to return (default: 50)'),
                'page_token': _string('Page token for pagination'),
            }
        ),
        action='list log entries',
    ),
    ToolDefinition(
        name='create_metric_descriptor',
        description='Create a custom metric descriptor in Cloud Monitoring',
        input_schema=_schema(
            {
                'type': _string("Metric type (e.g., 'custom.googleapis.com/my_metric')"),
                'metric_kind': _string('Metric kind: GAUGE, DELTA, or CUMULATIVE'),
                'value_type': _string('Value type: BOOL, INT64, DOUBLE, STRING, or DISTRIBUTION'),
                'description': _string('Description of the metric'),
                'display_name': _string('Display name for the metric'),
                'unit': _string("Unit of the metric values (e.g., 's', 'By', '1')"),
                'labels': _object('Optional label keys mapped to their descriptions'),
            },
            ['type', 'metric_kind', 'value_type', 'description'],
        ),
        action='create metric descriptor',
    ),
    ToolDefinition(
        name='write_time_series',
        description='Write time series data to Cloud Monitoring',
        input_schema=_schema(
            {
                'metric_type': _string('Metric type to write data for'),
                'resource_type': _string("Resource type (e.g., 'global', 'gce_instance')"),
                'value': _number('Metric value to write'),
                'metric_labels': _object('Optional metric labels'),
                'resource_labels': _object('Optional monitored resource labels'),
                'timestamp': _string('Timestamp for the data point (RFC 3339 format, defaults to now)'),
            },
            ['metric_type', 'resource_type', 'value'],
        ),
        action='write time series',
    ),
    ToolDefinition(
        name='list_time_series',
        description='List time series data from Cloud Monitoring',
        input_schema=_schema(
            {
                'filter': _string(
                    'Monitoring filter expression '
                    '(e.g., \'metric.type="compute.googleapis.com/instance/cpu/usage_time"\')'
                ),
                'start_time': _string('Start time for the query (RFC 3339 format)'),
                'end_time': _string('End time for the query (RFC 3339 format)'),
                'aggregation': {
                    'type': 'object',
                    'description': 'Optional aggregation configuration',
                    'properties': {
                        'alignment_period': _string("Alignment period (e.g., '60s', '5m')"),
                        'per_series_aligner': _string('Aligner, e.g. ALIGN_MEAN, ALIGN_RATE'),
                        'cross_series_reducer': _string('Reducer, e.g. REDUCE_SUM'),
                        'group_by_fields': {'type': 'array', 'items': {'type': 'string'}},
                    },
                },
                'page_size': _number('Maximum number of time series to return (default: 100)'),
                'page_token': _string('Page token for pagination'),
            },
            ['filter', 'start_time', 'end_time'],
        ),
        action='list time series',
    ),
    ToolDefinition(
        name='list_metric_descriptors',
        description='List metric descriptors from Cloud Monitoring',
        input_schema=_schema(
            {
                'filter': _string(_METRIC_DESCRIPTOR_FILTER),
                'page_size': _number('Maximum number of descriptors to return (default: 5)'),
                'page_token': _string('Page token for pagination'),
            }
        ),
        action='list metric descriptors',
    ),
    ToolDefinition(
        name='delete_metric_descriptor',
        description='Delete a custom metric descriptor from Cloud Monitoring',
        input_schema=_schema({'metric_type': _string('Metric type to delete')}, ['metric_type']),
        action='delete metric descriptor',
    ),
    ToolDefinition(
        name='list_available_metrics',
        description='List available metrics in Cloud Monitoring',
        input_schema=_schema(
            {
                'filter': _string(_METRIC_DESCRIPTOR_FILTER),
                'page_size': _number('Maximum number of metrics to return (default: 100)'),
                'page_token': _string('Page token for pagination'),
            }
        ),
        action='list available metrics',
    ),
    ToolDefinition(
        name='list_traces',
        description='List traces from Cloud Trace',
        input_schema=_schema(
            {
                'start_time': _string('Start time for the query (RFC 3339 format)'),
                'end_time': _string('End time for the query (RFC 3339 format)'),
                'filter': _string(_TRACE_FILTER),
                'order_by': _string("Order by field (e.g., 'start desc')"),
                'view': _string('Amount of data per trace: MINIMAL, ROOTSPAN, or COMPLETE'),
                'page_size': _number('Maximum number of traces to return (default: 100)'),
                'page_token': _string('Page token for pagination'),
            },
            ['start_time', 'end_time'],
        ),
        action='list traces',
    ),
    ToolDefinition(
        name='get_trace',
        description='Get a specific trace from Cloud Trace',
        input_schema=_schema({'trace_id': _string('Trace ID to retrieve')}, ['trace_id']),
        action='get trace',
    ),
    ToolDefinition(
        name='patch_traces',
        description='Update trace spans in Cloud Trace',
        input_schema=_schema(
            {
                'trace_id': _string('Trace ID to update'),
                'spans': {
                    'type': 'array',
                    'description': 'Array of span objects to update or create',
                    'items': _SPAN_SCHEMA,
                },
            },
            ['trace_id', 'spans'],
        ),
        action='patch traces',
    ),
    ToolDefinition(
        name='create_profile',
        description='Create a new profile in Cloud Profiler',
        input_schema=_schema(
            {
                'target': _string('Target deployment name'),
                'profile_type': _string(_PROFILE_TYPES),
                'duration': _string("Profile duration (e.g., '60s', '5m', defaults to '60s')"),
                'labels': _object('Optional labels for the deployment'),
            },
            ['target', 'profile_type'],
        ),
        action='create profile',
    ),
    ToolDefinition(
        name='create_offline_profile',
        description='Create an offline profile in Cloud Profiler',
        input_schema=_schema(
            {
                'target': _string('Target deployment name'),
                'profile_type': _string(_PROFILE_TYPES),
                'profile_data': _string('Base64-encoded profile data'),
                'duration': _string("Profile duration (e.g., '60s', '5m', defaults to '60s')"),
                'labels': _object('Optional labels for the profile'),
            },
            ['target', 'profile_type', 'profile_data'],
        ),
        action='create offline profile',
    ),
    ToolDefinition(
        name='update_profile',
        description='Update a profile in Cloud Profiler',
        input_schema=_schema(
            {
                'profile_name': _string('Profile name to update'),
                'profile_data': _string('Updated base64-encoded profile data'),
                'labels': _object('Updated labels for the profile'),
                'update_mask': _string("Fields to update (e.g., 'labels,profile_bytes')"),
            },
            ['profile_name'],
        ),
        action='update profile',
    ),
    ToolDefinition(
        name='list_profiles',
        description='List profiles from Cloud Profiler',
        input_schema=_schema(
            {
                'page_size': _number('Maximum number of profiles to return (default: 100)'),
                'page_token': _string('Page token for pagination'),
            }
        ),
        action='list profiles',
    ),
]

TOOLS_BY_NAME: dict[str, ToolDefinition] = {tool.name: tool for tool in TOOL_DEFINITIONS}
