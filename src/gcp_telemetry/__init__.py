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

"""Google Cloud telemetry behind provider-neutral clients.

Four clients cover Cloud Logging, Cloud Monitoring, Cloud Trace and Cloud
Profiler. Each one forwards to an injected backend, so the real wire
adapters can be swapped for fakes in tests:

    from gcp_telemetry import LoggingClient
    from gcp_telemetry.cloud_logging import LogEntry

    client = LoggingClient.for_project('my-project')
    client.write_entry('my-app', LogEntry(severity='ERROR', message='boom'))

`TelemetryTools` wraps the clients as MCP tools and `gcp-telemetry-mcp`
serves them over stdio.
"""

from .cloud_logging import LoggingClient
from .config import TelemetryConfig, resolve_project_id
from .core.error import InvalidArgumentError, TelemetryError
from .monitoring import MonitoringClient
from .profiler import ProfilerClient
from .tools import TelemetryClients, TelemetryTools, create_clients
from .trace import TraceClient

__version__ = '0.1.0'

__all__ = [
    'InvalidArgumentError',
    'LoggingClient',
    'MonitoringClient',
    'ProfilerClient',
    'TelemetryClients',
    'TelemetryConfig',
    'TelemetryError',
    'TelemetryTools',
    'TraceClient',
    '__version__',
    'create_clients',
    'resolve_project_id',
]
