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

"""Constants for the telemetry tools.

Default page sizes and fallbacks used by the provider adapters, kept in one
place so the tool front end and the adapters agree on them.
"""

from datetime import timedelta

# Server identity reported to MCP clients.
SERVER_NAME = 'GCP Telemetry MCP'
PACKAGE_NAME = 'gcp-telemetry-mcp'

# Project ID environment variables (resolution order)
PROJECT_ID_ENV_VARS = (
    'GOOGLE_CLOUD_PROJECT',
    'GCLOUD_PROJECT',
)

# Cloud Logging
DEFAULT_LOG_ENTRY_LIMIT = 50

# Cloud Monitoring page sizes
DEFAULT_TIME_SERIES_PAGE_SIZE = 100
DEFAULT_METRIC_DESCRIPTORS_PAGE_SIZE = 5
DEFAULT_AVAILABLE_METRICS_PAGE_SIZE = 100

# Applied when an aggregation's alignment_period cannot be parsed.
DEFAULT_ALIGNMENT_PERIOD = timedelta(seconds=60)

# Cloud Trace
DEFAULT_TRACES_PAGE_SIZE = 100

# Cloud Profiler
DEFAULT_PROFILES_PAGE_SIZE = 100
DEFAULT_PROFILE_DURATION = '60s'
