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

"""Configuration for the telemetry tools.

Configuration is environment driven. The project ID is resolved once at
startup and handed to every provider adapter, which keeps it as an
immutable project-scoped handle for the lifetime of the process.
"""

import os
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from .constants import PROJECT_ID_ENV_VARS, SERVER_NAME


class EnvVar(StrEnum):
    """Enumerates the environment variables read by the telemetry tools."""

    GOOGLE_CLOUD_PROJECT = 'GOOGLE_CLOUD_PROJECT'
    GCLOUD_PROJECT = 'GCLOUD_PROJECT'
    GCP_TELEMETRY_LOG_LEVEL = 'GCP_TELEMETRY_LOG_LEVEL'


def resolve_project_id(project_id: str | None = None) -> str | None:
    """Resolve the GCP project ID.

    Resolution order:
    1. Explicit project_id parameter
    2. GOOGLE_CLOUD_PROJECT environment variable
    3. GCLOUD_PROJECT environment variable

    Args:
        project_id: Explicitly provided project ID.

    Returns:
        The resolved project ID or None.
    """
    if project_id:
        return project_id

    for env_var in PROJECT_ID_ENV_VARS:
        env_value = os.environ.get(env_var)
        if env_value:
            return env_value

    return None


class TelemetryConfig(BaseModel):
    """Resolved runtime configuration.

    Attributes:
        project_id: GCP project every provider handle is scoped to.
        server_name: Name reported to MCP clients.
        log_level: Minimum level for the stderr log stream.
    """

    model_config = ConfigDict(frozen=True, extra='forbid')

    project_id: str
    server_name: str = SERVER_NAME
    log_level: str = 'INFO'

    @classmethod
    def from_env(cls, project_id: str | None = None) -> 'TelemetryConfig | None':
        """Build a configuration from the environment.

        Args:
            project_id: Optional explicit project ID overriding the environment.

        Returns:
            The configuration, or None when no project ID can be resolved.
        """
        resolved = resolve_project_id(project_id)
        if not resolved:
            return None
        return cls(
            project_id=resolved,
            log_level=os.environ.get(EnvVar.GCP_TELEMETRY_LOG_LEVEL) or 'INFO',
        )
