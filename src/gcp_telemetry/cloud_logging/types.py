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

"""Generic Cloud Logging models.

These records carry only primitive types, maps and timestamps; nothing in
here knows about the Cloud Logging wire format.
"""

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict


class Severity(StrEnum):
    """Log severities understood by the generic model."""

    DEBUG = 'DEBUG'
    INFO = 'INFO'
    WARNING = 'WARNING'
    ERROR = 'ERROR'
    CRITICAL = 'CRITICAL'


class LogEntry(BaseModel):
    """A log entry to be written or one that was read back.

    Attributes:
        severity: One of the `Severity` names. Anything else is written as INFO.
        message: Text payload, used when `payload` is not set.
        labels: Optional entry labels.
        payload: Optional structured payload; takes precedence over `message`.
        timestamp: Entry timestamp. Filled in on entries read back.
    """

    model_config = ConfigDict(extra='forbid')

    severity: str = Severity.INFO.value
    message: str = ''
    labels: dict[str, str] | None = None
    payload: dict[str, Any] | None = None
    timestamp: datetime | None = None


class ListEntriesRequest(BaseModel):
    """Request to list log entries.

    Attributes:
        filter: Cloud Logging filter expression.
        order_by: Sort order; newest first when empty.
        limit: Maximum entries to return; 50 when zero or negative.
        page_token: Cursor from a previous listing.
    """

    model_config = ConfigDict(extra='forbid')

    filter: str = ''
    order_by: str = ''
    limit: int = 0
    page_token: str = ''

