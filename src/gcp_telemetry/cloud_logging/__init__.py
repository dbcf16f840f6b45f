# Copyright 2025 Google LLC
# SPDX-License-Identifier: Apache-2.0


"""Cloud Logging provider: generic models, client contract and wire adapter."""

from .client import LoggingBackend, LoggingClient
from .types import ListEntriesRequest, LogEntry, Severity

__all__ = [
    'ListEntriesRequest',
    'LogEntry',
    'LoggingBackend',
    'LoggingClient',
    'Severity',
]
