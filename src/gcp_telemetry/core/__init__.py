# Copyright 2025 Google LLC
# SPDX-License-Identifier: Apache-2.0


"""Shared building blocks: logging and error types."""

from .error import InvalidArgumentError, StatusName, TelemetryError
from .logging import Logger, configure_logging, get_logger

__all__ = [
    'InvalidArgumentError',
    'Logger',
    'StatusName',
    'TelemetryError',
    'configure_logging',
    'get_logger',
]
