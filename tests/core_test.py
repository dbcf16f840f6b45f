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

"""Tests for the shared error types, logging setup and page-bounded listing."""

import logging
from types import SimpleNamespace

from gcp_telemetry.core.error import InvalidArgumentError, TelemetryError
from gcp_telemetry.core.logging import configure_logging
from gcp_telemetry.core.paging import take_page


class TestTelemetryError:
    """Tests for TelemetryError."""

    def test_str_includes_status(self) -> None:
        """The string form is 'STATUS: message'."""
        error = TelemetryError(status='NOT_FOUND', message='no such tool')
        assert str(error) == 'NOT_FOUND: no such tool'
        assert error.original_message == 'no such tool'

    def test_status_defaults_to_internal(self) -> None:
        """Without a status the error is INTERNAL."""
        assert TelemetryError(message='x').status == 'INTERNAL'

    def test_status_inherited_from_cause(self) -> None:
        """A TelemetryError cause lends its status."""
        cause = InvalidArgumentError('bad', argument='filter')
        assert TelemetryError(message='wrapped', cause=cause).status == 'INVALID_ARGUMENT'

    def test_invalid_argument(self) -> None:
        """InvalidArgumentError records the argument name."""
        error = InvalidArgumentError('trace_id is required', argument='trace_id')
        assert error.status == 'INVALID_ARGUMENT'
        assert error.argument == 'trace_id'
        assert error.details == {'argument': 'trace_id'}


class TestTakePage:
    """Tests for take_page."""

    def test_reads_first_page_only(self) -> None:
        """Items and token come from the first page."""
        pager = SimpleNamespace(
            pages=[
                SimpleNamespace(items=[1, 2], next_page_token='p2'),
                SimpleNamespace(items=[3], next_page_token=''),
            ]
        )
        assert take_page(pager, 'items', 10) == ([1, 2], 'p2')

    def test_bounds_items(self) -> None:
        """At most page_size items are taken."""
        pager = SimpleNamespace(pages=[SimpleNamespace(items=list(range(10)), next_page_token='')])
        assert take_page(pager, 'items', 3) == ([0, 1, 2], '')

    def test_second_page_is_never_requested(self) -> None:
        """Iteration stops after the first page."""

        def pages():
            yield SimpleNamespace(items=['a'], next_page_token='more')
            raise AssertionError('second page requested')

        assert take_page(SimpleNamespace(pages=pages()), 'items', 5) == (['a'], 'more')

    def test_no_pages(self) -> None:
        """An empty pager yields an empty page."""
        assert take_page(SimpleNamespace(pages=[]), 'items', 5) == ([], '')


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_root_level(self) -> None:
        """The named level is applied to the root logger."""
        configure_logging('debug')
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        """Unknown level names mean INFO."""
        configure_logging('chatty')
        assert logging.getLogger().level == logging.INFO
