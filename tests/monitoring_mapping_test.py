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

"""Tests for the monitoring mapping tables and duration parsing."""

from datetime import timedelta

import pytest
from google.api import launch_stage_pb2, metric_pb2 as ga_metric

from gcp_telemetry.monitoring.mapping import (
    Aligner,
    Reducer,
    aligner_to_wire,
    alignment_period,
    launch_stage_name,
    metric_kind_from_wire,
    metric_kind_to_wire,
    parse_duration,
    reducer_to_wire,
    value_type_from_wire,
    value_type_to_wire,
)

_Kind = ga_metric.MetricDescriptor.MetricKind
_Type = ga_metric.MetricDescriptor.ValueType


class TestMetricKind:
    """Tests for metric kind translation."""

    @pytest.mark.parametrize('name', ['GAUGE', 'DELTA', 'CUMULATIVE'])
    def test_round_trip(self, name: str) -> None:
        """Known kinds survive a trip through the wire enum."""
        assert metric_kind_from_wire(metric_kind_to_wire(name)) == name

    def test_unknown_kind_defaults_to_gauge(self) -> None:
        """Unrecognized names and unspecified wire values are GAUGE."""
        assert metric_kind_to_wire('HISTOGRAM') == _Kind.GAUGE
        assert metric_kind_from_wire(_Kind.METRIC_KIND_UNSPECIFIED) == 'GAUGE'


class TestValueType:
    """Tests for value type translation."""

    @pytest.mark.parametrize('name', ['BOOL', 'INT64', 'DOUBLE', 'STRING', 'DISTRIBUTION'])
    def test_round_trip(self, name: str) -> None:
        """Known value types survive a trip through the wire enum."""
        assert value_type_from_wire(value_type_to_wire(name)) == name

    def test_unknown_value_type_defaults_to_double(self) -> None:
        """Unrecognized names and wire values are DOUBLE."""
        assert value_type_to_wire('FLOAT') == _Type.DOUBLE
        assert value_type_from_wire(_Type.MONEY) == 'DOUBLE'
        assert value_type_from_wire(_Type.VALUE_TYPE_UNSPECIFIED) == 'DOUBLE'


class TestAlignerAndReducer:
    """Tests for aggregation enum lookups."""

    def test_known_aligner(self) -> None:
        """Named aligners map to their enum."""
        assert aligner_to_wire('ALIGN_RATE') == Aligner.ALIGN_RATE

    @pytest.mark.parametrize('name', ['', 'ALIGN_SOMETHING'])
    def test_aligner_defaults_to_mean(self, name: str) -> None:
        """Empty or unknown aligners become ALIGN_MEAN."""
        assert aligner_to_wire(name) == Aligner.ALIGN_MEAN

    def test_known_reducer(self) -> None:
        """Named reducers map to their enum."""
        assert reducer_to_wire('REDUCE_SUM') == Reducer.REDUCE_SUM

    def test_unknown_reducer_is_none(self) -> None:
        """Unknown reducers become REDUCE_NONE."""
        assert reducer_to_wire('REDUCE_MEDIAN') == Reducer.REDUCE_NONE


class TestParseDuration:
    """Tests for Go style duration parsing."""

    @pytest.mark.parametrize(
        'text, expected',
        [
            ('60s', timedelta(seconds=60)),
            ('5m', timedelta(minutes=5)),
            ('1m30s', timedelta(seconds=90)),
            ('1.5h', timedelta(minutes=90)),
            ('500ms', timedelta(milliseconds=500)),
            ('250us', timedelta(microseconds=250)),
            ('2h45m', timedelta(hours=2, minutes=45)),
            ('-1m', timedelta(minutes=-1)),
            ('0', timedelta(0)),
        ],
    )
    def test_valid(self, text: str, expected: timedelta) -> None:
        """Valid durations parse to the expected timedelta."""
        assert parse_duration(text) == expected

    @pytest.mark.parametrize('text', ['', 'not-a-duration', '60', 's', '1d', '1m 30s'])
    def test_invalid(self, text: str) -> None:
        """Malformed durations raise ValueError."""
        with pytest.raises(ValueError):
            parse_duration(text)

    def test_alignment_period_falls_back_to_sixty_seconds(self) -> None:
        """Unparsable alignment periods become 60 seconds."""
        assert alignment_period('not-a-duration') == timedelta(seconds=60)
        assert alignment_period('') == timedelta(seconds=60)
        assert alignment_period('5m') == timedelta(minutes=5)


class TestLaunchStageName:
    """Tests for launch stage naming."""

    def test_known_stage(self) -> None:
        """Known stages are reported by name."""
        assert launch_stage_name(launch_stage_pb2.LaunchStage.GA) == 'GA'

    def test_unspecified_stage_is_empty(self) -> None:
        """Unspecified and unknown stages are empty."""
        assert launch_stage_name(launch_stage_pb2.LaunchStage.LAUNCH_STAGE_UNSPECIFIED) == ''
        assert launch_stage_name(9999) == ''
