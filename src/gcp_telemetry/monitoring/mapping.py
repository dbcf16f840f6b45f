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

"""Mapping tables between generic monitoring strings and wire enums.

Every mapping is an explicit table plus an explicit default, so the default
policy never depends on which enum member happens to be numbered first:

    ┌──────────────────────┬───────────────────────────┬─────────────────┐
    │ Field                │ Known values              │ Default         │
    ├──────────────────────┼───────────────────────────┼─────────────────┤
    │ metric_kind          │ GAUGE DELTA CUMULATIVE    │ GAUGE           │
    │ value_type           │ BOOL INT64 DOUBLE STRING  │ DOUBLE          │
    │                      │ DISTRIBUTION              │                 │
    │ per_series_aligner   │ ALIGN_* (see table)       │ ALIGN_MEAN      │
    │ cross_series_reducer │ REDUCE_* (see table)      │ REDUCE_NONE     │
    │ alignment_period     │ Go style duration string  │ 60s             │
    └──────────────────────┴───────────────────────────┴─────────────────┘
"""

import re
from datetime import timedelta

from google.api import launch_stage_pb2, metric_pb2 as ga_metric
from google.cloud import monitoring_v3

from ..constants import DEFAULT_ALIGNMENT_PERIOD
from ..core.logging import get_logger
from .types import MetricKind, ValueType

logger = get_logger(__name__)

_MetricKindPb = ga_metric.MetricDescriptor.MetricKind
_ValueTypePb = ga_metric.MetricDescriptor.ValueType
Aligner = monitoring_v3.Aggregation.Aligner
Reducer = monitoring_v3.Aggregation.Reducer

_METRIC_KIND_TO_WIRE: dict[str, int] = {
    MetricKind.GAUGE: _MetricKindPb.GAUGE,
    MetricKind.DELTA: _MetricKindPb.DELTA,
    MetricKind.CUMULATIVE: _MetricKindPb.CUMULATIVE,
}
_WIRE_TO_METRIC_KIND: dict[int, MetricKind] = {v: MetricKind(k) for k, v in _METRIC_KIND_TO_WIRE.items()}

_VALUE_TYPE_TO_WIRE: dict[str, int] = {
    ValueType.BOOL: _ValueTypePb.BOOL,
    ValueType.INT64: _ValueTypePb.INT64,
    ValueType.DOUBLE: _ValueTypePb.DOUBLE,
    ValueType.STRING: _ValueTypePb.STRING,
    ValueType.DISTRIBUTION: _ValueTypePb.DISTRIBUTION,
}
_WIRE_TO_VALUE_TYPE: dict[int, ValueType] = {v: ValueType(k) for k, v in _VALUE_TYPE_TO_WIRE.items()}

_ALIGNERS: dict[str, Aligner] = {
    'ALIGN_MEAN': Aligner.ALIGN_MEAN,
    'ALIGN_MAX': Aligner.ALIGN_MAX,
    'ALIGN_MIN': Aligner.ALIGN_MIN,
    'ALIGN_SUM': Aligner.ALIGN_SUM,
    'ALIGN_COUNT': Aligner.ALIGN_COUNT,
    'ALIGN_DELTA': Aligner.ALIGN_DELTA,
    'ALIGN_RATE': Aligner.ALIGN_RATE,
}

_REDUCERS: dict[str, Reducer] = {
    'REDUCE_MEAN': Reducer.REDUCE_MEAN,
    'REDUCE_MAX': Reducer.REDUCE_MAX,
    'REDUCE_MIN': Reducer.REDUCE_MIN,
    'REDUCE_SUM': Reducer.REDUCE_SUM,
    'REDUCE_COUNT': Reducer.REDUCE_COUNT,
}

# Microseconds per unit; timedelta cannot hold anything finer.
_UNIT_MICROSECONDS: dict[str, float] = {
    'ns': 0.001,
    'us': 1,
    'µs': 1,  # U+00B5 micro sign
    'μs': 1,  # U+03BC Greek small letter mu
    'ms': 1_000,
    's': 1_000_000,
    'm': 60_000_000,
    'h': 3_600_000_000,
}
_DURATION_PART = re.compile(r'(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)')


def metric_kind_to_wire(kind: str) -> int:
    """Map a metric kind name to the wire enum, GAUGE when unrecognized."""
    return _METRIC_KIND_TO_WIRE.get(kind, _MetricKindPb.GAUGE)


def metric_kind_from_wire(kind: int) -> MetricKind:
    """Map a wire metric kind to its name, GAUGE when unspecified or unknown."""
    return _WIRE_TO_METRIC_KIND.get(kind, MetricKind.GAUGE)


def value_type_to_wire(value_type: str) -> int:
    """Map a value type name to the wire enum, DOUBLE when unrecognized."""
    return _VALUE_TYPE_TO_WIRE.get(value_type, _ValueTypePb.DOUBLE)


def value_type_from_wire(value_type: int) -> ValueType:
    """Map a wire value type to its name, DOUBLE when unspecified or unknown."""
    return _WIRE_TO_VALUE_TYPE.get(value_type, ValueType.DOUBLE)


def aligner_to_wire(aligner: str) -> Aligner:
    """Map a per-series aligner name, ALIGN_MEAN when empty or unrecognized."""
    return _ALIGNERS.get(aligner, Aligner.ALIGN_MEAN)


def reducer_to_wire(reducer: str) -> Reducer:
    """Map a cross-series reducer name, REDUCE_NONE when unrecognized."""
    return _REDUCERS.get(reducer, Reducer.REDUCE_NONE)


def launch_stage_name(stage: int) -> str:
    """Return the launch stage name, or '' when unspecified or unknown."""
    if not stage:
        return ''
    try:
        return launch_stage_pb2.LaunchStage.Name(stage)
    except ValueError:
        return ''


def parse_duration(text: str) -> timedelta:
    """Parse a Go style duration string.

    Accepts a sequence of decimal numbers each followed by a unit, with an
    optional leading sign: '60s', '1m30s', '1.5h', '300ms', '-2h45m'. The
    bare string '0' is also accepted.

    Args:
        text: The duration string.

    Returns:
        The parsed duration.

    Raises:
        ValueError: If `text` is not a valid duration.
    """
    rest = text
    sign = 1
    if rest[:1] in ('-', '+'):
        sign = -1 if rest[0] == '-' else 1
        rest = rest[1:]

    if rest == '0':
        return timedelta(0)
    if not rest:
        raise ValueError(f'invalid duration {text!r}')

    total = 0.0
    pos = 0
    while pos < len(rest):
        match = _DURATION_PART.match(rest, pos)
        if not match:
            raise ValueError(f'invalid duration {text!r}')
        total += float(match.group(1)) * _UNIT_MICROSECONDS[match.group(2)]
        pos = match.end()

    return timedelta(microseconds=sign * total)


def alignment_period(text: str) -> timedelta:
    """Parse an alignment period, falling back to 60 seconds.

    Args:
        text: Duration string from the caller.

    Returns:
        The parsed period, or the 60 second default when `text` is unparsable.
    """
    try:
        return parse_duration(text)
    except ValueError:
        logger.debug('Unparsable alignment period, using default', alignment_period=text)
        return DEFAULT_ALIGNMENT_PERIOD
