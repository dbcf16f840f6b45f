# Copyright 2025 Google LLC
# SPDX-License-Identifier: Apache-2.0


"""Cloud Trace provider: generic models, client contract and wire adapter."""

from .client import TraceBackend, TraceClient
from .span_id import decode_span_id, encode_span_id
from .types import (
    GetTraceRequest,
    ListTracesRequest,
    ListTracesResponse,
    PatchTraceRequest,
    Span,
    SpanKind,
    Trace,
    TraceView,
)

__all__ = [
    'GetTraceRequest',
    'ListTracesRequest',
    'ListTracesResponse',
    'PatchTraceRequest',
    'Span',
    'SpanKind',
    'Trace',
    'TraceBackend',
    'TraceClient',
    'TraceView',
    'decode_span_id',
    'encode_span_id',
]
