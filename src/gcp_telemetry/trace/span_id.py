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

"""Span id conversion between generic strings and Cloud Trace integers.

Cloud Trace v1 carries span ids as unsigned 64-bit integers while the
generic model uses strings. Reading formats the integer as 16 lowercase
hex digits. Writing does not parse hex: every string is hashed with a
base-31 polynomial over its code points, wrapping at 2**64. The hash is
lossy, so an id read from Cloud Trace and written back does not keep its
value. A warning is logged for ids that do not look like the hex form.
"""

import re

from ..core.logging import get_logger

logger = get_logger(__name__)

_UINT64_MASK = (1 << 64) - 1
_HEX_SPAN_ID = re.compile(r'[0-9a-fA-F]{16}')


def encode_span_id(span_id: str) -> int:
    """Hash a generic span id into a Cloud Trace span id.

    Args:
        span_id: The generic span id.

    Returns:
        The 64-bit hash, 0 for the empty string.
    """
    if not span_id:
        return 0
    if not _HEX_SPAN_ID.fullmatch(span_id):
        logger.warning('Span id is not 16 hex digits, hashing it', span_id=span_id)

    value = 0
    for char in span_id:
        value = (value * 31 + ord(char)) & _UINT64_MASK
    return value


def decode_span_id(span_id: int) -> str:
    """Format a Cloud Trace span id.

    Args:
        span_id: The 64-bit span id.

    Returns:
        16 lowercase hex digits, or '' for 0.
    """
    if span_id == 0:
        return ''
    return f'{span_id:016x}'
