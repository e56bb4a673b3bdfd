# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Validation and repair of raw CloudWatch responses"""

import logging

from ec2_cpu_usage.core.errors import EmptyData, MissingData
from ec2_cpu_usage.core.models import MetricResult, RawMetricResult

logger = logging.getLogger(__name__)


def normalize(raw: RawMetricResult) -> MetricResult:
    """Turn a raw provider response into a MetricResult

    Steps, in order:
      1. absent timestamps or values -> MissingData
      2. empty timestamps or values -> EmptyData
      3. mismatched lengths -> both truncated to the shorter prefix
      4. first timestamp later than last -> both sequences reversed
      5. still out of order -> stable sort by timestamp, pairs kept together

    The input is never modified.

    Raises:
        MissingData: If either sequence is absent
        EmptyData: If either sequence has no elements
    """
    if raw.timestamps is None:
        raise MissingData('timestamps')
    if raw.values is None:
        raise MissingData('values')

    timestamps = list(raw.timestamps)
    values = list(raw.values)

    if not timestamps:
        raise EmptyData('timestamps')
    if not values:
        raise EmptyData('values')

    if len(timestamps) != len(values):
        length = min(len(timestamps), len(values))
        logger.warning(
            f"Warning: {len(timestamps)} timestamps vs {len(values)} values, truncating both to {length}"
        )
        timestamps = timestamps[:length]
        values = values[:length]

    # CloudWatch scans newest first by default
    if timestamps[0] > timestamps[-1]:
        timestamps.reverse()
        values.reverse()

    if not _is_non_decreasing(timestamps):
        logger.warning("Warning: timestamps not monotonic after reversal, sorting chronologically")
        sorted_indices = sorted(range(len(timestamps)), key=lambda i: timestamps[i])
        timestamps = [timestamps[i] for i in sorted_indices]
        values = [values[i] for i in sorted_indices]

    return MetricResult(timestamps=timestamps, values=values)


def _is_non_decreasing(timestamps):
    return all(a <= b for a, b in zip(timestamps, timestamps[1:]))
