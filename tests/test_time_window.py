# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Tests for relative time range resolution"""

from datetime import datetime, timedelta, timezone

import pytest

from ec2_cpu_usage.core.errors import InvalidTimeRange
from ec2_cpu_usage.core.time_window import TimeRange, Window, resolve

NOW = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def test_last_hour_scenario():
    """Last Hour at 12:00 resolves to [11:00, 12:00)"""
    window = resolve(TimeRange.LastHour, NOW)
    assert window.start == datetime(2024, 1, 1, 11, 0, tzinfo=timezone.utc)
    assert window.end == NOW


@pytest.mark.parametrize("time_range", list(TimeRange))
@pytest.mark.parametrize("now", [
    NOW,
    datetime(2024, 3, 10, 7, 59, 59, 999999, tzinfo=timezone.utc),
    datetime(2023, 12, 31, 23, 30, 17, tzinfo=timezone.utc),
])
def test_window_length_matches_range_duration(time_range, now):
    """end - start is exactly the range duration for every range"""
    window = resolve(time_range, now)
    assert window.end - window.start == timedelta(seconds=time_range.seconds)
    assert window.duration_seconds == time_range.seconds


def test_edges_truncated_to_minute():
    """Seconds and microseconds are dropped from both edges"""
    window = resolve(TimeRange.LastDay, datetime(2024, 5, 1, 8, 15, 42, 123456, tzinfo=timezone.utc))
    assert window.end == datetime(2024, 5, 1, 8, 15, tzinfo=timezone.utc)
    assert window.start == datetime(2024, 4, 30, 8, 15, tzinfo=timezone.utc)
    assert window.start.second == 0 and window.start.microsecond == 0


def test_same_minute_is_query_stable():
    """Calls within the same minute produce identical windows"""
    first = resolve(TimeRange.Last6Hours, datetime(2024, 1, 1, 12, 5, 1, tzinfo=timezone.utc))
    second = resolve(TimeRange.Last6Hours, datetime(2024, 1, 1, 12, 5, 58, tzinfo=timezone.utc))
    assert first == second


@pytest.mark.parametrize("value", ['Last 7 Days', 'Last7Days', TimeRange.Last7Days])
def test_accepts_label_name_and_member(value):
    """Labels, member names and members all resolve"""
    assert resolve(value, NOW).start == NOW - timedelta(days=7)


@pytest.mark.parametrize("value", ['Last 30 Days', 'last hour', '', None, 3600])
def test_unknown_range_rejected(value):
    """Unknown ranges raise instead of falling back to a default"""
    with pytest.raises(InvalidTimeRange) as exc_info:
        resolve(value, NOW)
    assert exc_info.value.label == value


def test_naive_now_taken_as_utc():
    """A naive anchor is interpreted as UTC"""
    window = resolve('Last Hour', datetime(2024, 1, 1, 12, 0, 30))
    assert window.end == NOW


def test_window_requires_start_before_end():
    """Empty or inverted windows are rejected"""
    with pytest.raises(ValueError):
        Window(start=NOW, end=NOW)


def test_labels_in_display_order():
    """Labels are listed shortest range first"""
    assert TimeRange.labels() == ['Last Hour', 'Last 6 Hours', 'Last 12 Hours', 'Last Day', 'Last 7 Days']
