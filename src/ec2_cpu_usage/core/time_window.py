# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Relative time range resolution into absolute query windows"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum

from ec2_cpu_usage.core.errors import InvalidTimeRange


class TimeRange(Enum):
    """Supported relative time ranges: (label, duration in seconds)"""

    LastHour = ('Last Hour', 3600)
    Last6Hours = ('Last 6 Hours', 21600)
    Last12Hours = ('Last 12 Hours', 43200)
    LastDay = ('Last Day', 86400)
    Last7Days = ('Last 7 Days', 604800)

    def __init__(self, label, seconds):
        self.label = label
        self.seconds = seconds

    @property
    def duration(self) -> timedelta:
        return timedelta(seconds=self.seconds)

    @classmethod
    def parse(cls, value) -> 'TimeRange':
        """Parse a TimeRange from a member, its label or its member name

        Raises:
            InvalidTimeRange: If value does not name a supported range
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for time_range in cls:
                if value in (time_range.label, time_range.name):
                    return time_range
        raise InvalidTimeRange(value)

    @classmethod
    def labels(cls):
        return [time_range.label for time_range in cls]


@dataclass(frozen=True)
class Window:
    """Absolute [start, end) query window, both edges on whole minutes"""

    start: datetime
    end: datetime

    def __post_init__(self):
        if not self.start < self.end:
            raise ValueError(f"Window start {self.start} must be before end {self.end}")

    @property
    def duration_seconds(self) -> int:
        return int((self.end - self.start).total_seconds())


def as_utc(dt: datetime) -> datetime:
    """Naive datetimes are taken as UTC"""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def truncate_to_minute(dt: datetime) -> datetime:
    """Drop seconds and microseconds; naive datetimes are taken as UTC"""
    return as_utc(dt).replace(second=0, microsecond=0)


def resolve(time_range, now: datetime) -> Window:
    """Resolve a relative time range into a Window ending at now

    Args:
        time_range: TimeRange member, label ('Last Day') or name ('LastDay')
        now: Anchor instant

    Returns:
        Window whose end is now truncated to the minute

    Raises:
        InvalidTimeRange: If time_range is not a supported range
    """
    time_range = TimeRange.parse(time_range)
    end = truncate_to_minute(now)
    start = truncate_to_minute(end - time_range.duration)
    return Window(start=start, end=end)
