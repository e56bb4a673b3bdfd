# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Sampling period selection for CloudWatch queries

CloudWatch rolls data up to coarser resolution as it ages, and a request
finer than what is retained for the window start comes back empty. The
minimum period is therefore a step function of the age of window.start.
These tiers track CloudWatch's limits; re-check them before changing.
"""

import logging
import math
from datetime import datetime, timedelta

from ec2_cpu_usage.core.time_window import Window, as_utc

logger = logging.getLogger(__name__)

# Hard ceiling on data points per request (transport and chart rendering cost)
MAX_DATA_POINTS = 1440

# (maximum age of window start, minimum period in seconds), youngest first
RETENTION_TIERS = [
    (timedelta(hours=3), 60),
    (timedelta(days=15), 300),
    (timedelta(days=63), 900),
]
OLDEST_TIER_PERIOD = 3600


def minimum_period(window: Window, now: datetime) -> int:
    """Smallest period CloudWatch honours for a window starting at window.start

    Args:
        window: Resolved query window
        now: Reference instant the age of window.start is measured from

    Returns:
        int: Minimum period in seconds (60, 300, 900 or 3600)
    """
    age = as_utc(now) - window.start
    for max_age, period in RETENTION_TIERS:
        if age <= max_age:
            return period
    return OLDEST_TIER_PERIOD


def expected_points(window: Window, period: int) -> int:
    """Number of data points a window yields at the given period"""
    return math.ceil(window.duration_seconds / period)


def cap_period(window: Window, requested: int, minimum: int, max_points: int = MAX_DATA_POINTS) -> int:
    """Effective period: at least minimum, and never more than max_points buckets

    Args:
        window: Resolved query window
        requested: Period asked for by the caller, in seconds
        minimum: Minimum period from minimum_period()
        max_points: Point budget, clamped to MAX_DATA_POINTS

    Returns:
        int: Effective period in seconds
    """
    if max_points < 1:
        raise ValueError(f"max_points must be positive, got {max_points}")
    max_points = min(max_points, MAX_DATA_POINTS)

    period = max(requested, minimum)
    if period != requested:
        logger.debug(f"Raised period {requested}s to provider minimum {minimum}s")

    points = expected_points(window, period)
    if points > max_points:
        adjusted = math.ceil(window.duration_seconds / max_points)
        period = max(adjusted, minimum)
        logger.info(f"Widened period to {period}s to stay within {max_points} data points (was {points})")

    return period
