# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Inbound CPU usage request validation"""

import ipaddress
import logging
from dataclasses import dataclass

from ec2_cpu_usage.core.errors import InvalidRequest
from ec2_cpu_usage.core.time_window import TimeRange

logger = logging.getLogger(__name__)

MIN_PERIOD = 60
MAX_PERIOD = 86400

# Sampling intervals offered for interactive selection
PERIOD_OPTIONS = [
    60,      # 1 minute
    300,     # 5 minutes
    600,     # 10 minutes
    900,     # 15 minutes
    1800,    # 30 minutes
    3600,    # 1 hour
    7200,    # 2 hours
    14400,   # 4 hours
    28800,   # 8 hours
    43200,   # 12 hours
    86400    # 24 hours
]


@dataclass(frozen=True)
class CpuUsageRequest:
    ip_address: str
    time_range: TimeRange
    period: int

    @classmethod
    def from_dict(cls, data) -> 'CpuUsageRequest':
        """Build a validated request from {'ipAddress', 'timeRange', 'period'}

        Raises:
            InvalidRequest: If a field is missing or malformed
            InvalidTimeRange: If timeRange is not a supported range
        """
        for key in ('ipAddress', 'timeRange', 'period'):
            if data.get(key) in (None, ''):
                raise InvalidRequest(key, 'required')
        return cls.create(data['ipAddress'], data['timeRange'], data['period'])

    @classmethod
    def create(cls, ip_address, time_range, period) -> 'CpuUsageRequest':
        logger.debug(f"Validating request: ip={ip_address} range={time_range} period={period}")
        request = cls(
            ip_address=validate_ip_address(ip_address),
            time_range=TimeRange.parse(time_range),
            period=validate_period(period)
        )
        return request

    def to_dict(self):
        return {
            'ipAddress': self.ip_address,
            'timeRange': self.time_range.label,
            'period': self.period
        }


def validate_ip_address(value) -> str:
    try:
        return str(ipaddress.ip_address(str(value).strip()))
    except ValueError:
        raise InvalidRequest('ipAddress', f"{value!r} is not a valid IP address")


def validate_period(value) -> int:
    # bool is an int subclass; True is not a period
    if isinstance(value, bool):
        raise InvalidRequest('period', 'must be an integer number of seconds')
    if isinstance(value, str):
        if not value.strip().isdecimal():
            raise InvalidRequest('period', f"{value!r} is not an integer")
        value = int(value)
    if not isinstance(value, int):
        raise InvalidRequest('period', 'must be an integer number of seconds')
    if not MIN_PERIOD <= value <= MAX_PERIOD:
        raise InvalidRequest('period', f"must be between {MIN_PERIOD} and {MAX_PERIOD} seconds")
    return value
