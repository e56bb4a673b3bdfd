# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Main orchestrator for EC2 CPU usage retrieval"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from ec2_cpu_usage.core import period_advisor, query_builder, result_normalizer, time_window
from ec2_cpu_usage.core.errors import MetricsError, ProviderError
from ec2_cpu_usage.core.interfaces import InstanceDirectory, MetricsProvider
from ec2_cpu_usage.core.models import MetricResult
from ec2_cpu_usage.core.query_builder import MetricQuery

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class CpuUsage:
    """A normalized result together with the query that produced it"""

    query: MetricQuery
    result: MetricResult


class MetricsOrchestrator:
    """Sequences directory lookup, window and period resolution, fetch and normalization

    Holds only its collaborators, so one instance can serve any number of
    concurrent requests. Each external call is attempted exactly once.
    """

    def __init__(self, directory: InstanceDirectory, provider: MetricsProvider,
                 clock=utc_now, max_points: int = period_advisor.MAX_DATA_POINTS):
        self.directory = directory
        self.provider = provider
        self.clock = clock
        self.max_points = max_points

    def plan(self, time_range, period: int, now: datetime = None):
        """Resolve the window and effective period without any network call

        Returns:
            tuple: (Window, effective period in seconds)
        """
        now = now if now is not None else self.clock()
        window = time_window.resolve(time_range, now)
        minimum = period_advisor.minimum_period(window, now)
        effective = period_advisor.cap_period(window, period, minimum, self.max_points)
        return window, effective

    def get_cpu_usage(self, ip_address: str, time_range, period: int) -> MetricResult:
        """Fetch the CPU utilization series for the instance behind ip_address

        Args:
            ip_address: Private IP address of the instance
            time_range: TimeRange member or label, e.g. 'Last Hour'
            period: Requested sampling period in seconds

        Returns:
            MetricResult: Normalized series, oldest sample first

        Raises:
            InstanceNotFound: If no instance owns ip_address (no metrics call is made)
            InvalidTimeRange: If time_range is not supported
            ProviderError: If an AWS call fails
            MissingData, EmptyData: If the response holds no usable series
        """
        return self.fetch_usage(ip_address, time_range, period).result

    def fetch_usage(self, ip_address: str, time_range, period: int) -> CpuUsage:
        """Same as get_cpu_usage, but also returns the query that was sent"""
        logger.debug(f"Starting CPU usage retrieval: ip={ip_address} range={time_range} period={period}")

        try:
            instance_id = self.directory.lookup(ip_address)
        except MetricsError:
            raise
        except Exception as e:
            raise ProviderError(str(e)) from e
        logger.info(f"  Instance: {instance_id}")

        window, effective = self.plan(time_range, period)
        query = query_builder.build(instance_id, window, effective)
        logger.info(
            f"  Fetching CPUUtilization {window.start.isoformat()} -> {window.end.isoformat()} "
            f"(period={effective}s)"
        )

        try:
            raw = self.provider.fetch(query.instance_id, query.window, query.period)
        except MetricsError:
            raise
        except Exception as e:
            raise ProviderError(str(e)) from e

        result = result_normalizer.normalize(raw)
        logger.info(f"  Retrieved {len(result)} data points")
        return CpuUsage(query=query, result=result)
