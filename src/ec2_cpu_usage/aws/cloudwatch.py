# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""CloudWatch CPU utilization fetching"""

import logging

from botocore.exceptions import BotoCoreError, ClientError

from ec2_cpu_usage.core import query_builder
from ec2_cpu_usage.core.errors import ProviderError
from ec2_cpu_usage.core.interfaces import MetricsProvider
from ec2_cpu_usage.core.models import RawMetricResult

logger = logging.getLogger(__name__)


class CloudWatchMetricsProvider(MetricsProvider):
    """Handles CloudWatch GetMetricData retrieval for one instance"""

    def __init__(self, cloudwatch_client, stat='Average'):
        self.cloudwatch_client = cloudwatch_client
        self.stat = stat

    def fetch(self, instance_id, window, period):
        """Fetch CPUUtilization for instance_id over window

        Pages are concatenated in the order CloudWatch emits them; ordering
        and length repairs are left to the normalizer.

        Returns:
            RawMetricResult: timestamps/values are None if CloudWatch returned
            no result for the query at all
        """
        query = query_builder.build(instance_id, window, period)
        timestamps = None
        values = None
        status_code = None
        messages = []

        try:
            paginator = self.cloudwatch_client.get_paginator('get_metric_data')
            pages = paginator.paginate(
                MetricDataQueries=[query_builder.to_metric_data_query(query, stat=self.stat)],
                StartTime=window.start,
                EndTime=window.end
            )
            for page in pages:
                for result in page.get('MetricDataResults', []):
                    if result.get('Id') != query_builder.QUERY_ID:
                        continue
                    # Each key is tracked separately so a missing array stays missing
                    if 'Timestamps' in result:
                        timestamps = (timestamps or []) + list(result['Timestamps'])
                    if 'Values' in result:
                        values = (values or []) + list(result['Values'])
                    status_code = result.get('StatusCode', status_code)
                    messages.extend(m.get('Value', '') for m in result.get('Messages', []))
        except (ClientError, BotoCoreError) as e:
            raise ProviderError(str(e)) from e

        if status_code == 'PartialData':
            logger.warning(f"  Warning: CloudWatch returned partial data for {instance_id}")
        for message in messages:
            logger.info(f"    CloudWatch: {message}")

        return RawMetricResult(
            timestamps=timestamps,
            values=values,
            status_code=status_code,
            messages=messages
        )
