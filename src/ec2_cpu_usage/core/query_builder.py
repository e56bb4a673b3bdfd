# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""CPU utilization query assembly"""

from dataclasses import dataclass

from ec2_cpu_usage.core.time_window import Window

QUERY_ID = 'cpu_utilization'
NAMESPACE = 'AWS/EC2'
METRIC_NAME = 'CPUUtilization'


@dataclass(frozen=True)
class MetricQuery:
    instance_id: str
    window: Window
    period: int


def build(instance_id: str, window: Window, period: int) -> MetricQuery:
    return MetricQuery(instance_id=instance_id, window=window, period=period)


# "Average" matters here: CPUUtilization is a percentage, summing it within a period is meaningless
def to_metric_data_query(query: MetricQuery, stat='Average'):
    """Render a MetricQuery as a CloudWatch MetricDataQuery"""
    return {
        'Id': QUERY_ID,
        'MetricStat': {
            'Metric': {
                'Namespace': NAMESPACE,
                'MetricName': METRIC_NAME,
                'Dimensions': [{'Name': 'InstanceId', 'Value': query.instance_id}]
            },
            'Period': query.period,
            'Stat': stat
        },
        'ReturnData': True
    }
