# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Secure CSV export of CPU utilization series using defusedcsv"""

from defusedcsv import csv

HEADERS = ['timestamp', 'cpu_utilization']


def write_time_series_csv(filepath, result):
    """Write a MetricResult to CSV, one row per data point

    Args:
        filepath: Path to CSV file
        result: MetricResult to export
    """
    with open(filepath, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(HEADERS)
        writer.writerows(
            [ts.isoformat(), value] for ts, value in zip(result.timestamps, result.values)
        )
