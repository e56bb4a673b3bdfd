# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Summary statistics over a normalized CPU utilization series"""

from dataclasses import asdict, dataclass
from datetime import datetime

import numpy as np

from ec2_cpu_usage.core.models import MetricResult

HIGH_USAGE_THRESHOLD = 90.0


@dataclass(frozen=True)
class MetricSummary:
    total_points: int
    start: datetime
    end: datetime
    average: float
    maximum: float
    minimum: float
    median: float
    percentile95: float
    periods_above_threshold: int
    percentage_above_threshold: float
    threshold: float = HIGH_USAGE_THRESHOLD

    def to_dict(self):
        data = asdict(self)
        data['start'] = self.start.isoformat()
        data['end'] = self.end.isoformat()
        return data


def summarize(result: MetricResult, threshold: float = HIGH_USAGE_THRESHOLD) -> MetricSummary:
    """Calculate average, extremes, percentiles and high-usage share

    Args:
        result: Normalized series (never empty)
        threshold: CPU percentage above which a period counts as high usage
    """
    values = np.asarray(result.values, dtype=float)
    above = int(np.count_nonzero(values > threshold))

    return MetricSummary(
        total_points=len(values),
        start=result.start,
        end=result.end,
        average=float(np.mean(values)),
        maximum=float(np.max(values)),
        minimum=float(np.min(values)),
        median=float(np.percentile(values, 50)),
        percentile95=float(np.percentile(values, 95)),
        periods_above_threshold=above,
        percentage_above_threshold=above / len(values) * 100,
        threshold=threshold
    )
