# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Metric result containers shared by the provider, normalizer and outputs"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Sequence


@dataclass(frozen=True)
class RawMetricResult:
    """Provider response as received; nothing about it is trusted

    Either sequence may be None (absent), empty, unordered or of a
    different length than the other.
    """

    timestamps: Optional[Sequence[datetime]] = None
    values: Optional[Sequence[float]] = None
    status_code: Optional[str] = None
    messages: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class MetricResult:
    """Normalized CPU utilization series, oldest sample first"""

    timestamps: List[datetime]
    values: List[float]

    def __post_init__(self):
        if len(self.timestamps) != len(self.values):
            raise ValueError(
                f"timestamps ({len(self.timestamps)}) and values ({len(self.values)}) differ in length"
            )
        if not self.timestamps:
            raise ValueError("MetricResult requires at least one data point")

    def __len__(self):
        return len(self.timestamps)

    @property
    def start(self) -> datetime:
        return self.timestamps[0]

    @property
    def end(self) -> datetime:
        return self.timestamps[-1]

    def to_dict(self):
        """Outbound response shape: ISO-8601 timestamps and parallel values"""
        return {
            'timestamps': [ts.isoformat() for ts in self.timestamps],
            'values': list(self.values)
        }
