# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Collaborator interfaces the orchestrator depends on

These abstract the AWS services so the orchestration logic stays independent
of boto3 and can be exercised with in-memory fakes.
"""

from abc import ABC, abstractmethod

from ec2_cpu_usage.core.models import RawMetricResult
from ec2_cpu_usage.core.time_window import Window


class InstanceDirectory(ABC):
    """Maps an IP address to the identifier of the instance that owns it"""

    @abstractmethod
    def lookup(self, ip_address: str) -> str:
        """Return the instance id for ip_address

        Raises:
            InstanceNotFound: If no instance has this address
        """


class MetricsProvider(ABC):
    """Fetches a CPU utilization series for one instance"""

    @abstractmethod
    def fetch(self, instance_id: str, window: Window, period: int) -> RawMetricResult:
        """Return the raw series for instance_id over window at the given period

        Raises:
            ProviderError: If the provider call fails
        """
