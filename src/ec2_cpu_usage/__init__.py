# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""EC2 CPU Usage - CPU utilization time series for EC2 instances by private IP"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ec2-cpu-usage")
except PackageNotFoundError:
    __version__ = "0.0.0"
__all__ = ["__version__"]
