# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Error taxonomy for CPU usage retrieval

Every failure raised while serving a request is a MetricsError subclass, so
callers can catch the whole category while still telling the kinds apart.
"""


class MetricsError(Exception):
    """Base class for all caller-facing CPU usage errors"""


class InvalidTimeRange(MetricsError):
    """Raised when a time range label is not one of the supported ranges"""

    def __init__(self, label):
        self.label = label
        super().__init__(f"Invalid time range: {label!r}")


class InstanceNotFound(MetricsError):
    """Raised when no instance owns the requested IP address"""

    def __init__(self, ip_address):
        self.ip_address = ip_address
        super().__init__(f"No instance found for IP address {ip_address}")


class ProviderError(MetricsError):
    """Raised when an AWS API call fails; keeps the underlying message"""

    def __init__(self, message):
        self.message = message
        super().__init__(f"Metrics provider error: {message}")


class MissingData(MetricsError):
    """Raised when the provider response lacks timestamps or values"""

    def __init__(self, field):
        self.field = field
        super().__init__(f"Invalid metric data: missing {field}")


class EmptyData(MetricsError):
    """Raised when the provider returned no data points"""

    def __init__(self, field):
        self.field = field
        super().__init__(f"No metric data returned: {field} is empty")


class InvalidRequest(MetricsError):
    """Raised when an inbound request field fails validation"""

    def __init__(self, field, reason):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")
