# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""AWS EC2 operations: instance lookup by private IP address"""

import logging

from botocore.exceptions import BotoCoreError, ClientError

from ec2_cpu_usage.core.errors import InstanceNotFound, ProviderError
from ec2_cpu_usage.core.interfaces import InstanceDirectory

logger = logging.getLogger(__name__)


class Ec2InstanceDirectory(InstanceDirectory):
    """Resolves private IP addresses to EC2 instance ids"""

    def __init__(self, ec2_client):
        self.ec2_client = ec2_client

    def lookup(self, ip_address):
        """Get the id of the instance owning a private IP address

        Terminated instances are skipped. When several instances match,
        a running one is preferred, otherwise the first returned.

        Raises:
            InstanceNotFound: If no live instance has this address
            ProviderError: If the DescribeInstances call fails
        """
        logger.debug(f"Looking up instance for IP {ip_address}")
        try:
            instances = []
            paginator = self.ec2_client.get_paginator('describe_instances')
            for page in paginator.paginate(Filters=[{'Name': 'private-ip-address', 'Values': [ip_address]}]):
                for reservation in page.get('Reservations', []):
                    instances.extend(reservation.get('Instances', []))
        except (ClientError, BotoCoreError) as e:
            raise ProviderError(str(e)) from e

        candidates = [i for i in instances if _state(i) != 'terminated']
        if not candidates:
            raise InstanceNotFound(ip_address)

        if len(candidates) > 1:
            logger.info(f"  {len(candidates)} instances match {ip_address}, preferring a running one")
            running = [i for i in candidates if _state(i) == 'running']
            if running:
                candidates = running

        return candidates[0]['InstanceId']


def _state(instance):
    return instance.get('State', {}).get('Name')
