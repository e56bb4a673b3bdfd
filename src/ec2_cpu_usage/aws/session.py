# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""boto3 client construction"""

import boto3
from botocore.config import Config


def create_client(service, region=None, profile=None, connect_timeout=5, read_timeout=30):
    """Create a boto3 client that makes a single attempt per call

    Args:
        service: AWS service name ('ec2', 'cloudwatch')
        region: AWS region, or None for the default resolution chain
        profile: Named credentials profile, or None for the default
        connect_timeout: Connection timeout in seconds
        read_timeout: Read timeout in seconds
    """
    session = boto3.Session(profile_name=profile, region_name=region)
    config = Config(
        retries={'total_max_attempts': 1, 'mode': 'standard'},
        connect_timeout=connect_timeout,
        read_timeout=read_timeout
    )
    return session.client(service, config=config)
