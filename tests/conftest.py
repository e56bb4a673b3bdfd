# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures"""

import pytest

ENV_VARS = [
    'AWS_REGION',
    'AWS_DEFAULT_REGION',
    'AWS_PROFILE',
    'EC2_CPU_USAGE_LOG_LEVEL',
    'EC2_CPU_USAGE_CONFIG',
    'EC2_CPU_USAGE_DATA_DIR',
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No AWS or app environment, and no user config file"""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr('ec2_cpu_usage.utils.paths.user_config_dir', lambda app: str(tmp_path / 'config'))
    monkeypatch.setattr('ec2_cpu_usage.utils.paths.user_data_dir', lambda app: str(tmp_path / 'data'))
    return monkeypatch
