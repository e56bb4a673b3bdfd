# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Tests for settings loading and path resolution"""

import pytest

from ec2_cpu_usage.utils.config import ConfigError, Settings, load_settings
from ec2_cpu_usage.utils.paths import get_config_path, get_default_results_dir


def write_config(tmp_path, text):
    path = tmp_path / 'config.yml'
    path.write_text(text, encoding='utf-8')
    return path


def test_defaults_without_config(clean_env):
    """No file and no environment gives the built-in defaults"""
    assert load_settings() == Settings()


def test_values_from_file(clean_env, tmp_path):
    """YAML keys map onto settings"""
    path = write_config(tmp_path, "region: eu-west-1\ndefault_time_range: Last Day\ndefault_period: 900\n")
    settings = load_settings(path)
    assert settings.region == 'eu-west-1'
    assert settings.default_time_range == 'Last Day'
    assert settings.default_period == 900


def test_config_env_var_and_empty_file(clean_env, tmp_path):
    """$EC2_CPU_USAGE_CONFIG points at the file; an empty file is allowed"""
    path = write_config(tmp_path, "")
    clean_env.setenv('EC2_CPU_USAGE_CONFIG', str(path))
    assert get_config_path() == path
    assert load_settings() == Settings()


def test_environment_overrides_file(clean_env, tmp_path):
    """AWS_REGION, AWS_PROFILE and log level env vars win over the file"""
    path = write_config(tmp_path, "region: eu-west-1\nprofile: dev\nlog_level: INFO\n")
    clean_env.setenv('AWS_REGION', 'us-east-2')
    clean_env.setenv('AWS_PROFILE', 'ops')
    clean_env.setenv('EC2_CPU_USAGE_LOG_LEVEL', 'debug')
    settings = load_settings(path)
    assert settings.region == 'us-east-2'
    assert settings.profile == 'ops'
    assert settings.log_level == 'DEBUG'


@pytest.mark.parametrize("text", [
    "colour: blue\n",
    "default_time_range: Last Month\n",
    "default_period: 0\n",
    "read_timeout: soon\n",
    "log_level: LOUD\n",
    "- just\n- a list\n",
    "region: [unclosed\n",
])
def test_invalid_config_rejected(clean_env, tmp_path, text):
    """Unknown keys, bad values and malformed YAML raise ConfigError"""
    with pytest.raises(ConfigError):
        load_settings(write_config(tmp_path, text))


def test_missing_file_rejected(clean_env, tmp_path):
    """An explicit path that does not exist is an error"""
    with pytest.raises(ConfigError):
        load_settings(tmp_path / 'nope.yml')


def test_results_dir_follows_data_dir_env(clean_env, tmp_path):
    """$EC2_CPU_USAGE_DATA_DIR relocates the results directory"""
    clean_env.setenv('EC2_CPU_USAGE_DATA_DIR', str(tmp_path / 'custom'))
    assert get_default_results_dir() == tmp_path / 'custom' / 'results'
