# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Settings loading from YAML config file and environment"""

import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Optional

import yaml

from ec2_cpu_usage.core.errors import InvalidTimeRange
from ec2_cpu_usage.core.time_window import TimeRange
from ec2_cpu_usage.utils.paths import get_config_path

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV_VAR = "EC2_CPU_USAGE_LOG_LEVEL"
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigError(Exception):
    """Raised when the config file or environment holds invalid settings"""


@dataclass(frozen=True)
class Settings:
    region: Optional[str] = None
    profile: Optional[str] = None
    default_time_range: str = TimeRange.LastHour.label
    default_period: int = 300
    output_dir: Optional[str] = None
    log_level: str = 'INFO'
    connect_timeout: int = 5
    read_timeout: int = 30


def load_yaml(filepath):
    """Load YAML file with UTF-8 encoding

    Returns:
        dict: Parsed YAML data ({} for an empty file)
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_settings(path=None) -> Settings:
    """Load settings: defaults, then config file, then environment

    Args:
        path: Explicit config file; otherwise $EC2_CPU_USAGE_CONFIG or the
              platformdirs user config file, if present

    Raises:
        ConfigError: If the file is unreadable or a value is invalid
    """
    path = path or get_config_path()
    data = {}
    if path is not None:
        logger.debug(f"Loading config from {path}")
        try:
            data = load_yaml(path)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    settings = replace(Settings(), **data)
    settings = _apply_env_overrides(settings)
    _validate(settings)
    return settings


def _apply_env_overrides(settings):
    overrides = {}
    region = os.environ.get('AWS_REGION') or os.environ.get('AWS_DEFAULT_REGION')
    if region:
        overrides['region'] = region
    if profile := os.environ.get('AWS_PROFILE'):
        overrides['profile'] = profile
    if log_level := os.environ.get(LOG_LEVEL_ENV_VAR):
        overrides['log_level'] = log_level.upper()
    return replace(settings, **overrides)


def _validate(settings):
    try:
        TimeRange.parse(settings.default_time_range)
    except InvalidTimeRange as e:
        raise ConfigError(f"default_time_range: {e}") from e

    for name in ('default_period', 'connect_timeout', 'read_timeout'):
        value = getattr(settings, name)
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ConfigError(f"{name} must be a positive integer, got {value!r}")

    if str(settings.log_level).upper() not in LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {settings.log_level!r}")
