# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Path resolution for config and result files using platformdirs."""

import os
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

APP_NAME = "ec2-cpu-usage"
DATA_DIR_ENV_VAR = "EC2_CPU_USAGE_DATA_DIR"
CONFIG_ENV_VAR = "EC2_CPU_USAGE_CONFIG"
CONFIG_FILENAME = "config.yml"


def get_user_data_dir() -> Path:
    """Get writable user data directory (env var or platformdirs)."""
    if custom := os.environ.get(DATA_DIR_ENV_VAR):
        return Path(custom).expanduser()
    return Path(user_data_dir(APP_NAME))


def get_config_path() -> Path | None:
    """Get the config file to load, if any.

    Priority: env var → platformdirs user config dir. Returns None when
    neither points at an existing file.
    """
    if custom := os.environ.get(CONFIG_ENV_VAR):
        return Path(custom).expanduser()

    default = Path(user_config_dir(APP_NAME)) / CONFIG_FILENAME
    if default.exists():
        return default
    return None


def get_default_results_dir() -> Path:
    """Get default results directory (user data dir / results)."""
    return get_user_data_dir() / "results"


def get_writable_dir(path) -> Path:
    """Expand and create a directory for writing results."""
    directory = Path(path).expanduser()
    directory.mkdir(parents=True, exist_ok=True)
    return directory
