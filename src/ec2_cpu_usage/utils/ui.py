# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Interactive selection of time range and sampling period"""

import sys

from ec2_cpu_usage.core.request import PERIOD_OPTIONS
from ec2_cpu_usage.core.time_window import TimeRange


def select_from_list(
    prompt: str,
    options: list,
    allow_cancel: bool = True,
    display_fn=None,
    input_prompt: str = None
):
    """Generic numbered selection from list

    Args:
        prompt: Prompt message
        options: List of options
        allow_cancel: Allow cancellation with Ctrl+C
        display_fn: Optional function to format each option for display
        input_prompt: Optional custom input prompt (default: "Select (1-N):")

    Returns:
        Selected option
    """
    print(f"\n{prompt}")
    for i, option in enumerate(options, 1):
        display_text = display_fn(option) if display_fn else str(option)
        print(f"  {i}. {display_text}")

    actual_prompt = input_prompt or f"\nSelect (1-{len(options)}): "

    while True:
        try:
            choice = int(input(actual_prompt))
            if 1 <= choice <= len(options):
                return options[choice - 1]
            print(f"Please enter a number between 1 and {len(options)}")
        except ValueError:
            print("Please enter a valid number")
        except (KeyboardInterrupt, EOFError):
            if allow_cancel:
                print("\nSelection cancelled.", file=sys.stderr)
                sys.exit(1)
            raise


def format_period(seconds: int) -> str:
    """60 -> '1 minute', 7200 -> '2 hours'"""
    for unit_seconds, unit in ((86400, 'day'), (3600, 'hour'), (60, 'minute')):
        if seconds >= unit_seconds and seconds % unit_seconds == 0:
            count = seconds // unit_seconds
            return f"{count} {unit}" if count == 1 else f"{count} {unit}s"
    return f"{seconds} seconds"


def select_time_range() -> TimeRange:
    return select_from_list(
        "Time range:",
        list(TimeRange),
        display_fn=lambda r: r.label,
        input_prompt=f"\nSelect time range (1-{len(TimeRange)}): "
    )


def select_period() -> int:
    return select_from_list(
        "Sampling interval:",
        PERIOD_OPTIONS,
        display_fn=format_period,
        input_prompt=f"\nSelect interval (1-{len(PERIOD_OPTIONS)}): "
    )
