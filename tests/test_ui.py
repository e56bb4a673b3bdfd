# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Tests for interactive selection helpers"""

import pytest

from ec2_cpu_usage.core.time_window import TimeRange
from ec2_cpu_usage.utils import ui


@pytest.mark.parametrize("seconds,expected", [
    (60, '1 minute'),
    (300, '5 minutes'),
    (3600, '1 hour'),
    (43200, '12 hours'),
    (86400, '1 day'),
    (90, '90 seconds'),
])
def test_format_period(seconds, expected):
    """Periods display in their largest whole unit"""
    assert ui.format_period(seconds) == expected


def test_select_time_range_retries_bad_input(monkeypatch, capsys):
    """Invalid and out-of-range answers re-prompt"""
    answers = iter(['x', '9', '4'])
    monkeypatch.setattr('builtins.input', lambda prompt: next(answers))

    assert ui.select_time_range() is TimeRange.LastDay
    out = capsys.readouterr().out
    assert 'Please enter a valid number' in out
    assert 'Please enter a number between 1 and 5' in out


def test_select_period(monkeypatch):
    """Numbered choice maps onto the period options"""
    monkeypatch.setattr('builtins.input', lambda prompt: '2')
    assert ui.select_period() == 300


def test_cancel_exits(monkeypatch):
    """Ctrl+D cancels the selection"""
    def raise_eof(prompt):
        raise EOFError
    monkeypatch.setattr('builtins.input', raise_eof)
    with pytest.raises(SystemExit):
        ui.select_period()
