# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Unified CLI entry point for ec2-cpu-usage."""

import sys
import json
import logging
import traceback
import argparse

from ec2_cpu_usage.core.errors import MetricsError
from ec2_cpu_usage.core.output_generator import FORMATS
from ec2_cpu_usage.utils.config import ConfigError, load_settings

logger = logging.getLogger(__name__)


def build_orchestrator(settings):
    """Wire boto3-backed collaborators into a MetricsOrchestrator."""
    from ec2_cpu_usage.aws.session import create_client
    from ec2_cpu_usage.aws.ec2 import Ec2InstanceDirectory
    from ec2_cpu_usage.aws.cloudwatch import CloudWatchMetricsProvider
    from ec2_cpu_usage.core.orchestrator import MetricsOrchestrator

    client_args = {
        'region': settings.region,
        'profile': settings.profile,
        'connect_timeout': settings.connect_timeout,
        'read_timeout': settings.read_timeout,
    }
    directory = Ec2InstanceDirectory(create_client('ec2', **client_args))
    provider = CloudWatchMetricsProvider(create_client('cloudwatch', **client_args))
    return MetricsOrchestrator(directory, provider)


def _resolve_range_and_period(args, settings):
    """Take range/period from args, else prompt on a terminal, else config defaults."""
    from ec2_cpu_usage.utils.ui import select_time_range, select_period

    interactive = sys.stdin.isatty() and not getattr(args, 'no_input', False)

    time_range = args.range
    if time_range is None:
        time_range = select_time_range() if interactive else settings.default_time_range

    period = args.period
    if period is None:
        period = select_period() if interactive else settings.default_period

    return time_range, period


def cmd_query(args, settings):
    """Fetch CPU usage for an instance and print or save it."""
    from ec2_cpu_usage.core.request import CpuUsageRequest
    from ec2_cpu_usage.core.statistics import summarize

    time_range, period = _resolve_range_and_period(args, settings)
    request = CpuUsageRequest.create(args.ip_address, time_range, period)

    orchestrator = build_orchestrator(settings)
    logger.info(f"Retrieving CPU usage for {request.ip_address} ({request.time_range.label}, {request.period}s)...")

    usage = orchestrator.fetch_usage(request.ip_address, request.time_range, request.period)
    query, result = usage.query, usage.result
    summary = summarize(result)

    logger.info(
        f"  Average {summary.average:.2f}% | Max {summary.maximum:.2f}% | "
        f"p95 {summary.percentile95:.2f}% | {summary.periods_above_threshold} period(s) above {summary.threshold:.0f}%"
    )

    output_dir = args.output_dir or settings.output_dir
    if output_dir:
        from ec2_cpu_usage.core.output_generator import OutputGenerator
        from ec2_cpu_usage.utils.paths import get_writable_dir

        formats = FORMATS if args.format == 'all' else (args.format,)
        generator = OutputGenerator(str(get_writable_dir(output_dir)))
        generator.generate(request, query.instance_id, query.window, query.period, result, summary, formats)
        logger.info(f"\nCompleted! Results saved to: {output_dir}")
    else:
        print(json.dumps(result.to_dict(), indent=2))


def cmd_plan(args, settings):
    """Show the window and effective period a query would use."""
    from ec2_cpu_usage.core.orchestrator import MetricsOrchestrator
    from ec2_cpu_usage.core.period_advisor import expected_points
    from ec2_cpu_usage.core.request import validate_period

    time_range, period = _resolve_range_and_period(args, settings)
    period = validate_period(period)

    # plan() never touches the collaborators
    window, effective = MetricsOrchestrator(None, None).plan(time_range, period)
    print(json.dumps({
        'start': window.start.isoformat(),
        'end': window.end.isoformat(),
        'requested_period': period,
        'period': effective,
        'data_points': expected_points(window, effective),
    }, indent=2))


def cmd_ranges(args, settings):
    """List supported time ranges."""
    from ec2_cpu_usage.core.time_window import TimeRange

    for time_range in TimeRange:
        print(f"  {time_range.label:<14} {time_range.seconds:>7}s  ({time_range.name})")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='ecu',
        description='EC2 CPU Usage - CPU utilization time series for an EC2 instance by private IP'
    )
    parser.add_argument('--config', help='Path to YAML config file')
    subparsers = parser.add_subparsers(dest='command')

    # query
    p_query = subparsers.add_parser('query', help='Fetch CPU usage for an instance')
    p_query.add_argument('ip_address', help='Private IP address of the instance')
    p_query.add_argument('-r', '--range', help="Time range, e.g. 'Last Hour' (default: prompt or config)")
    p_query.add_argument('-p', '--period', type=int, help='Sampling interval in seconds (default: prompt or config)')
    p_query.add_argument('-o', '--output-dir', help='Directory to save reports (default: print JSON)')
    p_query.add_argument('--format', choices=FORMATS + ('all',), default='all',
                         help='Report format when saving (default: all)')
    p_query.add_argument('--region', help='AWS region (overrides config)')
    p_query.add_argument('--profile', help='AWS credentials profile (overrides config)')
    p_query.add_argument('--no-input', action='store_true', help='Never prompt; use config defaults')
    p_query.set_defaults(func=cmd_query)

    # plan
    p_plan = subparsers.add_parser('plan', help='Show the query window and effective period')
    p_plan.add_argument('-r', '--range', help="Time range, e.g. 'Last Day'")
    p_plan.add_argument('-p', '--period', type=int, help='Sampling interval in seconds')
    p_plan.add_argument('--no-input', action='store_true', help='Never prompt; use config defaults')
    p_plan.set_defaults(func=cmd_plan)

    # ranges
    p_ranges = subparsers.add_parser('ranges', help='List supported time ranges')
    p_ranges.set_defaults(func=cmd_ranges)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        settings = load_settings(args.config)
    except ConfigError as e:
        logging.basicConfig(level=logging.INFO, format='%(message)s')
        logger.error(f"Error: {e}")
        sys.exit(1)

    logging.basicConfig(level=getattr(logging, settings.log_level.upper()), format='%(message)s')

    overrides = {k: getattr(args, k) for k in ('region', 'profile') if getattr(args, k, None)}
    if overrides:
        from dataclasses import replace
        settings = replace(settings, **overrides)

    try:
        args.func(args, settings)
    except MetricsError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("\nOperation cancelled by user.")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}")
        traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    main()
