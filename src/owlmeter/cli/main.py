"""
Command-line interface for owlmeter.

Runs a program under monitoring, then prints its resource metrics and the
estimated cost of running it on AWS Lambda, ECS Fargate and EKS Fargate.

    owlmeter [--region REGION] [--json] [--config PATH] command [args...]
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..config import get_config, set_config_path
from ..config.validators import LOG_LEVELS
from ..executor import RunError
from ..pricing import AwsRegion
from ..validation import ValidationError, handle_cli_error, validate_enum_choice
from .orchestrator import RunOrchestrator
from .report import format_text_report, report_to_dict

# --- Logging Setup ---
# Logs go to stderr so stdout carries only the report.
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)-5.5s] %(name)s:%(filename)s:%(lineno)d\t %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="owlmeter",
        description="Run a program, measure its CPU, memory and network usage, "
                    "and estimate what it would cost to run on AWS.",
        epilog="Example: owlmeter --region eu-west-1 python3 script.py arg1 arg2",
    )
    parser.add_argument(
        "-r",
        "--region",
        type=str,
        help=f"AWS region for pricing. Available: {', '.join(AwsRegion.identifiers())}. "
             "Defaults to pricing.default_region from config.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to a config.toml file.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON instead of text.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Override general.log_level from config (DEBUG, INFO, WARNING, ...).",
    )
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="Program to run, followed by its arguments.",
    )
    return parser


def main_cli(argv: Optional[List[str]] = None) -> None:
    """
    Main command-line entry point.

    Raises:
        SystemExit: On usage errors, configuration errors, spawn failures
                    or a non-zero exit of the monitored program.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    command = list(args.command)
    if command and command[0] == "--":
        command = command[1:]
    if not command:
        parser.print_usage(sys.stderr)
        print("owlmeter: error: a command to run is required", file=sys.stderr)
        sys.exit(1)

    if args.config:
        set_config_path(args.config)

    try:
        app_config = get_config()
    except (FileNotFoundError, ValidationError, ValueError) as e:
        handle_cli_error(error=e, context="configuration loading", exit_code=1, logger=logger)

    try:
        log_level = validate_enum_choice(
            args.log_level or app_config.general.log_level,
            choices=LOG_LEVELS,
            field_name="--log-level",
            case_sensitive=False,
        )
    except ValidationError as e:
        handle_cli_error(error=e, context="argument validation", exit_code=1, logger=logger)
    logging.getLogger().setLevel(log_level)

    try:
        region = AwsRegion.from_identifier(args.region or app_config.pricing.default_region)
    except ValidationError as e:
        handle_cli_error(error=e, context="region selection", exit_code=1, logger=logger)

    logger.info(f"Monitoring '{' '.join(command)}' (pricing region {region.value})")
    try:
        orchestrator = RunOrchestrator(command, monitor_config=app_config.monitor)
        result = orchestrator.run(region)
    except RunError as e:
        handle_cli_error(error=e, context="execution", exit_code=1, logger=logger)

    if args.json:
        print(json.dumps(report_to_dict(result.metrics, result.costs), indent=2))
    else:
        print(format_text_report(result.metrics, result.costs))


if __name__ == "__main__":
    main_cli()
