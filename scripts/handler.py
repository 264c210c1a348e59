#!/usr/bin/env python3
"""Sensu handler entrypoint — reads one event on stdin and creates an Opsgenie alert.

Usage::

    # Generic alert with priority P2
    sensu-event | python scripts/handler.py --apiKey KEY --priority 2

    # Fixed "service stopped" alert
    sensu-event | python scripts/handler.py -a KEY --variant fixed_condition

    # Custom config file and EU endpoint
    python scripts/handler.py -a KEY --config config/settings.yaml \\
        --api-url https://api.eu.opsgenie.com < event.json
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import BinaryIO

import structlog

from sensu_opsgenie.alerts.client import AlertClient, OpsgenieClient
from sensu_opsgenie.core.config import load_settings
from sensu_opsgenie.core.exceptions import ConfigError, HandlerError, UsageError
from sensu_opsgenie.core.logging import setup_logging
from sensu_opsgenie.pipeline import AlertPipeline

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="handler-opsgenie",
        description="An Opsgenie handler built for use with Sensu.",
    )
    parser.add_argument(
        "-a",
        "--apiKey",
        dest="api_key",
        default=None,
        help="The apiKey for the Opsgenie integration",
    )
    parser.add_argument(
        "-p",
        "--priority",
        default=None,
        help="The Opsgenie priority to create this alert with, options are 1 through 5",
    )
    parser.add_argument(
        "--variant",
        choices=["generic", "fixed_condition"],
        default=None,
        help="Alert derivation policy (default: from config, else generic)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to settings YAML (default: config/settings.yaml)",
    )
    parser.add_argument(
        "--api-url",
        default=None,
        help="Opsgenie API endpoint, e.g. https://api.eu.opsgenie.com",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level override: DEBUG, INFO, WARNING, ERROR",
    )
    parser.add_argument("extra", nargs="*", help=argparse.SUPPRESS)
    return parser


async def run(
    args: argparse.Namespace,
    stdin: BinaryIO,
    client: AlertClient | None = None,
) -> str:
    """Load settings, run the pipeline once and return the request id."""
    settings = load_settings(args.config).with_overrides(
        api_key=args.api_key,
        api_url=args.api_url,
        priority=args.priority,
        variant=args.variant,
    )
    setup_logging(settings.logging, level=args.log_level)
    logger.info(
        "handler_starting",
        variant=settings.policy.kind,
        api_url=settings.opsgenie.api_url,
    )

    if not settings.opsgenie.api_key.get_secret_value():
        raise ConfigError("an Opsgenie API key is required (--apiKey)")

    client = client or OpsgenieClient(settings.opsgenie)
    pipeline = AlertPipeline(settings, client)
    try:
        return await pipeline.run(stdin)
    finally:
        await client.close()


def main(
    argv: list[str] | None = None,
    stdin: BinaryIO | None = None,
    client: AlertClient | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.extra:
            parser.print_help()
            raise UsageError("invalid argument(s) received")
        request_id = asyncio.run(run(args, stdin or sys.stdin.buffer, client))
    except HandlerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Create request ID: {request_id}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
