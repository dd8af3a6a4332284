"""
Entry point for the starr command line.

    python -m starr status radarr
    python -m starr event
"""

import argparse
import asyncio
import dataclasses
import json
import logging
import sys
from typing import Optional

from .application.exceptions import StarrError
from .infrastructure.containers import SERVICES, Container
from .starrcmd.event import CmdEvent, record_for

logger = logging.getLogger(__name__)


def setup_logging(level: str):
    """Applies basic logging configuration."""
    logging.basicConfig(level=level)


def _log_level(container: Container, override: Optional[str]) -> str:
    if override:
        return override.upper()
    return str(container.config().get("logging", {}).get("level", "INFO")).upper()


async def show_status(container: Container, service: str):
    """Prints the system status of one configured service as JSON."""

    async with getattr(container, service)() as handle:
        status = await handle.get_system_status()

    print(status.model_dump_json(by_alias=True, exclude_none=True, indent=2))


def show_event():
    """Prints the custom-script event found in the environment as JSON."""

    event = CmdEvent.from_environ()
    record_cls = record_for(event)
    record = event.get(record_cls) if record_cls else None

    output = {
        "app": str(event.app),
        "eventType": str(event.type),
        "record": dataclasses.asdict(record) if record is not None else None,
    }
    print(json.dumps(output, indent=2, default=str))


async def run_application(args: argparse.Namespace):
    """Wires and runs the requested command using the DI container."""

    container = Container()
    container.cli_args.from_dict(vars(args))
    setup_logging(level=_log_level(container, args.log_level))

    try:
        if args.command == "status":
            await show_status(container, args.service)
        else:
            show_event()
    except StarrError as e:
        logger.error(f"An application error occurred: {e}")
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Starr service client")

    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level, e.g. DEBUG. Defaults to the [logging] setting.",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    status = commands.add_parser("status", help="Print a service's system status.")
    status.add_argument("service", choices=SERVICES, help="The configured service to query.")

    commands.add_parser("event", help="Decode the custom-script event in the environment.")

    return parser


if __name__ == "__main__":
    cli_args = build_parser().parse_args()

    asyncio.run(run_application(cli_args))
