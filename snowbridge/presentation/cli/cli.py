"""
CLI Module

Architectural Intent:
- Command-line interface for snowbridge
- Runs one adapter operation (connect, get, post) against the configured instance
- Delegates to the adapter via composition root
- Supports --verbose/--debug flags for log level control
"""

import argparse
import asyncio
import json
import logging
import sys
import traceback

from snowbridge.composition_root import create_container
from snowbridge.domain.events.event_base import DomainEvent
from snowbridge.domain.exceptions import ConfigurationError
from snowbridge.domain.ports.http_transport_port import HttpResponse
from snowbridge.infrastructure.config import load_config
from snowbridge.infrastructure.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="snowbridge: ServiceNow change request adapter"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output with tracebacks"
    )
    parser.add_argument(
        "--config", "-c", default=None, help="Path to snowbridge.json"
    )
    parser.add_argument(
        "--json-logs", action="store_true", help="Emit logs as JSON lines"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser(
        "connect", help="Run a health check and report ONLINE or OFFLINE"
    )
    subparsers.add_parser("get", help="Read one change request")

    post_parser = subparsers.add_parser("post", help="Create a change request")
    post_parser.add_argument(
        "--payload", "-p", default=None, help="JSON object with the record fields"
    )
    return parser


def _format(data) -> str:
    if isinstance(data, HttpResponse):
        return f"HTTP {data.status_code}: {data.body}"
    return json.dumps(data, indent=2, default=str)


async def async_main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    config = load_config(args.config)

    # Configure logging based on flags
    if args.debug:
        configure_logging(level=logging.DEBUG, json_format=args.json_logs or config.log_json)
    elif args.verbose:
        configure_logging(level=logging.INFO, json_format=args.json_logs or config.log_json)
    else:
        configure_logging(level=config.log_level, json_format=args.json_logs or config.log_json)

    verbose = args.verbose or args.debug

    payload = None
    if args.command == "post" and args.payload:
        try:
            payload = json.loads(args.payload)
        except json.JSONDecodeError as e:
            print(f"[-] Invalid payload: {e}")
            return 1
        if not isinstance(payload, dict):
            print("[-] Invalid payload: expected a JSON object")
            return 1

    try:
        container = create_container(config)
    except (ConfigurationError, ValueError) as e:
        print(f"[-] Configuration error: {e}")
        return 1

    await container.telemetry.initialize()
    adapter = container.adapter

    async def on_status(event: DomainEvent) -> None:
        print(f"[*] {event.event_name}: {adapter.id}")

    container.event_bus.subscribe("ONLINE", on_status)
    container.event_bus.subscribe("OFFLINE", on_status)

    try:
        if args.command == "connect":
            data, error = await adapter.connect()
        elif args.command == "get":
            data, error = await adapter.get_record()
        else:
            data, error = await adapter.post_record(payload=payload)
    except Exception as e:
        print(f"[-] {args.command} failed: {e}")
        if verbose:
            traceback.print_exc()
        return 1
    finally:
        await container.telemetry.export()
        await container.transport.aclose()

    if error is not None:
        print("[-] " + (_format(error) if isinstance(error, HttpResponse) else str(error)))
        return 1

    print("[+] " + _format(data))
    return 0


def main():
    sys.exit(asyncio.run(async_main()))


if __name__ == "__main__":
    main()
