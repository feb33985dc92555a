#!/usr/bin/env python3
"""
pushtrigger CLI - Invoke a push trigger callback from the command line
"""

import argparse
import asyncio
import json
import sys
from typing import Any, List, Optional

import httpx

from pushtrigger import __version__
from pushtrigger.domain.entities import Callback
from pushtrigger.domain.errors import PushTriggerError
from pushtrigger.domain.value_objects import NO_OUTPUT
from pushtrigger.infrastructure.config import get_settings
from pushtrigger.infrastructure.http import CallbackClient
from pushtrigger.infrastructure.logging import configure_logging, get_logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments"""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="pushtrigger-invoke",
        description="Invoke a push trigger callback to resume a waiting workflow"
    )

    parser.add_argument(
        "url",
        type=str,
        help="Callback URL, optionally with inline user:password credentials"
    )

    body_group = parser.add_mutually_exclusive_group()
    body_group.add_argument(
        "--body", "-b",
        type=str,
        help="Trigger output as JSON string (omit to resume without outputs)"
    )
    body_group.add_argument(
        "--body-file", "-f",
        type=str,
        help="Read trigger output from JSON file"
    )

    parser.add_argument(
        "--timeout", "-t",
        type=float,
        default=settings.request_timeout,
        help=f"Request timeout in seconds (default: {settings.request_timeout:g})"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet mode, only print the response body"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})"
    )
    parser.add_argument(
        "--log-format",
        choices=["text", "json"],
        default=settings.log_format,
        help=f"Logging format (default: {settings.log_format})"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser.parse_args(argv)


def parse_json(text: str, source: str) -> Any:
    """Parse a JSON document, exiting with status 2 when invalid"""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {source}: {e}", file=sys.stderr)
        sys.exit(2)


def read_json_file(file_path: str) -> Any:
    """Read and parse a JSON file"""
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            content = f.read()
    except FileNotFoundError:
        print(f"Error: File not found: {file_path}", file=sys.stderr)
        sys.exit(2)
    except OSError as e:
        print(f"Error reading file {file_path}: {e}", file=sys.stderr)
        sys.exit(2)

    return parse_json(content, f"file {file_path}")


def load_output(args: argparse.Namespace) -> Any:
    """Resolve the trigger output from --body or --body-file"""
    if args.body_file:
        return read_json_file(args.body_file)
    if args.body is not None:
        return parse_json(args.body, "--body")
    return NO_OUTPUT


async def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI function"""
    args = parse_args(argv)

    configure_logging(log_level=args.log_level, log_format=args.log_format)
    logger = get_logger(__name__)

    output = load_output(args)

    async with CallbackClient(timeout=args.timeout) as client:
        try:
            callback = Callback(args.url, callback_client=client)
            response = await callback.invoke(output)
        except PushTriggerError as e:
            print(f"Error: {e.message}", file=sys.stderr)
            sys.exit(2)
        except httpx.HTTPError as e:
            print(f"Error: Request to callback failed: {e}", file=sys.stderr)
            sys.exit(1)

    logger.info(
        "Callback invoked",
        endpoint=str(callback.raw_endpoint),
        status_code=response.status_code,
    )

    if not args.quiet:
        print(f"{response.status_code} {response.reason_phrase}")
    if response.text:
        print(response.text)

    sys.exit(0 if response.is_success else 1)


def entry_point():
    """CLI entry point"""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    entry_point()
