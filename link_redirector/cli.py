#!/usr/bin/env python3
"""
Command-line interface for the link redirector.

Operates directly on the configured store, bypassing HTTP.

Usage:
    link-redirector-cli create <url> [--secret S]
    link-redirector-cli resolve <identifier>
    link-redirector-cli health
"""

import argparse
import asyncio
import json
import os
import sys
from typing import Optional

from .app import build_service
from .common.logging_config import setup_logging
from .config import load_config
from .errors import LinkRedirectorError
from .service import LinkRedirectorService


class LinkRedirectorCLI:
    """Command-line interface for the link redirector."""

    def __init__(self, service: LinkRedirectorService):
        """Initialize CLI."""
        self.service = service

    async def cleanup(self):
        """Cleanup resources."""
        await self.service.close()

    async def create(self, url: str, secret: Optional[str]) -> int:
        """Create a link."""
        try:
            identifier = await self.service.create_link(link=url, secret=secret)

            print(json.dumps({
                "success": True,
                "identifier": identifier,
                "destination": url,
            }, indent=2))

            return 0

        except LinkRedirectorError as e:
            print(json.dumps({
                "success": False,
                "status": e.status_code,
                "error": str(e),
            }, indent=2), file=sys.stderr)
            return 1

    async def resolve(self, identifier: str) -> int:
        """Look up the destination for an identifier."""
        try:
            destination = await self.service.resolve_link(identifier)
        except LinkRedirectorError as e:
            print(json.dumps({
                "success": False,
                "status": e.status_code,
                "error": str(e),
            }, indent=2), file=sys.stderr)
            return 1

        if destination is None:
            print(json.dumps({
                "success": False,
                "status": 404,
                "error": f"Identifier '{identifier}' not found",
            }, indent=2), file=sys.stderr)
            return 1

        print(json.dumps({
            "success": True,
            "identifier": identifier,
            "destination": destination,
        }, indent=2))
        return 0

    async def health(self) -> int:
        """Check store health."""
        health_status = await self.service.health_check()

        print(json.dumps({
            "success": health_status["overall"],
            "health": health_status,
        }, indent=2))

        return 0 if health_status["overall"] else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Link Redirector CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create a link (secret defaults to the SECRET env var)
  %(prog)s create https://example.com/long/url --secret S1

  # Look up a destination
  %(prog)s resolve AZqLkQ8t9w0

  # Check store health
  %(prog)s health
        """
    )

    parser.add_argument(
        "--store-url",
        default=None,
        help="Store URL (default: from STORE_URL env or memory://)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    create_parser = subparsers.add_parser("create", help="Create a link")
    create_parser.add_argument("url", help="Destination URL")
    create_parser.add_argument("--secret", default=os.getenv("SECRET"), help="Shared secret")

    resolve_parser = subparsers.add_parser("resolve", help="Resolve an identifier")
    resolve_parser.add_argument("identifier", help="Identifier to look up")

    subparsers.add_parser("health", help="Check store health")

    return parser


async def run(argv=None) -> int:
    """Parse arguments and execute the command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    overrides = {"store_url": args.store_url} if args.store_url else {}
    config = load_config(**overrides)
    logger = setup_logging(level="DEBUG" if args.verbose else "WARNING")

    cli = LinkRedirectorCLI(build_service(config, logger))

    try:
        if args.command == "create":
            return await cli.create(args.url, args.secret)
        elif args.command == "resolve":
            return await cli.resolve(args.identifier)
        elif args.command == "health":
            return await cli.health()
        else:
            parser.print_help()
            return 1

    finally:
        await cli.cleanup()


def main(argv=None) -> int:
    """Console script entry point."""
    return asyncio.run(run(argv))


if __name__ == "__main__":
    sys.exit(main())
