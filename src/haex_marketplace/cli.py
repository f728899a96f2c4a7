"""Command-line interface for browsing the Haex Marketplace."""

import argparse
import asyncio
import json
import logging
import sys
from typing import get_args

import aiohttp
from dotenv import load_dotenv
from pydantic import BaseModel

from haex_marketplace.client import MarketplaceApiError, MarketplaceClient
from haex_marketplace.models import SortOrder, dump_response
from haex_marketplace.utils import setup_logging

logger = logging.getLogger(__name__)


async def list_command(client: MarketplaceClient, args) -> BaseModel:
    """Handle the list subcommand."""
    return await client.extensions.list(
        page=args.page,
        limit=args.limit,
        category=args.category,
        search=args.search,
        tags=args.tags,
        sort=args.sort,
        publisher=args.publisher,
    )


async def show_command(client: MarketplaceClient, args) -> BaseModel:
    """Handle the show subcommand."""
    return await client.extensions.get(args.slug)


async def categories_command(client: MarketplaceClient, args) -> BaseModel:
    """Handle the categories subcommand."""
    return await client.categories.list()


async def download_url_command(client: MarketplaceClient, args) -> BaseModel:
    """Handle the download-url subcommand."""
    return await client.extensions.download_url(args.slug, args.version)


async def versions_command(client: MarketplaceClient, args) -> BaseModel:
    """Handle the versions subcommand."""
    return await client.extensions.versions(args.slug)


async def reviews_command(client: MarketplaceClient, args) -> BaseModel:
    """Handle the reviews subcommand."""
    return await client.reviews.list(args.slug, page=args.page, limit=args.limit)


async def health_command(client: MarketplaceClient, args) -> BaseModel:
    """Handle the health subcommand."""
    return await client.health_check()


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all subcommands."""
    parser = argparse.ArgumentParser(
        prog="haex-marketplace", description="Browse the Haex extension marketplace"
    )
    parser.add_argument(
        "--base-url",
        type=str,
        help="Marketplace API URL (default: $HAEX_MARKETPLACE_URL or the production host)",
    )
    parser.add_argument(
        "--platform",
        type=str,
        help="Platform identifier sent with every request (e.g. linux, macos)",
    )
    parser.add_argument(
        "--app-version",
        type=str,
        help="Application version sent with every request",
    )
    parser.add_argument(
        "--env-file",
        type=str,
        default=".env",
        help=".env file to load environment variables from (default: .env)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set the logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List and search extensions")
    list_parser.add_argument("--page", type=int)
    list_parser.add_argument("--limit", type=int)
    list_parser.add_argument("--category", type=str, help="Category slug")
    list_parser.add_argument("--search", type=str, help="Full-text search query")
    list_parser.add_argument("--tags", type=str, help="Comma-separated tags")
    list_parser.add_argument("--sort", choices=get_args(SortOrder))
    list_parser.add_argument("--publisher", type=str, help="Publisher slug")
    list_parser.set_defaults(handler=list_command)

    show_parser = subparsers.add_parser("show", help="Show extension details")
    show_parser.add_argument("slug")
    show_parser.set_defaults(handler=show_command)

    categories_parser = subparsers.add_parser(
        "categories", help="List categories with extension counts"
    )
    categories_parser.set_defaults(handler=categories_command)

    download_parser = subparsers.add_parser(
        "download-url", help="Get a signed download URL for an extension"
    )
    download_parser.add_argument("slug")
    download_parser.add_argument(
        "--version", type=str, help="Specific version (default: latest)"
    )
    download_parser.set_defaults(handler=download_url_command)

    versions_parser = subparsers.add_parser(
        "versions", help="List all versions of an extension"
    )
    versions_parser.add_argument("slug")
    versions_parser.set_defaults(handler=versions_command)

    reviews_parser = subparsers.add_parser(
        "reviews", help="List reviews of an extension"
    )
    reviews_parser.add_argument("slug")
    reviews_parser.add_argument("--page", type=int)
    reviews_parser.add_argument("--limit", type=int)
    reviews_parser.set_defaults(handler=reviews_command)

    health_parser = subparsers.add_parser("health", help="Check API health")
    health_parser.set_defaults(handler=health_command)

    return parser


async def run_command(args) -> BaseModel:
    """Create a client from the parsed arguments and run the chosen subcommand."""
    overrides = {
        key: value
        for key, value in (
            ("base_url", args.base_url),
            ("platform", args.platform),
            ("app_version", args.app_version),
        )
        if value is not None
    }
    async with MarketplaceClient(**overrides) as client:
        logger.debug(f"Running {args.command} against {client.base_url}")
        return await args.handler(client, args)


def main(argv: list[str] | None = None) -> int:
    """Run the command-line interface."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(getattr(logging, args.log_level))

    if load_dotenv(args.env_file):
        logger.info(f"Loaded environment variables from env file at path: {args.env_file}")

    try:
        result = asyncio.run(run_command(args))
    except MarketplaceApiError as e:
        logger.error(f"Marketplace API error (HTTP {e.status_code}): {e.message}")
        return 1
    except (aiohttp.ClientError, TimeoutError) as e:
        logger.error(f"Could not reach the marketplace: {e!r}")
        return 1

    print(json.dumps(dump_response(result), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
