"""Strata CLI entry points.
This module exposes data store and filtered query commands.
It maps argparse commands onto SDK coroutines.
"""

from __future__ import annotations

import argparse
import asyncio
from dataclasses import replace
import json
from typing import Any, Sequence

from api.client import StrataClient
from core.config import StrataConfig, parse_base_url
from core.constants import QUERY_TOKEN_SEPARATOR
from core.errors import StrataError, StrataValidationError
from model.query_token import Comparator


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="strata", description="Strata data service CLI")
    parser.add_argument("--base-url", help="Override STRATA_BASE_URL for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_namespaces_command(subparsers)
    _add_namespace_command(subparsers)
    _add_delete_namespace_command(subparsers)
    _add_query_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Strata CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = _build_client(args.base_url)
        if args.command == "namespaces":
            return asyncio.run(_run_namespaces_command(client))
        if args.command == "namespace":
            return asyncio.run(_run_namespace_command(client, args))
        if args.command == "delete-namespace":
            return asyncio.run(_run_delete_namespace_command(client, args))
        if args.command == "query":
            return asyncio.run(_run_query_command(client, args))
    except StrataError as error:
        print(f"error={error}")
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(base_url: str | None) -> StrataClient:
    """Build SDK client with optional base-url override.

    Args:
        base_url: Optional override URL.

    Returns:
        Configured SDK client.
    """
    config = StrataConfig.from_env()
    if base_url:
        config = replace(config, base_url=parse_base_url(base_url, source="--base-url"))
    return StrataClient(config)


async def _run_namespaces_command(client: StrataClient) -> int:
    namespaces = await client.data_store.get_all()
    for namespace in namespaces:
        print(namespace)
    return 0


async def _run_namespace_command(client: StrataClient, args: argparse.Namespace) -> int:
    """Handle namespace command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    namespace = await client.data_store.get(args.name, auto_load=not args.no_load)
    print(f"namespace={namespace.namespace}")
    print(f"keys_loaded={str(namespace.keys_loaded).lower()}")
    for key in namespace.keys:
        print(key)
    return 0


async def _run_delete_namespace_command(client: StrataClient, args: argparse.Namespace) -> int:
    await client.data_store.delete(args.name)
    print(f"deleted={args.name}")
    return 0


async def _run_query_command(client: StrataClient, args: argparse.Namespace) -> int:
    """Handle query command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    query = client.resource(args.resource)
    for raw_filter in args.filter or []:
        property_name, comparator, filter_value = _parse_filter_argument(raw_filter)
        getattr(query.filter().on(property_name), comparator.method_name)(filter_value)
    payload = await query.list()
    print(json.dumps(payload, indent=2, sort_keys=True))
    return 0


def _parse_filter_argument(raw_filter: str) -> tuple[str, Comparator, str]:
    """Split a ``property:comparator:value`` argument.

    Args:
        raw_filter: Raw CLI value.

    Returns:
        Property name, comparator and value.

    Raises:
        StrataValidationError: If the argument is malformed.
    """
    parts = raw_filter.split(QUERY_TOKEN_SEPARATOR, 2)
    if len(parts) != 3:
        raise StrataValidationError(
            f"Invalid --filter value '{raw_filter}': expected property:comparator:value."
        )
    property_name, token, filter_value = parts
    try:
        comparator = Comparator(token)
    except ValueError as error:
        supported = ", ".join(member.value for member in Comparator)
        raise StrataValidationError(
            f"Unsupported comparator '{token}'. Supported comparators: {supported}."
        ) from error
    return property_name, comparator, filter_value


def _add_namespaces_command(subparsers: Any) -> None:
    """Register namespaces subcommand."""
    subparsers.add_parser("namespaces", help="List data store namespaces")


def _add_namespace_command(subparsers: Any) -> None:
    """Register namespace subcommand."""
    parser = subparsers.add_parser("namespace", help="Show the keys of one namespace")
    parser.add_argument("name", help="Namespace name")
    parser.add_argument(
        "--no-load",
        action="store_true",
        help="Skip fetching keys, as when creating a namespace",
    )


def _add_delete_namespace_command(subparsers: Any) -> None:
    """Register delete-namespace subcommand."""
    parser = subparsers.add_parser("delete-namespace", help="Delete a namespace and its keys")
    parser.add_argument("name", help="Namespace name")


def _add_query_command(subparsers: Any) -> None:
    """Register query subcommand."""
    parser = subparsers.add_parser("query", help="Read a collection resource with filters")
    parser.add_argument("resource", help="Collection endpoint, e.g. dataElements")
    parser.add_argument(
        "--filter",
        action="append",
        help="Filter as property:comparator:value; repeat to combine",
    )
