"""Fetch a single block from a NEAR node and print it.

Usage:
    python -m nearrpc.fetch_block 9820214 --url https://rpc.mainnet.near.org
    nearrpc-fetch-block <block hash> --json
"""

from argparse import ArgumentParser, Namespace
from datetime import UTC, datetime
import json
import sys

import asyncio

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from nearrpc.blocks.models import BlockResult
from nearrpc.helpers.config import ClientConfig, get_near_rpc_url, get_optional_env
from nearrpc.helpers.constants import NEAR_RPC_LOG_LEVEL_ENV
from nearrpc.helpers.errors import RPCClientError
from nearrpc.helpers.logging import set_log_level
from nearrpc.helpers.rpc import RPCClient


def parse_header(raw: str) -> tuple[str, str]:
    """Split a ``Name: value`` command-line header."""
    name, sep, value = raw.partition(":")
    if not sep or not name.strip():
        msg = f"Invalid header (expected 'Name: value'): {raw}"
        raise ValueError(msg)
    return name.strip(), value.strip()


def build_config(args: Namespace) -> ClientConfig:
    config = ClientConfig.from_env()
    # Applied in order; a repeated header name keeps the last value
    for raw in args.header:
        name, value = parse_header(raw)
        config = config.with_headers({name: value})
    if args.timeout is not None:
        config = config.with_timeout(args.timeout)
    if args.trace:
        config = config.with_trace()
    return config


def block_table(block: BlockResult) -> Table:
    header = block.header
    produced_at = datetime.fromtimestamp(header.timestamp / 1e9, tz=UTC)

    table = Table(title=f"Block {header.height}")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Hash", header.hash)
    table.add_row("Previous hash", header.prev_hash)
    table.add_row("Author", block.author)
    table.add_row("Timestamp", produced_at.isoformat())
    table.add_row("Epoch", header.epoch_id)
    table.add_row("Gas price", header.gas_price)
    table.add_row("Total supply", header.total_supply)
    table.add_row("Protocol version", str(header.latest_protocol_version))
    table.add_row("Chunks", str(len(block.chunks)))
    table.add_row("Gas used", f"{sum(chunk.gas_used for chunk in block.chunks):,}")
    return table


async def fetch(args: Namespace, console: Console) -> int:
    try:
        rpc_url = get_near_rpc_url(args.url)
        config = build_config(args)
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1

    async with RPCClient(rpc_url, config) as rpc:
        try:
            block = await rpc.get_block(args.block_id)
        except RPCClientError as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            return 1

    if args.json:
        console.print_json(json.dumps(block.to_json_dict()))
    else:
        console.print(block_table(block))
    return 0


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(description="Fetch a block from a NEAR JSON-RPC node")
    parser.add_argument("block_id", help="Block height or hash")
    parser.add_argument("--url", help="Node RPC URL (default: $NEAR_RPC_URL)")
    parser.add_argument(
        "--header",
        action="append",
        default=[],
        metavar="NAME:VALUE",
        help="Extra HTTP header, may be repeated",
    )
    parser.add_argument("--timeout", type=float, help="HTTP timeout in seconds")
    parser.add_argument(
        "--trace", action="store_true", help="Log full request/response bodies"
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the raw block JSON"
    )
    parser.add_argument(
        "--log-level",
        default=get_optional_env(NEAR_RPC_LOG_LEVEL_ENV, "WARNING"),
        help="Log level (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    console = Console()
    try:
        set_log_level(args.log_level)
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1
    return asyncio.run(fetch(args, console))


if __name__ == "__main__":
    sys.exit(main())
