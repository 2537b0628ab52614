"""
asimovrpc CLI

Command-line access to an Asimov node over JSON-RPC. Every command prints
JSON on stdout; debug logging (``--debug``) goes to stderr.

Commands:
  info          - Client, network and chain status summary
  syncing       - Sync progress
  block-number  - Most recent block number
  gas-price     - Current gas price in xin
  balance       - Account balance
  block         - Block by number, tag or hash
  tx            - Transaction by hash
  receipt       - Transaction receipt by hash
  logs          - Logs matching a filter
  call          - Raw JSON-RPC call
"""

from __future__ import annotations

import click

from .config import DEFAULT_RPC_URL, DEFAULT_TIMEOUT, ClientConfig

VERSION = "0.1.0"


@click.group()
@click.version_option(version=VERSION, prog_name="asimovrpc")
@click.option(
    "--rpc-url",
    envvar="ASIMOV_RPC_URL",
    default=DEFAULT_RPC_URL,
    show_default=True,
    help="Node JSON-RPC endpoint",
)
@click.option(
    "--timeout",
    envvar="ASIMOV_RPC_TIMEOUT",
    type=float,
    default=DEFAULT_TIMEOUT,
    show_default=True,
    help="HTTP timeout in seconds",
)
@click.option("--debug", is_flag=True, envvar="ASIMOV_RPC_DEBUG", help="Log request and response bodies")
@click.pass_context
def cli(ctx: click.Context, rpc_url: str, timeout: float, debug: bool) -> None:
    """asimovrpc - JSON-RPC client for Asimov nodes."""
    ctx.ensure_object(dict)
    ctx.obj["config"] = ClientConfig(rpc_url=rpc_url, timeout=timeout, debug=debug)


from .commands.node import block_number, gas_price, info, syncing
from .commands.query import balance, block, logs, receipt, tx
from .commands.raw import call

cli.add_command(info)
cli.add_command(syncing)
cli.add_command(block_number)
cli.add_command(gas_price)
cli.add_command(balance)
cli.add_command(block)
cli.add_command(tx)
cli.add_command(receipt)
cli.add_command(logs)
cli.add_command(call)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
