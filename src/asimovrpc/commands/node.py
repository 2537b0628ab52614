"""
Node status commands.

``info`` gathers the introspection calls into a single summary; the others
expose one call each.
"""

from __future__ import annotations

import click

from . import emit, rpc_session


@click.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Show client, network and chain status."""
    with rpc_session(ctx) as client:
        summary = {
            "url": client.url,
            "client_version": client.web3_client_version(),
            "network_version": client.net_version(),
            "protocol_version": client.asimov_protocol_version(),
            "listening": client.net_listening(),
            "peer_count": client.net_peer_count(),
            "block_number": client.asimov_block_number(),
            "syncing": client.asimov_syncing(),
        }
    emit(summary)


@click.command()
@click.pass_context
def syncing(ctx: click.Context) -> None:
    """Show sync progress (all zero when the node is not syncing)."""
    with rpc_session(ctx) as client:
        status = client.asimov_syncing()
    emit(status)


@click.command("block-number")
@click.pass_context
def block_number(ctx: click.Context) -> None:
    """Print the most recent block number."""
    with rpc_session(ctx) as client:
        number = client.asimov_block_number()
    emit(number)


@click.command("gas-price")
@click.pass_context
def gas_price(ctx: click.Context) -> None:
    """Print the current gas price in xin."""
    with rpc_session(ctx) as client:
        price = client.asimov_gas_price()
    emit(price)
