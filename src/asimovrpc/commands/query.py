from __future__ import annotations

from decimal import Decimal
from typing import Optional

import click

from ..wire.params import FilterParams
from ..utils import ASIM1
from . import emit, parse_block, rpc_session


@click.command()
@click.argument("address")
@click.option("--block", "block_id", default="latest", show_default=True, help="Block number or tag")
@click.option("--asim", is_flag=True, help="Show the balance in whole coins instead of xin")
@click.pass_context
def balance(ctx: click.Context, address: str, block_id: str, asim: bool) -> None:
    """Show the balance of ADDRESS."""
    with rpc_session(ctx) as client:
        amount = client.asimov_get_balance(address, parse_block(block_id))
    if asim:
        emit(str(Decimal(amount) / Decimal(ASIM1)))
    else:
        emit(amount)


@click.command()
@click.argument("block_id", default="latest")
@click.option("--hash", "block_hash", default=None, help="Look the block up by hash instead")
@click.option("--full", is_flag=True, help="Include full transaction objects")
@click.pass_context
def block(ctx: click.Context, block_id: str, block_hash: Optional[str], full: bool) -> None:
    """Show a block by number or tag (default: latest). Prints null if unknown."""
    with rpc_session(ctx) as client:
        if block_hash:
            result = client.asimov_get_block_by_hash(block_hash, full)
        else:
            result = client.asimov_get_block_by_number(parse_block(block_id), full)
    emit(result)


@click.command()
@click.argument("tx_hash")
@click.pass_context
def tx(ctx: click.Context, tx_hash: str) -> None:
    """Show a transaction by hash."""
    with rpc_session(ctx) as client:
        result = client.asimov_get_transaction_by_hash(tx_hash)
    emit(result)


@click.command()
@click.argument("tx_hash")
@click.pass_context
def receipt(ctx: click.Context, tx_hash: str) -> None:
    """Show the receipt of a transaction (null while pending)."""
    with rpc_session(ctx) as client:
        result = client.asimov_get_transaction_receipt(tx_hash)
    emit(result)


@click.command()
@click.option("--from-block", default=None, help="First block (number or tag)")
@click.option("--to-block", default=None, help="Last block (number or tag)")
@click.option("--address", "addresses", multiple=True, help="Contract address (repeatable)")
@click.option(
    "--topic",
    "topics",
    multiple=True,
    help="Topic matcher per position; comma-separated alternatives, empty for any",
)
@click.pass_context
def logs(
    ctx: click.Context,
    from_block: Optional[str],
    to_block: Optional[str],
    addresses: tuple[str, ...],
    topics: tuple[str, ...],
) -> None:
    """Show logs matching a filter."""
    params = FilterParams(
        from_block=parse_block(from_block) if from_block else None,
        to_block=parse_block(to_block) if to_block else None,
        address=addresses,
        topics=tuple(tuple(t for t in topic.split(",") if t) for topic in topics),
    )
    with rpc_session(ctx) as client:
        result = client.asimov_get_logs(params)
    emit(result)
