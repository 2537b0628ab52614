"""
Commands - CLI command implementations.

- node:  node / chain status (info, syncing, block-number, gas-price)
- query: account, block, transaction and log lookups
- raw:   untyped JSON-RPC call
"""

from __future__ import annotations

import dataclasses
import json
import sys
from contextlib import contextmanager
from enum import Enum
from typing import Any, Iterator

import click

from ..client import AsimovRPC
from ..wire.params import BlockRef
from ..transport import RemoteError, TransportError


def make_client(ctx: click.Context) -> AsimovRPC:
    """Build a client from the group config; tests may inject ``http_client`` via ctx.obj."""
    obj = ctx.find_root().obj or {}
    return AsimovRPC.from_config(obj["config"], http_client=obj.get("http_client"))


@contextmanager
def rpc_session(ctx: click.Context) -> Iterator[AsimovRPC]:
    client = None
    try:
        client = make_client(ctx)
        yield client
    except RemoteError as exc:
        click.secho(f"ERROR: node returned error {exc.code}: {exc.message}", fg="red", err=True)
        sys.exit(1)
    except (TransportError, ValueError) as exc:
        click.secho(f"ERROR: {exc}", fg="red", err=True)
        sys.exit(1)
    finally:
        if client is not None:
            client.close()


def parse_block(value: str) -> BlockRef:
    """CLI block argument: decimal number, hex quantity or tag."""
    value = value.strip()
    if value.isdigit():
        return int(value)
    return value


def to_jsonable(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items()}
    return value


def emit(value: Any) -> None:
    click.echo(json.dumps(to_jsonable(value), indent=2))
