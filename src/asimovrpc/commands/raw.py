from __future__ import annotations

import json
from typing import Any

import click

from . import emit, rpc_session


def parse_param(value: str) -> Any:
    try:
        return json.loads(value)
    except ValueError:
        return value


@click.command()
@click.argument("method")
@click.argument("params", nargs=-1)
@click.pass_context
def call(ctx: click.Context, method: str, params: tuple[str, ...]) -> None:
    """
    Call METHOD with PARAMS and print the raw result.

    Each parameter is parsed as JSON when possible (numbers, booleans,
    objects) and sent as a plain string otherwise.
    """
    with rpc_session(ctx) as client:
        result = client.call(method, *(parse_param(p) for p in params))
    emit(result)
