"""
Request parameter types.

Each RPC argument that is more than a plain string gets a small typed
wrapper here, so call sites never build raw parameter lists by hand:

- ``BlockTag`` / ``block_param``: block identifiers (number or symbolic tag)
- ``T``: transaction object for flow_sendTransaction / flow_call / flow_estimateGas
- ``FilterParams``: log filter object for flow_newFilter / flow_getLogs
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from ..utils import big_to_hex, int_to_hex, is_hex_quantity, parse_int


class BlockTag(str, Enum):
    LATEST = "latest"
    EARLIEST = "earliest"
    PENDING = "pending"


BlockRef = Union[int, str, BlockTag]

_TAG_VALUES = {tag.value for tag in BlockTag}


def block_param(block: BlockRef) -> str:
    """Encode a block identifier for the wire.

    Args:
        block: Block number, ``BlockTag``, tag string or hex quantity.

    Returns:
        ``0x``-prefixed block number or the symbolic tag.

    Raises:
        ValueError: If the identifier is neither a number nor a known tag.
    """
    if isinstance(block, BlockTag):
        return block.value
    if isinstance(block, int) and not isinstance(block, bool):
        return int_to_hex(block)
    if isinstance(block, str):
        if block in _TAG_VALUES or is_hex_quantity(block):
            return block
    raise ValueError(f"Invalid block identifier: {block!r}")


@dataclass(frozen=True)
class T:
    """Transaction object sent to the node."""

    from_address: str
    to_address: str = ""
    gas: int = 0
    gas_price: Optional[int] = None
    value: Optional[int] = None
    data: str = ""
    nonce: int = 0

    def to_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {"from": self.from_address}
        if self.to_address:
            params["to"] = self.to_address
        if self.gas > 0:
            params["gas"] = int_to_hex(self.gas)
        if self.gas_price is not None:
            params["gasPrice"] = big_to_hex(self.gas_price)
        if self.value is not None:
            params["value"] = big_to_hex(self.value)
        if self.data:
            params["data"] = self.data
        if self.nonce > 0:
            params["nonce"] = int_to_hex(self.nonce)
        return params


@dataclass(frozen=True)
class FilterParams:
    """Log filter: block range plus address / topic matchers.

    An empty inner topic tuple matches any value in that position.
    """

    from_block: Optional[BlockRef] = None
    to_block: Optional[BlockRef] = None
    address: tuple[str, ...] = ()
    topics: tuple[tuple[str, ...], ...] = ()

    def to_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if self.from_block is not None:
            params["fromBlock"] = block_param(self.from_block)
        if self.to_block is not None:
            params["toBlock"] = block_param(self.to_block)
        if self.address:
            params["address"] = list(self.address)
        if self.topics:
            params["topics"] = [list(t) if t else None for t in self.topics]
        return params

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "FilterParams":
        address = payload.get("address") or ()
        if isinstance(address, str):
            address = (address,)

        topics = []
        for entry in payload.get("topics") or ():
            if entry is None:
                topics.append(())
            elif isinstance(entry, str):
                topics.append((entry,))
            else:
                topics.append(tuple(entry))

        return cls(
            from_block=_block_from_wire(payload.get("fromBlock")),
            to_block=_block_from_wire(payload.get("toBlock")),
            address=tuple(address),
            topics=tuple(topics),
        )


def _block_from_wire(value: Any) -> Optional[BlockRef]:
    if value is None:
        return None
    if isinstance(value, str) and value in _TAG_VALUES:
        return BlockTag(value)
    return parse_int(value)
