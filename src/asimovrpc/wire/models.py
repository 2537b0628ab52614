from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from ..utils import DecodeError, FormatError, parse_big_int, parse_int


def _require_object(payload: Any, record: str) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise DecodeError(f"{record}: expected JSON object, got {type(payload).__name__}")
    return payload


def _quantity(
    payload: dict[str, Any],
    key: str,
    record: str,
    parser: Callable[[str], int] = parse_int,
) -> Optional[int]:
    value = payload.get(key)
    if value is None:
        return None
    try:
        return parser(value)
    except FormatError as exc:
        raise FormatError(f"{record}.{key}: {exc}") from exc


def _string(payload: dict[str, Any], key: str, record: str) -> Optional[str]:
    value = payload.get(key)
    if value is not None and not isinstance(value, str):
        raise DecodeError(f"{record}.{key}: expected string, got {type(value).__name__}")
    return value


def _string_list(payload: dict[str, Any], key: str, record: str) -> tuple[str, ...]:
    value = payload.get(key)
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise DecodeError(f"{record}.{key}: expected list of strings")
    return tuple(value)


@dataclass(frozen=True)
class Transaction:
    hash: Optional[str]
    nonce: Optional[int]
    block_hash: Optional[str]
    block_number: Optional[int]
    transaction_index: Optional[int]
    from_address: Optional[str]
    to_address: Optional[str]
    value: Optional[int]
    gas: Optional[int]
    gas_price: Optional[int]
    input: Optional[str]

    @classmethod
    def from_dict(cls, payload: Any) -> "Transaction":
        data = _require_object(payload, "Transaction")
        name = "Transaction"
        return cls(
            hash=_string(data, "hash", name),
            nonce=_quantity(data, "nonce", name),
            block_hash=_string(data, "blockHash", name),
            block_number=_quantity(data, "blockNumber", name),
            transaction_index=_quantity(data, "transactionIndex", name),
            from_address=_string(data, "from", name),
            to_address=_string(data, "to", name),
            value=_quantity(data, "value", name, parse_big_int),
            gas=_quantity(data, "gas", name),
            gas_price=_quantity(data, "gasPrice", name, parse_big_int),
            input=_string(data, "input", name),
        )


@dataclass(frozen=True)
class Log:
    removed: bool
    log_index: Optional[int]
    transaction_index: Optional[int]
    transaction_hash: Optional[str]
    block_number: Optional[int]
    block_hash: Optional[str]
    address: Optional[str]
    data: Optional[str]
    topics: tuple[str, ...]

    @classmethod
    def from_dict(cls, payload: Any) -> "Log":
        data = _require_object(payload, "Log")
        name = "Log"
        removed = data.get("removed", False)
        if not isinstance(removed, bool):
            raise DecodeError(f"Log.removed: expected bool, got {type(removed).__name__}")
        return cls(
            removed=removed,
            log_index=_quantity(data, "logIndex", name),
            transaction_index=_quantity(data, "transactionIndex", name),
            transaction_hash=_string(data, "transactionHash", name),
            block_number=_quantity(data, "blockNumber", name),
            block_hash=_string(data, "blockHash", name),
            address=_string(data, "address", name),
            data=_string(data, "data", name),
            topics=_string_list(data, "topics", name),
        )


def decode_logs(payload: Any) -> list[Log]:
    """Decode a JSON array of log objects. ``null`` decodes to an empty list."""
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise DecodeError(f"Expected list of logs, got {type(payload).__name__}")
    return [Log.from_dict(entry) for entry in payload]


@dataclass(frozen=True)
class TransactionReceipt:
    transaction_hash: Optional[str]
    transaction_index: Optional[int]
    block_hash: Optional[str]
    block_number: Optional[int]
    cumulative_gas_used: Optional[int]
    gas_used: Optional[int]
    contract_address: Optional[str]
    logs: tuple[Log, ...]
    logs_bloom: Optional[str]
    root: Optional[str]
    status: Optional[int]

    @classmethod
    def from_dict(cls, payload: Any) -> "TransactionReceipt":
        data = _require_object(payload, "TransactionReceipt")
        name = "TransactionReceipt"
        return cls(
            transaction_hash=_string(data, "transactionHash", name),
            transaction_index=_quantity(data, "transactionIndex", name),
            block_hash=_string(data, "blockHash", name),
            block_number=_quantity(data, "blockNumber", name),
            cumulative_gas_used=_quantity(data, "cumulativeGasUsed", name),
            gas_used=_quantity(data, "gasUsed", name),
            contract_address=_string(data, "contractAddress", name),
            logs=tuple(decode_logs(data.get("logs"))),
            logs_bloom=_string(data, "logsBloom", name),
            root=_string(data, "root", name),
            status=_quantity(data, "status", name),
        )


BlockTransactions = Union[tuple[str, ...], tuple[Transaction, ...]]


@dataclass(frozen=True)
class Block:
    """A block as returned by flow_getBlockByHash / flow_getBlockByNumber.

    ``transactions`` holds hash strings when ``full_transactions`` is False
    and ``Transaction`` records when it is True. The variant is chosen by the
    flag passed with the request, never by looking at the payload.
    """

    number: Optional[int]
    hash: Optional[str]
    parent_hash: Optional[str]
    nonce: Optional[str]
    sha3_uncles: Optional[str]
    logs_bloom: Optional[str]
    transactions_root: Optional[str]
    state_root: Optional[str]
    miner: Optional[str]
    difficulty: Optional[int]
    total_difficulty: Optional[int]
    extra_data: Optional[str]
    size: Optional[int]
    gas_limit: Optional[int]
    gas_used: Optional[int]
    timestamp: Optional[int]
    uncles: tuple[str, ...]
    full_transactions: bool
    transactions: BlockTransactions

    @classmethod
    def from_dict(cls, payload: Any, full_transactions: bool) -> "Block":
        data = _require_object(payload, "Block")
        name = "Block"

        raw = data.get("transactions")
        if raw is None:
            raw = []
        if not isinstance(raw, list):
            raise DecodeError(f"Block.transactions: expected list, got {type(raw).__name__}")

        transactions: BlockTransactions
        if full_transactions:
            if not all(isinstance(tx, dict) for tx in raw):
                raise DecodeError("Block.transactions: expected transaction objects")
            transactions = tuple(Transaction.from_dict(tx) for tx in raw)
        else:
            if not all(isinstance(tx, str) for tx in raw):
                raise DecodeError("Block.transactions: expected transaction hashes")
            transactions = tuple(raw)

        return cls(
            number=_quantity(data, "number", name),
            hash=_string(data, "hash", name),
            parent_hash=_string(data, "parentHash", name),
            nonce=_string(data, "nonce", name),
            sha3_uncles=_string(data, "sha3Uncles", name),
            logs_bloom=_string(data, "logsBloom", name),
            transactions_root=_string(data, "transactionsRoot", name),
            state_root=_string(data, "stateRoot", name),
            miner=_string(data, "miner", name),
            difficulty=_quantity(data, "difficulty", name, parse_big_int),
            total_difficulty=_quantity(data, "totalDifficulty", name, parse_big_int),
            extra_data=_string(data, "extraData", name),
            size=_quantity(data, "size", name),
            gas_limit=_quantity(data, "gasLimit", name),
            gas_used=_quantity(data, "gasUsed", name),
            timestamp=_quantity(data, "timestamp", name),
            uncles=_string_list(data, "uncles", name),
            full_transactions=full_transactions,
            transactions=transactions,
        )


@dataclass(frozen=True)
class Syncing:
    is_syncing: bool
    starting_block: int
    current_block: int
    highest_block: int

    @classmethod
    def not_syncing(cls) -> "Syncing":
        return cls(is_syncing=False, starting_block=0, current_block=0, highest_block=0)

    @classmethod
    def decode(cls, raw: Any) -> "Syncing":
        """Decode a flow_syncing result.

        The node answers with the literal ``false`` when idle and with a
        progress object otherwise, so the raw shape is checked first.
        """
        if raw is False:
            return cls.not_syncing()
        data = _require_object(raw, "Syncing")
        progress = {}
        for key in ("startingBlock", "currentBlock", "highestBlock"):
            value = _quantity(data, key, "Syncing")
            if value is None:
                raise DecodeError(f"Syncing.{key}: missing progress field")
            progress[key] = value
        return cls(
            is_syncing=True,
            starting_block=progress["startingBlock"],
            current_block=progress["currentBlock"],
            highest_block=progress["highestBlock"],
        )


__all__ = [
    "Block",
    "BlockTransactions",
    "DecodeError",
    "Log",
    "Syncing",
    "Transaction",
    "TransactionReceipt",
    "decode_logs",
]
