"""
AsimovRPC - typed client for an Asimov node.

Every remote method of the node has one method here. Arguments are encoded
(block numbers, positions and indices as hex quantities), the call goes
through ``Transport`` and the result is decoded into a plain value or a
record from ``asimovrpc.wire.models``.

Lookups by hash / number return ``None`` when the node does not know the
identifier. Errors are never turned into ``None``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional, TypeVar

import httpx

from .wire.models import Block, Log, Syncing, Transaction, TransactionReceipt, decode_logs
from .wire.params import BlockRef, BlockTag, FilterParams, T, block_param
from .transport import DEFAULT_TIMEOUT, Logger, Transport
from .utils import ASIM1, DecodeError, int_to_hex, parse_big_int, parse_int

if TYPE_CHECKING:
    from .config import ClientConfig

R = TypeVar("R")


def _expect(result: Any, kind: type, method: str) -> Any:
    if not isinstance(result, kind):
        raise DecodeError(f"{method}: expected {kind.__name__}, got {type(result).__name__}")
    return result


def _string_list(result: Any, method: str) -> list[str]:
    if result is None:
        return []
    if not isinstance(result, list) or not all(isinstance(v, str) for v in result):
        raise DecodeError(f"{method}: expected list of strings")
    return list(result)


class AsimovRPC:
    """JSON-RPC client for an Asimov node."""

    def __init__(
        self,
        url: str,
        *,
        http_client: Optional[httpx.Client] = None,
        logger: Optional[Logger] = None,
        debug: bool = False,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.transport = Transport(
            url,
            http_client=http_client,
            logger=logger,
            debug=debug,
            timeout=timeout,
        )

    @classmethod
    def from_config(cls, config: "ClientConfig", **kwargs: Any) -> "AsimovRPC":
        return cls(config.rpc_url, debug=config.debug, timeout=config.timeout, **kwargs)

    @property
    def url(self) -> str:
        return self.transport.url

    @property
    def debug(self) -> bool:
        return self.transport.debug

    @debug.setter
    def debug(self, enabled: bool) -> None:
        self.transport.debug = enabled

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "AsimovRPC":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ============ Generic calls ============

    def call(self, method: str, *params: Any) -> Any:
        """Call ``method`` and return the undecoded ``result``."""
        return self.transport.call(method, params)

    def raw_call(self, method: str, *params: Any) -> Any:
        """Deprecated alias of :meth:`call`."""
        return self.call(method, *params)

    def _call_str(self, method: str, *params: Any) -> str:
        return _expect(self.call(method, *params), str, method)

    def _call_bool(self, method: str, *params: Any) -> bool:
        return _expect(self.call(method, *params), bool, method)

    def _call_int(self, method: str, *params: Any) -> int:
        return parse_int(self._call_str(method, *params))

    def _call_big_int(self, method: str, *params: Any) -> int:
        return parse_big_int(self._call_str(method, *params))

    def _lookup(self, method: str, decode: Callable[[Any], R], *params: Any) -> Optional[R]:
        result = self.call(method, *params)
        if result is None:
            return None
        return decode(result)

    # ============ web3 / net ============

    def web3_client_version(self) -> str:
        return self._call_str("web3_clientVersion")

    def web3_sha3(self, data: bytes) -> str:
        """Keccak-256 (not the standardised SHA3-256) of ``data``, computed by the node."""
        return self._call_str("web3_sha3", "0x" + bytes(data).hex())

    def net_version(self) -> str:
        return self._call_str("net_version")

    def net_listening(self) -> bool:
        return self._call_bool("net_listening")

    def net_peer_count(self) -> int:
        return self._call_int("net_peerCount")

    # ============ Node status ============

    def asimov_protocol_version(self) -> str:
        return self._call_str("flow_protocolVersion")

    def asimov_syncing(self) -> Syncing:
        return Syncing.decode(self.call("flow_syncing"))

    def asimov_coinbase(self) -> str:
        return self._call_str("flow_coinbase")

    def asimov_mining(self) -> bool:
        return self._call_bool("flow_mining")

    def asimov_hashrate(self) -> int:
        return self._call_int("flow_hashrate")

    def asimov_gas_price(self) -> int:
        """Current price per gas in xin."""
        return self._call_big_int("flow_gasPrice")

    def asimov_accounts(self) -> list[str]:
        return _string_list(self.call("flow_accounts"), "flow_accounts")

    def asimov_block_number(self) -> int:
        return self._call_int("flow_blockNumber")

    # ============ Account state ============

    def asimov_get_balance(self, address: str, block: BlockRef = BlockTag.LATEST) -> int:
        """Balance of ``address`` in xin."""
        return self._call_big_int("flow_getBalance", address, block_param(block))

    def asimov_get_storage_at(
        self, address: str, position: int, block: BlockRef = BlockTag.LATEST
    ) -> str:
        return self._call_str("flow_getStorageAt", address, int_to_hex(position), block_param(block))

    def asimov_get_transaction_count(self, address: str, block: BlockRef = BlockTag.LATEST) -> int:
        return self._call_int("flow_getTransactionCount", address, block_param(block))

    def asimov_get_block_transaction_count_by_hash(self, block_hash: str) -> int:
        return self._call_int("flow_getBlockTransactionCountByHash", block_hash)

    def asimov_get_block_transaction_count_by_number(self, block: BlockRef) -> int:
        return self._call_int("flow_getBlockTransactionCountByNumber", block_param(block))

    def asimov_get_uncle_count_by_block_hash(self, block_hash: str) -> int:
        return self._call_int("flow_getUncleCountByBlockHash", block_hash)

    def asimov_get_uncle_count_by_block_number(self, block: BlockRef) -> int:
        return self._call_int("flow_getUncleCountByBlockNumber", block_param(block))

    def asimov_get_code(self, address: str, block: BlockRef = BlockTag.LATEST) -> str:
        return self._call_str("flow_getCode", address, block_param(block))

    # ============ Transactions ============

    def asimov_sign(self, address: str, data: str) -> str:
        """Ask the node to sign ``data`` with the key of ``address``."""
        return self._call_str("flow_sign", address, data)

    def asimov_send_transaction(self, transaction: T) -> str:
        return self._call_str("flow_sendTransaction", transaction.to_params())

    def asimov_send_raw_transaction(self, data: str) -> str:
        return self._call_str("flow_sendRawTransaction", data)

    def asimov_call(self, transaction: T, block: BlockRef = BlockTag.LATEST) -> str:
        """Execute a message call without creating a transaction."""
        return self._call_str("flow_call", transaction.to_params(), block_param(block))

    def asimov_estimate_gas(self, transaction: T) -> int:
        return self._call_int("flow_estimateGas", transaction.to_params())

    # ============ Blocks ============

    def asimov_get_block_by_hash(self, block_hash: str, full_transactions: bool) -> Optional[Block]:
        return self._lookup(
            "flow_getBlockByHash",
            lambda raw: Block.from_dict(raw, full_transactions),
            block_hash,
            full_transactions,
        )

    def asimov_get_block_by_number(self, block: BlockRef, full_transactions: bool) -> Optional[Block]:
        return self._lookup(
            "flow_getBlockByNumber",
            lambda raw: Block.from_dict(raw, full_transactions),
            block_param(block),
            full_transactions,
        )

    def asimov_get_transaction_by_hash(self, tx_hash: str) -> Optional[Transaction]:
        return self._lookup("flow_getTransactionByHash", Transaction.from_dict, tx_hash)

    def asimov_get_transaction_by_block_hash_and_index(
        self, block_hash: str, index: int
    ) -> Optional[Transaction]:
        return self._lookup(
            "flow_getTransactionByBlockHashAndIndex",
            Transaction.from_dict,
            block_hash,
            int_to_hex(index),
        )

    def asimov_get_transaction_by_block_number_and_index(
        self, block: BlockRef, index: int
    ) -> Optional[Transaction]:
        return self._lookup(
            "flow_getTransactionByBlockNumberAndIndex",
            Transaction.from_dict,
            block_param(block),
            int_to_hex(index),
        )

    def asimov_get_transaction_receipt(self, tx_hash: str) -> Optional[TransactionReceipt]:
        """Receipt of a mined transaction; None while it is still pending."""
        return self._lookup("flow_getTransactionReceipt", TransactionReceipt.from_dict, tx_hash)

    def asimov_get_compilers(self) -> list[str]:
        """Deprecated on most nodes; the node may return [] or an error."""
        return _string_list(self.call("flow_getCompilers"), "flow_getCompilers")

    # ============ Filters ============

    def asimov_new_filter(self, params: FilterParams) -> str:
        return self._call_str("flow_newFilter", params.to_params())

    def asimov_new_block_filter(self) -> str:
        return self._call_str("flow_newBlockFilter")

    def asimov_new_pending_transaction_filter(self) -> str:
        return self._call_str("flow_newPendingTransactionFilter")

    def asimov_uninstall_filter(self, filter_id: str) -> bool:
        return self._call_bool("flow_uninstallFilter", filter_id)

    def asimov_get_filter_changes(self, filter_id: str) -> list[Log]:
        """Logs recorded by a log filter since the last poll."""
        return decode_logs(self.call("flow_getFilterChanges", filter_id))

    def asimov_get_filter_hashes(self, filter_id: str) -> list[str]:
        """Block or transaction hashes recorded by a block / pending filter since the last poll."""
        return _string_list(self.call("flow_getFilterChanges", filter_id), "flow_getFilterChanges")

    def asimov_get_filter_logs(self, filter_id: str) -> list[Log]:
        return decode_logs(self.call("flow_getFilterLogs", filter_id))

    def asimov_get_logs(self, params: FilterParams) -> list[Log]:
        return decode_logs(self.call("flow_getLogs", params.to_params()))

    # ============ Units ============

    @staticmethod
    def asim1() -> int:
        """One coin in xin (10^18)."""
        return ASIM1
