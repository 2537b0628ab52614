__all__ = [
    # Client
    "AsimovRPC",
    "ClientConfig",
    "load_config",
    # Transport
    "Transport",
    # Errors
    "AsimovError",
    "RemoteError",
    "TransportError",
    "DecodeError",
    "FormatError",
    # Parameters
    "BlockTag",
    "BlockRef",
    "FilterParams",
    "T",
    "block_param",
    # Records
    "Block",
    "Log",
    "Syncing",
    "Transaction",
    "TransactionReceipt",
    # Hex codec
    "ASIM1",
    "asim1",
    "big_to_hex",
    "int_to_hex",
    "parse_big_int",
    "parse_int",
]

from .client import AsimovRPC
from .config import ClientConfig, load_config
from .wire.models import Block, Log, Syncing, Transaction, TransactionReceipt
from .wire.params import BlockRef, BlockTag, FilterParams, T, block_param
from .transport import AsimovError, RemoteError, Transport, TransportError
from .utils import (
    ASIM1,
    DecodeError,
    FormatError,
    asim1,
    big_to_hex,
    int_to_hex,
    parse_big_int,
    parse_int,
)
