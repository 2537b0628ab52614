from __future__ import annotations

import re
from typing import Any

MAX_INT64 = 2**63 - 1

# One native coin in its smallest unit (10^18 xin).
ASIM1 = 10**18

_HEX_QUANTITY = re.compile(r"0x[0-9a-fA-F]+")


class DecodeError(ValueError):
    pass


class FormatError(DecodeError):
    pass


def asim1() -> int:
    return ASIM1


def _check_encodable(n: Any) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"Expected an integer, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"Cannot hex-encode negative value: {n}")
    return n


def int_to_hex(n: int) -> str:
    value = _check_encodable(n)
    if value > MAX_INT64:
        raise ValueError(f"Value exceeds 64-bit range, use big_to_hex: {value}")
    return hex(value)


def big_to_hex(n: int) -> str:
    return hex(_check_encodable(n))


def is_hex_quantity(value: Any) -> bool:
    return isinstance(value, str) and bool(_HEX_QUANTITY.fullmatch(value))


def parse_big_int(value: str) -> int:
    if not isinstance(value, str):
        raise FormatError(f"Expected hex string, got {type(value).__name__}")
    if not value.startswith("0x"):
        raise FormatError(f"Hex value must start with '0x': {value!r}")
    if not _HEX_QUANTITY.fullmatch(value):
        raise FormatError(f"Invalid hex value: {value!r}")
    return int(value[2:], 16)


def parse_int(value: str) -> int:
    result = parse_big_int(value)
    if result > MAX_INT64:
        raise FormatError(f"Hex value exceeds 64-bit range: {value!r}")
    return result
