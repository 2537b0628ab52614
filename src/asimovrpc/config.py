"""
Client configuration.

Settings come from CLI options or, for library callers, from the
``ASIMOV_RPC_URL``, ``ASIMOV_RPC_TIMEOUT`` and ``ASIMOV_RPC_DEBUG``
environment variables via :func:`load_config`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_RPC_URL = "http://127.0.0.1:8545"
DEFAULT_TIMEOUT = 10.0

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"", "0", "false", "no", "off"}


@dataclass
class ClientConfig:
    rpc_url: str = DEFAULT_RPC_URL
    timeout: float = DEFAULT_TIMEOUT
    debug: bool = False


def parse_bool(value: str, name: str) -> bool:
    normalized = (value or "").strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean flag (1/0, true/false, yes/no, on/off), got '{value}'.")


def load_config() -> ClientConfig:
    """Load client configuration from environment variables."""
    rpc_url = os.getenv("ASIMOV_RPC_URL", DEFAULT_RPC_URL).strip()
    if not rpc_url:
        raise ValueError("ASIMOV_RPC_URL must not be empty.")

    raw_timeout = os.getenv("ASIMOV_RPC_TIMEOUT", str(DEFAULT_TIMEOUT))
    try:
        timeout = float(raw_timeout)
    except ValueError:
        raise ValueError(f"ASIMOV_RPC_TIMEOUT must be a number, got '{raw_timeout}'.") from None
    if timeout <= 0:
        raise ValueError("ASIMOV_RPC_TIMEOUT must be positive.")

    debug = parse_bool(os.getenv("ASIMOV_RPC_DEBUG", ""), "ASIMOV_RPC_DEBUG")

    return ClientConfig(rpc_url=rpc_url, timeout=timeout, debug=debug)
