"""
JSON-RPC transport.

One call is one HTTP POST: the request envelope is serialised, posted with
a JSON content type, the whole body is read and the response envelope is
checked before its ``result`` is handed back. Nothing is retried.
"""

from __future__ import annotations

import json
from typing import Any, Optional, Protocol, Sequence

import httpx
from loguru import logger as default_logger

from .wire.schemas import SchemaRegistry, SchemaValidationError

DEFAULT_TIMEOUT = 10.0
JSONRPC_VERSION = "2.0"
REQUEST_ID = 1


class Logger(Protocol):
    def debug(self, message: str) -> Any: ...


class AsimovError(Exception):
    pass


class RemoteError(AsimovError):
    """The node answered with a JSON-RPC error object."""

    def __init__(self, code: int, message: str, data: Any = None) -> None:
        super().__init__(code, message)
        self.code = code
        self.message = message
        self.data = data

    def __str__(self) -> str:
        return f"Error {self.code} ({self.message})"


class TransportError(AsimovError):
    """The HTTP exchange failed or the body was not a JSON-RPC envelope."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class Transport:
    def __init__(
        self,
        url: str,
        http_client: Optional[httpx.Client] = None,
        logger: Optional[Logger] = None,
        debug: bool = False,
        timeout: float = DEFAULT_TIMEOUT,
        registry: Optional[SchemaRegistry] = None,
    ) -> None:
        url = (url or "").strip()
        if not url:
            raise ValueError("url must be a non-empty string.")

        self.url = url
        self.debug = debug
        self.log = logger if logger is not None else default_logger
        self.registry = registry or SchemaRegistry.default()
        self._owns_client = http_client is None
        self.client = http_client if http_client is not None else httpx.Client(timeout=timeout)

    def call(self, method: str, params: Sequence[Any] = ()) -> Any:
        """
        Perform one JSON-RPC exchange.

        Args:
            method: RPC method name (e.g., "flow_blockNumber")
            params: Positional parameters, each JSON-serialisable

        Returns:
            The ``result`` field of the response (may be None)

        Raises:
            RemoteError: If the response carries an error object
            TransportError: If the request cannot be encoded, or the HTTP
                exchange or envelope parsing fails
        """
        request = {
            "id": REQUEST_ID,
            "jsonrpc": JSONRPC_VERSION,
            "method": method,
            "params": list(params),
        }
        try:
            self.registry.validate_instance(request, "request")
            body = json.dumps(request)
        except SchemaValidationError as exc:
            raise TransportError(f"{method or '<empty>'}: bad request: {'; '.join(exc.errors)}") from exc
        except (TypeError, ValueError) as exc:
            raise TransportError(f"{method}: params are not JSON-serialisable: {exc}") from exc

        try:
            response = self.client.post(
                self.url,
                content=body,
                headers={"Content-Type": "application/json"},
            )
            data = response.read()
        except httpx.HTTPError as exc:
            raise TransportError(f"{method}: HTTP request failed: {exc}") from exc

        if self.debug:
            self.log.debug(
                f"{method}\nRequest: {body}\nResponse: {data.decode('utf-8', errors='replace')}\n"
            )

        return self._unwrap(method, data, response.status_code)

    def _unwrap(self, method: str, data: bytes, status_code: int) -> Any:
        try:
            envelope = json.loads(data)
        except ValueError as exc:
            raise TransportError(
                f"{method}: response is not valid JSON (HTTP {status_code})",
                status_code=status_code,
            ) from exc

        try:
            self.registry.validate_instance(envelope, "response")
        except SchemaValidationError as exc:
            raise TransportError(
                f"{method}: malformed JSON-RPC response (HTTP {status_code}): {'; '.join(exc.errors)}",
                status_code=status_code,
            ) from exc

        error = envelope.get("error")
        if error is not None:
            raise RemoteError(error["code"], error["message"], error.get("data"))

        return envelope.get("result")

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
