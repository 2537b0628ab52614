"""Shared fixtures: a fake node behind httpx.MockTransport."""

from __future__ import annotations

import json
from typing import Any, Optional

import httpx
import pytest

from asimovrpc.client import AsimovRPC

NODE_URL = "http://node.test:8545"


class FakeNode:
    """Answers every POST with a canned body and records the requests."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body = b'{"id": 1, "jsonrpc": "2.0", "result": null}'
        self.exc: Optional[Exception] = None

    def reply(self, result: Any) -> None:
        self.raw(json.dumps({"id": 1, "jsonrpc": "2.0", "result": result}))

    def fail(self, code: int, message: str, status_code: int = 200) -> None:
        envelope = {"id": 1, "jsonrpc": "2.0", "error": {"code": code, "message": message}}
        self.raw(json.dumps(envelope), status_code=status_code)

    def raw(self, body: str | bytes, status_code: int = 200) -> None:
        self.body = body.encode("utf-8") if isinstance(body, str) else body
        self.status_code = status_code

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, content=self.body)

    def http_client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))

    @property
    def last_request(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture()
def node() -> FakeNode:
    return FakeNode()


@pytest.fixture()
def client(node: FakeNode) -> AsimovRPC:
    return AsimovRPC(NODE_URL, http_client=node.http_client())
