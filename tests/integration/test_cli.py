"""
CLI integration tests using Click's test runner.

The fake node's httpx client is injected through the context object, so
the commands run end-to-end without network access.
"""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from asimovrpc.cli import VERSION, cli

from ..conftest import FakeNode
from ..test_models import BLOCK_HASH, LOG_PAYLOAD, SENDER, TX_HASH, TX_PAYLOAD, block_payload


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


def invoke(runner: CliRunner, node: FakeNode, args: list[str]):
    return runner.invoke(cli, args, obj={"http_client": node.http_client()})


class TestVersion:
    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert VERSION in result.output


class TestNodeCommands:
    def test_block_number(self, runner: CliRunner, node: FakeNode) -> None:
        node.reply("0x1b4")
        result = invoke(runner, node, ["block-number"])
        assert result.exit_code == 0
        assert json.loads(result.output) == 436

    def test_syncing_idle(self, runner: CliRunner, node: FakeNode) -> None:
        node.reply(False)
        result = invoke(runner, node, ["syncing"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "is_syncing": False,
            "starting_block": 0,
            "current_block": 0,
            "highest_block": 0,
        }

    def test_rpc_url_option(self, runner: CliRunner, node: FakeNode) -> None:
        node.reply("0x1")
        result = invoke(runner, node, ["--rpc-url", "http://other.test:9000", "gas-price"])
        assert result.exit_code == 0
        assert str(node.requests[0].url) == "http://other.test:9000"


class TestQueryCommands:
    def test_balance(self, runner: CliRunner, node: FakeNode) -> None:
        node.reply("0xde0b6b3a7640000")
        result = invoke(runner, node, ["balance", SENDER])
        assert result.exit_code == 0
        assert json.loads(result.output) == 10**18
        assert node.last_request["params"] == [SENDER, "latest"]

    def test_balance_in_coins(self, runner: CliRunner, node: FakeNode) -> None:
        node.reply("0x14d1120d7b160000")
        result = invoke(runner, node, ["balance", SENDER, "--block", "100", "--asim"])
        assert result.exit_code == 0
        assert json.loads(result.output) == "1.5"
        assert node.last_request["params"] == [SENDER, "0x64"]

    def test_block_full(self, runner: CliRunner, node: FakeNode) -> None:
        node.reply(block_payload([TX_PAYLOAD]))
        result = invoke(runner, node, ["block", "436", "--full"])
        assert result.exit_code == 0
        output = json.loads(result.output)
        assert output["number"] == 436
        assert output["full_transactions"] is True
        assert output["transactions"][0]["hash"] == TX_HASH
        assert node.last_request["params"] == ["0x1b4", True]

    def test_block_by_hash_unknown(self, runner: CliRunner, node: FakeNode) -> None:
        node.reply(None)
        result = invoke(runner, node, ["block", "--hash", BLOCK_HASH])
        assert result.exit_code == 0
        assert json.loads(result.output) is None
        assert node.last_request["method"] == "flow_getBlockByHash"

    def test_logs(self, runner: CliRunner, node: FakeNode) -> None:
        node.reply([LOG_PAYLOAD])
        topic = LOG_PAYLOAD["topics"][0]
        result = invoke(
            runner,
            node,
            ["logs", "--from-block", "1", "--to-block", "latest", "--topic", topic, "--topic", ""],
        )
        assert result.exit_code == 0
        assert json.loads(result.output)[0]["topics"] == [topic]
        assert node.last_request["params"] == [
            {"fromBlock": "0x1", "toBlock": "latest", "topics": [[topic], None]}
        ]


class TestRawCall:
    def test_call_parses_json_params(self, runner: CliRunner, node: FakeNode) -> None:
        node.reply("0x0")
        result = invoke(runner, node, ["call", "flow_getBalance", SENDER, "latest"])
        assert result.exit_code == 0
        assert json.loads(result.output) == "0x0"
        assert node.last_request["params"] == [SENDER, "latest"]

    def test_call_with_object(self, runner: CliRunner, node: FakeNode) -> None:
        node.reply(True)
        result = invoke(runner, node, ["call", "flow_getBlockByNumber", '"0x1"', "false"])
        assert result.exit_code == 0
        assert node.last_request["params"] == ["0x1", False]


class TestErrors:
    def test_remote_error(self, runner: CliRunner, node: FakeNode) -> None:
        node.fail(-32000, "header not found")
        result = invoke(runner, node, ["block-number"])
        assert result.exit_code == 1
        assert "-32000" in result.output
        assert "header not found" in result.output

    def test_transport_error(self, runner: CliRunner, node: FakeNode) -> None:
        node.raw("not json", status_code=502)
        result = invoke(runner, node, ["block-number"])
        assert result.exit_code == 1
        assert "ERROR:" in result.output

    def test_invalid_block(self, runner: CliRunner, node: FakeNode) -> None:
        result = invoke(runner, node, ["block", "newest"])
        assert result.exit_code == 1
        assert "Invalid block identifier" in result.output
        assert node.requests == []

    def test_empty_rpc_url(self, runner: CliRunner, node: FakeNode) -> None:
        result = invoke(runner, node, ["--rpc-url", "", "block-number"])
        assert result.exit_code == 1
        assert "ERROR:" in result.output
        assert "url must be a non-empty string" in result.output
        assert node.requests == []
