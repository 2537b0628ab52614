"""Tests for request parameter types."""

from __future__ import annotations

import pytest

from asimovrpc.wire.params import BlockTag, FilterParams, T, block_param

ADDR_A = "0x66b2b9cc9f6ff6f3e2ca8e4a1cbe8f7b9c3a1f10"
ADDR_B = "0x63a4d7b2f4b2ec0bbd3a0e17a6c2c8e3c3e7e1a2"
TOPIC = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"


class TestBlockParam:
    def test_number_is_hex_encoded(self) -> None:
        assert block_param(0) == "0x0"
        assert block_param(1024) == "0x400"

    @pytest.mark.parametrize("tag", ["latest", "earliest", "pending"])
    def test_tag_strings_pass_through(self, tag: str) -> None:
        assert block_param(tag) == tag

    def test_enum(self) -> None:
        assert block_param(BlockTag.PENDING) == "pending"

    def test_hex_string_passes_through(self) -> None:
        assert block_param("0x1b4") == "0x1b4"

    @pytest.mark.parametrize("bad", ["newest", "123", "", "0x10\n", "latest\n", -1, True, 1.5])
    def test_rejects_invalid(self, bad: object) -> None:
        with pytest.raises(ValueError):
            block_param(bad)  # type: ignore[arg-type]


class TestTransactionParams:
    def test_minimal(self) -> None:
        assert T(from_address=ADDR_A).to_params() == {"from": ADDR_A}

    def test_full(self) -> None:
        tx = T(
            from_address=ADDR_A,
            to_address=ADDR_B,
            gas=21000,
            gas_price=10**9,
            value=10**18,
            data="0xdeadbeef",
            nonce=7,
        )
        assert tx.to_params() == {
            "from": ADDR_A,
            "to": ADDR_B,
            "gas": "0x5208",
            "gasPrice": "0x3b9aca00",
            "value": "0xde0b6b3a7640000",
            "data": "0xdeadbeef",
            "nonce": "0x7",
        }

    def test_zero_value_is_kept(self) -> None:
        assert T(from_address=ADDR_A, value=0).to_params()["value"] == "0x0"


class TestFilterParams:
    def test_empty(self) -> None:
        assert FilterParams().to_params() == {}

    def test_to_params(self) -> None:
        params = FilterParams(
            from_block=100,
            to_block=BlockTag.LATEST,
            address=(ADDR_A,),
            topics=((TOPIC,), (), (ADDR_A, ADDR_B)),
        )
        assert params.to_params() == {
            "fromBlock": "0x64",
            "toBlock": "latest",
            "address": [ADDR_A],
            "topics": [[TOPIC], None, [ADDR_A, ADDR_B]],
        }

    def test_from_dict(self) -> None:
        params = FilterParams.from_dict(
            {
                "fromBlock": "0x64",
                "toBlock": "pending",
                "address": ADDR_A,
                "topics": [TOPIC, None, [ADDR_A, ADDR_B]],
            }
        )
        assert params == FilterParams(
            from_block=100,
            to_block=BlockTag.PENDING,
            address=(ADDR_A,),
            topics=((TOPIC,), (), (ADDR_A, ADDR_B)),
        )
