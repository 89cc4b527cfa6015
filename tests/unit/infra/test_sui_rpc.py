"""Tests for SuiRPCClient: JSON-RPC communication."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from tenacity import wait_none

from txparse.domain.models import CoinMetadata, ObjectOwner, PastObject, TransactionBlock
from txparse.exceptions import ExternalServiceError, MissingResultError, SuiRPCError
from txparse.infra.sui.rpc_client import MAX_ATTEMPTS, SuiRPCClient

RPC_URL = "https://fullnode.mainnet.sui.io:443"


@pytest.fixture(autouse=True)
def no_retry_wait(monkeypatch):
    monkeypatch.setattr(SuiRPCClient._call.retry, "wait", wait_none())


@pytest.fixture()
def mock_http():
    return AsyncMock()


@pytest.fixture()
def rpc(mock_http):
    return SuiRPCClient(rpc_url=RPC_URL, http_client=mock_http)


def _mock_response(data: dict):
    resp = MagicMock()
    resp.json.return_value = data
    return resp


def _sent_payload(mock_http) -> dict:
    call_args = mock_http.post.call_args
    return call_args[1]["json"] if "json" in call_args[1] else call_args[0][1]


class TestGetTransactionBlock:
    async def test_returns_validated_block(self, rpc, mock_http, transaction_block_raw):
        mock_http.post.return_value = _mock_response({"jsonrpc": "2.0", "id": 1, "result": transaction_block_raw})

        tx = await rpc.get_transaction_block("0xdead", show_balance_changes=True, show_effects=True)

        assert isinstance(tx, TransactionBlock)
        assert len(tx.balance_changes) == 5
        assert tx.effects.gas_used.storage_cost == "200"

    async def test_sends_selected_options(self, rpc, mock_http, transaction_block_raw):
        mock_http.post.return_value = _mock_response({"jsonrpc": "2.0", "id": 1, "result": transaction_block_raw})

        await rpc.get_transaction_block("0xdead", show_balance_changes=True, show_effects=True, show_events=True)

        assert mock_http.post.call_args[0][0] == RPC_URL
        payload = _sent_payload(mock_http)
        assert payload["method"] == "sui_getTransactionBlock"
        assert payload["params"] == [
            "0xdead",
            {
                "showBalanceChanges": True,
                "showEffects": True,
                "showEvents": True,
                "showObjectChanges": False,
            },
        ]

    async def test_object_changes_owner_converted(self, rpc, mock_http):
        result = {
            "digest": "0xdead",
            "objectChanges": [
                {
                    "type": "mutated",
                    "objectId": "0xa",
                    "version": 12,
                    "previousVersion": "11",
                    "owner": {"ObjectOwner": "0xbag"},
                    "objectType": "0x2::coin::Coin<0x2::sui::SUI>",
                }
            ],
        }
        mock_http.post.return_value = _mock_response({"jsonrpc": "2.0", "id": 1, "result": result})

        tx = await rpc.get_transaction_block("0xdead", show_object_changes=True)

        change = tx.object_changes[0]
        assert change.owner == ObjectOwner(object_id="0xbag")
        assert change.version == "12"
        assert change.previous_version == "11"

    async def test_null_result_raises(self, rpc, mock_http):
        mock_http.post.return_value = _mock_response({"jsonrpc": "2.0", "id": 1, "result": None})

        with pytest.raises(MissingResultError):
            await rpc.get_transaction_block("0xmissing")


class TestTryGetPastObject:
    async def test_version_sent_as_integer(self, rpc, mock_http):
        mock_http.post.return_value = _mock_response({
            "jsonrpc": "2.0", "id": 1,
            "result": {"status": "VersionFound", "details": {"objectId": "0xa", "version": "7", "content": {}}},
        })

        snapshot = await rpc.try_get_past_object("0xa", "7")

        assert isinstance(snapshot, PastObject)
        assert snapshot.found
        payload = _sent_payload(mock_http)
        assert payload["method"] == "sui_tryGetPastObject"
        assert payload["params"][0] == "0xa"
        assert payload["params"][1] == 7
        assert payload["params"][2]["showContent"] is True

    async def test_not_found_status(self, rpc, mock_http):
        mock_http.post.return_value = _mock_response({
            "jsonrpc": "2.0", "id": 1,
            "result": {"status": "VersionNotFound", "details": ["0xa", 7]},
        })

        snapshot = await rpc.try_get_past_object("0xa", 7)
        assert not snapshot.found
        assert snapshot.content is None
        assert snapshot.object_type is None


class TestGetCoinMetadata:
    async def test_returns_metadata(self, rpc, mock_http):
        mock_http.post.return_value = _mock_response({
            "jsonrpc": "2.0", "id": 1,
            "result": {"decimals": 9, "name": "Sui", "symbol": "SUI", "description": "", "iconUrl": None, "id": "0x9"},
        })

        metadata = await rpc.get_coin_metadata("0x2::sui::SUI")
        assert metadata == CoinMetadata(decimals=9, name="Sui", symbol="SUI", description="", id="0x9")
        assert _sent_payload(mock_http)["params"] == ["0x2::sui::SUI"]

    async def test_null_result_returns_none(self, rpc, mock_http):
        mock_http.post.return_value = _mock_response({"jsonrpc": "2.0", "id": 1, "result": None})
        assert await rpc.get_coin_metadata("0x1::fake::FAKE") is None


class TestRPCErrors:
    async def test_rpc_error_retried_then_raised(self, rpc, mock_http):
        mock_http.post.return_value = _mock_response({
            "jsonrpc": "2.0", "id": 1,
            "error": {"code": -32000, "message": "Transaction not found"},
        })

        with pytest.raises(SuiRPCError) as exc_info:
            await rpc.get_transaction_block("0xmissing")

        assert exc_info.value.code == -32000
        assert exc_info.value.message == "Transaction not found"
        assert mock_http.post.call_count == MAX_ATTEMPTS

    async def test_transport_error_retried(self, rpc, mock_http, transaction_block_raw):
        mock_http.post.side_effect = [
            httpx.ConnectError("connection reset"),
            _mock_response({"jsonrpc": "2.0", "id": 1, "result": transaction_block_raw}),
        ]

        tx = await rpc.get_transaction_block("0xdead", show_effects=True)
        assert tx.digest == transaction_block_raw["digest"]
        assert mock_http.post.call_count == 2

    async def test_missing_result_member(self, rpc, mock_http):
        mock_http.post.return_value = _mock_response({"jsonrpc": "2.0", "id": 1})

        with pytest.raises(MissingResultError):
            await rpc.get_coin_metadata("0x2::sui::SUI")

    async def test_non_json_body(self, rpc, mock_http):
        resp = MagicMock()
        resp.json.side_effect = ValueError("Expecting value")
        mock_http.post.return_value = resp

        with pytest.raises(ExternalServiceError):
            await rpc.get_coin_metadata("0x2::sui::SUI")

    async def test_unexpected_result_shape(self, rpc, mock_http):
        mock_http.post.return_value = _mock_response({"jsonrpc": "2.0", "id": 1, "result": {"details": {}}})

        with pytest.raises(ExternalServiceError):
            await rpc.try_get_past_object("0xa", 1)

    async def test_string_error_member(self, rpc, mock_http):
        mock_http.post.return_value = _mock_response({"error": "bad request"})

        with pytest.raises(SuiRPCError) as exc_info:
            await rpc.get_transaction_block("0xdead")

        assert exc_info.value.message == "bad request"
        assert mock_http.post.call_count == MAX_ATTEMPTS

    async def test_non_object_body(self, rpc, mock_http):
        mock_http.post.return_value = _mock_response("Service Unavailable")

        with pytest.raises(ExternalServiceError, match="unexpected body"):
            await rpc.get_coin_metadata("0x2::sui::SUI")
