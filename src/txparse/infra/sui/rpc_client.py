"""Sui JSON-RPC client: transaction blocks, historical objects, coin metadata."""

import logging

import httpx
from pydantic import ValidationError
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from txparse.domain.models import CoinMetadata, PastObject, TransactionBlock
from txparse.exceptions import ExternalServiceError, MissingResultError, SuiRPCError
from txparse.infra.http.rate_limited_client import RateLimitedClient

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 3


class SuiRPCClient:
    """Minimal Sui fullnode JSON-RPC client for transaction parsing."""

    def __init__(self, rpc_url: str, http_client: RateLimitedClient) -> None:
        self._rpc_url = rpc_url
        self._http = http_client

    @retry(
        retry=retry_if_exception_type((ExternalServiceError, httpx.TransportError)),
        stop=stop_after_attempt(MAX_ATTEMPTS),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    async def _call(self, method: str, params: list) -> dict | list | int | str | None:
        """Execute a JSON-RPC call and return the result field."""
        payload = {
            "jsonrpc": "2.0",
            "id": 1,
            "method": method,
            "params": params,
        }
        resp = await self._http.post(self._rpc_url, json=payload)
        try:
            data = resp.json()
        except ValueError as e:
            raise ExternalServiceError(f"Sui RPC returned non-JSON body ({method})") from e

        if not isinstance(data, dict):
            raise ExternalServiceError(f"Sui RPC returned unexpected body ({method}): {data!r}")

        if "error" in data:
            error = data["error"]
            if not isinstance(error, dict):
                raise SuiRPCError(method, code=0, message=str(error))
            raise SuiRPCError(
                method,
                code=error.get("code", 0),
                message=error.get("message", str(error)),
                data=error.get("data"),
            )
        if "result" not in data:
            raise MissingResultError(f"Sui RPC response missing result ({method})")

        return data["result"]

    async def get_transaction_block(
        self,
        digest: str,
        *,
        show_balance_changes: bool = False,
        show_effects: bool = False,
        show_events: bool = False,
        show_object_changes: bool = False,
    ) -> TransactionBlock:
        """Fetch a transaction block by digest with the selected sections included."""
        options = {
            "showBalanceChanges": show_balance_changes,
            "showEffects": show_effects,
            "showEvents": show_events,
            "showObjectChanges": show_object_changes,
        }
        result = await self._call("sui_getTransactionBlock", [digest, options])
        if result is None:
            raise MissingResultError(f"Transaction {digest} returned an empty result")
        return _validate(TransactionBlock, result, "sui_getTransactionBlock")

    async def try_get_past_object(self, object_id: str, version: str | int) -> PastObject:
        """Fetch an object as of a specific version.

        The result status tells found from not-found; only transport and RPC
        failures raise.
        """
        options = {"showContent": True, "showType": True, "showOwner": True}
        result = await self._call("sui_tryGetPastObject", [object_id, int(version), options])
        if result is None:
            raise MissingResultError(f"Object {object_id}@{version} returned an empty result")
        return _validate(PastObject, result, "sui_tryGetPastObject")

    async def get_coin_metadata(self, coin_type: str) -> CoinMetadata | None:
        """Fetch coin metadata. Returns None when the fullnode has none for this type."""
        result = await self._call("suix_getCoinMetadata", [coin_type])
        if result is None:
            return None
        return _validate(CoinMetadata, result, "suix_getCoinMetadata")


def _validate(model, result, method: str):
    try:
        return model.model_validate(result)
    except ValidationError as e:
        raise ExternalServiceError(f"Unexpected {method} result shape: {e}") from e
