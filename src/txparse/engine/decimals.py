"""Decimals Resolver: coin type -> display decimals, memoized per call."""

import logging

from txparse.infra.sui.rpc_client import SuiRPCClient

logger = logging.getLogger(__name__)

DEFAULT_DECIMALS = 0


class DecimalsResolver:
    """Looks up coin decimals through the RPC client.

    The cache is owned by the caller and passed in on every lookup, so the
    resolver itself holds no state between calls.
    """

    def __init__(self, rpc: SuiRPCClient) -> None:
        self._rpc = rpc

    async def resolve(self, coin_type: str, cache: dict[str, int]) -> int:
        cached = cache.get(coin_type)
        if cached is not None:
            return cached

        try:
            metadata = await self._rpc.get_coin_metadata(coin_type)
        except Exception:
            # Not cached: a later lookup for the same type retries
            logger.warning("Failed to get decimals for %s, using %d", coin_type, DEFAULT_DECIMALS, exc_info=True)
            return DEFAULT_DECIMALS

        decimals = DEFAULT_DECIMALS
        if metadata is not None and metadata.decimals is not None:
            decimals = metadata.decimals
        cache[coin_type] = decimals
        return decimals
