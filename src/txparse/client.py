"""TxParseClient: entry point combining the RPC client, Balance Parser and Bag diff engine."""

import logging

from txparse.domain.models import DynamicFieldBalanceChange, ParseResult
from txparse.engine.bag_diff import BagBalanceDiffEngine
from txparse.infra.sui.rpc_client import SuiRPCClient
from txparse.parser.transaction import parse_transaction

logger = logging.getLogger(__name__)


class TxParseClient:
    def __init__(self, rpc: SuiRPCClient, bag_engine: BagBalanceDiffEngine | None = None) -> None:
        self._rpc = rpc
        self._bag_engine = bag_engine or BagBalanceDiffEngine(rpc)

    async def parse_tx(self, digest: str) -> ParseResult:
        """Fetch a transaction and return its balance changes and gas cost."""
        tx = await self._rpc.get_transaction_block(
            digest,
            show_balance_changes=True,
            show_effects=True,
            show_events=True,
        )
        result = parse_transaction(tx)
        logger.debug("Parsed %s: %d balance changes", digest, len(result.balance_changes))
        return result

    async def get_bag_dynamic_field_balance_changes(
        self, tx_digest: str, bag_id: str
    ) -> list[DynamicFieldBalanceChange]:
        """Balance deltas of the objects held by `bag_id` that `tx_digest` touched."""
        return await self._bag_engine.get_balance_changes(tx_digest, bag_id)
