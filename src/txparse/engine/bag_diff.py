"""Container Diff Engine: balance deltas of objects held by a Bag in one transaction.

For every object the transaction created or mutated under the Bag, the object
is fetched at its new version and (when mutated) at its previous version; the
balance field of both snapshots is diffed.
"""

import logging
import re
from dataclasses import dataclass

from txparse.domain.models import DynamicFieldBalanceChange, ObjectChange, ObjectOwner
from txparse.engine.decimals import DecimalsResolver
from txparse.infra.sui.rpc_client import SuiRPCClient
from txparse.parser.utils.balance_field import extract_snapshot_balance
from txparse.parser.utils.coin_type import extract_coin_type

logger = logging.getLogger(__name__)

ZERO = "0"

# Unsigned ASCII decimal digits, nothing else
AMOUNT_PATTERN = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class BagEntry:
    """An object change that qualifies for diffing."""

    object_id: str
    version: str
    previous_version: str | None
    object_type: str | None = None


def select_bag_entries(object_changes: list[ObjectChange], bag_id: str) -> list[BagEntry]:
    """Created/mutated changes owned by `bag_id` (exact match), in source order."""
    entries: list[BagEntry] = []
    for change in object_changes:
        if not change.is_created_or_mutated():
            continue
        if not isinstance(change.owner, ObjectOwner) or change.owner.object_id != bag_id:
            continue
        if change.object_id is None or change.version is None:
            logger.warning("Skipping %s change without object id/version", change.type)
            continue
        entries.append(BagEntry(
            object_id=change.object_id,
            version=change.version,
            previous_version=change.previous_version,
            object_type=change.object_type,
        ))
    return entries


def parse_amount(raw: str) -> int:
    """Parse an on-chain u64/u128 amount string. Raises ValueError on anything else."""
    if AMOUNT_PATTERN.fullmatch(raw) is None:
        raise ValueError(f"Not an unsigned integer amount: {raw!r}")
    return int(raw)


class BagBalanceDiffEngine:
    """Reconstructs dynamic field balance changes for a Bag."""

    def __init__(self, rpc: SuiRPCClient, decimals: DecimalsResolver | None = None) -> None:
        self._rpc = rpc
        self._decimals = decimals or DecimalsResolver(rpc)

    async def get_balance_changes(self, tx_digest: str, bag_id: str) -> list[DynamicFieldBalanceChange]:
        tx = await self._rpc.get_transaction_block(tx_digest, show_object_changes=True)
        if tx.object_changes is None:
            logger.debug("Transaction %s has no object changes", tx_digest)
            return []

        entries = select_bag_entries(tx.object_changes, bag_id)
        decimals_cache: dict[str, int] = {}
        changes: list[DynamicFieldBalanceChange] = []

        # Sequential on purpose: one object fully resolved before the next
        for entry in entries:
            change = await self._process_entry(entry, decimals_cache)
            if change is not None:
                changes.append(change)

        logger.info(
            "Bag %s in %s: %d of %d owned objects produced balance changes",
            bag_id, tx_digest, len(changes), len(entries),
        )
        return changes

    async def _process_entry(
        self, entry: BagEntry, decimals_cache: dict[str, int]
    ) -> DynamicFieldBalanceChange | None:
        """Diff one object. Returns None (and logs) when the object must be skipped."""
        try:
            current = await self._rpc.try_get_past_object(entry.object_id, entry.version)
            current_raw = extract_snapshot_balance(current)
            if current_raw is None:
                logger.debug("No balance field on %s@%s, skipping", entry.object_id, entry.version)
                return None

            previous_raw = ZERO
            if entry.previous_version is not None:
                previous = await self._rpc.try_get_past_object(entry.object_id, entry.previous_version)
                previous_raw = extract_snapshot_balance(previous) or ZERO

            try:
                current_value = parse_amount(current_raw)
                previous_value = parse_amount(previous_raw)
            except ValueError:
                logger.warning("Non-integer balance on %s, skipping", entry.object_id, exc_info=True)
                return None

            object_type = current.object_type or entry.object_type or ""
            coin_type = extract_coin_type(object_type)
            decimals = await self._decimals.resolve(coin_type, decimals_cache)

            return DynamicFieldBalanceChange(
                coin_type=coin_type,
                previous_value=str(previous_value),
                current_value=str(current_value),
                value_diff=str(current_value - previous_value),
                decimals=decimals,
            )
        except Exception:
            logger.exception("Error processing object %s", entry.object_id)
            return None
