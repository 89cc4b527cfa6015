"""Print the dynamic field balance changes of a Bag in one transaction.

Usage:
    PYTHONPATH=src python scripts/inspect_bag.py [TX_DIGEST] [BAG_ID]

Uses TXPARSE_SUI_RPC_URL (default: Sui mainnet fullnode).
"""

import asyncio
import logging
import sys

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)-5s %(name)s - %(message)s")
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

TX_DIGEST = "J5BzQREx52w3t75bFSZAy3uRpGne543vx251ZDf6LKmR"
BAG_ID = "0x64ac48a57c8dfb3f69d5b0956be0c6727267978a11a53659c71f77c13c58aaad"


async def main(tx_digest: str, bag_id: str) -> None:
    from txparse.container import Container

    container = Container()
    settings = container.settings()
    logging.getLogger().setLevel(settings.log_level)
    client = container.tx_parse_client()

    print(f"RPC: {settings.sui_rpc_url}")
    print(f"Transaction: {tx_digest}")
    print(f"Bag ID: {bag_id}\n")

    try:
        changes = await client.get_bag_dynamic_field_balance_changes(tx_digest, bag_id)
    finally:
        await container.http_client().close()

    print(f"Found {len(changes)} dynamic field balance changes:\n")
    if not changes:
        print("No balance changes found for this bag in this transaction.")
        return

    for i, change in enumerate(changes, start=1):
        print(f"Change #{i}:")
        print(f"  Coin Type: {change.coin_type}")
        print(f"  Decimals: {change.decimals}")
        print(f"  Previous Value: {change.previous_value} ({change.previous_amount})")
        print(f"  Current Value: {change.current_value} ({change.current_amount})")
        print(f"  Difference: {change.value_diff} ({change.amount_diff})")
        print()


if __name__ == "__main__":
    digest = sys.argv[1] if len(sys.argv) > 1 else TX_DIGEST
    bag = sys.argv[2] if len(sys.argv) > 2 else BAG_ID
    asyncio.run(main(digest, bag))
