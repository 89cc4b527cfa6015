"""Fetch a transaction and print its normalized balance changes and gas cost as JSON.

Usage:
    PYTHONPATH=src python scripts/parse_tx.py TX_DIGEST
"""

import asyncio
import json
import logging
import sys

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)-5s %(name)s - %(message)s")
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


async def main(tx_digest: str) -> None:
    from txparse.container import Container

    container = Container()
    logging.getLogger().setLevel(container.settings().log_level)
    client = container.tx_parse_client()
    try:
        result = await client.parse_tx(tx_digest)
    finally:
        await container.http_client().close()

    print(json.dumps(result.model_dump(by_alias=True), indent=2))


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(1)
    asyncio.run(main(sys.argv[1]))
