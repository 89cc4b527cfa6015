import copy
import json
from pathlib import Path

import pytest

from txparse.domain.models import TransactionBlock

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def _transaction_block_raw() -> dict:
    with open(FIXTURES / "transaction_block.json") as f:
        return json.load(f)


@pytest.fixture()
def transaction_block_raw(_transaction_block_raw) -> dict:
    return copy.deepcopy(_transaction_block_raw)


@pytest.fixture()
def transaction_block(transaction_block_raw) -> TransactionBlock:
    return TransactionBlock.model_validate(transaction_block_raw)
