"""Balance Parser: flatten a transaction's balance changes and gas cost."""

import logging

from pydantic import ValidationError

from txparse.domain.models import BalanceChange, ParseResult, TransactionBlock
from txparse.exceptions import InvalidPayloadError, MissingGasInfoError
from txparse.parser.owner import get_actual_owner

logger = logging.getLogger(__name__)


def parse_transaction(tx: TransactionBlock) -> ParseResult:
    """Build a ParseResult from a transaction fetched with balance changes and effects.

    Balance changes keep source order and are not merged per coin type.
    Raises MissingGasInfoError when effects.gasUsed is absent.
    """
    gas_cost = tx.effects.gas_used if tx.effects is not None else None
    if gas_cost is None:
        raise MissingGasInfoError(
            f"Transaction {tx.digest or '<unknown>'} response does not include gas usage information"
        )

    balance_changes = [
        BalanceChange(
            coin_type=change.coin_type,
            amount=change.amount,
            # "" marks an unknown owner; never a real address
            owner=get_actual_owner(change.owner) or "",
        )
        for change in tx.balance_changes or []
    ]

    return ParseResult(balance_changes=balance_changes, gas_cost=gas_cost)


def parse_transaction_value(raw: dict) -> ParseResult:
    """parse_transaction() over a raw sui_getTransactionBlock result."""
    try:
        tx = TransactionBlock.model_validate(raw)
    except ValidationError as e:
        logger.warning("Transaction payload failed validation: %d error(s)", e.error_count())
        raise InvalidPayloadError(f"Transaction payload could not be validated: {e}") from e
    return parse_transaction(tx)
