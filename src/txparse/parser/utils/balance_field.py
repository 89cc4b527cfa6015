"""Extract a balance-like number from Move object content of unknown shape.

Balances appear in several shapes depending on the wrapper type:

    {"balance": "1000"}                                   Coin<T>, plain struct
    {"balance": {"value": "1000"}}                        Balance<T> as struct
    {"value": "1000"}                                     Field<K, u64>
    {"value": {"fields": {"balance": "1000", ...}}}       Field<K, Coin<T>>
    {"value": {"fields": {"value": "1000"}}}              Field<K, Balance<T>>

Struct values in Sui JSON are nested as {"type": ..., "fields": {...}}; both the
nested and the flattened form are accepted.
"""

import logging
from typing import Any

from txparse.domain.models.objects import PastObject

logger = logging.getLogger(__name__)

MOVE_OBJECT = "moveObject"


def _struct_fields(value: Any) -> dict | None:
    """Return the field map of a struct value, unwrapping {"fields": {...}}."""
    if not isinstance(value, dict):
        return None
    inner = value.get("fields")
    if isinstance(inner, dict):
        return inner
    return value


def extract_balance_value(content: dict | None) -> str | None:
    """Return the balance of a move object as a numeric string, or None if not found.

    Rules, first match wins:
      1. fields.balance: its `value` sub-field if it is a struct, else the field itself.
      2. fields.value: its nested `balance`, else its nested `value`, else the field itself.
    """
    try:
        if not isinstance(content, dict) or content.get("dataType") != MOVE_OBJECT:
            return None
        fields = content.get("fields")
        if not isinstance(fields, dict):
            return None

        if fields.get("balance") is not None:
            balance = fields["balance"]
            nested = _struct_fields(balance)
            if nested is not None and nested.get("value") is not None:
                return str(nested["value"])
            return str(balance)

        if fields.get("value") is not None:
            value = fields["value"]
            nested = _struct_fields(value)
            if nested is not None:
                if nested.get("balance") is not None:
                    return str(nested["balance"])
                if nested.get("value") is not None:
                    return str(nested["value"])
            return str(value)
    except Exception:
        logger.warning("Balance extraction failed for content type %r", _content_type(content), exc_info=True)
        return None

    return None


def extract_snapshot_balance(snapshot: PastObject) -> str | None:
    """Balance of a historical object snapshot; None if the version was not found."""
    if not snapshot.found:
        logger.debug("Snapshot status %s has no content", snapshot.status)
        return None
    return extract_balance_value(snapshot.content)


def _content_type(content: Any) -> Any:
    if isinstance(content, dict):
        return content.get("type")
    return type(content).__name__
