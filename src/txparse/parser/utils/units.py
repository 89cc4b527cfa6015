"""Scale raw on-chain integer amounts to display units."""

from decimal import Decimal


def to_decimal_amount(raw: str | int, decimals: int) -> Decimal:
    """Convert an integer amount in the smallest unit to a Decimal in display units.

    to_decimal_amount("1500000000", 9) -> Decimal("1.5")
    """
    value = Decimal(str(raw))
    if decimals == 0 or value == 0:
        return value
    return value / Decimal(10) ** decimals
