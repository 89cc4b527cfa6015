"""Consumer-facing result shapes. Serialize with model_dump(by_alias=True) for camelCase."""

from decimal import Decimal

from pydantic import Field

from txparse.domain.models.base import CamelModel
from txparse.domain.models.transaction import GasCostSummary
from txparse.parser.utils.units import to_decimal_amount


class BalanceChange(CamelModel):
    coin_type: str
    amount: str  # signed integer string, verbatim
    owner: str  # canonical owner, "" when unknown


class ParseResult(CamelModel):
    balance_changes: list[BalanceChange]
    gas_cost: GasCostSummary


class DynamicFieldBalanceChange(CamelModel):
    """Balance delta of one object held in a Bag across a single transaction."""

    model_config = {"frozen": True}

    coin_type: str
    previous_value: str
    current_value: str
    value_diff: str
    decimals: int = Field(ge=0)

    @property
    def previous_amount(self) -> Decimal:
        return to_decimal_amount(self.previous_value, self.decimals)

    @property
    def current_amount(self) -> Decimal:
        return to_decimal_amount(self.current_value, self.decimals)

    @property
    def amount_diff(self) -> Decimal:
        return to_decimal_amount(self.value_diff, self.decimals)
