"""Wire models for sui_getTransactionBlock responses. Unknown keys are ignored."""

from txparse.domain.enums import ObjectChangeType
from txparse.domain.models.base import CamelModel
from txparse.domain.models.owner import WireOwner


class GasCostSummary(CamelModel):
    """Gas charged by a transaction, integer strings in MIST."""

    computation_cost: str
    storage_cost: str
    storage_rebate: str
    non_refundable_storage_fee: str


class TransactionEffects(CamelModel):
    status: dict | None = None
    gas_used: GasCostSummary | None = None


class RawBalanceChange(CamelModel):
    coin_type: str
    amount: str
    owner: WireOwner = None


class ObjectChange(CamelModel):
    type: str
    object_id: str | None = None
    object_type: str | None = None
    version: str | None = None
    previous_version: str | None = None
    owner: WireOwner = None

    def is_created_or_mutated(self) -> bool:
        return self.type in (ObjectChangeType.CREATED.value, ObjectChangeType.MUTATED.value)


class TransactionBlock(CamelModel):
    digest: str | None = None
    balance_changes: list[RawBalanceChange] | None = None
    effects: TransactionEffects | None = None
    object_changes: list[ObjectChange] | None = None
    events: list[dict] | None = None
