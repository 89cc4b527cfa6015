from txparse.domain.models.objects import CoinMetadata, PastObject
from txparse.domain.models.owner import (
    AddressOwner,
    ConsensusV2Owner,
    ImmutableOwner,
    ObjectOwner,
    Owner,
    SharedOwner,
    UnknownOwner,
    owner_from_wire,
)
from txparse.domain.models.results import BalanceChange, DynamicFieldBalanceChange, ParseResult
from txparse.domain.models.transaction import (
    GasCostSummary,
    ObjectChange,
    RawBalanceChange,
    TransactionBlock,
    TransactionEffects,
)

__all__ = [
    "AddressOwner",
    "BalanceChange",
    "CoinMetadata",
    "ConsensusV2Owner",
    "DynamicFieldBalanceChange",
    "GasCostSummary",
    "ImmutableOwner",
    "ObjectChange",
    "ObjectOwner",
    "Owner",
    "ParseResult",
    "PastObject",
    "RawBalanceChange",
    "SharedOwner",
    "TransactionBlock",
    "TransactionEffects",
    "UnknownOwner",
    "owner_from_wire",
]
