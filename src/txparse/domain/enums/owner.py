from enum import Enum


class OwnerKind(str, Enum):
    """Ownership variants of a Sui object. Values mirror the JSON-RPC keys."""

    IMMUTABLE = "Immutable"
    ADDRESS = "AddressOwner"
    OBJECT = "ObjectOwner"
    SHARED = "Shared"
    CONSENSUS_V2 = "ConsensusV2"
    UNKNOWN = "Unknown"
