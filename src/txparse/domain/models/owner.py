"""Object ownership as a closed sum type, converted once from the JSON-RPC shape."""

import logging
from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, ValidationError

from txparse.domain.enums import OwnerKind

logger = logging.getLogger(__name__)


class ImmutableOwner(BaseModel):
    kind: Literal[OwnerKind.IMMUTABLE] = OwnerKind.IMMUTABLE


class AddressOwner(BaseModel):
    kind: Literal[OwnerKind.ADDRESS] = OwnerKind.ADDRESS
    address: str


class ObjectOwner(BaseModel):
    """Owned by another object, e.g. a dynamic field inside a Bag."""

    kind: Literal[OwnerKind.OBJECT] = OwnerKind.OBJECT
    object_id: str


class SharedOwner(BaseModel):
    kind: Literal[OwnerKind.SHARED] = OwnerKind.SHARED
    initial_shared_version: int


class ConsensusV2Owner(BaseModel):
    kind: Literal[OwnerKind.CONSENSUS_V2] = OwnerKind.CONSENSUS_V2
    start_version: int


class UnknownOwner(BaseModel):
    """A shape this library does not recognize. Kept for diagnostics only."""

    kind: Literal[OwnerKind.UNKNOWN] = OwnerKind.UNKNOWN
    raw: Any = None


Owner = ImmutableOwner | AddressOwner | ObjectOwner | SharedOwner | ConsensusV2Owner | UnknownOwner

_OWNER_TYPES = (ImmutableOwner, AddressOwner, ObjectOwner, SharedOwner, ConsensusV2Owner, UnknownOwner)


def owner_from_wire(raw: Any) -> Owner | None:
    """Convert a JSON-RPC `owner` value into an Owner variant.

    Immutable objects are returned by the fullnode as the plain string
    "Immutable"; every other variant is a single-key object.
    """
    if raw is None:
        return None
    if isinstance(raw, _OWNER_TYPES):
        return raw
    if isinstance(raw, str):
        if raw == OwnerKind.IMMUTABLE.value:
            return ImmutableOwner()
        return UnknownOwner(raw=raw)
    if not isinstance(raw, dict):
        return UnknownOwner(raw=raw)

    try:
        if OwnerKind.ADDRESS.value in raw:
            return AddressOwner(address=raw[OwnerKind.ADDRESS.value])
        if OwnerKind.OBJECT.value in raw:
            return ObjectOwner(object_id=raw[OwnerKind.OBJECT.value])
        if OwnerKind.SHARED.value in raw:
            shared = raw[OwnerKind.SHARED.value]
            return SharedOwner(initial_shared_version=shared["initial_shared_version"])
        if OwnerKind.CONSENSUS_V2.value in raw:
            consensus = raw[OwnerKind.CONSENSUS_V2.value]
            return ConsensusV2Owner(start_version=consensus["start_version"])
    except (KeyError, TypeError, ValidationError):
        logger.debug("Malformed owner payload: %r", raw)

    return UnknownOwner(raw=raw)


# Field type for wire models: validation runs owner_from_wire first
WireOwner = Annotated[Owner | None, BeforeValidator(owner_from_wire)]
