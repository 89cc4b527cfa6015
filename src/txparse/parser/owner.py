"""Canonical display string for an object owner."""

from typing import Any

from txparse.domain.models.owner import (
    AddressOwner,
    ConsensusV2Owner,
    ImmutableOwner,
    ObjectOwner,
    Owner,
    SharedOwner,
    owner_from_wire,
)

IMMUTABLE = "Immutable"


def get_actual_owner(owner: Owner | None) -> str | None:
    """Map an owner variant to its canonical string.

    Immutable -> "Immutable", address/object owners -> the holder id verbatim,
    Shared -> "Shared-{initial_shared_version}", ConsensusV2 -> "ConsensusV2-{start_version}".
    Unknown variants and a missing owner return None.
    """
    if owner is None:
        return None
    if isinstance(owner, ImmutableOwner):
        return IMMUTABLE
    if isinstance(owner, AddressOwner):
        return owner.address
    if isinstance(owner, ObjectOwner):
        return owner.object_id
    if isinstance(owner, SharedOwner):
        return f"Shared-{owner.initial_shared_version}"
    if isinstance(owner, ConsensusV2Owner):
        return f"ConsensusV2-{owner.start_version}"
    return None


def normalize_wire_owner(raw: Any) -> str | None:
    """get_actual_owner() over a raw JSON-RPC owner value."""
    return get_actual_owner(owner_from_wire(raw))
