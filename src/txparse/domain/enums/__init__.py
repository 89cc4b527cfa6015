from txparse.domain.enums.object_change import ObjectChangeType
from txparse.domain.enums.object_status import PastObjectStatus
from txparse.domain.enums.owner import OwnerKind

__all__ = [
    "ObjectChangeType",
    "OwnerKind",
    "PastObjectStatus",
]
