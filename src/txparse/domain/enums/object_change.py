from enum import Enum


class ObjectChangeType(str, Enum):
    """`type` tag of an entry in a transaction's objectChanges list."""

    CREATED = "created"
    MUTATED = "mutated"
    DELETED = "deleted"
    WRAPPED = "wrapped"
    UNWRAPPED = "unwrapped"
    TRANSFERRED = "transferred"
    PUBLISHED = "published"
