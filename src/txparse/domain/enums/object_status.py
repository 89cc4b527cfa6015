from enum import Enum


class PastObjectStatus(str, Enum):
    """Status returned by sui_tryGetPastObject."""

    VERSION_FOUND = "VersionFound"
    OBJECT_NOT_EXISTS = "ObjectNotExists"
    OBJECT_DELETED = "ObjectDeleted"
    VERSION_NOT_FOUND = "VersionNotFound"
    VERSION_TOO_HIGH = "VersionTooHigh"
