"""Wire models for historical object snapshots and coin metadata."""

from typing import Any

from txparse.domain.enums import PastObjectStatus
from txparse.domain.models.base import CamelModel


class PastObject(CamelModel):
    """Result of sui_tryGetPastObject.

    `details` is the object data when `status` is VersionFound; otherwise the
    fullnode returns an object id or an {object_id, version} pair.
    """

    status: str
    details: Any = None

    @property
    def found(self) -> bool:
        return self.status == PastObjectStatus.VERSION_FOUND.value and isinstance(self.details, dict)

    @property
    def content(self) -> dict | None:
        if not self.found:
            return None
        content = self.details.get("content")
        return content if isinstance(content, dict) else None

    @property
    def object_type(self) -> str | None:
        """Declared Move type, from the content first, then from the object data."""
        content = self.content
        if content is not None and content.get("type"):
            return content["type"]
        if self.found:
            return self.details.get("type")
        return None


class CoinMetadata(CamelModel):
    decimals: int | None = None
    name: str | None = None
    symbol: str | None = None
    description: str | None = None
    icon_url: str | None = None
    id: str | None = None
