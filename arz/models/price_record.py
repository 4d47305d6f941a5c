# arz/models/price_record.py

"""Unified price record and snapshot models."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PriceRecord:
    """A single normalized price entry from any source page."""

    code: str
    local_name: str
    price: float
    icon_url: str = ""
    display_name: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the record in the published JSON shape."""
        return {
            "code": self.code,
            "name": self.local_name,
            "price": self.price,
            "icon": self.icon_url,
            "en": self.display_name,
        }


@dataclass(frozen=True)
class Snapshot:
    """The merged, timestamped output document."""

    generated_at: str
    records: tuple[PriceRecord, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Return the snapshot in the published JSON shape."""
        return {
            "date": self.generated_at,
            "currencies": [r.to_dict() for r in self.records],
        }
