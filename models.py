from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

VEHICLE_WIDTH = 10


class ValidationError(ValueError):
    """Raised when a vehicle request cannot be searched as given."""


@dataclass(frozen=True)
class VehicleRequest:
    length: float
    quantity: int


@dataclass(frozen=True)
class Listing:
    id: str
    length: float
    width: float
    location_id: str
    price_in_cents: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Listing:
        return cls(
            id=data["id"],
            length=data["length"],
            width=data["width"],
            location_id=data["location_id"],
            price_in_cents=data["price_in_cents"],
        )


@dataclass(frozen=True)
class Assignment:
    price: int
    listing_ids: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SearchResult:
    location_id: str
    listing_ids: list[str]
    total_price_in_cents: int

    def to_dict(self) -> dict[str, str | list[str] | int]:
        return {
            "location_id": self.location_id,
            "listing_ids": list(self.listing_ids),
            "total_price_in_cents": self.total_price_in_cents,
        }
