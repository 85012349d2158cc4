from __future__ import annotations
import json
import tempfile
from pathlib import Path
from typing import Any
import pytest

from listings import group_by_location
from listings import load_listings
from models import Listing


@pytest.fixture
def sample_listings() -> list[dict[str, Any]]:
    """Sample JSON data mimicking listings.json"""
    return [
        {
            "id": "2f9266ce-7716-40b1-b27f-c1d77a807551",
            "location_id": "d1c331f1-9ae6-4d8a-9d87-a0cf5cfe1536",
            "length": 40,
            "width": 20,
            "price_in_cents": 64683,
        },
        {
            "id": "741a0213-8512-499e-a8f2-8d3aad664d76",
            "location_id": "760ec3ad-5db1-4e81-820b-f15f009d4b5a",
            "length": 20,
            "width": 20,
            "price_in_cents": 16293,
        },
        {
            "id": "2213d790-9641-4ac1-b56f-9883ac54ec1a",
            "location_id": "d1c331f1-9ae6-4d8a-9d87-a0cf5cfe1536",
            "length": 50,
            "width": 25,
            "price_in_cents": 75000,
        },
    ]


def _write_temp_listings(data: Any) -> Path:
    """Helper to write JSON to a temp file"""
    tmp = tempfile.NamedTemporaryFile(delete=False, suffix=".json")
    tmp.close()
    with open(tmp.name, "w", encoding="utf-8") as f:
        json.dump(data, f)
    return Path(tmp.name)


def test_load_listings_returns_listing_records(sample_listings: list[dict[str, Any]]) -> None:
    tmp_file = _write_temp_listings(sample_listings)
    result = load_listings(tmp_file)

    assert len(result) == 3
    assert all(isinstance(listing, Listing) for listing in result)
    assert result[0] == Listing(
        id="2f9266ce-7716-40b1-b27f-c1d77a807551",
        length=40,
        width=20,
        location_id="d1c331f1-9ae6-4d8a-9d87-a0cf5cfe1536",
        price_in_cents=64683,
    )


def test_load_listings_rejects_non_array() -> None:
    tmp_file = _write_temp_listings({"id": "not-a-list"})

    with pytest.raises(ValueError):
        load_listings(tmp_file)


def test_load_listings_missing_field_raises(sample_listings: list[dict[str, Any]]) -> None:
    del sample_listings[1]["width"]
    tmp_file = _write_temp_listings(sample_listings)

    with pytest.raises(KeyError):
        load_listings(tmp_file)


def test_load_listings_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_listings(tmp_path / "missing.json")


def test_group_by_location_groups_by_location_id(sample_listings: list[dict[str, Any]]) -> None:
    """It should group multiple listings under the same location_id"""
    listings = [Listing.from_dict(record) for record in sample_listings]
    result = group_by_location(listings)

    assert list(result) == [
        "d1c331f1-9ae6-4d8a-9d87-a0cf5cfe1536",
        "760ec3ad-5db1-4e81-820b-f15f009d4b5a",
    ]
    group = result["d1c331f1-9ae6-4d8a-9d87-a0cf5cfe1536"]
    assert [listing.id for listing in group] == [
        "2f9266ce-7716-40b1-b27f-c1d77a807551",
        "2213d790-9641-4ac1-b56f-9883ac54ec1a",
    ]


def test_group_by_location_empty() -> None:
    assert group_by_location([]) == {}
