import json
import logging

from models import Listing

logger = logging.getLogger(__name__)


def load_listings(listings_path):
    with open(listings_path) as f:
        records = json.load(f)

    if not isinstance(records, list):
        raise ValueError(f"{listings_path} must contain a JSON array of listings")

    listings = [Listing.from_dict(record) for record in records]
    logger.info("Loaded %d listings from %s", len(listings), listings_path)
    return listings


def group_by_location(listings):
    locations = dict()
    for listing in listings:
        locations.setdefault(listing.location_id, []).append(listing)
    return locations
