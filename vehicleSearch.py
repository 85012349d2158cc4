import logging
from collections.abc import Mapping

from listings import group_by_location, load_listings
from models import VEHICLE_WIDTH, SearchResult, ValidationError
from packing import FeasibilityOracle
from partitions import distinct_partitions
from assignment import find_cheapest_assignment

logger = logging.getLogger(__name__)


def _request_fields(query_item):
    if isinstance(query_item, Mapping):
        return query_item["length"], query_item["quantity"]
    return query_item.length, query_item.quantity


def parse_vehicle_query(vehicle_query):
    """Expand ``{length, quantity}`` items into a flat list of vehicle lengths."""
    items = [_request_fields(query_item) for query_item in vehicle_query]
    for length, quantity in items:
        if quantity < 0:
            raise ValidationError(f"Vehicle quantity cannot be negative (length {length}, quantity {quantity})")

    vehicles = []
    for length, quantity in items:
        vehicles.extend([length] * quantity)
    return vehicles


class VehicleSearch:
    """Finds the cheapest set of listings per location for a vehicle request.

    The location index and the feasibility cache are built once and reused by
    every ``find`` call. An instance must not be shared between threads
    without external locking.
    """

    def __init__(self, listings, vehicle_width=VEHICLE_WIDTH):
        self.locations = group_by_location(listings)
        self.oracle = FeasibilityOracle(vehicle_width)

    @classmethod
    def from_file(cls, listings_path, vehicle_width=VEHICLE_WIDTH):
        return cls(load_listings(listings_path), vehicle_width=vehicle_width)

    def find(self, vehicle_query) -> list[SearchResult]:
        vehicles = parse_vehicle_query(vehicle_query)
        if not vehicles:
            return []

        partitions = distinct_partitions(vehicles)
        logger.debug("%d vehicles give %d distinct partitions", len(vehicles), len(partitions))

        results = []
        for location_id, listings in self.locations.items():
            best = self.find_best_combination_for_location(partitions, listings)
            if best is None:
                logger.debug("No feasible combination at location %s", location_id)
                continue
            results.append(
                SearchResult(
                    location_id=location_id,
                    listing_ids=sorted(set(best.listing_ids)),
                    total_price_in_cents=best.price,
                )
            )

        results.sort(key=lambda result: result.total_price_in_cents)
        logger.info(
            "Searched %d vehicles across %d locations, %d matched",
            len(vehicles),
            len(self.locations),
            len(results),
        )
        return results

    def find_best_combination_for_location(self, partitions, listings):
        best = None
        for partition in partitions:
            if len(partition) > len(listings):
                continue
            combination = find_cheapest_assignment(partition, listings, self.oracle.fits)
            if combination is not None and (best is None or combination.price < best.price):
                best = combination

        logger.debug("Feasibility cache %s", self.oracle.cache_info())
        return best
