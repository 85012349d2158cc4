from models import VEHICLE_WIDTH

ALONG_LENGTH = "length"
ALONG_WIDTH = "width"

# slack for float lengths that fill a lane exactly
EPSILON = 1e-9


def can_pack(items, lane_count, lane_capacity):
    """Decide whether ``items`` can be split across ``lane_count`` lanes.

    Every lane holds items end to end up to ``lane_capacity``. This is the
    bin-packing decision problem, so the worst case stays exponential in the
    number of items; placing the largest items first, skipping lanes whose
    remaining capacity was already tried for the same item, and remembering
    states that are known to fail keep typical requests small.
    """
    if not items:
        return True
    if lane_count <= 0:
        return False

    items = sorted(items, reverse=True)
    if items[0] > lane_capacity + EPSILON or sum(items) > lane_count * lane_capacity + EPSILON:
        return False

    lanes = [lane_capacity] * lane_count
    failed = set()

    def _place(index):
        if index == len(items):
            return True
        state = (index, tuple(sorted(lanes)))
        if state in failed:
            return False

        item = items[index]
        tried = set()
        for i, remaining in enumerate(lanes):
            if remaining + EPSILON < item or remaining in tried:
                continue
            tried.add(remaining)
            lanes[i] -= item
            placed = _place(index + 1)
            lanes[i] += item
            if placed:
                return True

        failed.add(state)
        return False

    return _place(0)


class FeasibilityOracle:
    """Decides whether a group of vehicles fits one listing.

    A group is packed in a single orientation: either every vehicle runs along
    the listing's length, or every vehicle is too long for that and runs along
    its width instead. The two are never mixed inside one listing.

    Results are cached for the lifetime of the oracle, keyed by orientation,
    the sorted group lengths and the listing footprint, so listings with the
    same dimensions share entries. The cache is not guarded for concurrent use.
    """

    def __init__(self, vehicle_width=VEHICLE_WIDTH):
        if vehicle_width <= 0:
            raise ValueError("vehicle_width must be positive")
        self.vehicle_width = vehicle_width
        self._cache = {}
        self.hits = 0
        self.misses = 0

    def fits(self, group, listing):
        if not group:
            return True
        lengths = tuple(sorted(group))
        return self._fits_along(ALONG_LENGTH, lengths, listing.length, listing.width) or self._fits_along(
            ALONG_WIDTH, lengths, listing.length, listing.width
        )

    def _fits_along(self, orientation, lengths, length, width):
        key = (orientation, lengths, length, width)
        cached = self._cache.get(key)
        if cached is not None:
            self.hits += 1
            return cached
        self.misses += 1

        if orientation == ALONG_LENGTH:
            result = lengths[-1] <= length + EPSILON and can_pack(lengths, int(width // self.vehicle_width), length)
        else:
            result = (
                lengths[0] > length + EPSILON
                and lengths[-1] <= width + EPSILON
                and can_pack(lengths, int(length // self.vehicle_width), width)
            )

        self._cache[key] = result
        return result

    def cache_info(self):
        return {"size": len(self._cache), "hits": self.hits, "misses": self.misses}

    def cache_clear(self):
        self._cache.clear()
        self.hits = 0
        self.misses = 0
