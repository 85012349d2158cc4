from models import Assignment


def find_cheapest_assignment(groups, listings, fits):
    """Assign each group to its own listing at the lowest total price.

    ``fits(group, listing)`` decides feasibility. Returns an ``Assignment``
    whose listing ids follow the group order, or ``None`` when some group
    cannot be housed by any unused listing.
    """
    candidates = []
    for group in groups:
        feasible = sorted(
            (listing for listing in listings if fits(group, listing)),
            key=lambda listing: (listing.price_in_cents, listing.id),
        )
        if not feasible:
            return None
        candidates.append(feasible)

    best = None
    used = set()
    chosen = []

    def _assign(index, running_price):
        nonlocal best
        if best is not None and running_price >= best.price:
            return
        if index == len(candidates):
            best = Assignment(running_price, tuple(chosen))
            return

        for listing in candidates[index]:
            if listing.id in used:
                continue
            price = running_price + listing.price_in_cents
            if best is not None and price >= best.price:
                # candidates are sorted by price, nothing later is cheaper
                break
            used.add(listing.id)
            chosen.append(listing.id)
            _assign(index + 1, price)
            chosen.pop()
            used.remove(listing.id)

    _assign(0, 0)
    return best
