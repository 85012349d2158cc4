def generate_partitions(items):
    """Yield every set partition of ``items`` as a list of groups.

    Each position in ``items`` is treated as a distinct element, so equal
    values may appear in several partitions that only differ by which copy
    sits where. The worklist holds partial partitions of the first ``index``
    items; popping one either opens a new group for the next item or adds it
    to each existing group.
    """
    items = list(items)
    stack = [(0, [])]
    while stack:
        index, partition = stack.pop()
        if index == len(items):
            yield partition
            continue
        item = items[index]
        for i in range(len(partition)):
            extended = [group + [item] if j == i else group for j, group in enumerate(partition)]
            stack.append((index + 1, extended))
        stack.append((index + 1, partition + [[item]]))


def partition_signature(partition):
    return tuple(sorted(tuple(sorted(group)) for group in partition))


def distinct_partitions(items):
    """Partitions of ``items`` with duplicates by group contents removed, in generation order."""
    seen = set()
    partitions = []
    for partition in generate_partitions(items):
        signature = partition_signature(partition)
        if signature in seen:
            continue
        seen.add(signature)
        partitions.append(partition)
    return partitions
