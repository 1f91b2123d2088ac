"""Exhaustive reference search over every row split.

Slow (``2**(n-1)`` partitions) but obviously correct; only for cross-checking
the dynamic program on small inputs. Note the default aggregation here is the
*sum* of row costs, not the mean used by ``partition.best_partition``.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from app.jigsaw.layout.errors import InvalidInputError, InvalidRowError, NoValidPartitionError
from app.jigsaw.layout.geometry import make_row
from app.jigsaw.layout.objectives import Objective, squared_error
from app.jigsaw.layout.partition import Bounds, Partition, get_aggregate
from app.jigsaw.layout.validation import checked_cost, validate_inputs

BRUTE_FORCE_MAX_ITEMS = 16


def all_splits(n: int) -> Iterator[Bounds]:
    """Yield every partition of ``n`` items into contiguous rows.

    Bit ``j - 1`` of the mask set means "a new row starts at item ``j``".
    Partitions are produced one at a time; call again to restart.
    """

    if n <= 0:
        yield ()
        return

    for mask in range(1 << (n - 1)):
        bounds = []
        start = 0
        for j in range(1, n):
            if mask >> (j - 1) & 1:
                bounds.append((start, j - 1))
                start = j
        bounds.append((start, n - 1))
        yield tuple(bounds)


def brute_force_partition(
    aspect_ratios: Iterable[float],
    margin: float,
    objective: Optional[Objective] = None,
    *,
    aggregate: str = "sum",
    max_items: int = BRUTE_FORCE_MAX_ITEMS,
) -> Partition:
    ratios, m = validate_inputs(aspect_ratios, margin)
    if objective is None:
        objective = squared_error()
    if not callable(objective):
        raise InvalidInputError("objective must be callable")
    combine = get_aggregate(aggregate)

    n = len(ratios)
    if n > max_items:
        raise InvalidInputError(f"brute force is limited to {max_items} items, got {n}")

    best: Optional[Partition] = None
    for bounds in all_splits(n):
        try:
            rows = [make_row(ratios[start:end + 1], m) for start, end in bounds]
        except InvalidRowError:
            continue

        value = 0.0
        for count, row in enumerate(rows):
            value = combine(value, count, checked_cost(objective(row.height)))

        if best is None or value < best.cost:
            best = Partition(bounds=bounds, cost=value)

    if best is None:
        # Only possible when single-item rows are already too narrow.
        raise NoValidPartitionError(0, m)
    return best
