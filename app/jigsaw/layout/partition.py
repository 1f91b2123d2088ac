"""Optimal row partitioning.

Given the full sequence of aspect ratios, pick the contiguous split into rows
with the lowest aggregate row cost. By default rows are aggregated by their
*mean* cost: a plain sum grows with the number of rows regardless of how good
each row looks, which biases the search toward a few huge rows.

Algorithm: dynamic programming over right boundaries.

For every item ``i`` we keep the best way to lay out items ``0..i``:
``best_cost[i]``, how many rows produced it (``best_count[i]``) and where the
previous row ended (``best_prev[i]``, ``-1`` for "first row"). The count is
what makes the running mean exact when another row is appended.

O(n^2) time, O(n) space.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from app.jigsaw.layout.errors import InvalidInputError, InvalidRowError, NoValidPartitionError
from app.jigsaw.layout.geometry import prefix_sums, range_height
from app.jigsaw.layout.objectives import Objective
from app.jigsaw.layout.validation import checked_cost, validate_inputs

Bounds = Tuple[Tuple[int, int], ...]


@dataclass(frozen=True)
class Partition:
    """Rows as inclusive ``(start, end)`` index pairs, plus the aggregate cost."""

    bounds: Bounds
    cost: float

    @property
    def row_count(self) -> int:
        return len(self.bounds)


def _mean(prev_cost: float, prev_count: int, row_cost: float) -> float:
    return (prev_cost * prev_count + row_cost) / (prev_count + 1)


def _total(prev_cost: float, prev_count: int, row_cost: float) -> float:
    return prev_cost + row_cost


# (aggregate so far, rows so far, new row cost) -> new aggregate
AGGREGATES: Dict[str, Callable[[float, int, float], float]] = {
    "mean": _mean,
    "sum": _total,
}


def get_aggregate(name: str) -> Callable[[float, int, float], float]:
    try:
        return AGGREGATES[name]
    except KeyError:
        raise InvalidInputError(
            f"unknown aggregate {name!r}; expected one of {sorted(AGGREGATES)}"
        ) from None


def best_partition(
    aspect_ratios: Iterable[float],
    margin: float,
    objective: Objective,
    *,
    aggregate: str = "mean",
) -> Partition:
    """Find the lowest-cost contiguous partition of ``aspect_ratios``.

    Ties go to the candidate examined first, i.e. the one whose previous row
    ends earliest (a single row beats any split).

    Raises NoValidPartitionError if some item cannot end any valid row.
    """

    ratios, m = validate_inputs(aspect_ratios, margin)
    if not callable(objective):
        raise InvalidInputError("objective must be callable")
    combine = get_aggregate(aggregate)

    n = len(ratios)
    if n == 0:
        return Partition(bounds=(), cost=0.0)

    prefix = prefix_sums(ratios)
    best_cost: List[float] = [0.0] * n
    best_count: List[int] = [0] * n
    best_prev: List[int] = [-1] * n

    for i in range(n):
        chosen: Optional[Tuple[float, int, int]] = None  # (cost, count, prev)

        for p in range(-1, i):
            try:
                h = range_height(prefix, p + 1, i, m, ratios)
            except InvalidRowError:
                continue
            row_cost = checked_cost(objective(h))

            if p < 0:
                candidate = (row_cost, 1, p)
            else:
                candidate = (
                    combine(best_cost[p], best_count[p], row_cost),
                    best_count[p] + 1,
                    p,
                )

            if chosen is None or candidate[0] < chosen[0]:
                chosen = candidate

        if chosen is None:
            raise NoValidPartitionError(i, m)

        best_cost[i], best_count[i], best_prev[i] = chosen

    return Partition(bounds=_walk_back(best_prev), cost=best_cost[n - 1])


def _walk_back(best_prev: List[int]) -> Bounds:
    bounds = []
    end = len(best_prev) - 1
    while end >= 0:
        start = best_prev[end] + 1
        bounds.append((start, end))
        end = start - 1
    bounds.reverse()
    return tuple(bounds)
