"""Justified row layout (container-first).

This module is intentionally UI-framework agnostic.

Goal: given the aspect ratios of a sequence of photos and a margin (both as
fractions of the container width), choose row breaks and row heights so every
row fills the container exactly. Renderers multiply the returned widths by the
real container width; nothing here knows about pixels.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from app.jigsaw.layout.errors import InvalidInputError
from app.jigsaw.layout.geometry import Row, make_row, row_height
from app.jigsaw.layout.objectives import Objective, squared_error
from app.jigsaw.layout.partition import Partition, best_partition
from app.jigsaw.layout.validation import validate_inputs


@dataclass(frozen=True)
class LayoutRow:
    """Items ``start..end`` (inclusive) sharing one height."""

    start: int
    end: int
    height: float

    @property
    def size(self) -> int:
        return self.end - self.start + 1

    @property
    def indices(self) -> range:
        return range(self.start, self.end + 1)


@dataclass(frozen=True)
class LayoutResult:
    rows: Tuple[LayoutRow, ...]
    widths: Tuple[float, ...]
    cost: float

    def row_of(self, index: int) -> LayoutRow:
        for row in self.rows:
            if row.start <= index <= row.end:
                return row
        raise IndexError(f"item index {index} out of range")


def build_layout(
    aspect_ratios: Sequence[float],
    margin: float,
    partition: Partition,
) -> LayoutResult:
    """Turn a partition into per-item widths, in original item order."""

    rows: List[LayoutRow] = []
    widths: List[float] = []
    for start, end in partition.bounds:
        segment = aspect_ratios[start:end + 1]
        h = row_height(segment, margin)
        rows.append(LayoutRow(start=start, end=end, height=h))
        widths.extend(h * r for r in segment)

    if len(widths) != len(aspect_ratios):
        raise InvalidInputError("partition does not cover every item exactly once")
    return LayoutResult(rows=tuple(rows), widths=tuple(widths), cost=partition.cost)


def optimal_partition(
    aspect_ratios: Iterable[float],
    margin: float = 0.0,
    objective: Optional[Objective] = None,
    *,
    aggregate: str = "mean",
) -> LayoutResult:
    """Compute the best justified layout.

    Defaults to ``squared_error()`` around a quarter-width row height, with
    row costs averaged. Raises NoValidPartitionError when the margin is too
    large for even single-item rows, InvalidInputError for bad input.
    """

    ratios, m = validate_inputs(aspect_ratios, margin)
    if objective is None:
        objective = squared_error()

    partition = best_partition(ratios, m, objective, aggregate=aggregate)
    return build_layout(ratios, m, partition)


def layout_rows(
    aspect_ratios: Iterable[float],
    margin: float = 0.0,
    objective: Optional[Objective] = None,
) -> List[Row]:
    """Same as optimal_partition, returned as one ``Row`` record per row."""

    ratios, m = validate_inputs(aspect_ratios, margin)
    result = optimal_partition(ratios, m, objective)
    return [make_row(ratios[row.start:row.end + 1], m) for row in result.rows]
