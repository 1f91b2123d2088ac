"""Row geometry.

All widths and heights are fractions of the container width. A row of ``k``
items has ``k + 1`` margins: one on each side plus one between each pair.
The row height is whatever makes the items fill the remaining width exactly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from app.jigsaw.layout.errors import InvalidRowError


@dataclass(frozen=True)
class Row:
    aspect_ratios: Tuple[float, ...]
    margin: float
    height: float
    widths: Tuple[float, ...]

    @property
    def size(self) -> int:
        return len(self.aspect_ratios)


def available_width(count: int, margin: float) -> float:
    return 1.0 - (count + 1) * margin


def _ratio_sum(aspect_ratios: Iterable[float]) -> float:
    try:
        return math.fsum(aspect_ratios)
    except OverflowError:
        return math.inf


def _height(count: int, ratio_sum: float, margin: float) -> float:
    avail = available_width(count, margin)
    if count <= 0 or avail <= 0:
        raise InvalidRowError(count, margin)
    if not (math.isfinite(ratio_sum) and ratio_sum > 0):
        raise InvalidRowError(count, margin, f"has an out-of-range aspect ratio sum ({ratio_sum})")

    h = avail / ratio_sum
    if not (math.isfinite(h) and h > 0):
        raise InvalidRowError(count, margin, f"has an out-of-range height ({h})")
    return h


def row_height(aspect_ratios: Sequence[float], margin: float) -> float:
    """Height of a row holding ``aspect_ratios`` (width / height each).

    Raises InvalidRowError when the margins eat the whole container, or when
    the ratios are so extreme that no positive finite height exists.
    """

    return _height(len(aspect_ratios), _ratio_sum(aspect_ratios), margin)


def make_row(aspect_ratios: Sequence[float], margin: float) -> Row:
    ratios = tuple(float(r) for r in aspect_ratios)
    h = row_height(ratios, margin)
    return Row(
        aspect_ratios=ratios,
        margin=margin,
        height=h,
        widths=tuple(h * r for r in ratios),
    )


def prefix_sums(aspect_ratios: Sequence[float]) -> List[float]:
    """``sums[j]`` is the total of the first ``j`` ratios."""

    sums = [0.0]
    for r in aspect_ratios:
        sums.append(sums[-1] + r)
    return sums


# Below this share of the running total a prefix difference has lost too many
# digits to trust.
_CANCELLATION_LIMIT = 1e-9


def range_height(
    prefix: Sequence[float],
    start: int,
    end: int,
    margin: float,
    aspect_ratios: Optional[Sequence[float]] = None,
) -> float:
    """Row height for items ``start..end`` (inclusive) in O(1).

    With ``aspect_ratios`` given, ranges whose prefix difference cancelled
    out (one huge ratio before small ones) or overflowed are re-summed
    exactly from the slice.
    """

    ratio_sum = prefix[end + 1] - prefix[start]
    if aspect_ratios is not None and not (
        math.isfinite(ratio_sum) and ratio_sum > abs(prefix[end + 1]) * _CANCELLATION_LIMIT
    ):
        ratio_sum = _ratio_sum(aspect_ratios[start:end + 1])
    return _height(end - start + 1, ratio_sum, margin)
