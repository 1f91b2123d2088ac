from __future__ import annotations

import math
from typing import Iterable, Tuple

from app.jigsaw.layout.errors import InvalidInputError


def validate_inputs(aspect_ratios: Iterable[float], margin: float) -> Tuple[Tuple[float, ...], float]:
    """Check caller input and return an owned copy ``(ratios, margin)``.

    The caller's sequence is never modified; the engine works on the copy.
    """

    try:
        m = float(margin)
    except (TypeError, ValueError):
        raise InvalidInputError("margin must be a number") from None
    if not math.isfinite(m) or m < 0:
        raise InvalidInputError("margin must be a finite number >= 0")

    ratios = []
    for idx, value in enumerate(aspect_ratios):
        try:
            r = float(value)
        except (TypeError, ValueError):
            raise InvalidInputError(f"aspect ratio at index {idx} is not a number") from None
        if not math.isfinite(r) or r <= 0:
            raise InvalidInputError(f"aspect ratio at index {idx} must be a finite number > 0")
        ratios.append(r)
    return tuple(ratios), m


def checked_cost(value: float) -> float:
    try:
        cost = float(value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"objective returned a non-numeric cost: {value!r}") from None
    if not math.isfinite(cost):
        raise InvalidInputError(f"objective returned a non-finite cost: {value!r}")
    return cost
