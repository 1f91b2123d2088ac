"""Row cost functions.

An objective is any callable mapping a positive row height to a cost, lower
being better. The optimizer treats it as opaque.
"""

from __future__ import annotations

import math
from typing import Callable, Dict

from app.jigsaw.layout.errors import InvalidInputError

Objective = Callable[[float], float]

# Three 4:3 landscape photos per row, ignoring margins.
DEFAULT_IDEAL_HEIGHT = 0.25


def _check_ideal(ideal_height: float) -> float:
    ideal = float(ideal_height)
    if not math.isfinite(ideal) or ideal <= 0:
        raise InvalidInputError("ideal_height must be a finite number > 0")
    return ideal


def squared_error(ideal_height: float = DEFAULT_IDEAL_HEIGHT) -> Objective:
    """Symmetric penalty ``(height - ideal)**2``."""

    ideal = _check_ideal(ideal_height)

    def cost(height: float) -> float:
        return (height - ideal) ** 2

    return cost


def penalize_small(ideal_height: float = DEFAULT_IDEAL_HEIGHT) -> Objective:
    """Logarithmic penalty below the ideal height, linear above it.

    Short, wide rows cost much more than tall ones: the penalty diverges as
    the height approaches zero.
    """

    ideal = _check_ideal(ideal_height)

    def cost(height: float) -> float:
        if height < ideal:
            return math.log(ideal / height)
        return height - ideal

    return cost


OBJECTIVES: Dict[str, Callable[[float], Objective]] = {
    "squared_error": squared_error,
    "penalize_small": penalize_small,
}


def get_objective(name: str, ideal_height: float = DEFAULT_IDEAL_HEIGHT) -> Objective:
    try:
        factory = OBJECTIVES[name]
    except KeyError:
        raise InvalidInputError(
            f"unknown objective {name!r}; expected one of {sorted(OBJECTIVES)}"
        ) from None
    return factory(ideal_height)
