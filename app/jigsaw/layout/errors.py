"""Error taxonomy for the justified layout engine.

Everything derives from ValueError so callers validating input the usual way
(``except ValueError``) still catch layout failures.
"""

from __future__ import annotations

from typing import Optional


class LayoutError(ValueError):
    """Base class for all layout failures."""


class InvalidInputError(LayoutError):
    """Bad aspect ratio, margin, objective or option passed by the caller."""


class InvalidRowError(LayoutError):
    """A row of ``count`` items has no positive, finite height.

    Usually the margins leave no usable width; ``detail`` overrides the
    message for rows broken by extreme aspect ratios instead.
    """

    def __init__(self, count: int, margin: float, detail: Optional[str] = None) -> None:
        self.count = count
        self.margin = margin
        if detail is None:
            detail = f"has no usable width at margin {margin}"
        super().__init__(f"row of {count} item(s) {detail}")


class NoValidPartitionError(LayoutError):
    """No geometrically valid row can end at item ``index``."""

    def __init__(self, index: int, margin: float) -> None:
        self.index = index
        self.margin = margin
        super().__init__(
            f"no valid partition: every row ending at item {index} is too "
            f"narrow at margin {margin}"
        )
