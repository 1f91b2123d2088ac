from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from PIL import Image, ImageOps


def read_aspect_ratio(path: str | Path) -> float:
    """Width / height of an image as displayed (EXIF rotation applied)."""

    with Image.open(path) as im:
        im = ImageOps.exif_transpose(im)
        w, h = im.size
    if w <= 0 or h <= 0:
        raise ValueError(f"image has no area: {path}")
    return w / h


def read_aspect_ratios(paths: Iterable[str | Path]) -> List[float]:
    return [read_aspect_ratio(p) for p in paths]
