# -*- coding: utf-8 -*-
"""Blur / soft-edge detection for pixels that changed together with their neighbourhood."""

from __future__ import annotations

from typing import Sequence

from pixeldiff.core.color_delta import color_delta
from pixeldiff.core.siblings import iter_neighbors, neighbor_bounds, pixel_at

BLOCK_SIZE = 2


def has_many_changed_siblings(
    img1: Sequence[int],
    img2: Sequence[int],
    x1: int,
    y1: int,
    width: int,
    height: int,
) -> bool:
    """Return True if at least half of the adjacent pixels differ between the images."""
    neighbors = list(iter_neighbors(x1, y1, width, height))
    total = len(neighbors)
    required = total // 2
    changed = 0

    for index, (x, y) in enumerate(neighbors):
        if changed >= required:
            return True
        if changed + (total - index) < required:
            return False
        if pixel_at(img1, x, y, width) != pixel_at(img2, x, y, width):
            changed += 1

    return changed >= required


def block_average(
    img: Sequence[int],
    x: int,
    y: int,
    width: int,
    height: int,
    size: int = BLOCK_SIZE,
) -> tuple[float, float, float, float]:
    """Average RGBA over the ``size`` x ``size`` block at (x, y), clipped to the image."""
    totals = [0, 0, 0, 0]
    count = 0
    for by in range(y, min(y + size, height)):
        for bx in range(x, min(x + size, width)):
            pos = (by * width + bx) * 4
            for channel in range(4):
                totals[channel] += img[pos + channel]
            count += 1
    return (totals[0] / count, totals[1] / count, totals[2] / count, totals[3] / count)


def block_delta(
    img1: Sequence[int],
    img2: Sequence[int],
    x: int,
    y: int,
    width: int,
    height: int,
) -> float:
    """Perceptual distance between the averaged blocks of both images at (x, y)."""
    return color_delta(
        block_average(img1, x, y, width, height),
        block_average(img2, x, y, width, height),
    )


def image_blurred(
    img1: Sequence[int],
    img2: Sequence[int],
    x1: int,
    y1: int,
    width: int,
    height: int,
    threshold: float,
) -> bool:
    """Return True if the pixel lies in a changed region whose block averages still match.

    Block distances are compared against the linear ``threshold``, not
    against the squared per-pixel limit.
    """
    if not has_many_changed_siblings(img1, img2, x1, y1, width, height):
        return False

    x0, y0, x2, y2 = neighbor_bounds(x1, y1, width, height)
    for x in range(x0, x2 + 1):
        for y in range(y0, y2 + 1):
            if block_delta(img1, img2, x, y, width, height) > threshold:
                return False
    return True
