# -*- coding: utf-8 -*-
"""Neighbourhood helpers shared by the anti-aliasing and blur classifiers."""

from __future__ import annotations

from typing import Iterator, Sequence


def neighbor_bounds(x: int, y: int, width: int, height: int) -> tuple[int, int, int, int]:
    """Return ``(x0, y0, x2, y2)`` of the 3x3 window around a pixel, clamped to the image."""
    return max(x - 1, 0), max(y - 1, 0), min(x + 1, width - 1), min(y + 1, height - 1)


def on_border(x: int, y: int, width: int, height: int) -> bool:
    x0, y0, x2, y2 = neighbor_bounds(x, y, width, height)
    return x == x0 or x == x2 or y == y0 or y == y2


def iter_neighbors(x1: int, y1: int, width: int, height: int) -> Iterator[tuple[int, int]]:
    """Yield adjacent coordinates, x outer and y inner, skipping the center."""
    x0, y0, x2, y2 = neighbor_bounds(x1, y1, width, height)
    for x in range(x0, x2 + 1):
        for y in range(y0, y2 + 1):
            if x == x1 and y == y1:
                continue
            yield x, y


def pixel_at(img: Sequence[int], x: int, y: int, width: int) -> Sequence[int]:
    pos = (y * width + x) * 4
    return img[pos:pos + 4]


def has_many_siblings(img: Sequence[int], x1: int, y1: int, width: int, height: int) -> bool:
    """Check if a pixel has 3+ adjacent pixels of exactly the same color.

    Border pixels start with one sibling already counted.
    """
    center = pixel_at(img, x1, y1, width)
    zeroes = 1 if on_border(x1, y1, width, height) else 0

    for x, y in iter_neighbors(x1, y1, width, height):
        if pixel_at(img, x, y, width) == center:
            zeroes += 1
        if zeroes > 2:
            return True

    return False
