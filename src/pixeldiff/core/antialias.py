# -*- coding: utf-8 -*-
"""Anti-aliased pixel detection.

Based on "Anti-aliased Pixel and Intensity Slope Detector" by V. Vysniauskas, 2009.
"""

from __future__ import annotations

from typing import Sequence

from pixeldiff.core.color_delta import color_delta
from pixeldiff.core.siblings import has_many_siblings, iter_neighbors, on_border, pixel_at


def antialiased(
    img: Sequence[int],
    x1: int,
    y1: int,
    width: int,
    height: int,
    img2: Sequence[int],
) -> bool:
    """Return True if the pixel at (x1, y1) of ``img`` is likely part of anti-aliasing.

    The pixel must sit between a darker and a brighter neighbour, and one of
    those two extremes must lie in a flat area of both images.
    """
    center = pixel_at(img, x1, y1, width)
    zeroes = 1 if on_border(x1, y1, width, height) else 0
    min_delta = 0.0
    max_delta = 0.0
    min_x = min_y = max_x = max_y = 0

    for x, y in iter_neighbors(x1, y1, width, height):
        delta = color_delta(center, pixel_at(img, x, y, width), y_only=True)

        if delta == 0:
            zeroes += 1
            # more than 2 equal siblings means a flat area, not an edge
            if zeroes > 2:
                return False
        elif delta < min_delta:
            min_delta = delta
            min_x, min_y = x, y
        elif delta > max_delta:
            max_delta = delta
            max_x, max_y = x, y

    if min_delta == 0 or max_delta == 0:
        return False

    return (
        has_many_siblings(img, min_x, min_y, width, height)
        and has_many_siblings(img2, min_x, min_y, width, height)
    ) or (
        has_many_siblings(img, max_x, max_y, width, height)
        and has_many_siblings(img2, max_x, max_y, width, height)
    )
