# -*- coding: utf-8 -*-
"""Perceptual color difference in YIQ space.

Based on "Measuring perceived color difference using YIQ NTSC transmission
color space in mobile applications" by Y. Kotsarenko and F. Ramos.

The scalar functions work on single pixels and are used by the classifiers,
the array functions compute the same values for whole images at once. Both
evaluate the exact same floating point operations in the same order, so
their results are bit-identical.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

Y_WEIGHT = 0.5053
I_WEIGHT = 0.299
Q_WEIGHT = 0.1957


def blend(c: float, a: float) -> float:
    """Blend a channel value with white at opacity ``a`` (0..1)."""
    return 255 + (c - 255) * a


def rgb2y(r: float, g: float, b: float) -> float:
    return r * 0.29889531 + g * 0.58662247 + b * 0.11448223


def rgb2i(r: float, g: float, b: float) -> float:
    return r * 0.59597799 - g * 0.27417610 - b * 0.32180189


def rgb2q(r: float, g: float, b: float) -> float:
    return r * 0.21147017 - g * 0.52261711 + b * 0.31114694


def color_delta(pixel1: Sequence[float], pixel2: Sequence[float], y_only: bool = False) -> float:
    """Return the squared perceptual distance between two RGBA pixels.

    With ``y_only`` the signed brightness difference is returned instead.
    """
    r1, g1, b1, a1 = pixel1
    r2, g2, b2, a2 = pixel2

    if a1 == a2 and r1 == r2 and g1 == g2 and b1 == b2:
        return 0.0

    if a1 < 255:
        a1 /= 255
        r1 = blend(r1, a1)
        g1 = blend(g1, a1)
        b1 = blend(b1, a1)

    if a2 < 255:
        a2 /= 255
        r2 = blend(r2, a2)
        g2 = blend(g2, a2)
        b2 = blend(b2, a2)

    y = rgb2y(r1, g1, b1) - rgb2y(r2, g2, b2)

    if y_only:
        return y

    i = rgb2i(r1, g1, b1) - rgb2i(r2, g2, b2)
    q = rgb2q(r1, g1, b1) - rgb2q(r2, g2, b2)

    return Y_WEIGHT * y * y + I_WEIGHT * i * i + Q_WEIGHT * q * q


def _blend_array(pixels: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    values = pixels.astype(np.float64)
    alpha = values[:, 3]
    opacity = alpha / 255
    translucent = alpha < 255
    channels = []
    for channel in range(3):
        c = values[:, channel]
        channels.append(np.where(translucent, blend(c, opacity), c))
    return channels[0], channels[1], channels[2]


def color_delta_array(pixels1: np.ndarray, pixels2: np.ndarray) -> np.ndarray:
    """Vectorised ``color_delta`` over two ``(N, 4)`` uint8 pixel arrays."""
    r1, g1, b1 = _blend_array(pixels1)
    r2, g2, b2 = _blend_array(pixels2)

    y = rgb2y(r1, g1, b1) - rgb2y(r2, g2, b2)
    i = rgb2i(r1, g1, b1) - rgb2i(r2, g2, b2)
    q = rgb2q(r1, g1, b1) - rgb2q(r2, g2, b2)

    delta = Y_WEIGHT * y * y + I_WEIGHT * i * i + Q_WEIGHT * q * q
    same = np.all(pixels1 == pixels2, axis=1)
    return np.where(same, 0.0, delta)


def gray_array(pixels: np.ndarray, alpha: float) -> np.ndarray:
    """Luma of each pixel blended with white at ``alpha`` times its own opacity."""
    values = pixels.astype(np.float64)
    y = rgb2y(values[:, 0], values[:, 1], values[:, 2])
    return blend(y, alpha * values[:, 3] / 255)
