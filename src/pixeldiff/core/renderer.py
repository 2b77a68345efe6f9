# -*- coding: utf-8 -*-
"""Diff image drawing on ``(N, 4)`` uint8 pixel views."""

from __future__ import annotations

import math

import numpy as np

from pixeldiff.constants import BLUR_COLOR, MAX_YIQ_DELTA
from pixeldiff.core.color_delta import gray_array
from pixeldiff.models.options import Color, Options


def draw_pixel(output: np.ndarray, index: int, color: Color, alpha: int = 255) -> None:
    output[index] = (color[0], color[1], color[2], alpha)


def draw_background(
    output: np.ndarray,
    pixels: np.ndarray,
    alpha: float,
    where: np.ndarray | None = None,
) -> None:
    """Draw pixels as grayscale blended with white, optionally only where ``where`` is set."""
    if where is not None:
        pixels = pixels[where]
    # casting truncates toward zero like a byte array store
    gray = gray_array(pixels, alpha).astype(np.uint8)
    values = np.empty((gray.shape[0], 4), dtype=np.uint8)
    values[:, 0] = gray
    values[:, 1] = gray
    values[:, 2] = gray
    values[:, 3] = 255
    if where is None:
        output[:] = values
    else:
        output[where] = values


def draw_antialiased(output: np.ndarray, index: int, options: Options) -> None:
    if options.draw_aa and not options.diff_mask:
        draw_pixel(output, index, options.aa_color)


def draw_blurred(output: np.ndarray, index: int) -> None:
    draw_pixel(output, index, BLUR_COLOR)


def diff_alpha(delta: float, options: Options) -> int:
    """Opacity of a diff marker, proportional to the difference in debug mask mode."""
    if options.diff_mask_debug:
        return int(255 * math.sqrt(delta / MAX_YIQ_DELTA))
    return 255


def draw_diff_pixel(output: np.ndarray, index: int, delta: float, options: Options) -> None:
    draw_pixel(output, index, options.marker_color, diff_alpha(delta, options))
