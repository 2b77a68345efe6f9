# -*- coding: utf-8 -*-
"""Pixel-by-pixel image comparison."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import numpy as np

from pixeldiff.config import build_options
from pixeldiff.constants import BYTES_PER_PIXEL, MAX_YIQ_DELTA
from pixeldiff.core.antialias import antialiased
from pixeldiff.core.blur import image_blurred
from pixeldiff.core.color_delta import color_delta_array
from pixeldiff.core.renderer import draw_antialiased, draw_background, draw_blurred, draw_diff_pixel
from pixeldiff.core.validator import validate_inputs
from pixeldiff.models.diff_result import DiffResult
from pixeldiff.models.options import Options

logger = logging.getLogger(__name__)


def _resolve_options(options: Options | Mapping[str, Any] | None) -> Options:
    if isinstance(options, Options):
        return options
    return build_options(options)


def is_identical(pixels1: np.ndarray, pixels2: np.ndarray) -> bool:
    """Compare two flat uint8 buffers as 32-bit words."""
    return bool(np.array_equal(pixels1.view(np.uint32), pixels2.view(np.uint32)))


def compare(
    img1: Any,
    img2: Any,
    output: Any,
    width: int,
    height: int,
    options: Options | Mapping[str, Any] | None = None,
) -> int:
    """Compare two RGBA buffers and return the number of mismatched pixels.

    ``output`` is an optional writable buffer of the same length that
    receives the rendered diff; pass None to skip drawing entirely.
    """
    pixels1, pixels2, out = validate_inputs(img1, img2, output, width, height)
    opts = _resolve_options(options)

    if is_identical(pixels1, pixels2):
        logger.debug("Images are identical (%dx%d), skipping scan", width, height)
        if out is not None and not opts.diff_mask:
            draw_background(out.reshape(-1, BYTES_PER_PIXEL), pixels1.reshape(-1, BYTES_PER_PIXEL), opts.alpha)
        return 0

    return scan_pixels(pixels1, pixels2, out, width, height, opts)


def scan_pixels(
    pixels1: np.ndarray,
    pixels2: np.ndarray,
    output: np.ndarray | None,
    width: int,
    height: int,
    options: Options,
) -> int:
    """Classify every pixel of two validated flat uint8 buffers.

    Pixels whose color delta exceeds ``options.max_delta`` are checked for
    anti-aliasing, then for blur; whatever remains counts as a difference.
    """
    px1 = pixels1.reshape(-1, BYTES_PER_PIXEL)
    px2 = pixels2.reshape(-1, BYTES_PER_PIXEL)
    out = None if output is None else output.reshape(-1, BYTES_PER_PIXEL)

    delta = color_delta_array(px1, px2)
    above = delta > options.max_delta

    if out is not None and not options.diff_mask:
        draw_background(out, px1, options.alpha, where=~above)

    flagged = np.flatnonzero(above)
    logger.debug("%d of %d pixels above max delta %.2f", flagged.size, delta.size, options.max_delta)

    img1 = pixels1.tobytes()
    img2 = pixels2.tobytes()
    counted: list[int] = []

    for index in flagged.tolist():
        y, x = divmod(index, width)

        if not options.include_aa and (
            antialiased(img1, x, y, width, height, img2) or antialiased(img2, x, y, width, height, img1)
        ):
            if out is not None:
                draw_antialiased(out, index, options)

        elif image_blurred(img1, img2, x, y, width, height, options.threshold):
            if out is not None:
                draw_blurred(out, index)

        else:
            if out is not None:
                draw_diff_pixel(out, index, float(delta[index]), options)
            counted.append(index)

    if options.debug:
        _log_debug_summary(delta, counted)

    logger.debug("Found %d mismatched pixels", len(counted))
    return len(counted)


def _log_debug_summary(delta: np.ndarray, counted: list[int]) -> None:
    if delta.size == 0:
        return
    zero_share = 100 * np.count_nonzero(delta == 0) / delta.size
    logger.info("Pixels with zero difference: %.2f%%", zero_share)
    if counted:
        largest = float(np.sqrt(delta[counted].max() / MAX_YIQ_DELTA))
        logger.info("Largest non-antialiased difference: %.6f", largest)
    else:
        logger.info("No non-antialiased differences")


def render_diff(
    img1: Any,
    img2: Any,
    width: int,
    height: int,
    options: Options | Mapping[str, Any] | None = None,
) -> DiffResult:
    """Compare two images and return the count together with a freshly drawn diff image."""
    validate_inputs(img1, img2, None, width, height)
    image = np.zeros((height, width, BYTES_PER_PIXEL), dtype=np.uint8)
    mismatch = compare(img1, img2, image, width, height, options)
    return DiffResult(mismatch=mismatch, width=width, height=height, image=image)
