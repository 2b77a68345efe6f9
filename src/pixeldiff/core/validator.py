# -*- coding: utf-8 -*-
"""Input checks and buffer normalisation."""

from __future__ import annotations

import array
from typing import Any

import numpy as np

from pixeldiff.constants import BYTES_PER_PIXEL
from pixeldiff.errors import DimensionMismatch, InvalidPixelData, SizeMismatch

_BYTE_BUFFERS = (bytes, bytearray, memoryview, array.array)


def as_pixel_view(data: Any, name: str, writable: bool = False) -> np.ndarray:
    """Return a flat uint8 view of ``data`` without copying it."""
    if isinstance(data, np.ndarray):
        if data.dtype != np.uint8:
            raise InvalidPixelData(f"{name}: uint8 array expected, got dtype {data.dtype}.")
        if writable and not (data.flags.c_contiguous and data.flags.writeable):
            raise InvalidPixelData(f"{name}: output array must be C-contiguous and writable.")
        # inputs may be strided; the 32-bit identity check needs contiguous memory
        return np.ascontiguousarray(data).reshape(-1)

    if isinstance(data, _BYTE_BUFFERS):
        view = memoryview(data)
        if view.itemsize != 1:
            raise InvalidPixelData(f"{name}: 1 byte per element expected, got {view.itemsize}.")
        if writable and view.readonly:
            raise InvalidPixelData(f"{name}: output buffer must be writable.")
        return np.frombuffer(view.cast("B") if view.format != "B" else view, dtype=np.uint8)

    raise InvalidPixelData(
        f"{name}: bytes, bytearray, memoryview or uint8 numpy array expected, got {type(data).__name__}."
    )


def validate_inputs(
    img1: Any,
    img2: Any,
    output: Any,
    width: int,
    height: int,
) -> tuple[np.ndarray, np.ndarray, np.ndarray | None]:
    """Check buffer kinds, lengths and dimensions; return flat uint8 views."""
    pixels1 = as_pixel_view(img1, "img1")
    pixels2 = as_pixel_view(img2, "img2")
    out = None if output is None else as_pixel_view(output, "output", writable=True)

    if pixels1.size != pixels2.size:
        raise SizeMismatch(f"Image sizes do not match: {pixels1.size} vs {pixels2.size} bytes.")
    if out is not None and out.size != pixels1.size:
        raise SizeMismatch(f"Output size does not match: {out.size} vs {pixels1.size} bytes.")

    for label, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 0:
            raise DimensionMismatch(f"{label} must be a non-negative integer, got {value!r}.")
    expected = int(width) * int(height) * BYTES_PER_PIXEL
    if pixels1.size != expected:
        raise DimensionMismatch(
            f"Image data size does not match width/height: {pixels1.size} bytes for {width}x{height}."
        )

    return pixels1, pixels2, out
