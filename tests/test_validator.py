# -*- coding: utf-8 -*-
"""Tests for input validation."""

from __future__ import annotations

import array

import numpy as np
import pytest

from pixeldiff import DimensionMismatch, InvalidPixelData, SizeMismatch, compare
from pixeldiff.core.validator import as_pixel_view, validate_inputs


def test_rejects_plain_lists() -> None:
    with pytest.raises(InvalidPixelData):
        compare([1, 2, 3], [1, 2, 3, 4], None, 2, 1)


def test_rejects_wide_arrays() -> None:
    img = np.zeros(16, dtype=np.uint16)
    with pytest.raises(InvalidPixelData):
        compare(img, img, None, 2, 2)
    with pytest.raises(InvalidPixelData):
        as_pixel_view(array.array("H", [0] * 4), "img1")


def test_rejects_read_only_output() -> None:
    img = bytes(16)
    with pytest.raises(InvalidPixelData, match="writable"):
        compare(img, img, bytes(16), 2, 2)


def test_rejects_non_contiguous_output() -> None:
    img = np.zeros((2, 2, 4), dtype=np.uint8)
    out = np.zeros((2, 4, 4), dtype=np.uint8)[:, ::2]
    with pytest.raises(InvalidPixelData):
        compare(img, img, out, 2, 2)


def test_size_mismatch_between_inputs() -> None:
    with pytest.raises(SizeMismatch, match="Image sizes do not match"):
        compare(bytes(8), bytes(12), None, 2, 1)


def test_size_mismatch_with_output() -> None:
    with pytest.raises(SizeMismatch):
        compare(bytes(8), bytes(8), bytearray(4), 2, 1)


def test_dimension_mismatch() -> None:
    with pytest.raises(DimensionMismatch):
        compare(bytes(16), bytes(16), None, 2, 1)


def test_negative_dimension() -> None:
    with pytest.raises(DimensionMismatch):
        compare(b"", b"", None, -1, 0)


def test_accepts_all_byte_buffers() -> None:
    data = bytes(range(16))
    pixels1, pixels2, out = validate_inputs(
        bytearray(data), memoryview(data), array.array("B", data), 2, 2
    )
    assert pixels1.tolist() == list(data)
    assert pixels2.tolist() == list(data)
    assert out is not None and out.flags.writeable


def test_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        compare(bytes(16), bytes(16), None, 3, 3)


def test_strided_input_is_compared() -> None:
    base = np.full(16, 255, dtype=np.uint8)
    assert compare(base[::2], base[::2].copy(), None, 2, 1) == 0

    other = base[::2].copy()
    other[0:3] = 0
    assert compare(base[::2], other, None, 2, 1) == 1


def test_strided_input_view_is_contiguous() -> None:
    base = np.arange(16, dtype=np.uint8)
    view = as_pixel_view(base[::2], "img1")
    assert view.flags.c_contiguous
    assert view.tolist() == list(range(0, 16, 2))


def test_buffer_errors_are_reported_before_option_errors() -> None:
    with pytest.raises(InvalidPixelData):
        compare([0, 0, 0, 0], bytes(4), None, 1, 1, {"threshold": 5})
    with pytest.raises(SizeMismatch):
        compare(bytes(4), bytes(8), None, 1, 1, {"alpha": -1})
