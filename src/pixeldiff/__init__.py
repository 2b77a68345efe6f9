# -*- coding: utf-8 -*-
"""Perceptual, anti-aliasing aware pixel comparison."""

from __future__ import annotations

from pixeldiff.constants import APP_VERSION as __version__
from pixeldiff.core.color_delta import color_delta
from pixeldiff.core.matcher import compare, render_diff
from pixeldiff.errors import DimensionMismatch, InvalidPixelData, PixelDiffError, SizeMismatch
from pixeldiff.models.diff_result import DiffResult
from pixeldiff.models.options import Options

__all__ = [
    "DiffResult",
    "DimensionMismatch",
    "InvalidPixelData",
    "Options",
    "PixelDiffError",
    "SizeMismatch",
    "__version__",
    "color_delta",
    "compare",
    "render_diff",
]
