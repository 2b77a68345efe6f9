# -*- coding: utf-8 -*-
"""Precondition errors raised before a comparison starts scanning."""

from __future__ import annotations


class PixelDiffError(ValueError):
    """Base class for invalid comparison inputs."""


class InvalidPixelData(PixelDiffError):
    """Raised when a buffer is not a 1-byte-per-element array-like."""


class SizeMismatch(PixelDiffError):
    """Raised when input or output buffer lengths differ."""


class DimensionMismatch(PixelDiffError):
    """Raised when the buffer length does not equal width * height * 4."""
