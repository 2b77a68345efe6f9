# -*- coding: utf-8 -*-
"""Decode and encode RGBA images with OpenCV."""

from __future__ import annotations

import logging
from pathlib import Path

import cv2
import numpy as np

logger = logging.getLogger(__name__)

_TO_RGBA = {
    1: cv2.COLOR_GRAY2RGBA,
    3: cv2.COLOR_BGR2RGBA,
    4: cv2.COLOR_BGRA2RGBA,
}


def load_rgba(path: str | Path) -> np.ndarray:
    """Read an image file as a ``(height, width, 4)`` uint8 RGBA array."""
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Image not found: {file_path}")

    img = cv2.imread(str(file_path), cv2.IMREAD_UNCHANGED)
    if img is None:
        raise ValueError(f"Could not decode image: {file_path}")

    if img.dtype == np.uint16:
        img = (img >> 8).astype(np.uint8)
    elif img.dtype != np.uint8:
        raise ValueError(f"Unsupported image depth {img.dtype} in {file_path}")

    channels = 1 if img.ndim == 2 else img.shape[2]
    if channels not in _TO_RGBA:
        raise ValueError(f"Unsupported channel count {channels} in {file_path}")

    rgba = cv2.cvtColor(img, _TO_RGBA[channels])
    logger.debug("Loaded %s (%dx%d, %d channels)", file_path, rgba.shape[1], rgba.shape[0], channels)
    return np.ascontiguousarray(rgba)


def save_rgba(path: str | Path, image: np.ndarray) -> Path:
    """Write a ``(height, width, 4)`` RGBA array to disk."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    bgra = cv2.cvtColor(image, cv2.COLOR_RGBA2BGRA)
    if not cv2.imwrite(str(file_path), bgra):
        raise ValueError(f"Could not encode image: {file_path}")
    return file_path
