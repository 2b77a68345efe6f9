# -*- coding: utf-8 -*-
"""Shared pytest fixtures for pixel comparison tests."""

from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pytest


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)
DARK_GRAY = (100, 100, 100, 255)
LIGHT_GRAY = (200, 200, 200, 255)


def solid(width: int, height: int, color: tuple[int, int, int, int]) -> np.ndarray:
    image = np.empty((height, width, 4), dtype=np.uint8)
    image[:, :] = color
    return image


def edge_image(edge_color: tuple[int, int, int, int], size: int = 5) -> np.ndarray:
    """Black left, white right, with a one pixel wide column of ``edge_color`` in between."""
    image = solid(size, size, WHITE)
    image[:, : size // 2] = BLACK
    image[:, size // 2] = edge_color
    return image


def checkerboard(width: int, height: int, inverted: bool = False) -> np.ndarray:
    image = solid(width, height, WHITE)
    yy, xx = np.mgrid[0:height, 0:width]
    dark = (xx + yy) % 2 == (1 if inverted else 0)
    image[dark] = BLACK
    return image


@pytest.fixture
def aa_edge_pair() -> tuple[np.ndarray, np.ndarray]:
    """Two renderings of the same edge that only disagree on the anti-aliased column."""
    return edge_image(DARK_GRAY), edge_image(LIGHT_GRAY)


@pytest.fixture
def checker_pair() -> tuple[np.ndarray, np.ndarray]:
    return checkerboard(4, 4), checkerboard(4, 4, inverted=True)


@pytest.fixture
def noise_pair() -> tuple[np.ndarray, np.ndarray]:
    rng = np.random.default_rng(1234)
    palette = np.array([BLACK, WHITE, DARK_GRAY, LIGHT_GRAY, (0, 0, 255, 255), (255, 0, 0, 128)], dtype=np.uint8)
    img1 = palette[rng.integers(0, len(palette), size=(12, 12))]
    img2 = img1.copy()
    mask = rng.random((12, 12)) < 0.3
    img2[mask] = palette[rng.integers(0, len(palette), size=int(mask.sum()))]
    return img1, img2
