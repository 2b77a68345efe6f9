# -*- coding: utf-8 -*-
"""Diff result data model."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class DiffResult:
    """Mismatch count together with the rendered diff image it belongs to."""

    mismatch: int
    width: int
    height: int
    image: np.ndarray | None = None

    @property
    def total_pixels(self) -> int:
        return self.width * self.height

    @property
    def mismatch_ratio(self) -> float:
        if self.total_pixels == 0:
            return 0.0
        return self.mismatch / self.total_pixels

    @property
    def identical(self) -> bool:
        return self.mismatch == 0
