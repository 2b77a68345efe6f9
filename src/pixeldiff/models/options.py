# -*- coding: utf-8 -*-
"""Comparison options data model."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from pixeldiff.constants import (
    DEFAULT_AA_COLOR,
    DEFAULT_ALPHA,
    DEFAULT_DIFF_COLOR,
    DEFAULT_THRESHOLD,
    MAX_YIQ_DELTA,
)

Color = tuple[int, int, int]


@dataclass(frozen=True)
class Options:
    """Immutable snapshot of the settings used for a single comparison."""

    threshold: float = DEFAULT_THRESHOLD
    include_aa: bool = False
    alpha: float = DEFAULT_ALPHA
    aa_color: Color = DEFAULT_AA_COLOR
    diff_color: Color = DEFAULT_DIFF_COLOR
    diff_mask: bool = False
    diff_mask_debug: bool = False
    draw_aa: bool = True
    mask_color: Color | None = None
    debug: bool = False

    def __post_init__(self) -> None:
        for name in ("threshold", "alpha"):
            value = getattr(self, name)
            if not 0 <= value <= 1:
                raise ValueError(f"{name} must be in range 0..1, got {value!r}")

    @property
    def max_delta(self) -> float:
        """Maximum acceptable squared YIQ distance between two colors."""
        return MAX_YIQ_DELTA * self.threshold * self.threshold

    @property
    def marker_color(self) -> Color:
        """Color used for genuine differences in the current render mode."""
        if self.diff_mask and self.mask_color is not None:
            return self.mask_color
        return self.diff_color

    def to_dict(self) -> dict:
        data = asdict(self)
        for key in ("aa_color", "diff_color", "mask_color"):
            if data[key] is not None:
                data[key] = list(data[key])
        return data
