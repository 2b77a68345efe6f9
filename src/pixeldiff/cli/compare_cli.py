# -*- coding: utf-8 -*-
"""CLI commands for comparing images."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer

from pixeldiff.config import ConfigError, load_options
from pixeldiff.core.matcher import compare, render_diff
from pixeldiff.errors import PixelDiffError, SizeMismatch
from pixeldiff.utils.image_utils import load_rgba, save_rgba
from pixeldiff.utils.logger import setup_logging

app = typer.Typer(help="Perceptual pixel comparison for visual regression tests")
logger = logging.getLogger(__name__)

EXIT_DIFFERENT = 1
EXIT_ERROR = 2


def _cli_overrides(**values: object) -> dict[str, object]:
    return {key: value for key, value in values.items() if value is not None}


@app.command("compare")
def compare_images(
    image1: Path = typer.Argument(..., help="Path to the expected image"),
    image2: Path = typer.Argument(..., help="Path to the actual image"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the diff image here"),
    threshold: float = typer.Option(None, help="Matching threshold 0..1 (default 0.1)"),
    include_aa: bool = typer.Option(False, "--include-aa", help="Count anti-aliased pixels as differences"),
    alpha: float = typer.Option(None, help="Opacity of the original image in the diff 0..1"),
    diff_mask: bool = typer.Option(False, "--diff-mask", help="Draw differences only"),
    diff_mask_debug: bool = typer.Option(False, "--diff-mask-debug", help="Scale diff opacity by magnitude"),
    no_draw_aa: bool = typer.Option(False, "--no-draw-aa", help="Leave anti-aliased pixels undrawn"),
    config: Path = typer.Option(None, help="JSON options file"),
    verbose: bool = typer.Option(False, help="Verbose output"),
) -> None:
    """Compare two images and report the number of mismatched pixels."""
    setup_logging(verbose)

    overrides = _cli_overrides(
        threshold=threshold,
        include_aa=True if include_aa else None,
        alpha=alpha,
        diff_mask=True if diff_mask else None,
        diff_mask_debug=True if diff_mask_debug else None,
        draw_aa=False if no_draw_aa else None,
        debug=True if verbose else None,
    )

    try:
        options = load_options(config, overrides)
        img1 = load_rgba(image1)
        img2 = load_rgba(image2)
        if img1.shape != img2.shape:
            raise SizeMismatch(
                f"Image dimensions do not match: {img1.shape[1]}x{img1.shape[0]} vs {img2.shape[1]}x{img2.shape[0]}"
            )
        height, width = img1.shape[:2]

        if output is None:
            mismatch = compare(img1, img2, None, width, height, options)
        else:
            result = render_diff(img1, img2, width, height, options)
            mismatch = result.mismatch
            save_rgba(output, result.image)
    except (ConfigError, PixelDiffError, FileNotFoundError, ValueError) as e:
        logger.debug("Comparison failed", exc_info=True)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(EXIT_ERROR)

    total = width * height
    share = 100 * mismatch / total if total else 0.0
    typer.echo(f"Mismatched pixels: {mismatch} ({share:.2f}%)")
    if output is not None:
        typer.echo(f"Diff image saved to: {output}")

    if mismatch:
        raise typer.Exit(EXIT_DIFFERENT)


@app.command("show-options")
def show_options(
    config: Path = typer.Option(None, help="JSON options file"),
) -> None:
    """Print the effective comparison options as JSON."""
    try:
        options = load_options(config)
    except (ConfigError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(EXIT_ERROR)
    typer.echo(json.dumps(options.to_dict(), indent=2))


if __name__ == "__main__":
    app()
