# -*- coding: utf-8 -*-
"""Option defaults, merging and validation."""

from __future__ import annotations

import json
import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Mapping

from pixeldiff.constants import (
    DEFAULT_AA_COLOR,
    DEFAULT_ALPHA,
    DEFAULT_DIFF_COLOR,
    DEFAULT_SETTINGS_FILE,
    DEFAULT_THRESHOLD,
)
from pixeldiff.models.options import Color, Options

logger = logging.getLogger(__name__)


DEFAULT_OPTIONS: dict[str, Any] = {
    "threshold": DEFAULT_THRESHOLD,
    "include_aa": False,
    "alpha": DEFAULT_ALPHA,
    "aa_color": list(DEFAULT_AA_COLOR),
    "diff_color": list(DEFAULT_DIFF_COLOR),
    "diff_mask": False,
    "diff_mask_debug": False,
    "draw_aa": True,
    "mask_color": None,
    "debug": False,
}

OPTION_ALIASES = {
    "includeAA": "include_aa",
    "aaColor": "aa_color",
    "diffColor": "diff_color",
    "diffMask": "diff_mask",
    "diffMaskDebug": "diff_mask_debug",
    "drawAA": "draw_aa",
    "maskColor": "mask_color",
    "maskPixelColor": "mask_color",
}

ENV_OVERRIDES = {
    "PIXELDIFF_THRESHOLD": "threshold",
    "PIXELDIFF_INCLUDE_AA": "include_aa",
    "PIXELDIFF_DIFF_MASK": "diff_mask",
}

_BOOL_KEYS = ("include_aa", "diff_mask", "diff_mask_debug", "draw_aa", "debug")
_COLOR_KEYS = ("aa_color", "diff_color", "mask_color")


class ConfigError(ValueError):
    """Raised when options are invalid."""


def get_default_options() -> dict[str, Any]:
    """Return a deep copy of the default options."""
    return deepcopy(DEFAULT_OPTIONS)


def normalize_keys(overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Map camelCase aliases to option names and drop unknown keys."""
    normalized: dict[str, Any] = {}
    for key, value in overrides.items():
        name = OPTION_ALIASES.get(key, key)
        if name not in DEFAULT_OPTIONS:
            logger.debug("Ignoring unknown option %r", key)
            continue
        normalized[name] = value
    return normalized


def merge_options(base: dict[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    merged = deepcopy(base)
    for key, value in normalize_keys(override).items():
        merged[key] = deepcopy(value)
    return merged


def _parse_color(name: str, value: Any) -> Color | None:
    if value is None:
        if name == "mask_color":
            return None
        raise ConfigError(f"{name} must be a color, got None")
    if isinstance(value, Mapping):
        try:
            value = (value["r"], value["g"], value["b"])
        except KeyError as exc:
            raise ConfigError(f"{name} mapping needs r, g and b keys") from exc
    if isinstance(value, (str, bytes)) or len(value) != 3:
        raise ConfigError(f"{name} must have exactly 3 channels")
    channels = []
    for channel in value:
        if isinstance(channel, bool) or not isinstance(channel, int) or not (0 <= channel <= 255):
            raise ConfigError(f"{name} channels must be ints in range 0..255")
        channels.append(channel)
    return (channels[0], channels[1], channels[2])


def _parse_fraction(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not (0 <= float(value) <= 1):
        raise ConfigError(f"{name} must be a number in range 0..1")
    return float(value)


def validate_options(options: Mapping[str, Any]) -> dict[str, Any]:
    """Validate a merged option dict and return it with normalised values."""
    validated: dict[str, Any] = {
        "threshold": _parse_fraction("threshold", options.get("threshold")),
        "alpha": _parse_fraction("alpha", options.get("alpha")),
    }
    for key in _COLOR_KEYS:
        validated[key] = _parse_color(key, options.get(key))
    for key in _BOOL_KEYS:
        validated[key] = bool(options.get(key))
    return validated


def build_options(overrides: Mapping[str, Any] | None = None) -> Options:
    """Merge overrides into the defaults and return a fresh Options snapshot."""
    merged = merge_options(get_default_options(), overrides or {})
    return Options(**validate_options(merged))


def _env_bool(raw: str) -> bool:
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _apply_env_overrides(options: dict[str, Any], env: Mapping[str, str]) -> dict[str, Any]:
    """Apply environment-based overrides."""
    merged = deepcopy(options)
    for env_name, key in ENV_OVERRIDES.items():
        raw = env.get(env_name, "").strip()
        if not raw:
            continue
        if key in _BOOL_KEYS:
            merged[key] = _env_bool(raw)
        else:
            try:
                merged[key] = float(raw)
            except ValueError as exc:
                raise ConfigError(f"{env_name} must be a number, got {raw!r}") from exc
        logger.debug("Option %s overridden from %s", key, env_name)
    return merged


def _read_options_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Options file {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Options file {path} must hold a JSON object")
    return data


def load_options(
    path: str | Path | None = None,
    overrides: Mapping[str, Any] | None = None,
    env: Mapping[str, str] | None = None,
) -> Options:
    """Load options from JSON, then apply environment and explicit overrides."""
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    merged = get_default_options()
    if config_path.exists():
        merged = merge_options(merged, _read_options_file(config_path))
        logger.debug("Loaded options from %s", config_path)
    elif path is not None:
        raise ConfigError(f"Options file not found: {config_path}")

    merged = _apply_env_overrides(merged, os.environ if env is None else env)
    merged = merge_options(merged, overrides or {})
    return build_options(merged)


def save_options(options: Options, path: str | Path | None = None) -> Path:
    """Save options as JSON."""
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with config_path.open("w", encoding="utf-8") as handle:
        json.dump(options.to_dict(), handle, indent=2)
        handle.write("\n")
    return config_path
