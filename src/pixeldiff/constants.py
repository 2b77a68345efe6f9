# -*- coding: utf-8 -*-
"""Application constants."""

APP_NAME = "pixeldiff"
APP_VERSION = "0.1.0"

DEFAULT_SETTINGS_FILE = "pixeldiff.json"

# Maximum possible value of the YIQ difference metric (black vs. white is ~32857).
MAX_YIQ_DELTA = 35215

DEFAULT_THRESHOLD = 0.1
DEFAULT_ALPHA = 0.1

DEFAULT_AA_COLOR = (255, 255, 0)
DEFAULT_DIFF_COLOR = (255, 0, 0)
BLUR_COLOR = (0, 255, 0)

BYTES_PER_PIXEL = 4
