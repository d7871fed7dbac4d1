"""
Configuration constants for the Excessive Cancellations Detection Engine.

Detection constants are fixed; deployment knobs can be overridden through
environment variables.
"""

import os

# ── Window Scanner ────────────────────────────────────────────────────

WINDOW_MS = 60_000  # 60 seconds, boundary inclusive
CANCEL_RATIO_THRESHOLD = 1 / 3  # flag when cancels / orders is strictly above
MIN_ORDER_DENOMINATOR = 1  # floor for the ratio denominator

# ── Record Parser ─────────────────────────────────────────────────────

FIELD_DELIMITER = ","
FIELD_COUNT = 4
NEW_ORDER_CODE = "D"
CANCEL_OR_FILL_CODE = "F"

# ── Service ───────────────────────────────────────────────────────────

APP_VERSION = "1.0.0"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(50 * 1024 * 1024)))
INPUT_ENCODING = "utf-8"
