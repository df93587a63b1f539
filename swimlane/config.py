"""
Centralized configuration for swimlane.

All values that vary by deployment belong here.
Override via environment variables.
"""

import os

_TRUTHY = {"1", "true", "yes", "on"}

# ============================================================
# Logging
# ============================================================

LOG_LEVEL: str = os.environ.get("SWIMLANE_LOG_LEVEL", "INFO")
"""Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."""

LOG_FORMAT: str = os.environ.get("SWIMLANE_LOG_FORMAT", "auto").lower()
"""json | human | auto (JSON when stderr is not a TTY)."""

# ============================================================
# Lane assignment
# ============================================================

STRICT_INTERVALS: bool = os.environ.get("SWIMLANE_STRICT", "").strip().lower() in _TRUTHY
"""Reject events ending before they start instead of placing them as-is."""

# ============================================================
# Display
# ============================================================

DATE_DISPLAY_FORMAT: str = os.environ.get("SWIMLANE_DATE_FORMAT", "%m-%d")
"""strftime pattern for dates in CLI text output."""


def log_json_format() -> bool | None:
    """Resolve LOG_FORMAT for configure_logging (None = auto-detect)."""
    if LOG_FORMAT == "json":
        return True
    if LOG_FORMAT == "human":
        return False
    return None
