"""
Utility modules for the portfolio analyzer.

Contains logging, path handling, the reachability preflight, and constants.
"""

from .log import setup_logger, get_logger
from .paths import ensure_dir, ensure_parent_dir, sanitize_filename
from .reachability import check_reachable
from .constants import (
    DEFAULT_TARGET_URL,
    DEFAULT_REPORT_PATH,
    DEFAULT_USER_AGENT,
    DEFAULT_PAGE_TIMEOUT,
    DEFAULT_BREAKPOINTS,
    CONTRAST_THRESHOLD,
    MIN_TOUCH_TARGET,
)

__all__ = [
    "setup_logger",
    "get_logger",
    "ensure_dir",
    "ensure_parent_dir",
    "sanitize_filename",
    "check_reachable",
    "DEFAULT_TARGET_URL",
    "DEFAULT_REPORT_PATH",
    "DEFAULT_USER_AGENT",
    "DEFAULT_PAGE_TIMEOUT",
    "DEFAULT_BREAKPOINTS",
    "CONTRAST_THRESHOLD",
    "MIN_TOUCH_TARGET",
]
