"""
Analyzer configuration.

Collects the target, selectors and thresholds of one analysis run. The
defaults describe the portfolio served by the local development server.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .utils.constants import (
    ANIMATION_SELECTORS,
    CONTAINER_SELECTOR,
    CONTRAST_SELECTORS,
    CONTRAST_THRESHOLD,
    DEFAULT_ANIMATION_WAIT,
    DEFAULT_BREAKPOINTS,
    DEFAULT_PAGE_TIMEOUT,
    DEFAULT_REPORT_PATH,
    DEFAULT_SETTLE_TIMEOUT,
    DEFAULT_TARGET_URL,
    DEFAULT_VIEWPORT,
    HERO_SELECTOR,
    LOAD_TIME_BUDGET,
    MIN_TOUCH_TARGET,
    RESPONSIVE_CHILD_SELECTORS,
    TOUCH_TARGET_SELECTORS,
)


@dataclass
class AnalyzerConfig:
    """Settings for one analysis run."""
    url: str = DEFAULT_TARGET_URL
    report_path: str = DEFAULT_REPORT_PATH
    # None disables screenshot capture
    screenshots_dir: Optional[str] = None
    headless: bool = True
    page_timeout: int = DEFAULT_PAGE_TIMEOUT
    animation_wait: int = DEFAULT_ANIMATION_WAIT
    viewport: Dict[str, int] = field(default_factory=lambda: dict(DEFAULT_VIEWPORT))

    contrast_selectors: str = CONTRAST_SELECTORS
    touch_target_selectors: str = TOUCH_TARGET_SELECTORS
    container_selector: str = CONTAINER_SELECTOR
    responsive_child_selectors: Optional[str] = RESPONSIVE_CHILD_SELECTORS
    animation_selectors: str = ANIMATION_SELECTORS
    hero_selector: str = HERO_SELECTOR

    breakpoints: Tuple[int, ...] = DEFAULT_BREAKPOINTS
    settle_timeout: float = DEFAULT_SETTLE_TIMEOUT
    contrast_threshold: float = CONTRAST_THRESHOLD
    min_touch_target: float = MIN_TOUCH_TARGET
    load_time_budget: float = LOAD_TIME_BUDGET
