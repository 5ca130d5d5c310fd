"""
Shared constants for the portfolio analyzer.

Contains the fixed target, selectors and thresholds used across modules.
"""

# Local development server serving the portfolio
DEFAULT_TARGET_URL = "http://localhost:5174/portfolio/"

# Report written by the headless run
DEFAULT_REPORT_PATH = "ui-analysis-report.json"

# Screenshots directory for the headless run
DEFAULT_SCREENSHOTS_DIR = "screenshots"

# Default user agent string for the browser and the reachability preflight
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

# Page load timeout in milliseconds (for Playwright)
DEFAULT_PAGE_TIMEOUT = 30000

# Preflight request timeout in seconds
DEFAULT_PREFLIGHT_TIMEOUT = 10

# Viewport used for navigation and as the baseline measurement
DEFAULT_VIEWPORT = {"width": 1920, "height": 1080}

# Breakpoints probed by the responsive audit, ascending
DEFAULT_BREAKPOINTS = (320, 768, 1024, 1440, 1920)

# Upper bound for a single layout-settle wait, in seconds
DEFAULT_SETTLE_TIMEOUT = 2.0

# Wait after navigation for entrance animations to finish, in milliseconds
DEFAULT_ANIMATION_WAIT = 3000

# WCAG AA contrast ratio for normal text
CONTRAST_THRESHOLD = 4.5

# WCAG minimum touch target size in CSS pixels
MIN_TOUCH_TARGET = 44

# Load event budget in milliseconds
LOAD_TIME_BUDGET = 3000

# Hero sections shorter than this fraction of the viewport are flagged
HERO_MIN_HEIGHT_RATIO = 0.9

# Selectors of the portfolio hero section
HERO_SELECTOR = ".hero-minimal"
CONTAINER_SELECTOR = ".minimal-content"
CONTRAST_SELECTORS = (
    ".social-link, .action-text, .minimal-name, "
    ".minimal-role, .minimal-description"
)
TOUCH_TARGET_SELECTORS = ".social-link, .action-item"
RESPONSIVE_CHILD_SELECTORS = ".social-link, .action-item"
ANIMATION_SELECTORS = (
    ".ripple, .cursor-glow, .particle, .shape-circle, .shape-line, "
    "[style*=\"transform\"], [style*=\"transition\"], [style*=\"animation\"]"
)
SOCIAL_LINK_SELECTOR = ".social-link"
ACTION_ITEM_SELECTOR = ".action-item"
ACTION_LINE_SELECTOR = ".action-line"
