"""
Portfolio UI Analyzer - accessibility and layout audits for a rendered portfolio page.

This package inspects a rendered page through Playwright, computes contrast
ratios, checks touch targets, detects viewport overflow at common breakpoints,
flags animations without hardware acceleration and writes a JSON report.
"""

__version__ = "1.0.0"
__author__ = "Portfolio Analyzer Team"
