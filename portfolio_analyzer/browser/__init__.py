"""
Browser module for rendering and probing the target page.

Contains the Playwright page renderer and the page-backed probe source.
"""

from .renderer import PageRenderer
from .probes import PageProbeSource

__all__ = [
    "PageRenderer",
    "PageProbeSource",
]
